#!/usr/bin/env python3
#
# Copyright      2023  Xiaomi Corp.       (authors: Wei Kang)
#
# See ../../../LICENSE for clarification regarding multiple authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# To run this single test, use
#
#  python3 -m pytest textalign/python/tests/test_grep.py

import io
import tempfile
import unittest
from pathlib import Path

from textalign import (
    Config,
    kmp_search_case_insensitive,
    kmp_search_lines,
    search,
    search_case_insensitive,
)
from textalign.grep import run, select_search

CONTENTS = """\
Rust:
safe, fast, productive.
Pick three.
Duct tape.
Trust me.
"""


class TestSearch(unittest.TestCase):
    def test_case_sensitive(self):
        for fn in [search, kmp_search_lines]:
            self.assertEqual(
                fn("duct", io.StringIO(CONTENTS)), ["safe, fast, productive."]
            )

    def test_case_insensitive(self):
        for fn in [search_case_insensitive, kmp_search_case_insensitive]:
            self.assertEqual(
                fn("rUsT", io.StringIO(CONTENTS)), ["Rust:", "Trust me."]
            )
            self.assertEqual(
                fn("DUCT", CONTENTS.splitlines()),
                ["safe, fast, productive.", "Duct tape."],
            )

    def test_no_match(self):
        for fn in [
            search,
            kmp_search_lines,
            search_case_insensitive,
            kmp_search_case_insensitive,
        ]:
            self.assertEqual(fn("monkey", io.StringIO(CONTENTS)), [])
            self.assertEqual(fn("duct", []), [])

    def test_empty_query(self):
        lines = CONTENTS.splitlines()
        self.assertEqual(search("", lines), lines)
        self.assertEqual(kmp_search_lines("", lines), lines)

    def test_strip_newlines(self):
        lines = ["one\r\n", "two\n", "three"]
        self.assertEqual(search("t", lines), ["two", "three"])
        self.assertEqual(kmp_search_lines("o", lines), ["one", "two"])


class TestConfig(unittest.TestCase):
    def test_from_env(self):
        config = Config.from_env("q", "f.txt", environ={})
        self.assertEqual(config, Config("q", "f.txt", True, False))

        config = Config.from_env("q", "f.txt", environ={"CASE_INSENSITIVE": "1"})
        self.assertFalse(config.case_sensitive)
        self.assertFalse(config.use_kmp)

        # only the presence of the variable matters
        config = Config.from_env(
            "q", "f.txt", environ={"USE_KMP": "", "CASE_INSENSITIVE": "0"}
        )
        self.assertFalse(config.case_sensitive)
        self.assertTrue(config.use_kmp)

    def test_select_search(self):
        self.assertIs(select_search(Config("q", "f")), search)
        self.assertIs(select_search(Config("q", "f", use_kmp=True)), kmp_search_lines)
        self.assertIs(
            select_search(Config("q", "f", case_sensitive=False)),
            search_case_insensitive,
        )
        self.assertIs(
            select_search(Config("q", "f", case_sensitive=False, use_kmp=True)),
            kmp_search_case_insensitive,
        )


class TestRun(unittest.TestCase):
    def test_run(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            filename = Path(tmp_dir) / "poem.txt"
            filename.write_text(CONTENTS, encoding="utf-8")

            self.assertEqual(run(Config("Pick", filename)), ["Pick three."])
            self.assertEqual(
                run(Config("rust", filename, case_sensitive=False, use_kmp=True)),
                ["Rust:", "Trust me."],
            )

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            with self.assertRaises(FileNotFoundError):
                run(Config("q", Path(tmp_dir) / "missing.txt"))


if __name__ == "__main__":
    unittest.main()
