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
#  python3 -m pytest textalign/python/tests/test_kmp.py

import random
import unittest

from textalign import failure_function_table, find_first, kmp_search

HAYSTACK = "AGCATTCAAAGAAATTT"


class TestFailureFunctionTable(unittest.TestCase):
    def test_table(self):
        self.assertEqual(
            failure_function_table("AAAGAAA"), [0, 1, 2, 0, 1, 2, 3]
        )

    def test_table_kmp77(self):
        # the example in the KMP 1977 paper
        self.assertEqual(
            failure_function_table("abcabcacab"),
            [0, 0, 0, 1, 2, 3, 4, 0, 1, 2],
        )

    def test_table_repetitive(self):
        self.assertEqual(
            failure_function_table("AAAAAAA"), [0, 1, 2, 3, 4, 5, 6]
        )

    def test_table_edge_cases(self):
        self.assertEqual(failure_function_table(""), [])
        self.assertEqual(failure_function_table("A"), [0])
        self.assertEqual(failure_function_table("ACACAB"), [0, 0, 1, 2, 3, 0])
        self.assertEqual(failure_function_table(b"AAB"), [0, 1, 0])


class TestKmpSearch(unittest.TestCase):
    def test_match(self):
        self.assertEqual(find_first("AAAGAAA", HAYSTACK), 7)

    def test_match_start(self):
        self.assertEqual(find_first("AGCATT", HAYSTACK), 0)

    def test_match_first_char(self):
        self.assertEqual(find_first("A", HAYSTACK), 0)

    def test_match_first_occurrence(self):
        self.assertEqual(find_first("AAA", HAYSTACK), 7)

    def test_match_end(self):
        self.assertEqual(find_first("TTT", HAYSTACK), 14)

    def test_match_full(self):
        self.assertEqual(find_first(HAYSTACK, HAYSTACK), 0)

    def test_match_repetitive(self):
        self.assertEqual(find_first("AAAAA", "AAAAAAAAAAAAAAAAA"), 0)
        self.assertEqual(find_first("AAAAA", "CCCCCAAAAAAAAAAAAAAAAA"), 5)
        self.assertEqual(find_first("CACACACA", "ACACACACAAAAAAAAAAAAA"), 1)

    def test_match_single_chars(self):
        self.assertEqual(find_first("C", "C"), 0)

    def test_match_edge_cases(self):
        self.assertEqual(find_first("AAAAAAAAAAA", "ACACACACAAAAAAAAAAAAA"), 8)
        self.assertEqual(
            find_first(
                "AAAAAAAAAAAAAAAAAAAAAAAAATCAAAAAAACAAAACACAAAACTC",
                "TGGCTCTAAAATGCTCTGTTCTCAAAAAAAAAAAAAAAAAAAAAAAAAATCAAAAAAACAAAA"
                "CACAAAACTCTTTAGAGAATCACCCCCCCTTACATTCTTG",
            ),
            24,
        )

    def test_no_match(self):
        self.assertIsNone(find_first("AAAGAAC", HAYSTACK))
        self.assertIsNone(find_first("GAAATTTC", HAYSTACK))

    def test_no_match_needle_longer(self):
        self.assertIsNone(find_first("AGCATTCAAAGAAATTTCC", HAYSTACK))

    def test_empty(self):
        self.assertEqual(find_first("", HAYSTACK), 0)
        self.assertEqual(find_first("", ""), 0)
        self.assertIsNone(find_first("A", ""))

    def test_bytes_and_lists(self):
        self.assertEqual(find_first(b"AAAGAAA", HAYSTACK.encode()), 7)
        self.assertEqual(find_first([3, 4], [1, 2, 3, 3, 4]), 3)

    def test_reuse_table(self):
        query = "ACA"
        table = failure_function_table(query)
        self.assertEqual(kmp_search(query, "TTACAT", table), 2)
        self.assertEqual(kmp_search(query, "ACACA", table), 0)
        self.assertIsNone(kmp_search(query, "ACCA", table))

    def test_wrong_table(self):
        with self.assertRaises(AssertionError):
            kmp_search("ACA", "TTACAT", [0, 0])

    def test_agrees_with_str_find(self):
        rng = random.Random(11)
        for _ in range(200):
            text = "".join(rng.choice("AB") for _ in range(rng.randint(0, 20)))
            query = "".join(rng.choice("AB") for _ in range(rng.randint(1, 5)))
            expected = text.find(query)
            expected = None if expected < 0 else expected
            self.assertEqual(find_first(query, text), expected)


if __name__ == "__main__":
    unittest.main()
