# Copyright      2023   Xiaomi Corp.       (author: Wei Kang)
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

import logging
import os
from dataclasses import dataclass
from typing import Callable, Iterable, List, Mapping, Optional

from .kmp import failure_function_table, kmp_search
from .utils import Pathlike


@dataclass
class Config:
    """
    What to search for and where.
    """

    query: str

    filename: Pathlike

    # False to ignore case when comparing the query with the lines.
    case_sensitive: bool = True

    # True to use the KMP matcher instead of the `in` operator.
    use_kmp: bool = False

    @staticmethod
    def from_env(
        query: str,
        filename: Pathlike,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Config":
        """Construct a Config, the switches are read from the environment.

        The search is case insensitive if ``CASE_INSENSITIVE`` is set (to any
        value) and uses KMP if ``USE_KMP`` is set.

        Args:
          query:
            The string to search for.
          filename:
            The file to search in.
          environ:
            The environment to read, defaults to ``os.environ``.
        """
        if environ is None:
            environ = os.environ
        return Config(
            query=query,
            filename=filename,
            case_sensitive="CASE_INSENSITIVE" not in environ,
            use_kmp="USE_KMP" in environ,
        )


def _lines(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        yield line.rstrip("\r\n")


def search(query: str, lines: Iterable[str]) -> List[str]:
    """
    Return the lines containing `query`.

    >>> search("duct", ["Rust:", "safe, fast, productive.", "Duct tape."])
    ['safe, fast, productive.']

    Args:
      query:
        The string to search for.
      lines:
        An iterable of lines, e.g. a file object. Trailing newlines are
        removed.
    Returns:
      Return the matched lines in their original order.
    """
    return [line for line in _lines(lines) if query in line]


def search_case_insensitive(query: str, lines: Iterable[str]) -> List[str]:
    """Like :func:`search`, but ignores case. The lines are returned as they are."""
    query = query.lower()
    return [line for line in _lines(lines) if query in line.lower()]


def kmp_search_lines(query: str, lines: Iterable[str]) -> List[str]:
    """
    Like :func:`search`, but the lines are scanned with the KMP matcher.
    The failure table of `query` is computed once and shared by all the lines.
    """
    table = failure_function_table(query)
    return [
        line for line in _lines(lines) if kmp_search(query, line, table) is not None
    ]


def kmp_search_case_insensitive(query: str, lines: Iterable[str]) -> List[str]:
    """Like :func:`kmp_search_lines`, but ignores case."""
    query = query.lower()
    table = failure_function_table(query)
    return [
        line
        for line in _lines(lines)
        if kmp_search(query, line.lower(), table) is not None
    ]


def select_search(config: Config) -> Callable[[str, Iterable[str]], List[str]]:
    """Return the search function matching the switches of `config`."""
    if config.case_sensitive:
        return kmp_search_lines if config.use_kmp else search
    if config.use_kmp:
        return kmp_search_case_insensitive
    return search_case_insensitive


def run(config: Config) -> List[str]:
    """
    Search `config.query` in the file `config.filename`.

    Returns:
      Return the matched lines, without trailing newlines.
    """
    search_fn = select_search(config)
    logging.debug(
        f"Searching {config.query!r} in {config.filename} "
        f"with {search_fn.__name__}"
    )
    with open(config.filename, encoding="utf-8") as f:
        results = search_fn(config.query, f)
    logging.debug(f"Found {len(results)} lines")
    return results
