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

from typing import List, Optional, Sequence


def failure_function_table(query: Sequence) -> List[int]:
    """
    Compute the failure function (a.k.a. prefix function) of the query used
    by the Knuth-Morris-Pratt search.

    ``table[i]`` is the length of the longest proper prefix of
    ``query[: i + 1]`` that is also a suffix of it. On a mismatch after
    ``j`` matched symbols the search resumes with ``table[j - 1]`` matched
    symbols instead of starting over.

    >>> failure_function_table("AAAGAAA")
    [0, 1, 2, 0, 1, 2, 3]
    >>> failure_function_table("abcabcacab")
    [0, 0, 0, 1, 2, 3, 4, 0, 1, 2]

    Args:
      query:
        The sequence to search for, a str, bytes or any indexable sequence.
    Returns:
      Return a list with one entry per query position.
    """
    table = [0] * len(query)
    k = 0
    for i in range(1, len(query)):
        while k > 0 and query[i] != query[k]:
            k = table[k - 1]
        if query[i] == query[k]:
            k += 1
        table[i] = k
    return table


def kmp_search(query: Sequence, text: Sequence, table: List[int]) -> Optional[int]:
    """
    Find the first occurrence of query in text.

    Args:
      query:
        The sequence to search for.
      text:
        The sequence to search in.
      table:
        The table returned by :func:`failure_function_table` for `query`.
    Returns:
      Return the start offset of the first match in `text`, or None if
      `query` does not occur in `text`. An empty query matches at 0.
    """
    assert len(table) == len(query), (len(table), len(query))
    if len(query) == 0:
        return 0

    j = 0  # number of matched symbols
    for i in range(len(text)):
        # not enough symbols left to complete a match
        if len(text) - i < len(query) - j:
            break
        while j > 0 and text[i] != query[j]:
            j = table[j - 1]
        if text[i] == query[j]:
            j += 1
            if j == len(query):
                return i - j + 1
    return None


def find_first(query: Sequence, text: Sequence) -> Optional[int]:
    """Build the failure table of `query` and search for it in `text`."""
    return kmp_search(query, text, failure_function_table(query))
