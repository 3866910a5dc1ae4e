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
from itertools import groupby
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .datatypes import AlignResult, Op
from .utils import to_comparable_symbols


def _next_row(
    prev: np.ndarray,
    symbols2: np.ndarray,
    symbol: object,
    i: int,
    offsets: np.ndarray,
) -> np.ndarray:
    """
    Compute row ``i`` of the distance matrix from row ``i - 1``.

    Internally it uses a skewed cost, such that ``skewed[j] = cost[j] - j``,
    this turns the dependency on the left neighbour into a prefix minimum.

    Args:
      prev:
        Row ``i - 1``, of shape ``(m + 1,)``.
      symbols2:
        The second sequence, of shape ``(m,)``.
      symbol:
        ``seq1[i - 1]``.
      i:
        The index of the row to compute, i >= 1.
      offsets:
        ``np.arange(m + 1)``.
    Returns:
      Return row ``i``, of shape ``(m + 1,)`` and dtype np.int32.
    """
    candidates = np.empty(prev.size, dtype=np.int32)
    # column 0, i deletions
    candidates[0] = i
    # match / mismatch, from (i - 1, j - 1)
    candidates[1:] = prev[:-1] + (symbols2 != symbol).astype(np.int32)
    # from (i - 1, j)
    np.minimum(candidates[1:], prev[1:] + 1, out=candidates[1:])
    # from (i, j - 1), cost[j] = min(candidates[j], cost[j - 1] + 1)
    return np.minimum.accumulate(candidates - offsets) + offsets


def build_distance_matrix(seq1: Sequence, seq2: Sequence) -> np.ndarray:
    """
    Fill the dynamic-programming table of the Levenshtein distance between all
    the prefixes of two sequences. Substitution, insertion and deletion all
    cost 1.

    ``matrix[i][j]`` is the minimum number of edits to transform ``seq1[:i]``
    into ``seq2[:j]``, so ``matrix[0][j] == j``, ``matrix[i][0] == i`` and
    every other cell equals::

      min(matrix[i-1][j-1] + (seq1[i-1] != seq2[j-1]),
          matrix[i-1][j] + 1,
          matrix[i][j-1] + 1)

    The candidates rank Match/Mismatch > Insertion > Deletion, as
    :class:`Op` does. Tied candidates share the same value, so the rank only
    shows up when the path is recovered, see :func:`traceback`.

    Rows are filled in order, each row only depends on the previous one and
    on its own left part.

    Args:
      seq1:
        The first sequence, see :func:`textalign.utils.to_symbols` for the
        supported types. It can be empty.
      seq2:
        The second sequence. It can be empty. Its type may differ from
        seq1, e.g. a list of characters against a str, the symbols are
        compared as :func:`textalign.utils.to_comparable_symbols` does.
    Returns:
      Return a np.int32 array of shape ``(len(seq1) + 1, len(seq2) + 1)``.

    Note:
      It takes O(len(seq1) * len(seq2)) time and memory. Use
      :func:`edit_distance` if the alignment is not needed.
    """
    symbols1, symbols2 = to_comparable_symbols(seq1, seq2)
    n, m = symbols1.size, symbols2.size

    offsets = np.arange(m + 1, dtype=np.int32)
    matrix = np.empty((n + 1, m + 1), dtype=np.int32)
    matrix[0] = offsets
    for i in range(1, n + 1):
        matrix[i] = _next_row(matrix[i - 1], symbols2, symbols1[i - 1], i, offsets)

    logging.debug(f"Built distance matrix of shape {matrix.shape}")
    return matrix


def validate_distance_matrix(matrix: np.ndarray) -> np.ndarray:
    """
    Check the boundary invariants of a distance matrix, i.e. its shape is at
    least 1 x 1, ``matrix[0][j] == j`` and ``matrix[i][0] == i``.

    A matrix breaking them was not produced by :func:`build_distance_matrix`,
    which is a bug of the caller, so an AssertionError is raised.

    Args:
      matrix:
        A 2-D array (or nested lists) of non-negative integers.
    Returns:
      Return the matrix as a np.ndarray.
    """
    matrix = np.asarray(matrix)
    assert matrix.ndim == 2, matrix.ndim
    rows, cols = matrix.shape
    assert rows >= 1 and cols >= 1, matrix.shape
    assert np.issubdtype(matrix.dtype, np.integer), matrix.dtype
    assert (matrix[0] == np.arange(cols)).all(), matrix[0]
    assert (matrix[:, 0] == np.arange(rows)).all(), matrix[:, 0]
    return matrix


def traceback_path(matrix: np.ndarray) -> List[Tuple[Op, int, int]]:
    """
    Recover one optimal path of a distance matrix, walking from the
    bottom-right cell back to the top-left cell.

    On row 0 the step is an insertion (move left), on column 0 it is a
    deletion (move up). Elsewhere the neighbour with the smallest value among
    ``(i-1, j-1)`` (match), ``(i-1, j)`` (insertion) and ``(i, j-1)``
    (deletion) is chosen, ties are broken with the rank of :class:`Op`.

    Args:
      matrix:
        The distance matrix returned by :func:`build_distance_matrix`.
    Returns:
      Return a list of ``(op, i, j)`` in alignment order (start to end),
      where ``(i, j)`` is the cell the step arrives at. It is empty if the
      matrix is 1 x 1.
    """
    matrix = validate_distance_matrix(matrix)

    i = matrix.shape[0] - 1
    j = matrix.shape[1] - 1
    path = []
    while i > 0 or j > 0:
        if i == 0:
            path.append((Op.INSERTION, i, j))
            j -= 1
            continue
        if j == 0:
            path.append((Op.DELETION, i, j))
            i -= 1
            continue

        value, op = min(
            (int(matrix[i - 1, j - 1]), Op.MATCH),
            (int(matrix[i - 1, j]), Op.INSERTION),
            (int(matrix[i, j - 1]), Op.DELETION),
        )
        step_cost = int(matrix[i, j]) - value
        assert step_cost == 1 or (step_cost == 0 and op == Op.MATCH), (
            i,
            j,
            op,
            step_cost,
        )

        path.append((op, i, j))
        if op == Op.MATCH:
            i -= 1
            j -= 1
        elif op == Op.INSERTION:
            i -= 1
        else:
            j -= 1

    path.reverse()
    return path


def traceback_ops(matrix: np.ndarray) -> List[Op]:
    """Return the operations of :func:`traceback_path` in alignment order."""
    return [op for op, _, _ in traceback_path(matrix)]


def run_length_encode(ops: Iterable[Op]) -> str:
    """
    Collapse consecutive identical operations into ``<count><letter>`` tokens.

    >>> run_length_encode([Op.MATCH] * 6 + [Op.INSERTION] + [Op.MATCH] * 3)
    '6M1I3M'

    An empty input gives an empty string.
    """
    return "".join(
        f"{sum(1 for _ in group)}{op.letter}" for op, group in groupby(ops)
    )


def traceback(matrix: np.ndarray) -> str:
    """
    Get the CIGAR string of the optimal path of a distance matrix.

    Args:
      matrix:
        The distance matrix returned by :func:`build_distance_matrix`.
    Returns:
      Return the run-length encoded operations, e.g. ``"6M1I3M"``. A 1 x 1
      matrix (two empty sequences) gives ``""``.
    """
    return run_length_encode(traceback_ops(matrix))


def compute_alignment(seq1: Sequence, seq2: Sequence) -> AlignResult:
    """
    Compute the Levenshtein distance between two sequences and the CIGAR
    string of one optimal alignment.

    >>> from textalign import compute_alignment
    >>> compute_alignment("ACGTAAACAC", "ACGTAACAC")
    AlignResult(edit_distance=1, cigar='6M1I3M')
    >>> compute_alignment("", "")
    AlignResult(edit_distance=0, cigar='')

    Args:
      seq1:
        The first sequence, it can be empty.
      seq2:
        The second sequence, it can be empty.
    Returns:
      Return an :class:`AlignResult`.
    """
    matrix = build_distance_matrix(seq1, seq2)
    return AlignResult(edit_distance=int(matrix[-1, -1]), cigar=traceback(matrix))


def edit_distance(seq1: Sequence, seq2: Sequence) -> int:
    """
    Compute the Levenshtein distance only.

    Same result as ``compute_alignment(seq1, seq2).edit_distance``, but only
    two rows of the matrix are kept, i.e. O(min(len(seq1), len(seq2)))
    memory. The alignment can not be recovered from it.
    """
    symbols1, symbols2 = to_comparable_symbols(seq1, seq2)
    # The distance is symmetric, let the shorter one span the columns.
    if symbols2.size > symbols1.size:
        symbols1, symbols2 = symbols2, symbols1

    offsets = np.arange(symbols2.size + 1, dtype=np.int32)
    row = offsets
    for i in range(1, symbols1.size + 1):
        row = _next_row(row, symbols2, symbols1[i - 1], i, offsets)
    return int(row[-1])


def get_nice_alignment(seq1: Sequence, seq2: Sequence) -> str:
    """
    Get a readable rendering of the alignment chosen by
    :func:`compute_alignment`.

    The first line is seq1, the second line is the error types, the third
    line is seq2. The following symbols are used:

      - ``*``: empty
      - ``+``: the symbol only exists in seq1
      - ``-``: the symbol only exists in seq2
      - ``#``: substitution
      - ``|``: correct.

    >>> print(get_nice_alignment("ACGTAAACAC", "ACGTAACAC"))
    A C G T A A A C A C
    | | | | | | + | | |
    A C G T A A * C A C

    (Each line also carries a trailing space.)
    """
    symbols1, symbols2 = to_comparable_symbols(seq1, seq2)
    matrix = build_distance_matrix(symbols1, symbols2)

    qs = ""
    ms = ""
    ts = ""
    prev_i, prev_j = 0, 0
    for _, i, j in traceback_path(matrix):
        if i > prev_i and j > prev_j:
            # correct or a substitution error
            qs_ = f"{seq1[i - 1]} "
            ts_ = f"{seq2[j - 1]} "
            sl = max(len(qs_), len(ts_))

            qs += f"{qs_:{sl}}"
            ts += f"{ts_:{sl}}"
            if symbols1[i - 1] == symbols2[j - 1]:
                ms += f"{'|':{sl}}"
            else:
                ms += f"{'#':{sl}}"
        elif i > prev_i:
            qs_ = f"{seq1[i - 1]} "
            sl = len(qs_)

            qs += f"{qs_:{sl}}"
            ms += f"{'+':{sl}}"
            ts += f"{'*':{sl}}"
        else:
            assert j > prev_j, (i, j, prev_i, prev_j)
            ts_ = f"{seq2[j - 1]} "
            sl = len(ts_)

            qs += f"{'*':{sl}}"
            ms += f"{'-':{sl}}"
            ts += f"{ts_:{sl}}"
        prev_i, prev_j = i, j
    return "\n".join([qs, ms, ts])
