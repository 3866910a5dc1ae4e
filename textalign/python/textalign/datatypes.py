from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

import regex

# A CIGAR string is a concatenation of <count><letter> tokens,
# count >= 1, letter in M/I/D.
_CIGAR_TOKEN = regex.compile(r"([1-9][0-9]*)([MID])")
_CIGAR_FULL = regex.compile(r"(?:[1-9][0-9]*[MID])*")


class Op(IntEnum):
    """
    An edit operation of an alignment.

    The integer value is the rank used to break ties between equally cheap
    moves, the smaller one wins: Match/Mismatch > Insertion > Deletion.
    Compare operations with their value (e.g. ``min(ops)``), never with
    the position they happen to have in a list.
    """

    MATCH = 0
    INSERTION = 1
    DELETION = 2

    @property
    def letter(self) -> str:
        """The letter used in CIGAR strings."""
        return "MID"[self.value]

    @staticmethod
    def from_letter(letter: str) -> "Op":
        index = "MID".find(letter)
        if len(letter) != 1 or index < 0:
            raise ValueError(f"Unknown CIGAR operation: {letter!r}")
        return Op(index)


def parse_cigar(cigar: str) -> List[Tuple[int, Op]]:
    """Split a CIGAR string into its runs.

    >>> parse_cigar("6M1I3M")
    [(6, <Op.MATCH: 0>), (1, <Op.INSERTION: 1>), (3, <Op.MATCH: 0>)]

    Args:
      cigar:
        A run-length encoded alignment, e.g. ``"6M1I3M"``. The empty string
        is the alignment of two empty sequences.
    Returns:
      Return a list of (count, operation) pairs in alignment order.
    """
    if _CIGAR_FULL.fullmatch(cigar) is None:
        raise ValueError(f"Malformed CIGAR string: {cigar!r}")
    return [
        (int(count), Op.from_letter(letter))
        for count, letter in _CIGAR_TOKEN.findall(cigar)
    ]


@dataclass(frozen=True)
class AlignResult:
    """
    The result of aligning two sequences.
    """

    # Minimum number of single-symbol insertions, deletions or substitutions
    # to transform the first sequence into the second one.
    edit_distance: int

    # Run-length encoded edit script, e.g. "6M1I3M".
    # It is empty if and only if both sequences are empty.
    cigar: str

    @property
    def ops(self) -> List[Tuple[int, Op]]:
        """Return the runs of self.cigar, see :func:`parse_cigar`."""
        return parse_cigar(self.cigar)
