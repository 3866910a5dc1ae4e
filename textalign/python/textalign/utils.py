import argparse
import os
import logging
from datetime import datetime
from pathlib import Path
from typing import Sequence, Tuple, Union

import numpy as np

Pathlike = Union[str, Path]

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(filename)s:%(lineno)d] %(message)s"

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_TRUE_SWITCHES = ("yes", "true", "t", "y", "1")
_FALSE_SWITCHES = ("no", "false", "f", "n", "0")


def to_symbols(seq: Sequence) -> np.ndarray:
    """Convert a sequence into a 1-D numpy array of atomic symbols.

    Every element of the input is one symbol of unit cost:

      - ``str``: one symbol per character, a unicode array (e.g. ``<U1``),
        so the characters compare like ``list(seq)`` does.
      - ``bytes`` or ``bytearray``: one symbol per byte, np.uint8.
      - ``np.ndarray``: used as it is, it has to be 1-D.
      - Anything else (lists, tuples, ...): converted with ``np.asarray``,
        the items have to be scalars.

    Args:
      seq:
        The input sequence, it may be empty.
    Returns:
      Return a 1-D array with ``len(seq)`` entries.
    """
    if isinstance(seq, np.ndarray):
        assert seq.ndim == 1, seq.ndim
        return seq

    if isinstance(seq, (bytes, bytearray)):
        return np.frombuffer(bytes(seq), dtype=np.uint8)

    if isinstance(seq, str):
        return np.array(list(seq), dtype=str)

    symbols = np.asarray(seq)
    assert symbols.ndim == 1, symbols.shape
    return symbols


def _symbol_kind(dtype: np.dtype) -> str:
    if dtype.kind in "biuf":
        return "number"
    if dtype.kind in "US":
        return dtype.kind
    return "object"


def to_comparable_symbols(
    seq1: Sequence, seq2: Sequence
) -> Tuple[np.ndarray, np.ndarray]:
    """Convert two sequences with :func:`to_symbols` so that their symbols
    can be compared elementwise.

    numpy compares numbers with numbers and strings with strings. For any
    other pair of dtypes (e.g. ``"ACGT"`` against ``b"ACGT"``) both arrays
    are turned into object arrays, so the symbols compare with Python's
    ``==``: ``"A" == "A"`` but ``"A" != 65``.

    Returns:
      Return a tuple of two 1-D arrays.
    """
    symbols1 = to_symbols(seq1)
    symbols2 = to_symbols(seq2)

    kind1 = _symbol_kind(symbols1.dtype)
    kind2 = _symbol_kind(symbols2.dtype)
    if kind1 != kind2 or kind1 == "object":
        symbols1 = symbols1.astype(object)
        symbols2 = symbols2.astype(object)
    return symbols1, symbols2


def setup_logger(
    log_filename: Pathlike,
    log_level: str = "info",
    use_console: bool = True,
) -> None:
    """Send the logs of the command line tools to a file.

    Used when ``--log-file`` is given. The current time is appended to the
    filename, so each run writes a new file.

    Args:
      log_filename:
        The filename to save the log, its directory is created if needed.
      log_level:
        One of "debug", "info", "warning", "error", "critical".
        Unknown names fall back to "error".
      use_console:
        True to also print logs to console.
    """
    date_time = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
    log_filename = f"{log_filename}-{date_time}"

    log_dir = os.path.dirname(log_filename)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    level = _LOG_LEVELS.get(log_level, logging.ERROR)
    logging.basicConfig(
        filename=log_filename,
        format=_LOG_FORMAT,
        level=level,
        filemode="w",
    )
    if use_console:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter(_LOG_FORMAT))
        logging.getLogger("").addHandler(console)


def str2bool(v):
    """Parse the value of a boolean switch such as ``--use-kmp true``.

    Accepts yes/true/t/y/1 and no/false/f/n/0, case insensitive.
    A bool is returned as it is.
    """
    if isinstance(v, bool):
        return v
    if v.lower() in _TRUE_SWITCHES:
        return True
    if v.lower() in _FALSE_SWITCHES:
        return False
    raise argparse.ArgumentTypeError(f"Boolean value expected, got {v!r}.")
