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

"""
Command line entry points.

  textalign-align ACGTAAACAC ACGTAACAC --show-alignment true
  CASE_INSENSITIVE=1 textalign-grep rust poem.txt
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .grep import Config, run
from .levenshtein import compute_alignment, get_nice_alignment
from .utils import setup_logger, str2bool

_FORMATTER = "%(asctime)s %(levelname)s [%(filename)s:%(lineno)d] %(message)s"


def _add_logging_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="""If given, logs are also saved to this file (a timestamp
        is appended to the filename).""",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="warning",
        choices=["debug", "info", "warning", "error", "critical"],
        help="The log level to use.",
    )


def _setup_logging(args: argparse.Namespace) -> None:
    if args.log_file is not None:
        setup_logger(args.log_file, log_level=args.log_level)
    else:
        logging.basicConfig(
            format=_FORMATTER, level=getattr(logging, args.log_level.upper())
        )


def get_align_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the edit distance and the CIGAR string "
        "of two sequences."
    )

    parser.add_argument("seq1", type=str, help="The first sequence.")

    parser.add_argument("seq2", type=str, help="The second sequence.")

    parser.add_argument(
        "--show-alignment",
        type=str2bool,
        default=False,
        help="True to also print the aligned sequences.",
    )

    _add_logging_args(parser)
    return parser.parse_args(argv)


def get_grep_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the lines of a file containing the query. "
        "Set CASE_INSENSITIVE to ignore case and USE_KMP to search "
        "with the KMP matcher, the flags below take precedence."
    )

    parser.add_argument("query", type=str, help="The string to search for.")

    parser.add_argument("filename", type=Path, help="The file to search in.")

    parser.add_argument(
        "--case-insensitive",
        type=str2bool,
        default=None,
        help="True to ignore case. Defaults to whether CASE_INSENSITIVE is set.",
    )

    parser.add_argument(
        "--use-kmp",
        type=str2bool,
        default=None,
        help="True to search with the KMP matcher. "
        "Defaults to whether USE_KMP is set.",
    )

    _add_logging_args(parser)
    return parser.parse_args(argv)


def align_main(argv: Optional[List[str]] = None) -> int:
    args = get_align_args(argv)
    _setup_logging(args)
    logging.info(vars(args))

    result = compute_alignment(args.seq1, args.seq2)
    print(f"{result.edit_distance}\t{result.cigar}")
    if args.show_alignment:
        print(get_nice_alignment(args.seq1, args.seq2))
    return 0


def grep_main(argv: Optional[List[str]] = None) -> int:
    args = get_grep_args(argv)
    _setup_logging(args)
    logging.info(vars(args))

    config = Config.from_env(args.query, args.filename)
    if args.case_insensitive is not None:
        config.case_sensitive = not args.case_insensitive
    if args.use_kmp is not None:
        config.use_kmp = args.use_kmp

    try:
        results = run(config)
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Failed to read {config.filename}: {e}")
        return 1

    for line in results:
        print(line)
    return 0
