#!/usr/bin/env python3
# Copyright    2023  Xiaomi Corp.        (authors: Wei Kang)
#
# See ../LICENSE for clarification regarding multiple authors
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
This script aligns the pairs of sequences in a tab separated file, one pair
per line, and writes the edit distance and the CIGAR string of each pair
to a JSONL file, e.g.

  $ cat pairs.tsv
  ACGTA	GCGTA
  ACGTAAACAC	ACGTAACAC
  $ ./align_pairs.py --pairs pairs.tsv --output alignments.jsonl
  $ cat alignments.jsonl
  {"seq1": "ACGTA", "seq2": "GCGTA", "edit_distance": 1, "cigar": "5M"}
  {"seq1": "ACGTAAACAC", "seq2": "ACGTAACAC", "edit_distance": 1, "cigar": "6M1I3M"}
"""

import argparse
import json
import logging
from pathlib import Path

from textalign import compute_alignment


def get_args():
    parser = argparse.ArgumentParser()

    parser.add_argument(
        "--pairs",
        type=Path,
        help="Path to the tab separated file containing the pairs.",
    )

    parser.add_argument(
        "--output",
        type=Path,
        help="Path to the JSONL file to save the alignments.",
    )

    return parser.parse_args()


def main():
    args = get_args()
    logging.info(vars(args))

    if args.output.is_file():
        logging.info(f"{args.output} already exists - skipping.")
        return

    args.output.parent.mkdir(parents=True, exist_ok=True)

    num_pairs = 0
    with open(args.pairs, encoding="utf-8") as fin, open(
        args.output, "w", encoding="utf-8"
    ) as fout:
        for i, line in enumerate(fin):
            fields = line.rstrip("\r\n").split("\t")
            if len(fields) != 2:
                logging.warning(f"Skipping line {i + 1}, expect 2 fields: {line!r}")
                continue
            result = compute_alignment(fields[0], fields[1])
            record = {
                "seq1": fields[0],
                "seq2": fields[1],
                "edit_distance": result.edit_distance,
                "cigar": result.cigar,
            }
            print(json.dumps(record), file=fout)
            num_pairs += 1

    logging.info(f"Aligned {num_pairs} pairs, saved to {args.output}")


if __name__ == "__main__":
    formatter = (
        "%(asctime)s %(levelname)s [%(filename)s:%(lineno)d] %(message)s"
    )
    logging.basicConfig(format=formatter, level=logging.INFO)

    main()
