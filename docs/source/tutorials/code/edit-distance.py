#!/usr/bin/env python3

import textalign

s1 = "ACGTAAACAC"
s2 = "ACGTAACAC"
result = textalign.compute_alignment(s1, s2)
print(result.edit_distance)
print(result.cigar)
print(result.ops)
print(textalign.get_nice_alignment(s1, s2))

"""
The output is

1
6M1I3M
[(6, <Op.MATCH: 0>), (1, <Op.INSERTION: 1>), (3, <Op.MATCH: 0>)]
A C G T A A A C A C
| | | | | | + | | |
A C G T A A * C A C
"""
