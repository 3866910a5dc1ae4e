#!/usr/bin/env python3

import textalign


def main():
    query = "AAAGAAA"
    table = textalign.failure_function_table(query)
    print(table)

    for text in ["AGCATTCAAAGAAATTT", "AAAGAAC"]:
        print(textalign.kmp_search(query, text, table))


if __name__ == "__main__":
    main()

"""
The output is:

[0, 1, 2, 0, 1, 2, 3]
7
None
"""
