#!/usr/bin/env python3

# prints the <XOR> averages of a benchmark log

import os

from experiment_summary import summary


def main(argv=None):
    return summary.main(argv, 'comp-compare')

if __name__ == '__main__':
    exit(main(os.sys.argv[1:]))
