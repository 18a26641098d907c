# extract -> ratios -> average -> render, shared by every summary script

import argparse
import re
import sys
from collections import namedtuple, OrderedDict
from typing import Dict, List, Sequence, Tuple

import numpy as np

from experiment_summary.errors import (
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    DivisionByZeroError,
    EmptyInputError,
    ParseError,
    SummaryError,
)

Record = Tuple[float, ...]

RatioDefinition = namedtuple('RatioDefinition', ['name', 'numerator', 'denominator'])

# one report section: header label, pattern and the ratios computed from its matches
MetricGroup = namedtuple('MetricGroup', ['label', 'pattern', 'definitions'])

# plain decimal numbers: no nan, inf, exponents or digit separators
NUMBER = re.compile(r'-?\d+(\.\d+)?')


class Pattern(object):
    """Regular expression with a fixed number of numeric capture slots.

    The template is compiled with re.VERBOSE and re.DOTALL: whitespace in
    the template is ignored (escape literal blanks as ``\\ `` and ``#`` as
    ``\\#``) and ``.`` also matches newlines so that a match may span
    several lines of the log.
    """

    def __init__(self, name, template, arity):
        self.name = name
        self.template = template
        self.arity = arity
        self.regex = re.compile(template, re.VERBOSE | re.DOTALL)
        if self.regex.groups != arity:
            raise ValueError('pattern {} declares {} slots but has {} groups'.format(
                name, arity, self.regex.groups))

    def __repr__(self):
        return 'Pattern({!r}, arity={})'.format(self.name, self.arity)


def extract(text: str, pattern: Pattern) -> List[Record]:
    records = []
    for index, match in enumerate(pattern.regex.finditer(text)):
        values = []
        for slot, field in enumerate(match.groups()):
            if field is None or not NUMBER.fullmatch(field):
                raise ParseError(pattern.name, index, slot, field)
            values.append(float(field))
        records.append(tuple(values))
    return records


def compute_ratios(records: Sequence[Record],
                   definitions: Sequence[RatioDefinition]) -> Dict[str, List[float]]:
    """Return ``{definition name: per-record ratios}`` in record order.

    Raises DivisionByZeroError on the first record whose denominator is 0.
    """
    series = OrderedDict()
    if not records:
        for definition in definitions:
            series[definition.name] = []
        return series

    table = np.array(records, dtype=float)
    for definition in definitions:
        denominators = table[:, definition.denominator]
        zeros = np.flatnonzero(denominators == 0)
        if zeros.size:
            raise DivisionByZeroError(definition.name, int(zeros[0]))
        series[definition.name] = (table[:, definition.numerator] / denominators).tolist()
    return series


def average_ratio(values: Sequence[float]) -> float:
    if len(values) == 0:
        raise EmptyInputError('cannot average an empty sequence')
    return 100 * (float(np.sum(values)) / len(values))


def render(section_label: str, rows: Sequence[Tuple[str, float]]) -> str:
    lines = ['<{}>'.format(section_label)]
    lines.extend('  {} = {} %'.format(label, value) for label, value in rows)
    lines.append('</{}>'.format(section_label))
    return '\n'.join(lines)


def summarize_group(text: str, group: MetricGroup) -> List[Tuple[str, float]]:
    """Averaged ratio rows of one metric group, in definition order."""
    records = extract(text, group.pattern)
    if not records:
        raise EmptyInputError('{}: no match of pattern {}'.format(group.label, group.pattern.name))
    series = compute_ratios(records, group.definitions)
    return [(definition.name, average_ratio(series[definition.name]))
            for definition in group.definitions]


def summarize(text: str, groups: Sequence[MetricGroup]) -> str:
    sections = [render(group.label, summarize_group(text, group)) for group in groups]
    return '\n\n'.join(sections)


def read_log(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as reader:
        return reader.read()


def parse_args(argv, description=None):
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input",
        help="log file written by the benchmark binary")

    args = parser.parse_args(argv)

    return args


def run(args, groups):
    print('[*] reading {:s}'.format(args.input), file=sys.stderr)
    text = read_log(args.input)

    print('[*] summarize {}'.format(', '.join(group.label for group in groups)), file=sys.stderr)
    return summarize(text, groups)


def main(argv, report_name):
    """Print the report named ``report_name`` for the log given in argv.

    Returns the process exit code; nothing is written to stdout on failure.
    """
    from experiment_summary.reports import DESCRIPTIONS, get_report

    groups = get_report(report_name)
    args = parse_args(argv, DESCRIPTIONS[report_name])
    try:
        report = run(args, groups)
    except (OSError, UnicodeDecodeError) as e:
        print('[-] read_log: {}'.format(e), file=sys.stderr)
        print('[-] Done, failed', file=sys.stderr)
        return EXIT_FILE_ERROR
    except SummaryError as e:
        print('[-] {}: {}'.format(e.stage, e), file=sys.stderr)
        print('[-] Done, failed', file=sys.stderr)
        return e.exit_code

    print(report)
    print('[+] Done, success', file=sys.stderr)
    return EXIT_SUCCESS

