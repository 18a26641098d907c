#!/usr/bin/env python3

# draws the averaged ratios of every report section as a bar chart

import argparse
import os
import sys

import matplotlib.pyplot as plt
import numpy as np

from experiment_summary import summary
from experiment_summary.errors import EXIT_FILE_ERROR, EXIT_SUCCESS, SummaryError
from experiment_summary.reports import REPORTS, get_report

# disable warning about too many figures open
plt.rcParams.update({'figure.max_open_warning': 0})

def parse_args(argv):
    parser = argparse.ArgumentParser()
    parser.add_argument("-i", "--input",
        help="log file written by the benchmark binary",
        required=True)
    parser.add_argument("-r", "--report",
        help="report type to plot",
        choices=sorted(REPORTS),
        required=True)
    parser.add_argument("-o", "--output",
        help="output directory of the charts",
        required=True)

    args = parser.parse_args(argv)

    return args

# adapted from https://matplotlib.org/3.1.1/gallery/lines_bars_and_markers/barchart.html
def generate_chart(section_label, rows):
    labels = [label for label, _ in rows]
    values = [value for _, value in rows]

    x = np.arange(len(labels))
    width = 0.5

    fig, ax = plt.subplots()
    rects = ax.bar(x, values, width, label=section_label)

    plt.xticks(rotation=45)
    ax.set_ylabel('average ratio in percent')
    ax.set_title(section_label)
    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.axhline(100, linestyle='dotted', color='gray')

    for rect, value in zip(rects, values):
        ax.annotate('{:.1f}'.format(value),
            xy=(rect.get_x() + rect.get_width() / 2, rect.get_height()),
            xytext=(0, 3),
            textcoords='offset points',
            ha='center', va='bottom')

    fig.tight_layout()

    return fig


def run(args):
    print('[*] reading {:s}'.format(args.input), file=sys.stderr)
    text = summary.read_log(args.input)

    # every section is summarized before any figure is opened
    sections = [(group.label, summary.summarize_group(text, group))
                for group in get_report(args.report)]

    charts = {}
    for label, rows in sections:
        print('[*] generate_chart {}'.format(label), file=sys.stderr)
        charts[label] = generate_chart(label, rows)

    output_dir = args.output

    if not os.path.exists(output_dir):
        os.mkdir(output_dir)
    print('[*] saving charts at {:s}'.format(output_dir), file=sys.stderr)
    paths = []
    for name, chart in charts.items():
        figure_path = os.path.join(output_dir, name + '_ratios.pdf')
        chart.savefig(figure_path)
        plt.close(chart)
        paths.append(figure_path)

    return paths


def main(argv=None):
    args = parse_args(argv)
    try:
        run(args)
    except (OSError, UnicodeDecodeError) as e:
        print('[-] {}'.format(e), file=sys.stderr)
        print('[-] Done, failed', file=sys.stderr)
        return EXIT_FILE_ERROR
    except SummaryError as e:
        print('[-] {}: {}'.format(e.stage, e), file=sys.stderr)
        print('[-] Done, failed', file=sys.stderr)
        return e.exit_code

    print('[+] Done, success', file=sys.stderr)
    return EXIT_SUCCESS

if __name__ == '__main__':
    exit(main(os.sys.argv[1:]))
