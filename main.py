#!/usr/bin/env python3
"""
Main script for computing standard errors of the mean.
"""

# Pipeline overview:
# 1) Take values from the command line, or load a CSV (long or wide layout).
# 2) Split the observations into samples, one per group.
# 3) Compute n, mean, SD and SE = SD / sqrt(n) for every sample.
# 4) Print the summary, write statistical_summary.csv and optionally a figure.

import argparse
import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sterr.analysis import calculate_statistics, print_statistics
from sterr.data_processing import load_sample_table, wide_to_long
from sterr.output import save_statistics_to_csv
from sterr.plotting import plot_statistical_summary
from sterr.stats import InvalidInputError, compute_standard_error

DEFAULT_OUTPUT_DIR = "output"


def build_parser():
    parser = argparse.ArgumentParser(
        description="Standard error of the mean for numeric samples."
    )
    parser.add_argument("csv", nargs="?", help="CSV file of observations.")
    parser.add_argument(
        "--values", nargs="+", type=float, help="Sample values given directly."
    )
    parser.add_argument("--column", default="value", help="Value column (long CSV).")
    parser.add_argument("--group-by", dest="group_by", help="Group column (long CSV).")
    parser.add_argument(
        "--wide",
        action="store_true",
        help="Treat every CSV column as a separate sample.",
    )
    parser.add_argument("--output", default=DEFAULT_OUTPUT_DIR, help="Output directory.")
    parser.add_argument("--plot", action="store_true", help="Save a summary figure.")
    return parser


def run_table(args):
    df = load_sample_table(args.csv)
    value_col, group_col = args.column, args.group_by
    if args.wide:
        value_col, group_col = "value", "sample"
        df = wide_to_long(df, value_col=value_col, group_col=group_col)
        logging.info("Reshaped wide table to %d observations", len(df))

    stats_df = calculate_statistics(df, value_col, group_col=group_col)
    print_statistics(stats_df, group_col=group_col)

    stats_csv = save_statistics_to_csv(stats_df, args.output)
    logging.info("  - Statistical summary CSV: %s", stats_csv)
    if args.plot:
        plot_path = plot_statistical_summary(
            stats_df, group_col=group_col, output_dir=args.output
        )
        logging.info("  - Summary figure: %s", plot_path)


def main(argv=None):
    """Main execution function."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.values is None and args.csv is None:
        parser.error("provide a CSV file or --values")

    start_time = time.time()
    try:
        if args.values is not None:
            se = compute_standard_error(args.values)
            logging.info("Computed standard error for n=%d values", len(args.values))
            print(f"{se:.10g}")
        else:
            run_table(args)
    except (InvalidInputError, KeyError, FileNotFoundError) as exc:
        logging.error("Analysis failed: %s", exc)
        return 1

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    return 0


if __name__ == "__main__":
    sys.exit(main())
