"""
Single-thread vs two-worker processing of two Project Gutenberg books.

Usage:
    >>> book-bench
    >>> book-bench --executor=thread        # GIL-bound thread pool instead of processes
    >>> book-bench --data-dir=/tmp/books --output-dir=/tmp/out -v

Flow: create dirs -> download missing books -> single-thread run -> two-worker
run -> summary table. Outputs of the two runs go to *_SINGLE.txt and
*_MULTI.txt so they can be diffed.
"""

import argparse
import logging

from .acquire import ensure_all
from .config import default_config, prepare_dirs
from .config_logging import config_logging
from .errors import BenchError
from .report import ConsoleReporter, summary_table
from .runners import EXECUTORS, run_concurrent, run_sequential

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Compare sequential and concurrent processing of two books")
    parser.add_argument("--data-dir", default="data", help="Where downloaded books are cached")
    parser.add_argument("--output-dir", default="output", help="Where transformed books are written")
    parser.add_argument(
        "--executor",
        choices=sorted(EXECUTORS),
        default="process",
        help="Pool flavour of the two-worker run",
    )
    parser.add_argument("--skip-multi", action="store_true", help="Only run the single-thread baseline")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def run(args) -> list:
    config = default_config(args.data_dir, args.output_dir)
    prepare_dirs(config)
    ensure_all(config)

    reporter = ConsoleReporter()
    runs = [run_sequential(config.single_pairs(), reporter)]
    if not args.skip_multi:
        runs.append(run_concurrent(config.multi_pairs(), reporter, executor=args.executor))
    return runs


def main(argv=None) -> int:
    args = parse_args(argv)
    config_logging(logging.DEBUG if args.verbose else logging.INFO)
    try:
        runs = run(args)
    except BenchError as e:
        logger.error("%s", e)
        return 1
    print()
    print(summary_table(runs))
    return 0
