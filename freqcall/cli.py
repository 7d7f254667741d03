"""
freqCall - recognition of the frequencies of waves recorded in CSV files.

Usage:
    freqcall [-t] [-h] [--ascending] [--output CSV] [--verbose] [path]
        -t: print elapsed time
        -h: print help and quit
        path: directory where the wave files are located
"""

import argparse
import os
import sys
import time
from typing import List, Optional

from loguru import logger

from freqcall.analysis.files import is_dir_exist
from freqcall.analysis.pipeline import FrequencyPipeline
from freqcall.analysis.report import print_results, save_results_csv, sort_results
from freqcall.config import settings


class Timer:
    """Measures a single wall time interval and prints it as mm:ss"""

    def __init__(self, enable: bool):
        self.enable = enable
        self._begin = 0.0

    def start(self) -> None:
        if self.enable:
            self._begin = time.monotonic()

    def stop(self) -> None:
        if self.enable:
            elapsed = int(time.monotonic() - self._begin)
            print(f"{elapsed // 60:02d}:{elapsed % 60:02d} mm:ss")


def setup_logging(verbose: bool = False) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else settings.LOG_LEVEL)
    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        logger.add(settings.log_file, level="DEBUG", rotation="1 MB")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="freqcall",
        description="frequency call: calculates the frequency in wave files.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=settings.DATA_ROOT,
        help="directory where the wave files are located; default '%(default)s'",
    )
    parser.add_argument("-t", "--time", action="store_true", help="print elapsed time")
    parser.add_argument(
        "--ascending", action="store_true", help="list the lowest frequency first"
    )
    parser.add_argument("-o", "--output", help="also save the result table to this CSV file")
    parser.add_argument("-v", "--verbose", action="store_true", help="print debug details")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if not is_dir_exist(args.path):
        print(f"directory '{args.path}' does not exist", file=sys.stderr)
        return 1

    timer = Timer(args.time)
    timer.start()
    try:
        pipeline = FrequencyPipeline()
        results = pipeline.run_directory(
            args.path,
            ext=settings.FILE_EXTENSION,
            show_progress=settings.SHOW_PROGRESS,
        )
        results = sort_results(results, descending=not args.ascending)
        print_results(results)
        if args.output:
            save_results_csv(results, args.output)
    except Exception as e:
        logger.error(f"Unrecoverable error: {e}")
        return 1
    finally:
        timer.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
