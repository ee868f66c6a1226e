"""
Command line interface.

Usage:
    python -m regbench [--verbose verbose] [--data PATH] [--iterations N]
                       [--workers K] [--backend NAME] [--log-level LEVEL]

Exit status:
    0  success
    1  dataset could not be loaded
    2  invalid arguments
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from regbench import __version__
from regbench.config import DEFAULT_DATA_PATH, DEFAULT_ITERATIONS, RunConfig
from regbench.core.exceptions import LoadError, ValidationError
from regbench.pipeline import run_pipeline
from regbench.regression.solvers import BACKEND_CHOICES

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='regbench',
        description=(
            "Repeatedly fit crime rate and room count against median home "
            "value and report each fit."
        ),
    )
    parser.add_argument(
        '--verbose',
        nargs='?',
        const='verbose',
        default='',
        help="Print every iteration when set to 'verbose' (case-insensitive)",
    )
    parser.add_argument(
        '--data',
        default=str(DEFAULT_DATA_PATH),
        help=f"CSV dataset path (default: {DEFAULT_DATA_PATH})",
    )
    parser.add_argument(
        '--iterations', '-n',
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"Number of repetitions (default: {DEFAULT_ITERATIONS})",
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=1,
        help="Worker threads; 1 runs sequentially (default: 1)",
    )
    parser.add_argument(
        '--backend',
        choices=BACKEND_CHOICES,
        default='auto',
        help="Regression backend (default: auto)",
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the pipeline, and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    
    try:
        config = RunConfig.build(
            args.data,
            iterations=args.iterations,
            verbose=args.verbose.casefold() == 'verbose',
            workers=args.workers,
            backend=args.backend,
        )
    except ValidationError as e:
        print(f"regbench: error: {e}", file=sys.stderr)
        return EXIT_USAGE
    
    try:
        run_pipeline(config)
    except LoadError as e:
        logger.debug("Load failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR
    
    return EXIT_OK


def main_entry() -> None:
    sys.exit(main())
