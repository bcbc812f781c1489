#!/usr/bin/env python3
"""
CLI entry point for the Career Correlation Engine.

Runs the complete pipeline:
1. Load configuration
2. Read the career dataset
3. Compute pairwise regressions and descriptive statistics
4. Print the report

Usage:
    python -m analytics.career_correlation.run [--dataset PATH] [--quiet]

Options:
    --dataset PATH    CSV file to analyze (default: CAREER_DATASET_PATH or career_dataset.csv)
    --quiet           Reduce logging verbosity
    --help            Show this help message
"""

import sys
import argparse
import logging

from .config import get_config
from .dataset_loader import DatasetError, read_dataset
from .analyzer import perform_correlation_analysis
from .report import format_report


def setup_logging(verbose: bool = True, level: int = logging.INFO):
    """Set up logging configuration."""
    logging.basicConfig(
        level=level if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Career Correlation Engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m analytics.career_correlation.run
  python -m analytics.career_correlation.run --dataset data/career_dataset.csv
  python -m analytics.career_correlation.run --quiet
        """
    )
    parser.add_argument(
        "--dataset",
        default=None,
        help="Path to the career dataset CSV"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce logging verbosity"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for the correlation engine pipeline."""
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
    except ValueError as e:
        setup_logging()
        logging.getLogger(__name__).error(f"❌ Invalid configuration: {e}")
        return 1

    setup_logging(verbose=config.verbose and not args.quiet, level=config.logging_level)
    logger = logging.getLogger(__name__)

    dataset_path = args.dataset or config.dataset_path

    try:
        # Step 1: Load dataset
        logger.info("=" * 80)
        logger.info("STEP 1: Load Dataset")
        logger.info("=" * 80)
        individuals = read_dataset(dataset_path)

        if not individuals:
            logger.warning("No individuals loaded from the dataset!")
            return 0

        # Step 2: Analyze
        logger.info("\n" + "=" * 80)
        logger.info("STEP 2: Compute Correlations")
        logger.info("=" * 80)
        report = perform_correlation_analysis(individuals)

        if report.is_insufficient:
            logger.warning(
                f"Only {report.n_individuals} individual loaded from the dataset; "
                "at least 2 are needed for regression analysis."
            )
            return 0

        # Step 3: Report
        print(format_report(report))

        return 0

    except DatasetError as e:
        logger.error(f"❌ PIPELINE FAILED: {e}")
        return 1

    except KeyboardInterrupt:
        logger.warning("\n\n⚠️  Pipeline interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
