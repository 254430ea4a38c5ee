"""
Command Line Interface for Product Scraper
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config import ScraperConfig
from .core.reporter import ErrorReporter, setup_logging
from .core.scraper import ProductScraper

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Product Scraper - scrape a product listing into a dated CSV file'
    )

    # Input
    parser.add_argument(
        '--url',
        type=str,
        help='Listing page URL (default: $PRODUCT_SCRAPER_URL or the built-in target)'
    )

    # Output
    parser.add_argument(
        '--data-dir',
        type=str,
        help='CSV output directory (default: ./data)'
    )
    parser.add_argument(
        '--log-dir',
        type=str,
        help='Error log directory (default: ./logs)'
    )

    # Network
    parser.add_argument(
        '--timeout',
        type=float,
        help='Request timeout in seconds (default: 30)'
    )
    parser.add_argument(
        '--retries',
        type=int,
        help='Retries per request on connection errors and 429/5xx (default: 0)'
    )

    # Other
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    reporter = ErrorReporter()

    try:
        config = ScraperConfig.from_env(
            target_url=args.url,
            data_folder=args.data_dir,
            log_folder=args.log_dir,
            timeout=args.timeout,
            max_retries=args.retries
        )
    except ValueError as e:
        reporter.report(e)
        return 1

    setup_logging(config.log_folder, log_level)

    scraper = ProductScraper(config)
    try:
        records = asyncio.run(scraper.scrape())
        output_path = scraper.save(records)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        reporter.report(e)
        return 1
    finally:
        scraper.close()

    print(f"\nScraping complete!")
    print(f"   Products: {len(records)}")
    print(f"   Saved to: {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
