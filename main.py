"""
Warranty Enricher - Main Entry Point

Reads a table of devices keyed by service tag, looks up ship date, warranty
expiration and storage for each one from the vendor API, and writes the
augmented table.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.config import load_config
from src.errors import AuthError, ConfigError, InputTableError
from src.models import RunSummary
from src.orchestrator import EnrichmentPipeline


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="warranty-enricher",
        description="Add Ship Date, Warranty Expiration and Storage columns to a device table."
    )
    parser.add_argument("--input", type=Path, help="Input table (default: devices.csv)")
    parser.add_argument("--output", type=Path, help="Output table (default: devices_enriched.csv)")
    parser.add_argument("--config", type=Path, help="TOML config file (default: config/enricher.toml)")
    parser.add_argument("--identifier-column", help="Column holding the service tag (default: Serial Number)")
    parser.add_argument("--delimiter", help="Field delimiter (default: ,)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def print_summary(summary: RunSummary) -> None:
    """Print the human-readable end-of-run notice."""
    print("\n" + "=" * 70)
    print("  ENRICHMENT COMPLETE")
    print("=" * 70)
    print(f"  Rows read:          {summary.rows_read}")
    print(f"  Rows written:       {summary.rows_written}")
    print(f"  Rows skipped:       {summary.rows_skipped}")
    print(f"  Warranty failures:  {summary.warranty_failures}")
    print(f"  No warranty data:   {summary.warranty_missing}")
    print(f"  Storage failures:   {summary.storage_failures}")
    print(f"  Output:             {summary.output_path}")
    print("=" * 70 + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stdout
    )

    try:
        config = load_config(
            args.config,
            input_path=args.input,
            output_path=args.output,
            identifier_column=args.identifier_column,
            delimiter=args.delimiter,
            log_level=args.log_level,
        )
        logging.getLogger().setLevel(config.log_level)

        summary = EnrichmentPipeline(config).run()
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except InputTableError as e:
        logger.error(f"Cannot read input: {e}")
        return 1
    except AuthError as e:
        logger.error(f"Authentication failed, no output written: {e}")
        return 1

    print_summary(summary)
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
