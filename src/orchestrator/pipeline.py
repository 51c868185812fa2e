"""
Enrichment Pipeline

Drives one enrichment run:
1. Loads the input table and fixes the output column layout
2. Obtains one bearer token
3. Resolves warranty and storage for each record, strictly in input order
4. Merges the derived fields into each record
5. Writes the whole output table once at the end

Only authentication and input-table failures abort a run. A failed lookup is
logged here, at the call site, and the record is written with empty fields.
"""

import logging
import requests
from typing import Any, Dict, List, Optional

from src.api.auth import authenticate
from src.api.client import VendorAPIClient
from src.compute.columns import appended_columns, canonical_columns, find_column, merge_record
from src.config import EnricherConfig
from src.lookups import get_storage, get_warranty
from src.models import LookupOutcome, RunSummary
from src.tables import read_table, write_table


logger = logging.getLogger(__name__)


class EnrichmentPipeline:
    """Single-pass, sequential warranty/storage enrichment of a device table."""

    def __init__(self, config: EnricherConfig, session: Optional[requests.Session] = None):
        """
        Initialize the pipeline.

        Args:
            config: Run configuration
            session: Optional HTTP session shared by authentication and lookups
        """
        self.config = config
        self.session = session

    def run(self) -> RunSummary:
        """
        Execute the enrichment run.

        Returns:
            RunSummary with row and failure counts

        Raises:
            InputTableError: The input table cannot be read
            AuthError: No bearer token could be obtained; nothing is written
        """
        config = self.config
        summary = RunSummary(output_path=config.output_path)

        columns, rows = read_table(config.input_path, config.delimiter)
        summary.rows_read = len(rows)

        original_columns = canonical_columns(columns)
        new_columns = appended_columns(original_columns)
        output_columns = original_columns + new_columns

        identifier_column = find_column(original_columns, config.identifier_column)
        if identifier_column is None:
            logger.warning(
                f"Identifier column '{config.identifier_column}' not found in {config.input_path}; "
                f"no rows will be enriched"
            )

        token = authenticate(config.api, session=self.session)

        enriched: List[Dict[str, str]] = []
        with VendorAPIClient(config.api, session=self.session) as client:
            for index, row in enumerate(rows, start=1):
                service_tag = self._service_tag(row, identifier_column)
                if not service_tag:
                    logger.warning(f"Row {index}: no service tag, skipping")
                    summary.rows_skipped += 1
                    summary.skipped_rows.append(index)
                    continue

                enriched.append(self._enrich_row(row, service_tag, token, client, original_columns, summary))

        write_table(config.output_path, output_columns, enriched, config.delimiter)
        summary.rows_written = len(enriched)

        logger.info(
            f"Enrichment complete - written={summary.rows_written}, skipped={summary.rows_skipped}, "
            f"lookup_failures={summary.lookup_failures}, output={config.output_path}"
        )
        return summary

    @staticmethod
    def _log_failure(kind: str, outcome: LookupOutcome) -> None:
        logger.error(f"Error retrieving {kind} for {outcome.service_tag}: {outcome.error}")

    @staticmethod
    def _service_tag(row: Dict[str, Any], identifier_column: Optional[str]) -> str:
        if identifier_column is None:
            return ""
        value = row.get(identifier_column)
        if value is None:
            return ""
        return str(value).strip()

    def _enrich_row(
        self,
        row: Dict[str, str],
        service_tag: str,
        token: str,
        client: VendorAPIClient,
        original_columns: List[str],
        summary: RunSummary
    ) -> Dict[str, str]:
        logger.info(f"Processing service tag {service_tag}")

        warranty = get_warranty(service_tag, token, client)
        if not warranty.ok:
            summary.warranty_failures += 1
            self._log_failure("warranty", warranty)
        elif warranty.value.is_empty():
            summary.warranty_missing += 1
            logger.warning(f"No warranty data returned for {warranty.service_tag}")

        storage = get_storage(service_tag, token, client)
        if not storage.ok:
            summary.storage_failures += 1
            self._log_failure("storage", storage)

        return merge_record(row, original_columns, warranty.value, storage.value)
