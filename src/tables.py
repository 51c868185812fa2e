"""
Table I/O

Reads and writes delimited tables with pandas. Every cell is kept as a
string; empty cells stay empty strings rather than NaN.
"""

import logging
from pathlib import Path
from typing import Dict, List, Tuple
import pandas as pd

from src.errors import InputTableError


logger = logging.getLogger(__name__)


def read_table(filepath: Path, delimiter: str = ",") -> Tuple[List[str], List[Dict[str, str]]]:
    """
    Load a delimited table.

    Returns:
        (columns, rows) where columns is the header order and rows are dicts
        keyed by column name

    Raises:
        InputTableError: If the file is missing, empty or cannot be parsed
    """
    filepath = Path(filepath).expanduser()
    logger.info(f"Loading data from: {filepath}")

    try:
        raw = pd.read_csv(
            filepath,
            sep=delimiter,
            header=None,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8-sig",
        )
    except FileNotFoundError as e:
        raise InputTableError(f"Input file not found: {filepath}") from e
    except pd.errors.EmptyDataError as e:
        raise InputTableError(f"Input file is empty: {filepath}") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise InputTableError(f"Cannot parse input file {filepath}: {e}") from e

    # Header read as data so repeated names are not renamed (Model -> Model.1)
    raw = raw.fillna("")
    columns = [str(c) for c in raw.iloc[0]]

    rows = []
    for values in raw.iloc[1:].itertuples(index=False):
        row: Dict[str, str] = {}
        for column, value in zip(columns, values):
            # First occurrence of a repeated column keeps its value
            row.setdefault(column, value)
        rows.append(row)

    logger.info(f"  Loaded {len(rows):,} rows, {len(columns)} columns")
    return columns, rows


def write_table(filepath: Path, columns: List[str], rows: List[Dict[str, str]], delimiter: str = ",") -> None:
    """Write rows to a delimited table, overwriting any existing file."""
    filepath = Path(filepath).expanduser()
    filepath.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(rows, columns=columns)
    df.to_csv(filepath, sep=delimiter, index=False)
    logger.info(f"  Saved {len(df):,} rows to: {filepath}")
