"""
Dataset loader for the Career Correlation Engine.

Reads the career dataset CSV, maps fixed column positions to named fields,
ordinal-encodes the family influence label and returns the individuals whose
fields all parse. Rows that fail to parse are skipped with a warning.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

import pandas as pd

logger = logging.getLogger(__name__)

# Zero-based column positions in the source CSV
FIELD_COLUMNS: Dict[str, int] = {
    "age": 2,
    "years_of_experience": 4,
    "job_satisfaction": 7,
    "salary": 10,
    "family_influence": 14,
    "professional_network_size": 19,
}

# Ordinal encoding: Low -> 1, Medium -> 2, High -> 3
FAMILY_INFLUENCE_CODES: Dict[str, float] = {
    "Low": 1.0,
    "Medium": 2.0,
    "High": 3.0,
}

# Plain decimal or scientific notation, ASCII digits only
NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)

NUMERIC_FIELDS = (
    "age",
    "years_of_experience",
    "job_satisfaction",
    "professional_network_size",
    "salary",
)


class DatasetError(Exception):
    """The dataset source cannot be opened or read."""


@dataclass(frozen=True)
class Individual:
    """
    One parsed row of the career dataset.

    id is the zero-based position of the data row in the file (header
    excluded), counting rows that were skipped, so it matches the record
    number in load warnings.
    """

    id: int
    age: float
    years_of_experience: float
    job_satisfaction: float
    professional_network_size: float
    family_influence: float
    salary: float


def encode_family_influence(label: str) -> float:
    """
    Map a family influence label to its ordinal code.

    Matching is exact and case-sensitive after trimming whitespace.

    Raises:
        ValueError: If the label is not Low, Medium or High
    """
    key = label.strip()
    if key not in FAMILY_INFLUENCE_CODES:
        raise ValueError(f"Invalid Family Influence value: {label!r}")
    return FAMILY_INFLUENCE_CODES[key]


def parse_number(value: str) -> float:
    """Parse a trimmed numeric cell, rejecting empty, malformed and non-finite values."""
    text = value.strip()
    if not NUMBER_PATTERN.fullmatch(text):
        raise ValueError(f"Invalid numeric value: {value!r}")
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"Non-finite numeric value: {value!r}")
    return number


def parse_individual(row_id: int, row, columns: Mapping[str, int] = FIELD_COLUMNS) -> Individual:
    """
    Build an Individual from one positional CSV row.

    Args:
        row_id: Index of the data row in the source (header excluded)
        row: Positional sequence of raw cell values
        columns: Field name to column position mapping

    Raises:
        ValueError: If any required field is missing or cannot be parsed
    """
    cells = {}
    for field, position in columns.items():
        value = row[position]
        if not isinstance(value, str):
            # pandas pads short rows with NaN
            raise ValueError(f"Missing value for {field} (column {position})")
        cells[field] = value

    fields = {field: parse_number(cells[field]) for field in NUMERIC_FIELDS}
    fields["family_influence"] = encode_family_influence(cells["family_influence"])

    return Individual(id=row_id, **fields)


def _read_frame(file_path: str) -> pd.DataFrame:
    """
    Read the CSV data rows with every cell kept as raw text.

    The header line is read as a plain row so it fixes the table width:
    pandas raises ParserError for any data row wider than the header.
    Columns are labelled by position.
    """
    try:
        with open(file_path, newline="", encoding="utf-8") as handle:
            return pd.read_csv(
                handle,
                header=None,
                index_col=False,
                dtype=str,
                keep_default_na=False,
            ).iloc[1:].reset_index(drop=True)
    except pd.errors.EmptyDataError:
        logger.warning(f"⚠️  Dataset {file_path} is empty")
        return pd.DataFrame()
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
        raise DatasetError(f"Could not read dataset {file_path}: {e}") from e


def read_dataset(
    file_path: str,
    columns: Optional[Mapping[str, int]] = None
) -> List[Individual]:
    """
    Load individuals from the career dataset CSV.

    The first line is a header. Each data row is mapped positionally
    (see FIELD_COLUMNS). Rows with an unparseable numeric value or an
    unknown family influence label are skipped with a warning.

    Args:
        file_path: Path to the CSV file
        columns: Optional override of FIELD_COLUMNS

    Returns:
        List[Individual]: Parsed individuals, in file order

    Raises:
        DatasetError: If the file cannot be opened, decoded or parsed as CSV,
            or has fewer columns than the field mapping needs

    Example:
        >>> individuals = read_dataset("career_dataset.csv")
        >>> len(individuals)
    """
    columns = dict(columns or FIELD_COLUMNS)
    missing = set(FIELD_COLUMNS) - set(columns)
    if missing:
        raise ValueError(f"Column mapping is missing fields: {sorted(missing)}")

    logger.info(f"Reading dataset from {file_path}")
    df = _read_frame(file_path)

    if df.empty:
        logger.info("   ✓ Loaded 0 individuals")
        return []

    required_width = max(columns.values()) + 1
    if len(df.columns) < required_width:
        raise DatasetError(
            f"Dataset {file_path} has {len(df.columns)} columns, "
            f"expected at least {required_width}"
        )

    individuals = []
    skipped = 0

    for row_id, row in enumerate(df.itertuples(index=False, name=None)):
        try:
            individuals.append(parse_individual(row_id, row, columns))
        except ValueError as e:
            skipped += 1
            logger.warning(f"⚠️  Could not parse data for record {row_id}: {e}")

    logger.info(f"   ✓ Loaded {len(individuals)} individuals ({skipped} rows skipped)")
    return individuals
