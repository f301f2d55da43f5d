"""
Loading and cleaning of the horse-kick table.

The historical data ships in two layouts:
- long: one row per (year, corps) with a ``deaths`` column
- wide: one row per year with one column per corps (``GC``, ``C1`` .. ``C15``)

Both are read into a long-format DataFrame with columns year, corps, deaths.
"""

from pathlib import Path
from typing import Optional

import pandas as pd
import structlog

from ..config import Settings, settings as default_settings
from ..sanitizer.exceptions import MissingColumnError
from ..sanitizer.pipeline import SanitizationPipeline

logger = structlog.get_logger(__name__)

TRAINING_COLUMNS: tuple[str, ...] = ("year", "corps", "deaths")

_ROMAN = [(10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I")]


def to_roman(number: int) -> str:
    """Roman numeral for a corps number (1..39)."""
    if not 0 < number < 40:
        raise ValueError(f"Corps number out of range: {number}")
    parts = []
    for value, numeral in _ROMAN:
        while number >= value:
            parts.append(numeral)
            number -= value
    return "".join(parts)


def normalize_corps_label(label: str) -> str:
    """
    Map wide-table column labels onto corps identifiers.

    ``GC`` (Guard Corps) becomes ``G``; ``C1``..``C15`` become roman numerals.
    Anything else is returned stripped but otherwise unchanged.
    """
    label = str(label).strip()
    upper = label.upper()
    if upper in {"GC", "G"}:
        return "G"
    if upper.startswith("C") and upper[1:].isdigit():
        return to_roman(int(upper[1:]))
    return label


def load_horse_kicks(path: str | Path) -> pd.DataFrame:
    """
    Read a horse-kick CSV into long format.

    Args:
        path: CSV file in long or wide layout

    Returns:
        DataFrame with at least year, corps, deaths columns
    """
    frame = pd.read_csv(path)
    frame.columns = [str(col).strip().lower() for col in frame.columns]

    if "corps" not in frame.columns and "year" in frame.columns:
        corps_columns = [col for col in frame.columns if col != "year"]
        frame = frame.melt(
            id_vars="year",
            value_vars=corps_columns,
            var_name="corps",
            value_name="deaths",
        )
        layout = "wide"
    else:
        layout = "long"

    if "corps" in frame.columns:
        frame["corps"] = frame["corps"].map(normalize_corps_label, na_action="ignore")

    logger.info("Horse-kick table loaded", path=str(path), layout=layout, rows=len(frame))
    return frame


def clean_horse_kicks(
    frame: pd.DataFrame, settings: Optional[Settings] = None
) -> pd.DataFrame:
    """
    Apply request sanitization to a training-style table.

    Same checks as a prediction request, with ``deaths`` required as well.
    Column presence is checked on the frame itself, so a zero-row frame with
    the full header cleans to an empty frame and one without it is rejected.

    Raises:
        MissingColumnError: If year, corps or deaths is absent
    """
    missing = [col for col in TRAINING_COLUMNS if col not in frame.columns]
    if missing:
        raise MissingColumnError(
            f"Missing required column(s): {', '.join(missing)}",
            missing_columns=missing,
            seen_columns=[str(col) for col in frame.columns],
        )
    if frame.empty:
        logger.info("Horse-kick table is empty, nothing to clean")
        return pd.DataFrame(columns=list(TRAINING_COLUMNS))

    settings = settings or default_settings
    pipeline = SanitizationPipeline(
        required_columns=TRAINING_COLUMNS,
        valid_corps=settings.VALID_CORPS,
        year_bounds=settings.year_bounds,
        warn=settings.WARN_ON_DROPPED_ROWS,
    )
    records = frame.to_dict(orient="records")
    result = pipeline.run(records)

    cleaned = pd.DataFrame(result.rows, columns=list(TRAINING_COLUMNS))
    logger.info(
        "Horse-kick table cleaned",
        received=len(frame),
        kept=len(cleaned),
        dropped=result.dropped_count,
    )
    return cleaned
