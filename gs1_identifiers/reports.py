"""
Batch validation reports (CSV).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List

import pandas as pd

from .core.barcode import IdentifierResult
from .core.registry import get_identifier_type

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["input", "type", "valid", "code", "message"]


def read_values(path: Path) -> List[str]:
    """Read one identifier per line, skipping blank lines."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip()]


def validate_many(values: Iterable[Any], kind: str = "gtin13") -> List[IdentifierResult]:
    """
    Validate many values as one identifier type.

    Bad values never raise; each one gets its own result. An unknown
    `kind` raises KeyError before anything is validated.
    """
    identifier_type = get_identifier_type(kind)
    results = [identifier_type.try_create(v if isinstance(v, str) else str(v)) for v in values]
    invalid = sum(1 for r in results if not r.valid)
    logger.info("Validated %d %s values, %d invalid", len(results), identifier_type.KIND, invalid)
    return results


def to_dataframe(results: Iterable[IdentifierResult]) -> pd.DataFrame:
    rows = [
        {
            "input": r.raw,
            "type": r.kind,
            "valid": r.valid,
            "code": r.code.value if r.code is not None else "",
            "message": r.message,
        }
        for r in results
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Count rows per outcome; valid rows are reported under code 'OK'."""
    codes = df["code"].where(df["code"] != "", "OK")
    summary = codes.value_counts().rename_axis("code").reset_index(name="count")
    return summary.sort_values("code").reset_index(drop=True)


def export_csv(df: pd.DataFrame, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return path
