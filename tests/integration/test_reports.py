"""
Tests for batch validation and CSV reports.
"""

import pandas as pd
import pytest

from gs1_identifiers import ErrorCode
from gs1_identifiers.reports import (
    REPORT_COLUMNS,
    export_csv,
    read_values,
    summarize,
    to_dataframe,
    validate_many,
)


BATCH = [
    "4006381333931",
    "4006381333932",
    "0000000000000",
    "123",
    "5901234123457",
]


class TestValidateMany:
    """Tests for validate_many()."""

    def test_one_result_per_value(self):
        results = validate_many(BATCH, "gtin13")
        assert len(results) == len(BATCH)
        assert [r.valid for r in results] == [True, False, False, False, True]
        assert [r.code for r in results] == [
            None,
            ErrorCode.CHECKSUM_FAILED,
            ErrorCode.ALL_ZERO,
            ErrorCode.WRONG_LENGTH,
            None,
        ]

    def test_gdti_batch(self):
        results = validate_many(
            ["4719512002889 1234567890 123456", "4719512002889.1234567890.123456"],
            "gdti",
        )
        assert [r.valid for r in results] == [True, False]

    def test_non_string_values_coerced(self):
        results = validate_many([4006381333931], "gtin13")
        assert results[0].valid

    def test_unknown_type(self):
        with pytest.raises(KeyError):
            validate_many(BATCH, "isbn")


class TestDataFrame:
    """Tests for to_dataframe() and summarize()."""

    def test_columns(self):
        df = to_dataframe(validate_many(BATCH, "gtin13"))
        assert list(df.columns) == REPORT_COLUMNS
        assert len(df) == len(BATCH)
        assert df.loc[1, "code"] == "CHECKSUM_FAILED"
        assert df.loc[0, "code"] == ""

    def test_empty(self):
        df = to_dataframe([])
        assert list(df.columns) == REPORT_COLUMNS
        assert df.empty

    def test_summarize(self):
        summary = summarize(to_dataframe(validate_many(BATCH, "gtin13")))
        counts = dict(zip(summary["code"], summary["count"]))
        assert counts == {
            "ALL_ZERO": 1,
            "CHECKSUM_FAILED": 1,
            "OK": 2,
            "WRONG_LENGTH": 1,
        }


class TestFiles:
    """Tests for read_values() and export_csv()."""

    def test_read_values_skips_blank_lines(self, tmp_path):
        path = tmp_path / "values.txt"
        path.write_text("4006381333931\n\n4719512002889 1234567890 123456\n  \n", encoding="utf-8")
        assert read_values(path) == ["4006381333931", "4719512002889 1234567890 123456"]

    def test_export_csv(self, tmp_path):
        df = to_dataframe(validate_many(BATCH, "gtin13"))
        path = export_csv(df, tmp_path / "out" / "report.csv")

        assert path.exists()
        loaded = pd.read_csv(path, dtype=str, keep_default_na=False)
        assert list(loaded["input"]) == BATCH
        assert list(loaded["valid"]) == ["True", "False", "False", "False", "True"]
