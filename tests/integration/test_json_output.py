"""
Tests for JSON formatter output.

Ensures clean JSON output with:
- The input exactly as supplied
- Component breakdown for GDTI
- Error code and message for invalid values
"""

import json

from gs1_identifiers import GDTI, GRAI, GTIN13, result_to_dict, result_to_json
from gs1_identifiers.formatters import identifier_to_dict, results_to_json


class TestJSONOutput:
    """Test JSON output formatting."""

    def test_valid_gtin13(self):
        data = json.loads(result_to_json(GTIN13.try_create("4006 3813-33931")))

        assert data["input"] == "4006 3813-33931"
        assert data["type"] == "GTIN-13"
        assert data["valid"] is True
        assert data["value"] == "4006 3813-33931"
        assert data["digits"] == "4006381333931"
        assert data["error"] is None

    def test_invalid_gtin13(self):
        data = result_to_dict(GTIN13.try_create("4006381333932"))

        assert data["valid"] is False
        assert data["value"] is None
        assert data["error"] == {
            "code": "CHECKSUM_FAILED",
            "message": "Invalid GTIN-13: 4006381333932",
        }

    def test_valid_gdti(self):
        data = result_to_dict(GDTI.try_create("4719512002889-1234567890-123456"))

        assert data["type"] == "GDTI"
        assert data["value"] == "4719512002889-1234567890-123456"
        assert data["gtin"] == "4719512002889"
        assert data["document_reference"] == "1234567890"
        assert data["serial"] == "123456"
        assert data["separator"] == "-"
        assert "digits" not in data

    def test_invalid_gdti(self):
        data = result_to_dict(GDTI.try_create("4719512002889.1234567890.123456"))

        assert data["error"]["code"] == "MALFORMED_STRUCTURE"

    def test_valid_grai(self):
        data = result_to_dict(GRAI.try_create("012345678900051234AX01"))

        assert data["type"] == "GRAI"
        assert data["asset_type"] == "1234567890005"
        assert data["serial"] == "1234AX01"
        assert "digits" not in data

    def test_identifier_to_dict(self):
        assert identifier_to_dict(GTIN13("4006381333931")) == {
            "value": "4006381333931",
            "digits": "4006381333931",
        }

    def test_results_to_json_array(self):
        results = [GTIN13.try_create("4006381333931"), GTIN13.try_create("")]
        data = json.loads(results_to_json(results))

        assert isinstance(data, list)
        assert [item["valid"] for item in data] == [True, False]
        assert data[1]["error"]["code"] == "WRONG_LENGTH"

    def test_json_serializable_without_indent(self):
        output = result_to_json(GTIN13.try_create("4006381333931"), indent=None)
        assert "\n" not in output
