"""
JSON Formatter for GS1 identifier results

Provides clean JSON output with:
- The input exactly as supplied
- The identifier type and validity
- Component breakdown for GDTI and GRAI, stripped digits for barcodes
- Error code and message for rejected values
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

from ..core.barcode import AbstractBarcode, IdentifierResult
from ..core.gdti import GDTI
from ..core.grai import GRAI


def identifier_to_dict(identifier: Any) -> Dict[str, Any]:
    """
    Describe a valid identifier as a plain dict.

    Args:
        identifier: A barcode, GDTI or GRAI instance

    Returns:
        Dict with 'value' plus type-specific fields
    """
    output: Dict[str, Any] = {"value": identifier.to_string()}

    if isinstance(identifier, GDTI):
        output["gtin"] = identifier.gtin_component
        output["document_reference"] = identifier.document_reference
        output["serial"] = identifier.serial_component
        output["separator"] = identifier.separator
    elif isinstance(identifier, GRAI):
        output["asset_type"] = identifier.asset_type
        output["serial"] = identifier.serial_component
    elif isinstance(identifier, AbstractBarcode):
        output["digits"] = identifier.digits

    return output


def result_to_dict(result: IdentifierResult) -> Dict[str, Any]:
    """
    Convert a validation result to a JSON-ready dict.

    Example output (valid):
        {"input": "4006381333931", "type": "GTIN-13", "valid": true,
         "value": "4006381333931", "digits": "4006381333931", "error": null}

    Example output (invalid):
        {"input": "4006381333932", "type": "GTIN-13", "valid": false,
         "value": null, "error": {"code": "CHECKSUM_FAILED",
                                  "message": "Invalid GTIN-13: 4006381333932"}}
    """
    output: Dict[str, Any] = {
        "input": result.raw,
        "type": result.kind,
        "valid": result.valid,
        "value": None,
    }

    if result.valid:
        output.update(identifier_to_dict(result.value))
        output["error"] = None
    else:
        output["error"] = {
            "code": result.code.value,
            "message": result.message,
        }

    return output


def result_to_json(result: IdentifierResult, indent: int = 2) -> str:
    """Convert a validation result to a JSON string."""
    return json.dumps(result_to_dict(result), indent=indent, ensure_ascii=False)


def results_to_json(results: Iterable[IdentifierResult], indent: int = 2) -> str:
    """Convert several results to a JSON array string."""
    items: List[Dict[str, Any]] = [result_to_dict(r) for r in results]
    return json.dumps(items, indent=indent, ensure_ascii=False)
