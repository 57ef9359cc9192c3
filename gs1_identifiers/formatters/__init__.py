"""
Output formatters for GS1 identifier results.
"""

from .json_formatter import (
    identifier_to_dict,
    result_to_dict,
    result_to_json,
    results_to_json,
)

__all__ = [
    "identifier_to_dict",
    "result_to_dict",
    "result_to_json",
    "results_to_json",
]
