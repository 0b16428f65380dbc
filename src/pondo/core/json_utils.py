#!/usr/bin/env python3
"""
JSON Utilities Module

Centralized JSON encoding and decoding with consistent formatting.
Locally persisted values go through these helpers so stored files stay
pretty-printed and readable.
"""

import json
from typing import Any


def format_json(data: Any, ensure_ascii: bool = False, sort_keys: bool = False) -> str:
    """
    Format data as a pretty-printed JSON string.

    Args:
        data: Data to format
        ensure_ascii: If True, escape non-ASCII characters (default: False)
        sort_keys: If True, sort dictionary keys (default: False)

    Returns:
        Pretty-printed JSON string
    """
    return json.dumps(data, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys)


def parse_json(raw: str) -> Any:
    """
    Parse a JSON document.

    Args:
        raw: JSON text

    Returns:
        The parsed JSON data

    Raises:
        ValueError: If the text is not valid JSON
    """
    return json.loads(raw)
