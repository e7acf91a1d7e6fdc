# extraction/general/token/__init__.py
"""
token.
=====

Does: Provide token utilities for manually entered color lists.
Exports: split_hex_tokens, clean_hex_value, parse_hex_tokens, HexImportResult
Used by: orchestrator.import_colors.
"""

from __future__ import annotations

from .hex_tokens import (
    FAILED_IMPORT_MESSAGE,
    PARTIAL_IMPORT_MESSAGE,
    HexImportResult,
    ImportStatus,
    clean_hex_value,
    parse_hex_tokens,
    split_hex_tokens,
)

__all__ = [
    "split_hex_tokens",
    "clean_hex_value",
    "parse_hex_tokens",
    "HexImportResult",
    "ImportStatus",
    "PARTIAL_IMPORT_MESSAGE",
    "FAILED_IMPORT_MESSAGE",
]
