"""
Utility functions and helpers.

This package contains validation helpers for snapshot records.
"""

from .validators import (
    validate_record_name,
    validate_record_type,
    validate_snapshot_records,
    validate_ttl,
)

__all__ = [
    "validate_record_name",
    "validate_record_type",
    "validate_snapshot_records",
    "validate_ttl",
]
