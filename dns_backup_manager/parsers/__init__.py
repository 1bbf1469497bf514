"""
Snapshot file handling.

This package reads and writes the point-in-time snapshot of DNS records.
"""

from .snapshot import DEFAULT_BACKUP_FILE, SnapshotCodec

__all__ = ["DEFAULT_BACKUP_FILE", "SnapshotCodec"]
