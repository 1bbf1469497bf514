"""
Core backup and restore functionality.

This package contains the reconciliation engine, the apply driver and the
orchestration of backup and restore runs.
"""

from .apply_driver import ApplyDriver, ApplyResult, ApplyTask
from .backup_manager import BackupManager
from .record_manager import RecordManager, reconcile

__all__ = [
    "ApplyDriver",
    "ApplyResult",
    "ApplyTask",
    "BackupManager",
    "RecordManager",
    "reconcile",
]
