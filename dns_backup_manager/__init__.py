"""
DNS Backup Manager - Snapshot and restore DNS records

A tool for capturing every DNS record of a hosting account to a snapshot
file and later reconciling live state back to that snapshot.
"""

__version__ = "1.0.0"
__author__ = "DNS Backup Manager Team"
__description__ = "Snapshot and restore DNS records of a hosting account"

from .core.backup_manager import BackupManager
from .core.record_manager import RecordManager, reconcile
from .providers.dns_client import DNSClient

__all__ = [
    "BackupManager",
    "RecordManager",
    "DNSClient",
    "reconcile",
]
