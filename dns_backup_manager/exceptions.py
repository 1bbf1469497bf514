"""
Exceptions raised by the DNS Backup Manager.

Every failure aborts the current backup or restore run, except a
ProtocolError raised by a single record write during restore, which is
recorded and reported once the run finishes.
"""

from typing import List, Optional


class DNSBackupError(Exception):
    """Base class for all DNS Backup Manager errors."""


class ConfigurationError(DNSBackupError):
    """Missing credentials or invalid configuration."""


class TransportError(DNSBackupError):
    """A request could not be built, sent or decoded."""


class ProtocolError(DNSBackupError):
    """The API answered with an envelope whose success flag is false."""

    def __init__(self, message: str, errors: Optional[List] = None):
        self.errors = errors or []
        if self.errors:
            message = f"{message}: {self.errors}"
        super().__init__(message)


class SnapshotError(DNSBackupError):
    """The snapshot file could not be read, written or decoded."""
