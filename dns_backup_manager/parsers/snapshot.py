"""
Snapshot Parser - JSON snapshot files of DNS records

A snapshot is a flat JSON array of record objects, written by backup and
read back by restore. A snapshot holding null decodes to no records.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from ..exceptions import SnapshotError
from ..models import DnsRecord

logger = logging.getLogger(__name__)

DEFAULT_BACKUP_FILE = "backup.json"


class SnapshotCodec:
    """Reads and writes a flat list of DNS records as a JSON snapshot."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @staticmethod
    def encode(records: List[DnsRecord]) -> str:
        """Serialize records to the snapshot form."""
        return json.dumps([record.to_dict() for record in records], indent=2) + "\n"

    @staticmethod
    def decode(text: str) -> List[DnsRecord]:
        """Deserialize records from the snapshot form."""
        try:
            data = json.loads(text)
        except ValueError as e:
            raise SnapshotError(f"Error decoding backup file: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise SnapshotError("Backup file must contain a list of DNS records")

        records = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise SnapshotError(f"Entry {index} of backup file is not a DNS record")
            try:
                records.append(DnsRecord.from_dict(item))
            except (TypeError, ValueError) as e:
                raise SnapshotError(f"Entry {index} of backup file is invalid: {e}") from e
        return records

    def read(self) -> List[DnsRecord]:
        """Read every record from the snapshot file."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise SnapshotError(f"Error opening backup file {self.path}: {e}") from e

        records = self.decode(text)
        logger.info(f"Read {len(records)} DNS records from {self.path}")
        return records

    def write(self, records: List[DnsRecord]) -> None:
        """Write every record to the snapshot file, replacing it."""
        text = self.encode(records)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise SnapshotError(f"Error creating backup file {self.path}: {e}") from e

        logger.info(f"Wrote {len(records)} DNS records to {self.path}")
