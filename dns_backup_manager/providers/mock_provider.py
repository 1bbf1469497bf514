"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores zones and records in
memory for safe testing and dry runs.
"""

import copy
import logging
import uuid
from typing import Dict, List, Optional

from ..exceptions import ProtocolError
from ..models import DnsRecord, Zone
from .base_provider import DNSProvider

logger = logging.getLogger(__name__)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self, config: Optional[Dict] = None):
        """Initialize mock provider, optionally seeded from config."""
        config = config or {}
        self.zones: List[Zone] = [Zone.from_dict(z) for z in config.get("zones", [])]
        self.records: List[DnsRecord] = [
            DnsRecord.from_dict(r) for r in config.get("records", [])
        ]
        self.calls: List[tuple] = []
        logger.info("Mock DNS provider initialized")

    def list_zones(self) -> List[Zone]:
        """Get every zone held in memory."""
        logger.info(f"Mock: Retrieved {len(self.zones)} zones")
        return copy.deepcopy(self.zones)

    def list_zone_records(self, zone_id: str) -> List[DnsRecord]:
        """Get all DNS records of a zone."""
        records = [r for r in self.records if r.zone_id == zone_id]
        logger.info(f"Mock: Retrieved {len(records)} records for zone {zone_id}")
        return copy.deepcopy(records)

    def create_record(self, record: DnsRecord) -> Dict:
        """Create a new DNS record with a freshly assigned id."""
        self.calls.append(("create", record.id))
        created = DnsRecord.from_dict(record.create_body())
        created.id = uuid.uuid4().hex
        self.records.append(created)
        logger.info(f"Mock: Created record {record.name} -> {record.content}")
        return {"success": True, "errors": [], "messages": [], "result": created.to_dict()}

    def update_record(self, record: DnsRecord) -> Dict:
        """Update an existing DNS record."""
        self.calls.append(("update", record.id))
        for i, existing in enumerate(self.records):
            if existing.id == record.id:
                self.records[i] = copy.deepcopy(record)
                logger.info(f"Mock: Updated record {record.name} -> {record.content}")
                return {"success": True, "errors": [], "messages": [], "result": record.to_dict()}

        raise ProtocolError(
            f"Failed to update {record.name}",
            errors=[{"code": 81044, "message": f"Record {record.id} does not exist."}],
        )

    def delete_record(self, record: DnsRecord) -> Dict:
        """Delete a DNS record."""
        self.calls.append(("delete", record.id))
        for i, existing in enumerate(self.records):
            if existing.id == record.id:
                del self.records[i]
                logger.info(f"Mock: Deleted record {record.name}")
                return {"success": True, "errors": [], "messages": [], "result": {"id": record.id}}

        raise ProtocolError(
            f"Failed to delete {record.name}",
            errors=[{"code": 81044, "message": f"Record {record.id} does not exist."}],
        )
