"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from ..models import DnsRecord, Zone


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def list_zones(self) -> List[Zone]:
        """Get every zone visible to the credentials."""
        pass

    @abstractmethod
    def list_zone_records(self, zone_id: str) -> List[DnsRecord]:
        """Get all DNS records of a zone."""
        pass

    @abstractmethod
    def create_record(self, record: DnsRecord) -> Dict:
        """Create a new DNS record in the record's zone."""
        pass

    @abstractmethod
    def update_record(self, record: DnsRecord) -> Dict:
        """Replace an existing DNS record with the given body."""
        pass

    @abstractmethod
    def delete_record(self, record: DnsRecord) -> Dict:
        """Delete a DNS record."""
        pass
