"""
DNS Client - Unified interface for DNS provider APIs

This module provides a common interface for the supported providers,
currently Cloudflare and an in-memory mock, plus the account-wide record
enumeration shared by backup and restore.
"""

import logging
from typing import Dict, List

from ..models import DnsRecord, Zone
from .base_provider import DNSProvider
from .cloudflare_provider import CloudflareProvider
from .mock_provider import MockDNSProvider

logger = logging.getLogger(__name__)


class DNSClient:
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: Dict):
        """Initialize DNS client with configuration."""
        self.config = config
        self.provider = self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "cloudflare")
        provider_config = self.config.get("dns_providers", {}).get(provider_name) or {}

        if provider_name == "cloudflare":
            return CloudflareProvider(provider_config)
        elif provider_name == "mock":
            return MockDNSProvider(provider_config)
        else:
            logger.warning(f"Unknown provider '{provider_name}', using mock provider")
            return MockDNSProvider()

    def get_zones(self) -> List[Zone]:
        """Get every zone visible to the credentials."""
        return self.provider.list_zones()

    def get_records(self, zone_id: str) -> List[DnsRecord]:
        """Get all DNS records for a zone."""
        return self.provider.list_zone_records(zone_id)

    def get_all_records(self) -> List[DnsRecord]:
        """Get the DNS records of every zone as one flat list."""
        zones = self.get_zones()
        records = []
        for i, zone in enumerate(zones, start=1):
            logger.info(f"Fetching zone {zone.name}; {i}/{len(zones)}")
            records.extend(self.get_records(zone.id))
        logger.info(f"Fetched {len(records)} DNS records across {len(zones)} zones")
        return records

    def create_record(self, record: DnsRecord) -> Dict:
        """Create a new DNS record."""
        return self.provider.create_record(record)

    def update_record(self, record: DnsRecord) -> Dict:
        """Update an existing DNS record."""
        return self.provider.update_record(record)

    def delete_record(self, record: DnsRecord) -> Dict:
        """Delete a DNS record."""
        return self.provider.delete_record(record)
