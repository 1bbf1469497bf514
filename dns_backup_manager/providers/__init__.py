"""
DNS provider implementations.

This package contains implementations for the supported DNS providers,
Cloudflare and an in-memory mock, plus the paginated list collector.
"""

from .dns_client import DNSClient, DNSProvider
from .cloudflare_provider import CloudflareProvider, Credentials
from .mock_provider import MockDNSProvider
from .pagination import collect_pages

__all__ = [
    "DNSClient",
    "DNSProvider",
    "CloudflareProvider",
    "Credentials",
    "MockDNSProvider",
    "collect_pages",
]
