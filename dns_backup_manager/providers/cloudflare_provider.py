"""
Cloudflare DNS provider implementation.

This module talks to the Cloudflare v4 REST API using requests. Every
response is wrapped in an envelope carrying success, errors, messages and
result; list endpoints are paginated until an empty page comes back.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

import requests

from ..models import DnsRecord, Zone
from ..exceptions import ConfigurationError, ProtocolError, TransportError
from .base_provider import DNSProvider
from .pagination import collect_pages

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.cloudflare.com/client/v4/"


@dataclass(frozen=True)
class Credentials:
    """API credentials: either an email and key pair or a bearer token."""

    email: str = ""
    key: str = ""
    token: str = ""

    def validate(self) -> None:
        """Fail before any network activity when no usable scheme is present."""
        if not (self.email and self.key) and not self.token:
            raise ConfigurationError("email & key or token must be provided")

    def headers(self) -> Dict[str, str]:
        """Return the authentication headers; email and key take precedence."""
        if self.email and self.key:
            return {"X-Auth-Email": self.email, "X-Auth-Key": self.key}
        return {"Authorization": f"Bearer {self.token}"}


class CloudflareProvider(DNSProvider):
    """DNS provider backed by the Cloudflare v4 REST API."""

    def __init__(self, config: Dict, session: Optional[requests.Session] = None):
        """Initialize Cloudflare provider."""
        self.config = config
        self.api_url = config.get("api_url") or DEFAULT_API_URL
        if not self.api_url.endswith("/"):
            self.api_url += "/"
        self.per_page = config.get("per_page")
        self.timeout = config.get("timeout")

        self.credentials = Credentials(
            email=config.get("email") or "",
            key=config.get("key") or "",
            token=config.get("token") or "",
        )
        self.credentials.validate()

        self._session = session
        self._local = threading.local()
        if session is not None:
            self._prepare(session)

        logger.info(f"Cloudflare provider initialized for {self.api_url}")

    @property
    def session(self) -> requests.Session:
        """Session for the calling thread; apply workers each get their own."""
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._prepare(requests.Session())
            self._local.session = session
        return session

    def _prepare(self, session: requests.Session) -> requests.Session:
        session.headers.update(self.credentials.headers())
        session.headers.update({"Content-Type": "application/json"})
        return session

    def list_zones(self) -> List[Zone]:
        """Get every zone visible to the credentials."""
        items = collect_pages(lambda page: self._list_page("zones", page))
        zones = [Zone.from_dict(item) for item in items]
        logger.info(f"Found {len(zones)} zones")
        return zones

    def list_zone_records(self, zone_id: str) -> List[DnsRecord]:
        """Get all DNS records of a zone."""
        path = f"zones/{zone_id}/dns_records"
        items = collect_pages(lambda page: self._list_page(path, page))
        return [DnsRecord.from_dict(item) for item in items]

    def create_record(self, record: DnsRecord) -> Dict:
        """Create a new DNS record in the record's zone."""
        envelope = self._request(
            "POST", f"zones/{record.zone_id}/dns_records", body=record.create_body()
        )
        self._check_envelope(envelope, f"create {record.name}")
        logger.debug(f"Created record {record.name} ({record.type}) in {record.zone_name}")
        return envelope

    def update_record(self, record: DnsRecord) -> Dict:
        """Replace an existing DNS record with the given body."""
        envelope = self._request(
            "PUT", self._record_path(record), body=record.to_dict()
        )
        self._check_envelope(envelope, f"update {record.name}")
        logger.debug(f"Updated record {record.name} ({record.type}) in {record.zone_name}")
        return envelope

    def delete_record(self, record: DnsRecord) -> Dict:
        """Delete a DNS record."""
        envelope = self._request("DELETE", self._record_path(record))
        self._check_envelope(envelope, f"delete {record.name}")
        logger.debug(f"Deleted record {record.name} ({record.type}) in {record.zone_name}")
        return envelope

    def _record_path(self, record: DnsRecord) -> str:
        return f"zones/{record.zone_id}/dns_records/{record.id}"

    def _list_page(self, path: str, page: int) -> Dict:
        """Request one page of a list endpoint."""
        params = {"page": page}
        if self.per_page:
            params["per_page"] = self.per_page
        return self._request("GET", path, params=params)

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict] = None,
        body: Optional[Dict] = None,
    ) -> Dict:
        """Send a request and decode the response envelope."""
        url = self.api_url + path
        logger.debug(f"{method} {url} params={params}")
        try:
            response = self.session.request(
                method, url, params=params, json=body, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"Error sending {method} {url}: {e}") from e

        try:
            envelope = response.json()
        except ValueError as e:
            raise TransportError(
                f"Error decoding response from {method} {url} "
                f"(HTTP {response.status_code}): {e}"
            ) from e

        if not isinstance(envelope, dict):
            raise TransportError(f"Unexpected response from {method} {url}: {envelope!r}")
        logger.debug(
            f"{method} {url} -> HTTP {response.status_code}, success={envelope.get('success')}"
        )
        return envelope

    def _check_envelope(self, envelope: Dict, operation: str) -> None:
        """Raise ProtocolError when a write response reports failure."""
        if not envelope.get("success", False):
            raise ProtocolError(f"Failed to {operation}", errors=envelope.get("errors"))
