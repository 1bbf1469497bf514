"""
Data models for zones and DNS records.

Records travel between the API, the snapshot file and the reconciliation
engine as DnsRecord objects. Zones are only ever enumerated.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class RecordMeta:
    """Metadata attached to a DNS record by the provider."""

    auto_added: bool = False
    source: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> Optional["RecordMeta"]:
        """Build metadata from its API form, keeping null as None."""
        if data is None:
            return None
        return cls(
            auto_added=bool(data.get("auto_added", False)),
            source=data.get("source") or "",
        )

    def to_dict(self) -> Dict:
        """Return the API form of the metadata."""
        return {"auto_added": self.auto_added, "source": self.source}


@dataclass(eq=False)
class DnsRecord:
    """A single DNS record, the unit of reconciliation."""

    id: str = ""
    type: str = ""
    name: str = ""
    content: str = ""
    proxiable: bool = False
    proxied: bool = False
    comment: str = ""
    tags: List[str] = field(default_factory=list)
    ttl: int = 1
    locked: bool = False
    zone_id: str = ""
    zone_name: str = ""
    meta: Optional[RecordMeta] = None

    def __eq__(self, other: Any) -> bool:
        """Compare every attribute; tags compare as an unordered multiset."""
        if not isinstance(other, DnsRecord):
            return NotImplemented
        return (
            self.id == other.id
            and self.type == other.type
            and self.name == other.name
            and self.content == other.content
            and self.proxiable == other.proxiable
            and self.proxied == other.proxied
            and self.comment == other.comment
            and sorted(self.tags) == sorted(other.tags)
            and self.ttl == other.ttl
            and self.locked == other.locked
            and self.zone_id == other.zone_id
            and self.zone_name == other.zone_name
            and _meta_equal(self.meta, other.meta)
        )

    __hash__ = None

    @classmethod
    def from_dict(cls, data: Dict) -> "DnsRecord":
        """Build a record from its API or snapshot form."""
        return cls(
            id=data.get("id") or "",
            type=data.get("type") or "",
            name=data.get("name") or "",
            content=data.get("content") or "",
            proxiable=bool(data.get("proxiable", False)),
            proxied=bool(data.get("proxied", False)),
            comment=data.get("comment") or "",
            tags=list(data.get("tags") or []),
            ttl=int(data["ttl"]) if data.get("ttl") is not None else 1,
            locked=bool(data.get("locked", False)),
            zone_id=data.get("zone_id") or "",
            zone_name=data.get("zone_name") or "",
            meta=RecordMeta.from_dict(data.get("meta")),
        )

    def to_dict(self) -> Dict:
        """Return the API and snapshot form of the record."""
        return {
            "id": self.id,
            "type": self.type,
            "name": self.name,
            "content": self.content,
            "proxiable": self.proxiable,
            "proxied": self.proxied,
            "comment": self.comment,
            "tags": list(self.tags),
            "ttl": self.ttl,
            "locked": self.locked,
            "zone_id": self.zone_id,
            "zone_name": self.zone_name,
            "meta": self.meta.to_dict() if self.meta is not None else None,
        }

    def create_body(self) -> Dict:
        """Return the body sent when creating the record; the id is not reused."""
        body = self.to_dict()
        del body["id"]
        return body


def _meta_equal(left: Optional[RecordMeta], right: Optional[RecordMeta]) -> bool:
    if left is None or right is None:
        return left is right
    return left.auto_added == right.auto_added and left.source == right.source


@dataclass
class Zone:
    """A managed domain as listed by the API. Owner, account and plan stay opaque."""

    id: str
    name: str
    development_mode: int = 0
    original_name_servers: List[str] = field(default_factory=list)
    original_registrar: str = ""
    original_dnshost: str = ""
    owner: Optional[Dict] = None
    account: Optional[Dict] = None
    permissions: List[str] = field(default_factory=list)
    plan: Optional[Dict] = None
    plan_pending: Optional[Dict] = None
    status: str = ""
    paused: bool = False
    type: str = ""
    name_servers: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> "Zone":
        """Build a zone from its API form."""
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            development_mode=data.get("development_mode") or 0,
            original_name_servers=list(data.get("original_name_servers") or []),
            original_registrar=data.get("original_registrar") or "",
            original_dnshost=data.get("original_dnshost") or "",
            owner=data.get("owner"),
            account=data.get("account"),
            permissions=list(data.get("permissions") or []),
            plan=data.get("plan"),
            plan_pending=data.get("plan_pending"),
            status=data.get("status") or "",
            paused=bool(data.get("paused", False)),
            type=data.get("type") or "",
            name_servers=list(data.get("name_servers") or []),
        )


@dataclass
class ChangeSet:
    """Disjoint create/update/delete sets computed by reconciliation."""

    creates: List[DnsRecord] = field(default_factory=list)
    updates: List[DnsRecord] = field(default_factory=list)
    deletes: List[DnsRecord] = field(default_factory=list)
    no_changes: List[DnsRecord] = field(default_factory=list)

    @property
    def total_changes(self) -> int:
        return len(self.creates) + len(self.updates) + len(self.deletes)

    def has_changes(self) -> bool:
        return self.total_changes > 0
