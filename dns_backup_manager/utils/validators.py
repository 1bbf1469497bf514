"""
Validators - Input validation for snapshot records

This module checks records read from a snapshot before they are restored,
using dnspython for record names and types.
"""

import logging
from typing import Dict, List

import dns.exception
import dns.name
import dns.rdatatype

from ..models import DnsRecord

logger = logging.getLogger(__name__)

# Cloudflare uses a TTL of 1 to mean "automatic".
AUTOMATIC_TTL = 1


def validate_record_type(record_type: str) -> bool:
    """
    Validate a DNS record type mnemonic such as A, CNAME or TXT.

    Args:
        record_type: The record type to validate

    Returns:
        True if dnspython knows the type, False otherwise
    """
    if not record_type or not isinstance(record_type, str):
        return False

    try:
        dns.rdatatype.from_text(record_type.strip().upper())
        return True
    except dns.rdatatype.UnknownRdatatype:
        logger.warning(f"Unknown record type: {record_type}")
        return False


def validate_record_name(name: str) -> bool:
    """
    Validate a DNS owner name.

    Args:
        name: The record name to validate

    Returns:
        True if valid, False otherwise
    """
    if not name or not isinstance(name, str):
        return False

    try:
        dns.name.from_text(name)
        return True
    except dns.exception.DNSException as e:
        logger.warning(f"Invalid record name '{name}': {e}")
        return False


def validate_ttl(ttl: int) -> bool:
    """Validate a TTL: automatic (1) or a positive number of seconds."""
    if isinstance(ttl, bool) or not isinstance(ttl, int):
        return False
    return ttl == AUTOMATIC_TTL or 0 < ttl <= 2147483647


def validate_snapshot_records(records: List[DnsRecord]) -> List[str]:
    """
    Validate snapshot records and return any validation errors.

    Records without an id have not been created yet and are allowed;
    only non-empty ids must be unique.
    """
    errors = []
    seen_ids: Dict[str, int] = {}

    for i, record in enumerate(records):
        label = record.name or f"entry {i}"

        if record.id in seen_ids:
            errors.append(
                f"{label}: duplicate record id '{record.id}' (also entry {seen_ids[record.id]})"
            )
        elif record.id:
            seen_ids[record.id] = i

        if not record.zone_id:
            errors.append(f"{label}: missing zone id")

        if not validate_record_type(record.type):
            errors.append(f"{label}: invalid record type '{record.type}'")

        if not validate_record_name(record.name):
            errors.append(f"{label}: invalid record name '{record.name}'")

        if not validate_ttl(record.ttl):
            errors.append(f"{label}: invalid ttl {record.ttl!r}")

    return errors
