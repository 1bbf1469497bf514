"""
Record Manager - Core logic for DNS record reconciliation

This module computes the changes needed to make the live DNS records of an
account match a snapshot. Records are matched by their provider-assigned
id; the snapshot is authoritative.
"""

import logging
from typing import Dict, List

from ..models import ChangeSet, DnsRecord

logger = logging.getLogger(__name__)


def reconcile(snapshot_records: List[DnsRecord], live_records: List[DnsRecord]) -> ChangeSet:
    """
    Classify every record into create, update, delete or unchanged.

    Args:
        snapshot_records: Records read from the snapshot
        live_records: Records currently present on the provider

    Returns:
        ChangeSet whose creates, updates and deletes are disjoint by id.
        Creates and updates hold the snapshot version of a record,
        deletes hold the live version.
    """
    live_by_id: Dict[str, DnsRecord] = {r.id: r for r in live_records}
    snapshot_by_id: Dict[str, DnsRecord] = {r.id: r for r in snapshot_records}

    changes = ChangeSet()
    for record in snapshot_records:
        # records without an id have never been created
        live = live_by_id.get(record.id) if record.id else None
        if live is None:
            changes.creates.append(record)
        elif record != live:
            changes.updates.append(record)
        else:
            changes.no_changes.append(record)

    for record in live_records:
        if record.id not in snapshot_by_id:
            changes.deletes.append(record)

    return changes


class RecordManager:
    """Manages DNS record change analysis."""

    def __init__(self, dns_client):
        """Initialize record manager with DNS client."""
        self.dns_client = dns_client

    def analyze_changes(
        self, current_records: List[DnsRecord], desired_records: List[DnsRecord]
    ) -> ChangeSet:
        """
        Analyze changes between live and snapshot DNS records.

        Args:
            current_records: Live DNS records fetched from the provider
            desired_records: DNS records read from the snapshot

        Returns:
            ChangeSet containing categorized changes
        """
        logger.info("Analyzing DNS record changes...")

        changes = reconcile(desired_records, current_records)

        for record in changes.creates:
            logger.debug(f"Create needed: {record.name} {record.type} -> {record.content}")
        for record in changes.updates:
            logger.debug(f"Update needed: {record.name} {record.type} -> {record.content}")
        for record in changes.deletes:
            logger.debug(f"Delete needed: {record.name} {record.type} ({record.id})")

        logger.info(
            f"Change analysis complete: {len(changes.creates)} creates, "
            f"{len(changes.updates)} updates, {len(changes.deletes)} deletes, "
            f"{len(changes.no_changes)} no changes"
        )

        return changes

    def get_live_records(self) -> List[DnsRecord]:
        """Fetch the live records of every zone in one pass."""
        return self.dns_client.get_all_records()

    def get_zone_summary(self, records: List[DnsRecord]) -> Dict[str, int]:
        """Count records per zone name."""
        summary: Dict[str, int] = {}
        for record in records:
            summary[record.zone_name] = summary.get(record.zone_name, 0) + 1
        return summary
