"""
Step definitions for DNS Backup Manager scenarios.
"""

from behave import given, when, then

from dns_backup_manager.core.backup_manager import BackupManager
from dns_backup_manager.models import DnsRecord
from dns_backup_manager.parsers.snapshot import SnapshotCodec


def _manager(context):
    """Build the backup manager lazily so Given steps can seed the account."""
    if not hasattr(context, "manager"):
        zones = {}
        for record in context.records:
            zones.setdefault(record["zone_id"], record["zone_name"])
        config = {
            "dns_providers": {
                "mock": {
                    "zones": [{"id": z, "name": n} for z, n in zones.items()],
                    "records": context.records,
                }
            },
            "default_provider": "mock",
            "backup": {"dir": str(context.backup_dir)},
        }
        context.manager = BackupManager(config)
        context.provider = context.manager.dns_client.provider
    return context.manager


def _find(context, record_id):
    for record in context.provider.records:
        if record.id == record_id:
            return record
    raise AssertionError(f"Record {record_id} not found")


@given("an account with the following DNS records")
def step_impl(context):
    """Seed the mock provider from the table."""
    for row in context.table:
        context.records.append(
            {
                "id": row["id"],
                "zone_id": row["zone_id"],
                "zone_name": row["zone_name"],
                "type": row["type"],
                "name": row["name"],
                "content": row["content"],
                "ttl": 1,
            }
        )


@given("a backup has been taken")
def step_impl(context):
    _manager(context).backup()
    context.provider.calls.clear()


@given("an empty backup file")
def step_impl(context):
    SnapshotCodec(_manager(context).backup_path).write([])


@given('record "{record_id}" has been changed to "{content}"')
def step_impl(context, record_id, content):
    _find(context, record_id).content = content


@given('record "{record_id}" has been deleted')
def step_impl(context, record_id):
    record = _find(context, record_id)
    context.provider.records.remove(record)


@given('a record "{record_id}" named "{name}" has been added to zone "{zone_id}"')
def step_impl(context, record_id, name, zone_id):
    zone_name = next(z.name for z in context.provider.zones if z.id == zone_id)
    context.provider.records.append(
        DnsRecord(id=record_id, type="A", name=name, content="9.9.9.9",
                  zone_id=zone_id, zone_name=zone_name)
    )


@when("I run a backup")
def step_impl(context):
    context.backed_up = _manager(context).backup()


@when("I run a restore")
def step_impl(context):
    try:
        context.result = _manager(context).restore()
    except Exception as e:
        context.error = str(e)
        context.result = False


@when("I run a restore in dry run mode")
def step_impl(context):
    context.report_file = context.backup_dir / "dry_run.txt"
    context.result = _manager(context).restore(
        dry_run=True, output_file=str(context.report_file)
    )


@then("the backup file should contain {count:d} records")
def step_impl(context, count):
    records = SnapshotCodec(context.manager.backup_path).read()
    assert len(records) == count, f"Expected {count} records, found {len(records)}"


@then('the backup file should contain records from zones "{zones}"')
def step_impl(context, zones):
    records = SnapshotCodec(context.manager.backup_path).read()
    expected = {z.strip() for z in zones.split(",")}
    assert {r.zone_name for r in records} == expected


@then("the restore should succeed")
def step_impl(context):
    assert context.result is True, f"Restore failed: {context.error or 'unknown error'}"


@then("no DNS changes should have been made")
def step_impl(context):
    assert context.provider.calls == [], f"Unexpected changes: {context.provider.calls}"


@then('the DNS changes should be "{changes}"')
def step_impl(context, changes):
    expected = [tuple(c.strip().split(" ")) for c in changes.split(",")]
    assert context.provider.calls == expected, f"Got {context.provider.calls}"


@then('the account should contain a record "{name}" with content "{content}"')
def step_impl(context, name, content):
    matches = [r for r in context.provider.records if r.name == name]
    assert matches and matches[0].content == content, f"Got {matches}"


@then("the account should contain {count:d} records")
def step_impl(context, count):
    assert len(context.provider.records) == count


@then("the dry run report should list {count:d} changes")
def step_impl(context, count):
    report = context.report_file.read_text()
    assert f"Total Changes: {count}" in report
