"""
DNS Backup Manager - snapshot and restore the DNS records of an account

Backup enumerates every zone and every record of each zone and writes
them to a snapshot file. Restore reads a snapshot, fetches the live
records once, reconciles the two and applies the difference.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..exceptions import SnapshotError
from ..models import ChangeSet, DnsRecord
from ..parsers.snapshot import DEFAULT_BACKUP_FILE, SnapshotCodec
from ..providers.dns_client import DNSClient
from ..utils.validators import validate_snapshot_records
from .apply_driver import ApplyDriver, ApplyResult
from .record_manager import RecordManager

# Initialize rich console and logger
console = Console()
logger = logging.getLogger(__name__)


class BackupManager:
    """Main class that orchestrates backup and restore runs."""

    def __init__(self, config: Dict, dns_client: Optional[DNSClient] = None):
        """Initialize the backup manager with configuration."""
        self.config = config
        self.dns_client = dns_client or DNSClient(config)
        self.record_manager = RecordManager(self.dns_client)

    @property
    def backup_path(self) -> Path:
        """Location of the snapshot file."""
        backup_config = self.config.get("backup") or {}
        directory = backup_config.get("dir") or "./"
        filename = backup_config.get("file") or DEFAULT_BACKUP_FILE
        return Path(directory) / filename

    def backup(self) -> List[DnsRecord]:
        """Snapshot every DNS record of the account."""
        console.print("[green]Fetching DNS records...[/green]")
        records = self.record_manager.get_live_records()

        SnapshotCodec(self.backup_path).write(records)
        self._display_zone_summary(records)
        console.print(
            f"[green]Backed up {len(records)} DNS records to {self.backup_path}[/green]"
        )
        return records

    def restore(
        self,
        dry_run: bool = False,
        output_file: Optional[str] = None,
        workers: Optional[int] = None,
    ) -> bool:
        """Make the live DNS records match the snapshot."""
        snapshot = SnapshotCodec(self.backup_path).read()
        problems = validate_snapshot_records(snapshot)
        if problems:
            for problem in problems:
                logger.error(f"Invalid snapshot record: {problem}")
            raise SnapshotError(
                f"Backup file {self.backup_path} has {len(problems)} invalid entries"
            )

        console.print(f"[green]Restoring {len(snapshot)} DNS records[/green]")
        console.print("[green]Fetching current DNS records...[/green]")
        live = self.record_manager.get_live_records()
        console.print(f"[blue]Found {len(live)} existing DNS records[/blue]")

        changes = self.record_manager.analyze_changes(live, snapshot)
        self._display_changes_summary(changes)

        if dry_run:
            console.print("[yellow]DRY RUN MODE - No changes will be applied[/yellow]")
            if output_file:
                self._save_dry_run_output(changes, output_file)
                console.print(f"[green]Dry run output saved to: {output_file}[/green]")
            return True

        if not changes.has_changes():
            console.print("[green]No changes required - DNS records are up to date[/green]")
            return True

        if workers is None:
            workers = (self.config.get("restore") or {}).get("workers", 1)
        result = self._apply_changes(changes, workers)
        if result.success:
            console.print("[green]All DNS changes applied successfully![/green]")
            return True

        console.print("[red]Some DNS changes failed to apply[/red]")
        for task, error in result.failures:
            console.print(f"[red]Failed to {task.operation} {task.record.name}: {error}[/red]")
        return False

    def _apply_changes(self, changes: ChangeSet, workers: int) -> ApplyResult:
        """Apply DNS changes with a progress bar."""
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}"),
            console=console,
        ) as progress:
            bar = progress.add_task("Applying DNS changes...", total=changes.total_changes)

            def advance(task, index, total):
                progress.update(bar, completed=index, description=task.describe())

            driver = ApplyDriver(self.dns_client, workers=workers, on_progress=advance)
            result = driver.run(changes)

        console.print(
            f"[blue]Successfully applied {len(result.applied)}/{result.total} changes[/blue]"
        )
        return result

    def _display_zone_summary(self, records: List[DnsRecord]):
        """Display the number of records per zone."""
        table = Table(title="DNS Backup Summary")
        table.add_column("Zone", style="cyan")
        table.add_column("Records", style="magenta")

        for zone_name, count in sorted(self.record_manager.get_zone_summary(records).items()):
            table.add_row(zone_name, str(count))

        console.print(table)

    def _display_changes_summary(self, changes: ChangeSet):
        """Display a summary of planned changes."""
        table = Table(title="DNS Changes Summary")
        table.add_column("Operation", style="cyan")
        table.add_column("Count", style="magenta")
        table.add_column("Details", style="white")

        if changes.updates:
            table.add_row(
                "Update",
                str(len(changes.updates)),
                ", ".join([r.name for r in changes.updates]),
            )

        if changes.deletes:
            table.add_row(
                "Delete",
                str(len(changes.deletes)),
                ", ".join([r.name for r in changes.deletes]),
            )

        if changes.creates:
            table.add_row(
                "Create",
                str(len(changes.creates)),
                ", ".join([r.name for r in changes.creates]),
            )

        if changes.no_changes:
            table.add_row("No Change", str(len(changes.no_changes)), "")

        console.print(table)
        console.print(f"\n[bold]Total changes: {changes.total_changes}[/bold]")

    def _save_dry_run_output(self, changes: ChangeSet, output_file: str):
        """Save dry run output to a file."""
        try:
            with open(output_file, "w") as f:
                f.write("=" * 60 + "\n")
                f.write("DNS BACKUP MANAGER - RESTORE DRY RUN SUMMARY\n")
                f.write("=" * 60 + "\n\n")

                f.write(f"Backup File: {self.backup_path}\n")
                f.write(f"Total Changes: {changes.total_changes}\n")
                f.write(f"Timestamp: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")

                if changes.updates:
                    f.write("RECORDS TO UPDATE:\n")
                    f.write("-" * 20 + "\n")
                    for record in changes.updates:
                        f.write(f"  ~ {record.name:<30} {record.type:<6} -> {record.content}\n")
                    f.write("\n")

                if changes.deletes:
                    f.write("RECORDS TO DELETE:\n")
                    f.write("-" * 20 + "\n")
                    for record in changes.deletes:
                        f.write(f"  - {record.name:<30} {record.type:<6} {record.content}\n")
                    f.write("\n")

                if changes.creates:
                    f.write("RECORDS TO CREATE:\n")
                    f.write("-" * 20 + "\n")
                    for record in changes.creates:
                        f.write(f"  + {record.name:<30} {record.type:<6} -> {record.content}\n")
                    f.write("\n")

                if changes.no_changes:
                    f.write("RECORDS WITH NO CHANGES:\n")
                    f.write("-" * 25 + "\n")
                    for record in changes.no_changes:
                        f.write(f"  = {record.name}\n")
                    f.write("\n")

                f.write("=" * 60 + "\n")
                f.write("END OF DRY RUN SUMMARY\n")
                f.write("=" * 60 + "\n")

            logger.info(f"Dry run output saved to: {output_file}")
        except OSError as e:
            logger.error(f"Failed to save dry run output to {output_file}: {e}")
            console.print(
                f"[red]Warning: Failed to save dry run output to {output_file}: {e}[/red]"
            )
