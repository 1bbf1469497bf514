"""
Apply Driver - executes a reconciled change set against a DNS provider

Changes are turned into an explicit task list, one task per record, in the
order updates, deletes, creates. Tasks run one at a time by default; with
more than one worker they run on a bounded thread pool, which is safe
because the three change sets never share a record id.

A ProtocolError from a single write is recorded and the run continues.
A TransportError aborts the run; records already applied stay applied.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from ..exceptions import ProtocolError, TransportError
from ..models import ChangeSet, DnsRecord

logger = logging.getLogger(__name__)

UPDATE = "update"
DELETE = "delete"
CREATE = "create"

_VERBS = {UPDATE: "updating", DELETE: "deleting", CREATE: "creating"}


@dataclass(frozen=True)
class ApplyTask:
    """One record operation."""

    operation: str
    record: DnsRecord

    def describe(self) -> str:
        return f"{_VERBS[self.operation]} dns record {self.record.name}"


@dataclass
class ApplyResult:
    """Outcome of an apply run."""

    total: int = 0
    applied: List[ApplyTask] = field(default_factory=list)
    failures: List[Tuple[ApplyTask, ProtocolError]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures and len(self.applied) == self.total


ProgressCallback = Callable[[ApplyTask, int, int], None]


class ApplyDriver:
    """Applies create, update and delete sets through a DNS client."""

    def __init__(
        self,
        dns_client,
        workers: int = 1,
        on_progress: Optional[ProgressCallback] = None,
    ):
        self.dns_client = dns_client
        self.workers = max(1, int(workers or 1))
        self.on_progress = on_progress

    @staticmethod
    def build_tasks(changes: ChangeSet) -> List[ApplyTask]:
        """Return the task list: updates, then deletes, then creates."""
        tasks = [ApplyTask(UPDATE, r) for r in changes.updates]
        tasks.extend(ApplyTask(DELETE, r) for r in changes.deletes)
        tasks.extend(ApplyTask(CREATE, r) for r in changes.creates)
        return tasks

    def run(self, changes: ChangeSet) -> ApplyResult:
        """Apply every change and return what succeeded and what failed."""
        tasks = self.build_tasks(changes)
        result = ApplyResult(total=len(tasks))
        if not tasks:
            return result

        if self.workers == 1:
            self._run_sequential(tasks, result)
        else:
            self._run_pooled(tasks, result)

        logger.info(
            f"Applied {len(result.applied)}/{result.total} changes, "
            f"{len(result.failures)} failed"
        )
        return result

    def _run_sequential(self, tasks: List[ApplyTask], result: ApplyResult) -> None:
        total = len(tasks)
        for index, task in enumerate(tasks, start=1):
            self._report(task, index, total)
            error = self._execute(task)
            self._record(task, error, result)

    def _run_pooled(self, tasks: List[ApplyTask], result: ApplyResult) -> None:
        total = len(tasks)
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = {executor.submit(self._execute, task): task for task in tasks}
            try:
                for index, future in enumerate(as_completed(futures), start=1):
                    task = futures[future]
                    error = future.result()
                    self._report(task, index, total)
                    self._record(task, error, result)
            except TransportError:
                for future in futures:
                    future.cancel()
                raise

    def _execute(self, task: ApplyTask) -> Optional[ProtocolError]:
        """Run one task; protocol errors are returned, transport errors raised."""
        try:
            if task.operation == UPDATE:
                self.dns_client.update_record(task.record)
            elif task.operation == DELETE:
                self.dns_client.delete_record(task.record)
            elif task.operation == CREATE:
                self.dns_client.create_record(task.record)
            else:
                raise ValueError(f"Unknown operation '{task.operation}'")
        except ProtocolError as e:
            return e
        return None

    def _record(
        self, task: ApplyTask, error: Optional[ProtocolError], result: ApplyResult
    ) -> None:
        if error is None:
            result.applied.append(task)
            return
        logger.error(f"Failed to {task.operation} record {task.record.name}: {error}")
        result.failures.append((task, error))

    def _report(self, task: ApplyTask, index: int, total: int) -> None:
        logger.info(f"{task.describe()}; {index}/{total}")
        if self.on_progress is not None:
            self.on_progress(task, index, total)
