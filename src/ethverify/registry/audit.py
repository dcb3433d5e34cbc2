"""
Append-only audit records for membership operations.

Every add and every membership query produces one record. Records are plain
values; the log they go to is passed in by the caller.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, Protocol, Union


@dataclass(frozen=True)
class MemberAdded:
    account: bytes

    event: ClassVar[str] = "MemberAdded"

    def to_dict(self) -> dict[str, Any]:
        return {"event": self.event, "account": "0x" + self.account.hex()}


@dataclass(frozen=True)
class IsMemberCheck:
    account: bytes
    result: bool

    event: ClassVar[str] = "IsMemberCheck"

    def to_dict(self) -> dict[str, Any]:
        return {
            "event": self.event,
            "account": "0x" + self.account.hex(),
            "result": self.result,
        }


AuditRecord = Union[MemberAdded, IsMemberCheck]


class AuditLog(Protocol):
    def append(self, record: AuditRecord) -> None: ...


class InMemoryAuditLog:
    """Append-only in-memory log, queryable by event name and account."""

    def __init__(self) -> None:
        self._records: list[AuditRecord] = []
        self._lock = threading.Lock()

    def append(self, record: AuditRecord) -> None:
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> tuple[AuditRecord, ...]:
        with self._lock:
            return tuple(self._records)

    def query(
        self, event: str | None = None, account: bytes | None = None
    ) -> list[AuditRecord]:
        """Records matching `event` (e.g. "MemberAdded") and/or `account`, oldest first."""
        return [
            rec
            for rec in self.records
            if (event is None or rec.event == event)
            and (account is None or rec.account == account)
        ]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[AuditRecord]:
        return iter(self.records)


__all__: tuple[str, ...] = (
    "AuditLog",
    "AuditRecord",
    "InMemoryAuditLog",
    "IsMemberCheck",
    "MemberAdded",
)
