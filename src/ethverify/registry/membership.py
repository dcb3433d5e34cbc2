"""
Allow-list of trusted accounts (e.g. oracle signers).

Entries are add-only: an account is either absent or a member, and there is
no way back. Each operation runs under one lock, so concurrent adds of the
same account produce exactly one success and one AlreadyMember per loser.
"""

from __future__ import annotations

import threading

import structlog

from ..accounts import to_account
from ..errors import AlreadyMember
from .audit import AuditLog, InMemoryAuditLog, IsMemberCheck, MemberAdded

logger = structlog.get_logger(__name__)


class MembershipRegistry:
    def __init__(self, audit_log: AuditLog | None = None) -> None:
        self.audit_log: AuditLog = audit_log if audit_log is not None else InMemoryAuditLog()
        self._members: dict[bytes, bool] = {}
        self._lock = threading.Lock()
        self._log = logger.bind(component="membership_registry")

    def add_member(self, account: bytes | str) -> None:
        """
        Register `account` as trusted.

        Args:
            account: 20-byte account or hex address.

        Raises:
            AlreadyMember: account was registered before.
            InvalidAccountIdentifier: account is malformed.
        """
        key = to_account(account)
        with self._lock:
            if key in self._members:
                self._log.warning("member_add_rejected", account="0x" + key.hex())
                raise AlreadyMember(key)
            self._members[key] = True
            self.audit_log.append(MemberAdded(key))
        self._log.info("member_added", account="0x" + key.hex())

    def is_member(self, account: bytes | str) -> bool:
        """Whether `account` is registered. Every call is recorded as IsMemberCheck."""
        key = to_account(account)
        with self._lock:
            result = self._members.get(key, False)
            self.audit_log.append(IsMemberCheck(key, result))
        self._log.debug("member_checked", account="0x" + key.hex(), result=result)
        return result


__all__: tuple[str, ...] = ("MembershipRegistry",)
