"""Membership registry of trusted accounts, with an append-only audit log."""

from .audit import (AuditLog, AuditRecord, InMemoryAuditLog, IsMemberCheck,
                    MemberAdded)
from .membership import MembershipRegistry

__all__: tuple[str, ...] = (
    "AuditLog",
    "AuditRecord",
    "InMemoryAuditLog",
    "IsMemberCheck",
    "MemberAdded",
    "MembershipRegistry",
)
