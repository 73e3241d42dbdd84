"""Enumerations and shared errors used across the wallet domain."""

from __future__ import annotations

from enum import Enum


class AccountStatus(str, Enum):
    """Lifecycle state of a user account."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    SUSPEND = "suspended"


class WalletType(str, Enum):
    """Kind of wallet a user can hold."""

    DEBIT = "Debit"
    CREDIT = "Credit"


class RecordNotFoundError(LookupError):
    """Raised when a repository lookup matches no record."""

    def __init__(self, message: str = "record not found") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message