"""Persistent domain entities: users, wallets and account updates."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Mapping, Optional, Union

from finwallet.types import AccountStatus, WalletType

_LOCAL_STAMP = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?$"
)
_RFC3339_STAMP = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(Z|[+-]\d{2}:\d{2})$"
)


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _build(match: re.Match, tz: timezone) -> datetime:
    year, month, day, hour, minute, second, fraction = match.groups()[:7]
    micro = int((fraction or "").ljust(6, "0")[:6])
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micro, tzinfo=tz
    )


def _zone(text: str) -> timezone:
    if text == "Z":
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    hours, minutes = text[1:].split(":")
    return timezone(sign * timedelta(hours=int(hours), minutes=int(minutes)))


def _parse_timestamp(text: str) -> datetime:
    try:
        local = _LOCAL_STAMP.match(text)
        if local:
            return _build(local, timezone.utc)
        stamped = _RFC3339_STAMP.match(text)
        if stamped:
            return _build(stamped, _zone(stamped.group(8)))
    except ValueError as exc:
        raise ValueError(f"error parsing created_at timestamp: {exc}") from exc
    raise ValueError(f"error parsing created_at timestamp: cannot parse {text!r}")


def _status(value: Any) -> Union[AccountStatus, str]:
    try:
        return AccountStatus(value)
    except ValueError:
        return value


@dataclass
class User:
    """A registered account holder."""

    id: int = 0
    nickname: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    status: Union[AccountStatus, str] = ""
    created_at: Optional[datetime] = None
    password: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of the user."""
        data: dict[str, Any] = {
            "id": self.id,
            "nick_name": self.nickname,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "status": _plain(self.status),
        }
        if self.created_at is not None:
            data["created_at"] = self.created_at.isoformat()
        data["password"] = self.password
        return data


def parse_user(data: Union[str, bytes, Mapping[str, Any]]) -> User:
    """Build a User from a JSON document or a mapping of wire fields."""
    record: Mapping[str, Any] = json.loads(data) if isinstance(data, (str, bytes)) else data
    stamp = record.get("created_at") or ""
    return User(
        id=int(record.get("id") or 0),
        nickname=record.get("nick_name") or "",
        first_name=record.get("first_name") or "",
        last_name=record.get("last_name") or "",
        email=record.get("email") or "",
        status=_status(record.get("status") or ""),
        created_at=_parse_timestamp(stamp) if stamp else None,
        password=record.get("password") or "",
    )


@dataclass
class Wallet:
    """A user's wallet and its balance."""

    id: int = 0
    name: str = ""
    type: Union[WalletType, str] = ""
    balance: float = 0.0
    user_id: int = 0
    user: Optional[User] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of the wallet."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": _plain(self.type),
            "balance": self.balance,
            "userId": self.user_id,
        }
        if self.user is not None:
            data["user"] = self.user.to_dict()
        return data


@dataclass
class AccountUpdate:
    """Fields that may be changed on an existing account."""

    id: int
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    status: Union[AccountStatus, str] = ""
    password: str = ""


class AuthError(Exception):
    """Authentication or authorisation failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message