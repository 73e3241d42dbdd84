"""Request and response payloads exchanged with API clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar, Union

from finwallet.types import WalletType

T = TypeVar("T")


@dataclass
class AuthRequest:
    """Login credentials: an e-mail or a nickname plus a password."""

    email: str = ""
    nickname: str = ""
    password: str = ""


@dataclass
class CreateAccountRequest:
    """Data needed to register a new account."""

    nick: str
    email: str
    password: str


@dataclass
class CreateWalletRequest:
    """Data needed to open a wallet."""

    name: str = ""
    wallet_type: Union[WalletType, str] = ""
    balance: float = 0.0
    user_id: int = 0


@dataclass
class DeleteAccountRequest:
    """Identifies an account to delete."""

    id: int
    email: str = ""


@dataclass
class DeleteWalletRequest:
    """Identifies a wallet to delete."""

    id: int
    email: str = ""


@dataclass
class UpdateAccountRequest:
    """Client request to change account fields."""

    id: int
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    status: str = ""
    password: str = ""


@dataclass
class UpdateWalletRequest:
    """Client request to change a wallet; None leaves a field unchanged."""

    wallet_id: int = 0
    name: str = ""
    wallet_type: Optional[Union[WalletType, str]] = None
    balance: Optional[float] = None


@dataclass
class WalletSummary:
    """One wallet as listed for a user."""

    name: str
    type: Union[WalletType, str]
    balance: float


@dataclass
class UserWalletResponse:
    """A user together with the wallets they own."""

    id: int = 0
    nickname: str = ""
    email: str = ""
    wallets: list[WalletSummary] = field(default_factory=list)


@dataclass
class CreateAccountResponse:
    """Details of a newly created account."""

    id: int
    nick: str
    email: str


@dataclass
class ErrorResponse:
    """Standard error payload."""

    error: str


@dataclass
class SuccessResponse(Generic[T]):
    """Standard success payload wrapping any data."""

    message: str
    data: T


@dataclass
class UpdateAccountResponse:
    """Details of an updated account."""

    id: int
    email: str = ""