"""Contracts between the business logic and its storage and callers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from finwallet.dtos import (
    AuthRequest,
    CreateAccountResponse,
    CreateWalletRequest,
    SuccessResponse,
    UpdateAccountResponse,
    UpdateWalletRequest,
    UserWalletResponse,
)
from finwallet.models import AccountUpdate, Wallet

T = TypeVar("T")
ID = TypeVar("ID")


@dataclass
class Filter:
    """A single query filter such as eq, neq, gt, like or in."""

    field: str
    operator: str
    value: Any


@dataclass
class OrderBy:
    """A sort clause; nulls_first of None means the store's default."""

    field: str
    ascending: bool = False
    nulls_first: Optional[bool] = None


@dataclass
class QueryOptions:
    """Filters, ordering and paging for a custom query."""

    filters: list[Filter] = field(default_factory=list)
    order_by: list[OrderBy] = field(default_factory=list)
    limit: Optional[int] = None
    offset: Optional[int] = None
    count: Optional[str] = None


class Repository(ABC, Generic[T, ID]):
    """Storage of entities of one kind, keyed by an identifier."""

    @abstractmethod
    def create(self, entity: T) -> T:
        """Persist a new entity and return it with generated fields filled."""

    @abstractmethod
    def get_by_id(self, id: ID) -> T:
        """Return the entity with this id."""

    @abstractmethod
    def get_all(self) -> list[T]:
        """Return every stored entity."""

    @abstractmethod
    def update(self, entity: T) -> T:
        """Store changes to an existing entity and return the stored version."""

    @abstractmethod
    def delete(self, id: ID) -> None:
        """Remove the entity with this id."""

    @abstractmethod
    def query(self, fields: str, options: QueryOptions) -> Any:
        """Run a custom selection of fields with the given options."""

    @abstractmethod
    def find_by_field(self, field: str, value: Any) -> Optional[T]:
        """Return the first entity whose field equals value."""


class UserUseCase(ABC):
    """Account management operations."""

    @abstractmethod
    def create_account(
        self, nick: str, email: str, password: str
    ) -> SuccessResponse[CreateAccountResponse]:
        """Register a new account."""

    @abstractmethod
    def destroy_account(self, email: str) -> None:
        """Permanently delete the account with this e-mail."""

    @abstractmethod
    def update_account(self, user: AccountUpdate) -> SuccessResponse[UpdateAccountResponse]:
        """Change the fields of an existing account."""

    @abstractmethod
    def login(self, auth: AuthRequest) -> str:
        """Check credentials and return the e-mail of the authenticated user."""


class WalletUseCase(ABC):
    """Wallet management operations."""

    @abstractmethod
    def create_wallet(self, request: CreateWalletRequest) -> Wallet:
        """Open a wallet."""

    @abstractmethod
    def update_wallet(self, request: UpdateWalletRequest) -> Wallet:
        """Change an existing wallet."""

    @abstractmethod
    def delete_wallet(self, wallet_id: int) -> None:
        """Remove a wallet."""

    @abstractmethod
    def get_user_wallet(self, user_id: int, email: str) -> UserWalletResponse:
        """List the wallets of the user with this e-mail."""