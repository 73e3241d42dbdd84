"""Wallet business rules: opening, changing, removing and listing wallets."""

from __future__ import annotations

from typing import Any

from finwallet.dtos import (
    CreateWalletRequest,
    ErrorResponse,
    UpdateWalletRequest,
    UserWalletResponse,
    WalletSummary,
)
from finwallet.models import Wallet
from finwallet.ports import Filter, QueryOptions, Repository, WalletUseCase
from finwallet.types import RecordNotFoundError
from finwallet.validators import update_wallet_validator, validate_wallet

DUPLICATE_NAME = "a wallet with this name already exists for this user"
USER_WALLET_FIELDS = "id,name,type,balance,user:users!inner(email)"


class WalletError(Exception):
    """A wallet operation was rejected or could not be completed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def to_response(self) -> ErrorResponse:
        """Return the error as an API error payload."""
        return ErrorResponse(self.message)


def _join(messages: list[str]) -> str:
    return " \n".join(messages)


class WalletService(WalletUseCase):
    """Wallet operations backed by a wallet repository."""

    def __init__(self, repository: Repository[Wallet, int]) -> None:
        self.repository = repository

    def _all_wallets(self, context: str) -> list[Wallet]:
        try:
            return list(self.repository.get_all())
        except Exception as exc:
            raise WalletError(f"{context}: {exc}") from exc

    def create_wallet(self, request: CreateWalletRequest) -> Wallet:
        """Validate the request and store a new wallet for its user."""
        problems = validate_wallet(request)
        if problems:
            raise WalletError(_join(problems))

        existing = self._all_wallets("error checking wallet existence")
        if any(w.name == request.name and w.user_id == request.user_id for w in existing):
            raise WalletError(DUPLICATE_NAME)

        wallet = Wallet(
            name=request.name,
            type=request.wallet_type,
            balance=request.balance,
            user_id=request.user_id,
        )
        try:
            return self.repository.create(wallet)
        except Exception as exc:
            raise WalletError(DUPLICATE_NAME) from exc

    def update_wallet(self, request: UpdateWalletRequest) -> Wallet:
        """Apply the requested changes; return the wallet unchanged if nothing differs."""
        problems, wallet = update_wallet_validator(request, self.repository)
        if problems or wallet is None:
            raise WalletError(_join(problems))

        updated = False

        if request.name and request.name != wallet.name:
            existing = self._all_wallets("error checking wallet names")
            for other in existing:
                if (
                    other.name == request.name
                    and other.user_id == wallet.user_id
                    and other.id != request.wallet_id
                ):
                    raise WalletError(DUPLICATE_NAME)
            wallet.name = request.name
            updated = True

        if request.wallet_type is not None:
            wallet.type = request.wallet_type
            updated = True

        if request.balance is not None and request.balance != wallet.balance:
            if request.balance < 0:
                raise WalletError("balance cannot be negative")
            wallet.balance = request.balance
            updated = True

        if not updated:
            return wallet

        try:
            return self.repository.update(wallet)
        except Exception as exc:
            raise WalletError(str(exc)) from exc

    def delete_wallet(self, wallet_id: int) -> None:
        """Remove an existing wallet."""
        if wallet_id <= 0:
            raise WalletError("invalid wallet ID")
        try:
            self.repository.get_by_id(wallet_id)
        except RecordNotFoundError as exc:
            raise WalletError("wallet not found") from exc
        except Exception as exc:
            raise WalletError(f"error fetching wallet: {exc}") from exc
        self.repository.delete(wallet_id)

    def get_user_wallet(self, user_id: int, email: str) -> UserWalletResponse:
        """List the wallets owned by the user with this e-mail."""
        options = QueryOptions(filters=[Filter("users.email", "eq", email)])
        try:
            data: Any = self.repository.query(USER_WALLET_FIELDS, options)
        except Exception as exc:
            raise WalletError(str(exc)) from exc

        if not isinstance(data, (list, tuple)) or not all(isinstance(w, Wallet) for w in data):
            raise WalletError("unexpected type returned from repository")

        result = UserWalletResponse(email=email)
        if not data:
            return result

        owner = data[0].user
        if owner is not None:
            result.email = owner.email
        result.wallets = [WalletSummary(w.name, w.type, w.balance) for w in data]
        return result