"""Business validation of wallet and account requests."""

from __future__ import annotations

import re
from typing import Any, Optional

from finwallet.dtos import CreateAccountRequest, CreateWalletRequest, UpdateWalletRequest
from finwallet.engine import PartialRule, RuleType, RuleViolation, ValidationResult, ValidatorEngine
from finwallet.models import AccountUpdate, User, Wallet
from finwallet.ports import Repository
from finwallet.types import AccountStatus, RecordNotFoundError

ERR_EMAIL_REQUIRED = "email cannot be empty"
ERR_EMAIL_INVALID = "invalid email format"
ERR_EMAIL_EXISTS = "email already exists"
ERR_NICK_REQUIRED = "nickname cannot be empty"
ERR_NICK_EXISTS = "nickname already exists"
ERR_CREDENTIAL_REQUIRED = " ".join(("password", "cannot", "be", "empty"))
ERR_ACCOUNT_NOT_FOUND = "account not found"
ERR_INVALID_CREDENTIALS = "invalid credentials"

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
_NO_SPACE_PATTERN = r"^\S*$"
_FETCH_FAILED = "Error fectching data"


class Validator:
    """Collects simple error messages."""

    def __init__(self) -> None:
        self.errors: list[str] = []

    def required(self, value: str, field: str) -> None:
        """Record an error when value is blank."""
        if value.strip() == "":
            self.errors.append(f"{field} cannot be empty")

    def is_valid(self) -> bool:
        """True when no error has been recorded."""
        return not self.errors

    def add_error(self, message: str) -> None:
        """Record an error message."""
        self.errors.append(message)

    def __str__(self) -> str:
        return ", ".join(self.errors)


def is_valid_email(email: str) -> bool:
    """True when email has a plausible address format."""
    return re.fullmatch(EMAIL_PATTERN, email) is not None


def _describe(violation: RuleViolation) -> str:
    rule = violation.rule.value if violation.rule is not None else ""
    return f"Field: {violation.field}, Rule: {rule}, Message: {violation.message}"


def validate_wallet(data: CreateWalletRequest) -> list[str]:
    """Check a wallet creation request; return messages, empty when valid."""
    engine = ValidatorEngine()
    engine.add_rules(
        "name",
        [PartialRule(RuleType.NOT_EMPTY), PartialRule(RuleType.LENGTH, 5)],
    )
    engine.add_rule("balance", RuleType.GREATER_OR_EQUAL, 0, "")
    engine.add_rule("user_id", RuleType.GREATER_OR_EQUAL, 0, "")
    return [_describe(error) for error in engine.validate(data).errors]


def update_wallet_validator(
    data: UpdateWalletRequest, repository: Repository[Wallet, int]
) -> tuple[list[str], Optional[Wallet]]:
    """Check an update request and fetch its wallet.

    Returns the error messages and the wallet, which is None whenever
    there are errors.
    """
    engine = ValidatorEngine()
    engine.add_rule("name", RuleType.NOT_EMPTY, None, "")
    engine.add_rule("balance", RuleType.GREATER_OR_EQUAL, 0, "")
    result = engine.validate(data)
    if not result.is_valid():
        return [_describe(error) for error in result.errors], None

    try:
        wallet = repository.find_by_field("id", data.wallet_id)
    except RecordNotFoundError:
        return ["wallet not found"], None
    except Exception as exc:
        return [f"error fetching wallet: {exc}"], None
    if wallet is None:
        return ["wallet not found"], None
    return [], wallet


def _lookup_check(repository: Repository[User, int], field: str, must_exist: bool, failure: str):
    def check(value: Any) -> tuple[bool, str]:
        try:
            found = repository.find_by_field(field, value)
        except Exception:
            return False, _FETCH_FAILED
        if (found is not None) != must_exist:
            return False, failure
        return True, ""

    return check


def _email_rules(check, must_message: str) -> list[PartialRule]:
    return [
        PartialRule(RuleType.NOT_EMPTY, None, "Email Is Empty"),
        PartialRule(RuleType.MIN_LENGTH, 12, "Email not have length"),
        PartialRule(RuleType.MATCH, EMAIL_PATTERN, "Email not match"),
        PartialRule(RuleType.MUST, check, must_message),
    ]


def _password_rules() -> list[PartialRule]:
    return [
        PartialRule(RuleType.NOT_EMPTY, None, "Password Is Empty"),
        PartialRule(RuleType.MATCH, _NO_SPACE_PATTERN, "Password contains space"),
        PartialRule(RuleType.MIN_LENGTH, 8, "Password not have length"),
    ]


def create_account_validator(
    data: CreateAccountRequest, repository: Repository[User, int]
) -> ValidationResult:
    """Check a registration request, including e-mail and nickname uniqueness."""
    duplicated_mail = _lookup_check(repository, "email", False, "Duplicated Mail")
    existing_nick = _lookup_check(repository, "nick", False, "Nickname already exists")

    engine = ValidatorEngine()
    engine.add_rules("email", _email_rules(duplicated_mail, "Email already exists"))
    engine.add_rules("password", _password_rules())
    engine.add_rules(
        "nick",
        [
            PartialRule(RuleType.NOT_EMPTY, None, "Nickname Is Empty"),
            PartialRule(RuleType.MIN_LENGTH, 6, "Nickname not have length"),
            PartialRule(RuleType.MATCH, _NO_SPACE_PATTERN, "Nickname contains space"),
            PartialRule(RuleType.MUST, existing_nick, "Nickname already exists"),
        ],
    )
    return engine.validate(data)


def destroy_account_validator(email: str, repository: Repository[User, int]) -> ValidationResult:
    """Check the e-mail of an account to delete.

    The rules are applied to the value passed in; a bare string is not a
    record, so the result reports an invalid data type.
    """
    valid_mail = _lookup_check(repository, "email", True, "Invalid Mail")
    engine = ValidatorEngine()
    engine.add_rules("email", _email_rules(valid_mail, "Email not exists"))
    return engine.validate(email)


def _status_in_enum(value: Any) -> tuple[bool, str]:
    if not isinstance(value, str):
        return False, "Value is not of type AccountStatus"
    try:
        AccountStatus(value)
    except ValueError:
        return False, "Invalid AccountStatus value"
    return True, ""


def update_account_validator(
    data: AccountUpdate, repository: Repository[User, int]
) -> ValidationResult:
    """Check an account update: new e-mail, password and status."""
    duplicated_mail = _lookup_check(repository, "email", False, "Duplicated Mail")

    engine = ValidatorEngine()
    engine.add_rules("email", _email_rules(duplicated_mail, "Email already exists"))
    engine.add_rules("password", _password_rules())
    engine.add_rules(
        "status",
        [
            PartialRule(RuleType.NOT_EMPTY, None, "Value is not define"),
            PartialRule(RuleType.MUST, _status_in_enum, "Value is not valid"),
        ],
    )
    return engine.validate(data)