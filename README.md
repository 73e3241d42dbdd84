# finwallet

The domain core of a small personal finance service. It models user accounts
and wallets, checks incoming requests against declarative validation rules,
and holds the business logic for creating, updating, deleting and listing
wallets. Storage sits behind an abstract repository, so any backend can be
plugged in by implementing it.

## Installation

```
pip install finwallet
```

To run the test suite:

```
pip install "finwallet[test]"
pytest
```

## Contents

- `finwallet.types`: the enums `AccountStatus` (`active`, `inactive`,
  `pending`, `suspended`) and `WalletType` (`Debit`, `Credit`), and
  `RecordNotFoundError`, which repositories raise when a lookup matches nothing.
- `finwallet.models`: the records `User`, `Wallet` and `AccountUpdate`, the
  `AuthError` exception, and `parse_user`, which builds a `User` from a JSON
  document or a mapping of wire fields (`nick_name`, `first_name`, ...) and
  parses `created_at` timestamps with or without a UTC offset. `User.to_dict`
  and `Wallet.to_dict` return the wire representation.
- `finwallet.dtos`: request and response dataclasses such as
  `CreateWalletRequest`, `UpdateWalletRequest`, `CreateAccountRequest`,
  `UserWalletResponse`, `WalletSummary`, `ErrorResponse` and the generic
  `SuccessResponse`.
- `finwallet.ports`: the abstract `Repository`, `UserUseCase` and
  `WalletUseCase`, plus `QueryOptions`, `Filter` and `OrderBy` for custom
  queries.
- `finwallet.engine`: a small rule engine. `ValidatorEngine` holds ordered
  rules (`RuleType`, `PartialRule`) bound to dataclass field names and returns
  a `ValidationResult` of `RuleViolation` entries.
- `finwallet.validators`: ready-made checks built on the engine:
  `validate_wallet`, `update_wallet_validator`, `create_account_validator`,
  `destroy_account_validator`, `update_account_validator`, plus
  `is_valid_email` and a simple message collector, `Validator`.
- `finwallet.wallet_usecase`: `WalletService`, the wallet business logic. It
  raises `WalletError` (with `to_response()` giving an `ErrorResponse`) when a
  request is rejected or the repository fails.
- `finwallet.auth_config`: `AuthConfig`, a thread-safe list of public routes
  stored as `METHOD_path`.

## Wallet service

```python
from finwallet.dtos import CreateWalletRequest
from finwallet.models import Wallet
from finwallet.ports import Repository
from finwallet.types import WalletType
from finwallet.wallet_usecase import WalletError, WalletService


class MyWalletRepository(Repository[Wallet, int]):
    ...  # create, get_by_id, get_all, update, delete, query, find_by_field


service = WalletService(MyWalletRepository())

try:
    wallet = service.create_wallet(
        CreateWalletRequest(name="Daily", wallet_type=WalletType.DEBIT, balance=100, user_id=1)
    )
except WalletError as exc:
    print(exc)
```

`create_wallet` first runs `validate_wallet`: the name must be non-empty and
exactly five characters long, and the balance and user id must be integers not
below zero. It then rejects a name the same user already has. `update_wallet`
fetches the wallet through `find_by_field("id", ...)`, refuses duplicate names
and negative balances, and returns the wallet unchanged when nothing differs.
`delete_wallet` rejects ids below 1 and unknown wallets. `get_user_wallet`
queries the repository by the owner's e-mail and expects a list of `Wallet`.

## Validation engine

```python
from dataclasses import dataclass

from finwallet.engine import RuleType, ValidatorEngine


@dataclass
class Signup:
    name: str


engine = ValidatorEngine()
engine.add_rule("name", RuleType.NOT_EMPTY, None, "Name is empty")
result = engine.validate(Signup(name=""))
if not result.is_valid():
    for violation in result.errors:
        print(violation.field, violation.rule, violation.message, violation.exception)
```

Only dataclass instances can be validated; anything else yields a single
"invalid data type" violation, and a rule naming a missing field yields a
"field not found" violation. Numeric comparison rules accept integers only.

## Route access configuration

```python
from finwallet.auth_config import AuthConfig

config = AuthConfig()
config.add_public_route("post", "/api/account")
config.is_public_route("POST", "/api/account")         # True
config.is_public_route("POST", "/api/auth/login")      # True, a default route
config.is_public_route("DELETE", "/api/account")       # False
config.is_public_route("OPTIONS", "/anything")         # True
```

## What this package does not do

- It has no HTTP server, routes or command-line program; `AuthConfig` only
  decides whether a method and path are public.
- It ships no storage backend. You supply a `Repository` implementation.
- It contains no implementation of `UserUseCase`: account creation, deletion,
  update and login exist only as an abstract interface, and no tokens are
  issued.
- `destroy_account_validator` takes a bare e-mail string, which is not a
  dataclass, so its result always reports an invalid data type.