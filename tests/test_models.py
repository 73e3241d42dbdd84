import json
from datetime import datetime, timedelta, timezone

import pytest

from finwallet.models import AccountUpdate, AuthError, User, Wallet, parse_user
from finwallet.types import AccountStatus, WalletType


def _user():
    password = "password"
    return User(
        id=7,
        nickname="tester",
        first_name="Ann",
        last_name="Lee",
        email="ann@example.com",
        status=AccountStatus.ACTIVE,
        created_at=datetime(2024, 1, 2, 3, 4, 5, 123000, tzinfo=timezone.utc),
        password=password,
    )


def test_parse_user_local_timestamp_is_utc():
    user = parse_user({"id": 1, "created_at": "2024-01-02T03:04:05.123"})
    assert user.created_at == datetime(2024, 1, 2, 3, 4, 5, 123000, tzinfo=timezone.utc)


def test_parse_user_rfc3339_with_offset():
    user = parse_user({"created_at": "2024-01-02T03:04:05+02:00"})
    assert user.created_at.utcoffset() == timedelta(hours=2)
    assert user.created_at.hour == 3


def test_parse_user_from_json_text():
    text = json.dumps({"id": 3, "nick_name": "nick", "email": "a@example.com", "status": "pending"})
    user = parse_user(text)
    assert user.id == 3
    assert user.nickname == "nick"
    assert user.status is AccountStatus.PENDING
    assert user.created_at is None


def test_parse_user_keeps_unknown_status_text():
    assert parse_user({"status": "archived"}).status == "archived"


def test_parse_user_rejects_bad_timestamp():
    with pytest.raises(ValueError, match="error parsing created_at timestamp"):
        parse_user({"created_at": "yesterday"})


def test_parse_user_rejects_impossible_date():
    with pytest.raises(ValueError, match="error parsing created_at timestamp"):
        parse_user({"created_at": "2024-13-40T00:00:00"})


def test_user_round_trip():
    user = _user()
    assert parse_user(user.to_dict()) == user


def test_user_to_dict_uses_wire_names():
    data = _user().to_dict()
    assert data["nick_name"] == "tester"
    assert data["status"] == "active"


def test_user_to_dict_omits_missing_timestamp():
    assert "created_at" not in User(id=1).to_dict()


def test_wallet_to_dict_without_user():
    wallet = Wallet(id=1, name="Savings", type=WalletType.DEBIT, balance=1000.0, user_id=1)
    assert wallet.to_dict() == {
        "id": 1,
        "name": "Savings",
        "type": "Debit",
        "balance": 1000.0,
        "userId": 1,
    }


def test_wallet_to_dict_nests_user():
    wallet = Wallet(id=2, name="Checking", user=_user())
    assert wallet.to_dict()["user"] == _user().to_dict()


def test_account_update_defaults_leave_fields_blank():
    update = AccountUpdate(id=5)
    assert (update.first_name, update.email, update.status) == ("", "", "")


def test_auth_error_carries_message():
    err = AuthError("invalid or expired authentication token")
    assert str(err) == "invalid or expired authentication token"
    assert err.message == "invalid or expired authentication token"
    assert isinstance(err, Exception)