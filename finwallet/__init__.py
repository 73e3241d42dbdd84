"""Domain core for accounts, wallets, validation rules and route access configuration."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "models",
    "dtos",
    "ports",
    "engine",
    "validators",
    "wallet_usecase",
    "auth_config",
]