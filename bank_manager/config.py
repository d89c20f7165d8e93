"""Configuration management for bank-manager."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from bank_manager.exceptions import ConfigurationError


@dataclass
class StorageConfig:
    """Snapshot file configuration."""

    path: Path = field(default_factory=lambda: Path("bank_directory.json"))
    pretty: bool = True


@dataclass
class SampleDataConfig:
    """Shape of a generated sample directory."""

    num_banks: int = 3
    branches_per_bank: int = 2
    customers_per_branch: int = 4
    accounts_per_customer: int = 2
    max_opening_deposit: Decimal = Decimal("5000.00")
    locale: str = "en_US"


@dataclass
class BankManagerConfig:
    """Main configuration for bank-manager."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    sample: SampleDataConfig = field(default_factory=SampleDataConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "BankManagerConfig":
        """Create config from environment variables."""
        import os

        storage = StorageConfig(
            path=Path(os.getenv("BANK_DIRECTORY_PATH", "bank_directory.json")),
            pretty=os.getenv("PRETTY_JSON", "true").lower() == "true",
        )

        sample = SampleDataConfig(
            num_banks=_env_int("SAMPLE_BANKS", 3),
            branches_per_bank=_env_int("SAMPLE_BRANCHES", 2),
            customers_per_branch=_env_int("SAMPLE_CUSTOMERS", 4),
            accounts_per_customer=_env_int("SAMPLE_ACCOUNTS", 2),
            max_opening_deposit=_env_decimal("SAMPLE_MAX_DEPOSIT", Decimal("5000.00")),
            locale=os.getenv("SAMPLE_LOCALE", "en_US"),
        )

        return cls(
            storage=storage,
            sample=sample,
            seed=_env_int("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_int(name: str, default: int | None) -> int | None:
    """Read an integer environment variable."""
    import os

    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _env_decimal(name: str, default: Decimal) -> Decimal:
    """Read a decimal environment variable."""
    import os

    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return Decimal(raw)
    except InvalidOperation as exc:
        raise ConfigurationError(f"{name} must be a decimal amount, got {raw!r}") from exc
