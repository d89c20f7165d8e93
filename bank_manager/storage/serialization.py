"""Encode and decode a bank directory as JSON-compatible data."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from bank_manager.exceptions import SnapshotError
from bank_manager.generators.identifier import (
    ACCOUNT_NUMBER_RANGE,
    BANK_ID_RANGE,
    BRANCH_CODE_RANGE,
    CUSTOMER_ID_RANGE,
    IdRange,
    IdentifierGenerator,
)
from bank_manager.models.banking import MAX_ACCOUNTS, Account, Bank, Branch, Customer
from bank_manager.models.base import Address, is_whole_cents
from bank_manager.store.directory import BankDirectory

SNAPSHOT_VERSION = 1


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, IdentifierGenerator):
        return None
    elif is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: serialize_value(getattr(value, f.name))
            for f in fields(value)
            if f.name != "id_generator"
        }
    elif isinstance(value, dict):
        # Child maps are keyed by their own IDs, so values alone are enough
        return [serialize_value(v) for v in value.values()]
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def directory_to_dict(directory: BankDirectory) -> dict:
    """Convert a directory to a snapshot dictionary."""
    return {
        "version": SNAPSHOT_VERSION,
        "banks": [serialize_value(bank) for bank in directory.banks],
    }


def directory_from_dict(
    data: dict,
    id_generator: IdentifierGenerator | None = None,
) -> BankDirectory:
    """Rebuild a directory from a snapshot dictionary.

    Parameters
    ----------
    data : dict
        Output of ``directory_to_dict``.
    id_generator : IdentifierGenerator | None
        Generator handed to every rebuilt entity for future IDs.

    Returns
    -------
    BankDirectory
        Directory with the same IDs, names, addresses and balances.

    Raises
    ------
    SnapshotError
        If the document is malformed or breaks an entity invariant.
    """
    generator = id_generator or IdentifierGenerator()
    try:
        version = data["version"]
        if version != SNAPSHOT_VERSION:
            raise SnapshotError(f"Unsupported snapshot version: {version!r}")
        banks = [_bank_from_dict(item, generator) for item in data["banks"]]
    except (KeyError, TypeError, ValueError, AttributeError, InvalidOperation) as exc:
        raise SnapshotError(f"Malformed snapshot: {exc!r}") from exc

    _check_unique([bank.bank_id for bank in banks], "bank")
    return BankDirectory(banks=banks, id_generator=generator)


def _bank_from_dict(data: dict, generator: IdentifierGenerator) -> Bank:
    branches = [_branch_from_dict(item, generator) for item in data["branches"]]
    return Bank(
        bank_id=_identifier(data["bank_id"], BANK_ID_RANGE, "bank_id"),
        name=str(data["name"]),
        branches=_keyed(branches, "branch_code", "branch"),
        id_generator=generator,
    )


def _branch_from_dict(data: dict, generator: IdentifierGenerator) -> Branch:
    customers = [_customer_from_dict(item, generator) for item in data["customers"]]
    return Branch(
        branch_code=_identifier(data["branch_code"], BRANCH_CODE_RANGE, "branch_code"),
        name=str(data["name"]),
        address=_address_from_dict(data["address"]),
        customers=_keyed(customers, "customer_id", "customer"),
        id_generator=generator,
    )


def _customer_from_dict(data: dict, generator: IdentifierGenerator) -> Customer:
    accounts = [_account_from_dict(item) for item in data["accounts"]]
    customer_id = _identifier(data["customer_id"], CUSTOMER_ID_RANGE, "customer_id")
    if len(accounts) > MAX_ACCOUNTS:
        raise SnapshotError(f"Customer {customer_id} holds {len(accounts)} accounts")
    _check_unique([account.account_number for account in accounts], "account")
    return Customer(
        customer_id=customer_id,
        name=str(data["name"]),
        address=_address_from_dict(data["address"]),
        accounts=accounts,
        id_generator=generator,
    )


def _account_from_dict(data: dict) -> Account:
    account_number = _identifier(data["account_number"], ACCOUNT_NUMBER_RANGE, "account_number")
    balance = Decimal(str(data["balance"]))
    if not balance.is_finite() or balance < 0 or not is_whole_cents(balance):
        raise SnapshotError(f"Account {account_number} has invalid balance {balance}")
    return Account(account_number=account_number, balance=balance)


def _address_from_dict(data: dict) -> Address:
    valid = data["valid"]
    if not isinstance(valid, bool):
        raise SnapshotError(f"Address validity flag {valid!r} is not a boolean")
    if not valid:
        return Address.invalid()

    parts = [data[key] for key in ("street", "city", "state", "zip_code")]
    if not all(isinstance(part, str) for part in parts):
        raise SnapshotError(f"Address fields must be strings: {parts!r}")
    # Stored fields go through the same validation as user input
    address = Address.from_fields(*parts)
    if not address.valid:
        raise SnapshotError(f"Address {data!r} is flagged valid but fails validation")
    return address


def _identifier(value: Any, id_range: IdRange, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value not in id_range:
        raise SnapshotError(f"{name} {value!r} is not a {id_range.digits}-digit identifier")
    return value


def _keyed(items: list, key: str, kind: str) -> dict:
    _check_unique([getattr(item, key) for item in items], kind)
    return {getattr(item, key): item for item in items}


def _check_unique(ids: list[int], kind: str) -> None:
    if len(set(ids)) != len(ids):
        raise SnapshotError(f"Duplicate {kind} identifiers in snapshot")
