"""Account model for the banking hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from bank_manager.models.base import format_currency, is_whole_cents

Amount = Decimal | int | str


@dataclass(eq=False)
class Account:
    """Balance-holding unit owned by exactly one customer.

    Created through ``Customer.open_account()`` only. The balance never
    goes below zero; every rejected operation is a no-op returning ``False``.
    Identity and equality are by ``account_number``.
    """

    account_number: int  # 9 digits
    balance: Decimal = field(default_factory=lambda: Decimal("0.00"))

    def deposit(self, amount: Amount) -> bool:
        """Add ``amount`` to the balance if it is positive."""
        value = _to_amount(amount)
        if value is None or value <= 0:
            return False
        self.balance += value
        return True

    def withdraw(self, amount: Amount) -> bool:
        """Take ``amount`` from the balance if ``0 < amount <= balance``."""
        value = _to_amount(amount)
        if value is None or value <= 0 or value > self.balance:
            return False
        self.balance -= value
        return True

    def transfer(self, other: Account, amount: Amount) -> bool:
        """Move ``amount`` into ``other``.

        Fails without touching either balance on a self-transfer or when
        the withdrawal is rejected.
        """
        if other == self:
            return False
        if not self.withdraw(amount):
            return False
        other.deposit(amount)
        return True

    def short_label(self) -> str:
        """Return ``[account number] balance``."""
        return f"[{self.account_number}] {format_currency(self.balance)}"

    def long_label(self) -> str:
        """Return the account number and balance on two lines."""
        return f"Account Number: {self.account_number}\n\tBalance: {format_currency(self.balance)}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self.account_number == other.account_number

    def __hash__(self) -> int:
        return hash(self.account_number)


def _to_amount(amount: Amount) -> Decimal | None:
    """Convert user input to a finite Decimal in whole cents, ``None`` if impossible."""
    if isinstance(amount, bool):
        return None
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite() or not is_whole_cents(value):
        return None
    return value
