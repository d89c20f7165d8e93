"""Customer model for the banking hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator

from bank_manager.generators.identifier import ACCOUNT_NUMBER_RANGE, IdentifierGenerator
from bank_manager.models.banking.account import Account
from bank_manager.models.base import Address

MAX_ACCOUNTS = 5


@dataclass(eq=False)
class Customer:
    """Client of a branch, owning up to ``MAX_ACCOUNTS`` accounts.

    Accounts keep their opening order; account numbers are unique among
    this customer's accounts.
    """

    customer_id: int  # 5 digits
    name: str
    address: Address = field(default_factory=Address.invalid)
    accounts: list[Account] = field(default_factory=list)
    id_generator: IdentifierGenerator = field(default_factory=IdentifierGenerator, repr=False)

    @property
    def number_of_accounts(self) -> int:
        return len(self.accounts)

    @property
    def total_balance(self) -> Decimal:
        return sum((account.balance for account in self.accounts), Decimal("0.00"))

    def open_account(self) -> Account | None:
        """Open a zero-balance account, ``None`` if the customer is at capacity."""
        if len(self.accounts) >= MAX_ACCOUNTS:
            return None
        account_number = self.id_generator.unique(
            {account.account_number for account in self.accounts},
            ACCOUNT_NUMBER_RANGE,
        )
        account = Account(account_number=account_number)
        self.accounts.append(account)
        return account

    def close_account(self, account: Account) -> bool:
        """Close ``account`` if it belongs to this customer and is empty."""
        for index, owned in enumerate(self.accounts):
            if owned == account:
                if owned.balance != 0:
                    return False
                del self.accounts[index]
                return True
        return False

    def get_account(self, account_number: int) -> Account | None:
        """Look up an account; anything that is not a 9-digit number is rejected."""
        if account_number not in ACCOUNT_NUMBER_RANGE:
            return None
        for account in self.accounts:
            if account.account_number == account_number:
                return account
        return None

    def set_name(self, name: str) -> None:
        self.name = name

    def set_address(self, address: Address | str) -> None:
        self.address = Address.coerce(address)

    def short_label(self) -> str:
        """Return ``(customer id) name``."""
        return f"({self.customer_id}) {self.name}"

    def long_label(self) -> str:
        """Return the customer header, address and every account."""
        lines = [f"{self.name} ({self.customer_id})", str(self.address)]
        if not self.accounts:
            lines.append("\tNo accounts open")
        else:
            lines.extend(f"\t{account.long_label()}" for account in self.accounts)
        return "\n".join(lines)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self.accounts))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self.customer_id == other.customer_id

    def __hash__(self) -> int:
        return hash(self.customer_id)
