"""Bank directory: the root of the entity graph and the unit of persistence."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator

from bank_manager.generators.identifier import BANK_ID_RANGE, IdentifierGenerator
from bank_manager.models.banking import Bank


@dataclass
class BankDirectory:
    """In-memory collection of banks, in creation order.

    Bank names are unique within the directory (case-insensitive) and bank
    IDs are unique across it. The same ``IdentifierGenerator`` is handed down
    to every bank, so a seeded directory produces reproducible IDs.
    """

    banks: list[Bank] = field(default_factory=list)
    id_generator: IdentifierGenerator = field(default_factory=IdentifierGenerator, repr=False)

    def size(self) -> int:
        """Return the number of banks."""
        return len(self.banks)

    def find_bank(self, name: str) -> Bank | None:
        """Find a bank by name, ignoring case."""
        wanted = name.casefold()
        for bank in self.banks:
            if bank.name.casefold() == wanted:
                return bank
        return None

    def create_bank(self, name: str) -> bool:
        """Create a bank unless the name is already taken."""
        if self.find_bank(name) is not None:
            return False
        bank_id = self.id_generator.unique({bank.bank_id for bank in self.banks}, BANK_ID_RANGE)
        self.banks.append(Bank(bank_id=bank_id, name=name, id_generator=self.id_generator))
        return True

    def remove_bank(self, bank_id: int) -> bool:
        """Remove the bank with ``bank_id`` and everything it owns."""
        for index, bank in enumerate(self.banks):
            if bank.bank_id == bank_id:
                del self.banks[index]
                return True
        return False

    def get_bank(self, bank_id: int) -> Bank | None:
        for bank in self.banks:
            if bank.bank_id == bank_id:
                return bank
        return None

    def rename_bank(self, bank_id: int, name: str) -> bool:
        """Rename a bank, refusing names held by another bank."""
        bank = self.get_bank(bank_id)
        if bank is None:
            return False
        holder = self.find_bank(name)
        if holder is not None and holder is not bank:
            return False
        bank.set_name(name)
        return True

    def summary(self) -> dict[str, int | Decimal]:
        """Return entity counts and the total balance held."""
        branches = [branch for bank in self.banks for branch in bank]
        customers = [customer for branch in branches for customer in branch]
        accounts = [account for customer in customers for account in customer]
        return {
            "banks": len(self.banks),
            "branches": len(branches),
            "customers": len(customers),
            "accounts": len(accounts),
            "total_balance": sum((account.balance for account in accounts), Decimal("0.00")),
        }

    def __iter__(self) -> Iterator[Bank]:
        return iter(list(self.banks))
