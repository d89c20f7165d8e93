"""Branch model for the banking hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from bank_manager.generators.identifier import CUSTOMER_ID_RANGE, IdentifierGenerator
from bank_manager.models.banking.customer import Customer
from bank_manager.models.base import Address


@dataclass(eq=False)
class Branch:
    """Location of a bank, owning its customers keyed by customer ID.

    Customer names may repeat; only the ID is unique within the branch.
    """

    branch_code: int  # 3 digits
    name: str
    address: Address = field(default_factory=Address.invalid)
    customers: dict[int, Customer] = field(default_factory=dict)
    id_generator: IdentifierGenerator = field(default_factory=IdentifierGenerator, repr=False)

    @property
    def number_of_customers(self) -> int:
        return len(self.customers)

    def add_customer(self, name: str, address: Address | str) -> bool:
        """Register a new customer under a fresh customer ID.

        Returns ``True`` iff the customer was newly inserted, which is
        always the case since the ID is drawn outside the used set.
        """
        customer_id = self.id_generator.unique(self.customers.keys(), CUSTOMER_ID_RANGE)
        self.customers[customer_id] = Customer(
            customer_id=customer_id,
            name=name,
            address=Address.coerce(address),
            id_generator=self.id_generator,
        )
        return True

    def remove_customer(self, customer_id: int) -> bool:
        """Drop a customer together with all of its accounts."""
        return self.customers.pop(customer_id, None) is not None

    def get_customer(self, customer_id: int) -> Customer | None:
        return self.customers.get(customer_id)

    def set_name(self, name: str) -> None:
        self.name = name

    def set_address(self, address: Address | str) -> None:
        self.address = Address.coerce(address)

    def short_label(self) -> str:
        """Return ``[branch code] name``."""
        return f"[{self.branch_code}] {self.name}"

    def long_label(self) -> str:
        """Return the branch header, address and customer list."""
        lines = [f"{self.name} [{self.branch_code}]", f"\t{self.address}", "\tCustomers:"]
        if not self.customers:
            lines.append("\t\t- No customers found -")
        else:
            lines.extend(f"\t\t{customer.short_label()}" for customer in self.customers.values())
        return "\n".join(lines)

    def __iter__(self) -> Iterator[Customer]:
        return iter(list(self.customers.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Branch):
            return NotImplemented
        return self.branch_code == other.branch_code

    def __hash__(self) -> int:
        return hash(self.branch_code)
