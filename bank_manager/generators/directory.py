"""Sample bank directory generator."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from bank_manager.config import SampleDataConfig
from bank_manager.generators.address import AddressFactory, strip_digits
from bank_manager.generators.base import BaseGenerator
from bank_manager.generators.identifier import IdentifierGenerator
from bank_manager.logging import get_logger
from bank_manager.models.banking import MAX_ACCOUNTS, Bank, Branch
from bank_manager.store.directory import BankDirectory

logger = get_logger(__name__)


class DirectoryGenerator(BaseGenerator):
    """Populate a ``BankDirectory`` with synthetic banks.

    Everything goes through the public entity operations, so generated
    data obeys the same invariants as data entered by hand: unique names
    per parent, at most ``MAX_ACCOUNTS`` accounts per customer and
    non-negative balances.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility of names, addresses, amounts and IDs.
    config : SampleDataConfig | None
        Shape of the generated directory.
    """

    def __init__(self, seed: int | None = None, config: SampleDataConfig | None = None) -> None:
        self.config = config or SampleDataConfig()
        super().__init__(seed, locale=self.config.locale)
        self._addresses = AddressFactory(seed=seed, locale=self.config.locale)

    def generate(self) -> BankDirectory:
        """Generate a fresh directory with a seeded identifier generator."""
        directory = BankDirectory(id_generator=IdentifierGenerator(seed=self.seed))
        return self.populate(directory)

    def populate(self, directory: BankDirectory) -> BankDirectory:
        """Add the configured number of banks to ``directory``.

        Returns
        -------
        BankDirectory
            The same directory, for chaining.
        """
        for _ in range(self.config.num_banks):
            bank = self._create_bank(directory)
            for _ in range(self.config.branches_per_bank):
                branch = self._create_branch(bank)
                for _ in range(self.config.customers_per_branch):
                    self._add_customer(branch)

        summary = directory.summary()
        logger.info(
            "Generated %d banks, %d branches, %d customers, %d accounts",
            summary["banks"],
            summary["branches"],
            summary["customers"],
            summary["accounts"],
        )
        return directory

    def _create_bank(self, directory: BankDirectory) -> Bank:
        name = self._unique_name(
            lambda: f"{self.fake.last_name()} {self.rng.choice(_BANK_SUFFIXES)}",
            lambda candidate: directory.find_bank(candidate) is None,
        )
        directory.create_bank(name)
        return directory.find_bank(name)

    def _create_branch(self, bank: Bank) -> Branch:
        name = self._unique_name(
            lambda: strip_digits(self.fake.city()),
            lambda candidate: bank.find_branch(candidate) is None,
        )
        bank.create_branch(name, self._addresses.generate())
        return bank.find_branch(name)

    def _add_customer(self, branch: Branch) -> None:
        branch.add_customer(self.fake.name(), self._addresses.generate())
        # Customer names may repeat, so take the newest entry
        customer = list(branch.customers.values())[-1]

        if self.config.accounts_per_customer <= 0:
            return
        for _ in range(self.rng.randint(1, min(self.config.accounts_per_customer, MAX_ACCOUNTS))):
            account = customer.open_account()
            account.deposit(self._opening_deposit())

    def _opening_deposit(self) -> Decimal:
        cents = int(self.config.max_opening_deposit * 100)
        return (Decimal(self.rng.randint(0, cents)) / 100).quantize(Decimal("0.01"))

    def _unique_name(self, make: Callable[[], str], is_free: Callable[[str], bool]) -> str:
        for _ in range(_NAME_ATTEMPTS):
            name = make()
            if is_free(name):
                return name
        base = make()
        suffix = 2
        name = f"{base} {suffix}"
        while not is_free(name):
            suffix += 1
            name = f"{base} {suffix}"
        return name


_NAME_ATTEMPTS = 20
_BANK_SUFFIXES = ["Bank", "Savings", "Trust", "Credit Union", "National Bank"]

