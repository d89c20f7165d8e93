"""Interactive console menu over a bank directory."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Callable

from bank_manager.logging import get_logger
from bank_manager.models.banking import Account, Bank, Branch, Customer
from bank_manager.models.base import Address, format_currency, is_whole_cents
from bank_manager.store.directory import BankDirectory

logger = get_logger(__name__)

BACK = -1
CANCEL = "0"
RULE = "=" * 80

INTRO = f"""{RULE}
Welcome to Bank Manager. Organize your banks, from their branches down to
individual customer accounts. Type the requested input whenever prompted.
To move back, enter -1.
{RULE}"""


class ConsoleMenu:
    """Menu-driven session: bank, branch, customer, account.

    Each level lists the entities of the level below and offers create,
    edit and remove actions; every mutation goes through the entity
    operations, which report failures as ``False``/``None``.

    Parameters
    ----------
    directory : BankDirectory
        Directory the session works on. Saving is left to the caller.
    input_fn : Callable[[str], str]
        Prompt reader (``input`` by default). ``EOFError`` ends the session.
    output_fn : Callable[[str], None]
        Line writer (``print`` by default).
    """

    def __init__(
        self,
        directory: BankDirectory,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.directory = directory
        self._input = input_fn
        self._out = output_fn

    def run(self) -> None:
        """Run until the user quits from the bank list or input ends."""
        self._out(INTRO)
        try:
            while True:
                bank = self._select_bank()
                if bank is None:
                    break
                self._bank_menu(bank)
        except EOFError:
            logger.debug("Input closed, leaving the menu")
            self._out("")

    # ------------------------------------------------------------------
    # Levels
    # ------------------------------------------------------------------

    def _select_bank(self) -> Bank | None:
        while True:
            self._out("\nChoose a bank (enter the bank ID):")
            if self.directory.size() == 0:
                self._out("\t- No banks created -")
            for bank in self.directory:
                self._out(f"\t{bank.short_label()}")
            self._out("\tEnter 0 to create one.\n\tEnter -1 to quit.")

            choice = self._read_int("Selection: ")
            if choice == BACK:
                return None
            if choice == 0:
                self._create_bank()
                continue
            bank = self.directory.get_bank(choice)
            if bank is not None:
                return bank
            self._out("\nUnrecognized bank ID. Please retry selection.")

    def _bank_menu(self, bank: Bank) -> None:
        while True:
            self._out(
                f"\nVisit a branch (enter the branch code):\n\t{bank.long_label()}\n"
                "\tEnter 0 to create a branch.\n"
                "\tEnter 1 to remove this bank.\n"
                "\tEnter 2 to rename this bank.\n"
                "\tEnter -1 to reselect a bank."
            )
            choice = self._read_int("Selection: ")
            if choice == BACK:
                return
            if choice == 0:
                self._create_branch(bank)
            elif choice == 1:
                if self._remove(bank.short_label(), lambda: self.directory.remove_bank(bank.bank_id)):
                    return
            elif choice == 2:
                self._rename_bank(bank)
            else:
                branch = bank.get_branch(choice)
                if branch is None:
                    self._out("\nUnrecognized branch code. Please retry selection.")
                else:
                    self._branch_menu(bank, branch)

    def _branch_menu(self, bank: Bank, branch: Branch) -> None:
        while True:
            self._out(
                f"\nWelcome to the {branch.name} branch.\nBranch details:\n{branch.long_label()}\n"
                "Enter a customer ID to select a customer.\n"
                "Enter 0 to add a new customer.\n"
                "Enter 1 to remove this branch.\n"
                "Enter 2 to edit branch details.\n"
                "Enter -1 to reselect a branch."
            )
            choice = self._read_int("Selection: ")
            if choice == BACK:
                return
            if choice == 0:
                self._add_customer(branch)
            elif choice == 1:
                if self._remove(branch.short_label(), lambda: bank.remove_branch(branch.branch_code)):
                    return
            elif choice == 2:
                self._edit_branch(bank, branch)
            else:
                customer = branch.get_customer(choice)
                if customer is None:
                    self._out("\nUnrecognized customer ID. Please retry selection.")
                else:
                    self._customer_menu(branch, customer)

    def _customer_menu(self, branch: Branch, customer: Customer) -> None:
        while True:
            self._out(
                f"\nHello {customer.name}!\nYour details:\n{customer.long_label()}\n"
                "Enter an account number to manage funds.\n"
                "Enter 0 to open a new account.\n"
                "Enter 1 to remove this customer and ALL accounts.\n"
                "Enter 2 to edit customer details.\n"
                "Enter -1 to reselect a customer."
            )
            choice = self._read_int("Selection: ")
            if choice == BACK:
                return
            if choice == 0:
                account = customer.open_account()
                if account is None:
                    self._out("It seems you have the maximum number of accounts open.")
                else:
                    self._out(f"Congratulations! You have opened a new account.\n\t{account.long_label()}")
            elif choice == 1:
                if self._remove(customer.short_label(), lambda: branch.remove_customer(customer.customer_id)):
                    return
            elif choice == 2:
                self._edit_customer(customer)
            else:
                account = customer.get_account(choice)
                if account is None:
                    self._out("\nUnrecognized account number. Please retry selection.")
                else:
                    self._account_menu(branch, customer, account)

    def _account_menu(self, branch: Branch, customer: Customer, account: Account) -> None:
        while True:
            self._out(
                f"\nManaging {account.long_label()}\n"
                "Enter 0 to deposit money into the account.\n"
                "Enter 1 to withdraw money from the account.\n"
                f"Enter 2 to transfer money within {branch.short_label()}.\n"
                "Enter 3 to close the account.\n"
                "Enter -1 to reselect an account."
            )
            choice = self._read_int("Selection: ")
            if choice == BACK:
                return
            if choice == 0:
                self._deposit(account)
            elif choice == 1:
                self._withdraw(account)
            elif choice == 2:
                self._transfer(branch, account)
            elif choice == 3:
                if self._close_account(customer, account):
                    return
            else:
                self._out("\nUnrecognized option. Please retry selection.")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _create_bank(self) -> None:
        self._out('\nCreate a new bank. Enter "0" to cancel.')
        while True:
            name = self._read_name("Please enter the name of the bank: ")
            if name is None:
                self._out("Bank not created.")
                return
            if self.directory.create_bank(name):
                self._out("\nBank successfully created.")
                return
            self._out("A bank with that name already exists. Please enter a distinguishable name.")

    def _rename_bank(self, bank: Bank) -> None:
        while True:
            name = self._read_name("Please enter the new name of the bank: ")
            if name is None:
                self._out("Bank not renamed.")
                return
            if self.directory.rename_bank(bank.bank_id, name):
                self._out(f"Bank renamed to {bank.short_label()}.")
                return
            self._out("A bank with that name already exists. Please enter a distinguishable name.")

    def _create_branch(self, bank: Bank) -> None:
        self._out('\nCreate a new branch. Enter "0" to cancel.')
        while True:
            name = self._read_name("Please enter the name of the branch: ")
            if name is None:
                self._out("Branch not created.")
                return
            address = self._read_address("branch")
            if address is None:
                self._out("Branch not created.")
                return
            if bank.create_branch(name, address):
                self._out("\nBranch successfully created.")
                return
            self._out("A branch with that name already exists. Please enter a distinguishable name.")

    def _edit_branch(self, bank: Bank, branch: Branch) -> None:
        while True:
            name = self._read_name("Please enter the new name of the branch: ")
            if name is None:
                self._out("Branch not edited.")
                return
            address = self._read_address("branch")
            if address is None:
                self._out("Branch not edited.")
                return
            if bank.rename_branch(branch.branch_code, name):
                branch.set_address(address)
                self._out("Branch details changed.")
                return
            self._out("A branch with that name already exists. Please enter a distinguishable name.")

    def _add_customer(self, branch: Branch) -> None:
        self._out('\nAdd a new customer. Enter "0" to cancel.')
        name = self._read_name("Please enter the customer's full name: ")
        if name is None:
            self._out("Customer not added.")
            return
        address = self._read_address("customer")
        if address is None:
            self._out("Customer not added.")
            return
        if branch.add_customer(name, address):
            self._out(f"{name} added.")
        else:
            self._out(f"Could not add {name}.")

    def _edit_customer(self, customer: Customer) -> None:
        name = self._read_name("Please enter the customer's new full name: ")
        if name is None:
            self._out("Customer not edited.")
            return
        address = self._read_address("customer")
        if address is None:
            self._out("Customer not edited.")
            return
        customer.set_name(name)
        customer.set_address(address)
        self._out("Customer details changed.")

    def _remove(self, label: str, remove: Callable[[], bool]) -> bool:
        self._out(f"\nAre you sure you want to remove {label}? Once deleted, all its data will be lost.")
        if not self._confirm():
            return False
        if remove():
            self._out(f"{label} has been removed.")
            return True
        self._out(f"Could not remove {label}.")
        return False

    def _deposit(self, account: Account) -> None:
        self._out(f"Depositing into account {account.account_number}. Enter 0 to cancel.")
        amount = self._read_amount()
        if amount is None:
            self._out("Deposit cancelled.")
            return
        if account.deposit(amount):
            self._out(f"Deposited {format_currency(amount)} into {account.account_number}.")
        else:
            self._out("Deposit rejected.")

    def _withdraw(self, account: Account) -> None:
        self._out(
            f"Withdrawing from account {account.account_number}. Enter 0 to cancel.\n"
            f"Balance: {format_currency(account.balance)}"
        )
        while True:
            amount = self._read_amount()
            if amount is None:
                self._out("Withdrawal cancelled.")
                return
            if account.withdraw(amount):
                self._out(f"Withdrew {format_currency(amount)} from {account.account_number}.")
                return
            self._out(f"Insufficient funds.\nBalance: {format_currency(account.balance)}")

    def _transfer(self, branch: Branch, account: Account) -> None:
        self._out(
            f"Transferring funds from account {account.account_number}. Enter 0 to cancel.\n"
            f"Balance: {format_currency(account.balance)}\n{branch.long_label()}\n"
            "Enter the recipient's customer ID."
        )
        recipient = self._pick_recipient(branch)
        if recipient is None:
            self._out("Transfer cancelled.")
            return

        self._out(f"\n{recipient.long_label()}\nChoose an account from the recipient's list. Enter 0 to cancel.")
        target = self._pick_account(recipient)
        if target is None:
            self._out("Transfer cancelled.")
            return
        if target == account:
            self._out("Cannot transfer into the same account.")
            return

        self._out(f"Transferring to {recipient.short_label()} ({target.account_number}).")
        while True:
            amount = self._read_amount()
            if amount is None:
                self._out("Transfer cancelled.")
                return
            if account.transfer(target, amount):
                self._out(
                    f"Transferred {format_currency(amount)} from {account.account_number} "
                    f"to {recipient.short_label()} ({target.account_number})."
                )
                return
            self._out(f"Insufficient funds.\nBalance: {format_currency(account.balance)}")

    def _pick_recipient(self, branch: Branch) -> Customer | None:
        while True:
            choice = self._read_int("Selection: ")
            if choice == 0:
                return None
            recipient = branch.get_customer(choice)
            if recipient is None:
                self._out("\nUnrecognized customer ID. Please retry selection.")
            elif recipient.number_of_accounts == 0:
                self._out("This customer has no accounts open.")
            else:
                return recipient

    def _pick_account(self, customer: Customer) -> Account | None:
        while True:
            choice = self._read_int("Selection: ")
            if choice == 0:
                return None
            account = customer.get_account(choice)
            if account is not None:
                return account
            self._out("\nUnrecognized account number. Please retry selection.")

    def _close_account(self, customer: Customer, account: Account) -> bool:
        self._out("\nAre you sure you want to close this account? Withdraw all funds first.")
        if not self._confirm():
            return False
        if account.balance != 0:
            self._out(f"Please empty the account before closing it.\nBalance: {format_currency(account.balance)}")
            return False
        if customer.close_account(account):
            self._out(f"Account {account.account_number} has been closed.")
            return True
        self._out(f"Could not close account {account.account_number}.")
        return False

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------

    def _read_int(self, prompt: str) -> int:
        while True:
            raw = self._input(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self._out("\nInvalid input. Please enter integers only.")

    def _read_name(self, prompt: str) -> str | None:
        """Read a name; ``None`` when cancelled. Names may not contain digits."""
        while True:
            name = self._input(prompt).strip()
            if name == CANCEL:
                return None
            if name and not any(char.isdigit() for char in name):
                return name
            self._out("Name is invalid, please enter letters only.")

    def _read_address(self, owner: str) -> Address | None:
        self._out(f'Please enter the {owner} address (Street, City, State, Zip Code). Enter "0" to cancel.')
        raw = self._input("Address: ").strip()
        if raw == CANCEL:
            return None
        address = Address.from_delimited_string(raw)
        if not address.valid:
            self._out("The address could not be validated and is stored as invalid.")
        return address

    def _read_amount(self) -> Decimal | None:
        """Read a positive amount in whole cents; ``None`` when the user enters 0."""
        while True:
            raw = self._input("Amount: $").strip()
            try:
                amount = Decimal(raw)
            except InvalidOperation:
                amount = None
            if amount is not None and amount.is_finite() and amount >= 0 and is_whole_cents(amount):
                return amount if amount > 0 else None
            self._out("Invalid amount. Please enter a positive nominal.")

    def _confirm(self) -> bool:
        self._out('Type "YES" to proceed.')
        return self._input("Input: ").strip().lower() == "yes"
