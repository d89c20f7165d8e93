"""Tests for the interactive console menu."""

from dataclasses import dataclass, field
from decimal import Decimal

import pytest

from bank_manager.console import ConsoleMenu
from bank_manager.models.banking import MAX_ACCOUNTS, Account, Bank, Branch, Customer
from bank_manager.models.base import Address
from bank_manager.store.directory import BankDirectory

QUIT_FROM_ACCOUNT = ["-1"] * 5
QUIT_FROM_CUSTOMER = ["-1"] * 4
QUIT_FROM_BRANCH = ["-1"] * 3
QUIT_FROM_BANK = ["-1"] * 2


@dataclass
class Session:
    """Scripted terminal: replays inputs, records printed lines."""

    inputs: list[str]
    lines: list[str] = field(default_factory=list)

    def read(self, prompt: str) -> str:
        if not self.inputs:
            raise EOFError
        return self.inputs.pop(0)

    def write(self, text: str) -> None:
        self.lines.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


def run_menu(directory: BankDirectory, inputs: list) -> Session:
    session = Session([str(value) for value in inputs])
    ConsoleMenu(directory, input_fn=session.read, output_fn=session.write).run()
    return session


@dataclass
class World:
    directory: BankDirectory
    bank: Bank
    branch: Branch
    alice: Customer
    account: Account


@pytest.fixture
def world(directory: BankDirectory, valid_address: Address) -> World:
    """Acme / Downtown / Alice with one account holding $100."""
    directory.create_bank("Acme")
    bank = directory.find_bank("Acme")
    bank.create_branch("Downtown", valid_address)
    branch = bank.find_branch("Downtown")
    branch.add_customer("Alice", valid_address)
    alice = next(iter(branch))
    account = alice.open_account()
    account.deposit(100)
    return World(directory, bank, branch, alice, account)


def account_path(world: World) -> list:
    return [world.bank.bank_id, world.branch.branch_code, world.alice.customer_id, world.account.account_number]


class TestSession:
    """Tests for session flow and prompt handling."""

    def test_intro_and_quit(self, directory: BankDirectory) -> None:
        """Test the welcome text and quitting from the bank list."""
        session = run_menu(directory, ["-1"])

        assert "Welcome to Bank Manager" in session.output
        assert "- No banks created -" in session.output
        assert not session.inputs

    def test_end_of_input_ends_session(self, directory: BankDirectory) -> None:
        """Test that running out of input ends the session."""
        run_menu(directory, [])

    def test_non_integer_selection(self, directory: BankDirectory) -> None:
        """Test that a non-integer selection re-prompts."""
        session = run_menu(directory, ["abc", "-1"])

        assert "Invalid input. Please enter integers only." in session.output

    def test_unknown_bank(self, directory: BankDirectory) -> None:
        """Test selecting a bank ID that does not exist."""
        session = run_menu(directory, ["1234", "-1"])

        assert "Unrecognized bank ID" in session.output


class TestBankLevel:
    """Tests for creating, renaming and removing banks."""

    def test_create_bank(self, directory: BankDirectory) -> None:
        """Test creating a bank from the bank list."""
        session = run_menu(directory, ["0", "Acme", "-1"])

        assert "Bank successfully created." in session.output
        assert directory.find_bank("Acme") is not None

    def test_name_with_digits_rejected(self, directory: BankDirectory) -> None:
        """Test that a name containing digits re-prompts."""
        session = run_menu(directory, ["0", "Acme 2", "Acme", "-1"])

        assert "Name is invalid, please enter letters only." in session.output
        assert directory.find_bank("Acme") is not None
        assert directory.size() == 1

    def test_duplicate_bank_name(self, world: World) -> None:
        """Test that a duplicate bank name is reported."""
        session = run_menu(world.directory, ["0", "ACME", "0", "-1"])

        assert "A bank with that name already exists" in session.output
        assert "Bank not created." in session.output
        assert world.directory.size() == 1

    def test_bank_listing(self, world: World) -> None:
        """Test that existing banks are listed by short label."""
        session = run_menu(world.directory, ["-1"])

        assert f"[{world.bank.bank_id}] Acme" in session.output

    def test_rename_bank(self, world: World) -> None:
        """Test renaming the selected bank."""
        session = run_menu(world.directory, [world.bank.bank_id, "2", "Acme Savings"] + QUIT_FROM_BANK)

        assert world.bank.name == "Acme Savings"
        assert "Bank renamed to" in session.output

    def test_remove_bank(self, world: World) -> None:
        """Test removing a bank after typing YES."""
        session = run_menu(world.directory, [world.bank.bank_id, "1", "YES", "-1"])

        assert world.directory.size() == 0
        assert f"[{world.bank.bank_id}] Acme has been removed." in session.output

    def test_remove_bank_declined(self, world: World) -> None:
        """Test that anything but YES keeps the bank."""
        run_menu(world.directory, [world.bank.bank_id, "1", "no"] + QUIT_FROM_BANK)

        assert world.directory.size() == 1


class TestBranchLevel:
    """Tests for branch creation, editing and removal."""

    def test_create_branch(self, world: World, address_line: str) -> None:
        """Test creating a branch with a valid address."""
        session = run_menu(world.directory, [world.bank.bank_id, "0", "Harbor", address_line] + QUIT_FROM_BANK)

        branch = world.bank.find_branch("Harbor")
        assert branch is not None
        assert branch.address.valid
        assert "Branch successfully created." in session.output

    def test_create_branch_invalid_address(self, world: World) -> None:
        """Test that an unparseable address is stored as invalid."""
        session = run_menu(world.directory, [world.bank.bank_id, "0", "Harbor", "nowhere"] + QUIT_FROM_BANK)

        assert not world.bank.find_branch("Harbor").address.valid
        assert "stored as invalid" in session.output

    def test_duplicate_branch_name(self, world: World, address_line: str) -> None:
        """Test that a duplicate branch name is reported."""
        session = run_menu(
            world.directory,
            [world.bank.bank_id, "0", "downtown", address_line, "0"] + QUIT_FROM_BANK,
        )

        assert "A branch with that name already exists" in session.output
        assert world.bank.number_of_branches == 1

    def test_unknown_branch(self, world: World) -> None:
        """Test selecting a branch code that does not exist."""
        session = run_menu(world.directory, [world.bank.bank_id, "5"] + QUIT_FROM_BANK)

        assert "Unrecognized branch code" in session.output

    def test_edit_branch(self, world: World) -> None:
        """Test changing the branch name and address."""
        new_address = "1 Main St, Austin, TX, 73301"
        session = run_menu(
            world.directory,
            [world.bank.bank_id, world.branch.branch_code, "2", "Central", new_address] + QUIT_FROM_BRANCH,
        )

        assert world.branch.name == "Central"
        assert world.branch.address.city == "Austin"
        assert "Branch details changed." in session.output

    def test_remove_branch(self, world: World) -> None:
        """Test removing a branch after confirmation."""
        session = run_menu(
            world.directory,
            [world.bank.bank_id, world.branch.branch_code, "1", "yes"] + QUIT_FROM_BANK,
        )

        assert world.bank.number_of_branches == 0
        assert "has been removed." in session.output


class TestCustomerLevel:
    """Tests for customer management and account opening."""

    def test_add_customer(self, world: World, address_line: str) -> None:
        """Test adding a customer to the branch."""
        session = run_menu(
            world.directory,
            [world.bank.bank_id, world.branch.branch_code, "0", "Bob Smith", address_line] + QUIT_FROM_BRANCH,
        )

        assert world.branch.number_of_customers == 2
        assert "Bob Smith added." in session.output

    def test_add_customer_cancelled(self, world: World) -> None:
        """Test cancelling at the name prompt."""
        session = run_menu(world.directory, [world.bank.bank_id, world.branch.branch_code, "0", "0"] + QUIT_FROM_BRANCH)

        assert world.branch.number_of_customers == 1
        assert "Customer not added." in session.output

    def test_open_account(self, world: World) -> None:
        """Test opening an account from the customer menu."""
        path = [world.bank.bank_id, world.branch.branch_code, world.alice.customer_id]
        session = run_menu(world.directory, path + ["0"] + QUIT_FROM_CUSTOMER)

        assert world.alice.number_of_accounts == 2
        assert "You have opened a new account." in session.output

    def test_open_account_at_capacity(self, world: World) -> None:
        """Test the message shown when no more accounts may be opened."""
        while world.alice.number_of_accounts < MAX_ACCOUNTS:
            world.alice.open_account()
        path = [world.bank.bank_id, world.branch.branch_code, world.alice.customer_id]

        session = run_menu(world.directory, path + ["0"] + QUIT_FROM_CUSTOMER)

        assert "It seems you have the maximum number of accounts open." in session.output
        assert world.alice.number_of_accounts == MAX_ACCOUNTS

    def test_edit_customer(self, world: World) -> None:
        """Test changing the customer name and address."""
        path = [world.bank.bank_id, world.branch.branch_code, world.alice.customer_id]
        session = run_menu(world.directory, path + ["2", "Alice Jones", "bad"] + QUIT_FROM_CUSTOMER)

        assert world.alice.name == "Alice Jones"
        assert not world.alice.address.valid
        assert "Customer details changed." in session.output

    def test_remove_customer(self, world: World) -> None:
        """Test removing a customer after confirmation."""
        path = [world.bank.bank_id, world.branch.branch_code, world.alice.customer_id]
        run_menu(world.directory, path + ["1", "YES"] + QUIT_FROM_BRANCH)

        assert world.branch.get_customer(world.alice.customer_id) is None


class TestAccountLevel:
    """Tests for deposits, withdrawals, transfers and closing."""

    def test_deposit(self, world: World) -> None:
        """Test depositing into the selected account."""
        session = run_menu(world.directory, account_path(world) + ["0", "25.50"] + QUIT_FROM_ACCOUNT)

        assert world.account.balance == Decimal("125.50")
        assert f"Deposited $25.50 into {world.account.account_number}." in session.output

    def test_invalid_amounts(self, world: World) -> None:
        """Test that negative and non-numeric amounts re-prompt."""
        session = run_menu(world.directory, account_path(world) + ["0", "-5", "lots", "0"] + QUIT_FROM_ACCOUNT)

        assert session.output.count("Invalid amount. Please enter a positive nominal.") == 2
        assert "Deposit cancelled." in session.output
        assert world.account.balance == Decimal("100")

    def test_sub_cent_amount_reprompts(self, world: World) -> None:
        """Test that an amount finer than a cent is refused at the prompt."""
        session = run_menu(world.directory, account_path(world) + ["0", "0.001", "0"] + QUIT_FROM_ACCOUNT)

        assert "Invalid amount. Please enter a positive nominal." in session.output
        assert "Deposit cancelled." in session.output
        assert world.account.balance == Decimal("100")

    def test_withdraw_retries_on_insufficient_funds(self, world: World) -> None:
        """Test that an overdraft re-prompts for a smaller amount."""
        session = run_menu(world.directory, account_path(world) + ["1", "150", "40"] + QUIT_FROM_ACCOUNT)

        assert "Insufficient funds.\nBalance: $100.00" in session.output
        assert world.account.balance == Decimal("60")

    def test_transfer(self, world: World, valid_address: Address) -> None:
        """Test transferring to another customer's account."""
        world.branch.add_customer("Bob", valid_address)
        bob = list(world.branch.customers.values())[-1]
        target = bob.open_account()

        session = run_menu(
            world.directory,
            account_path(world) + ["2", bob.customer_id, target.account_number, "30"] + QUIT_FROM_ACCOUNT,
        )

        assert world.account.balance == Decimal("70")
        assert target.balance == Decimal("30")
        assert "Transferred $30.00" in session.output

    def test_transfer_into_same_account(self, world: World) -> None:
        """Test that a transfer into the same account is refused."""
        session = run_menu(
            world.directory,
            account_path(world) + ["2", world.alice.customer_id, world.account.account_number] + QUIT_FROM_ACCOUNT,
        )

        assert "Cannot transfer into the same account." in session.output
        assert world.account.balance == Decimal("100")

    def test_transfer_cancelled(self, world: World) -> None:
        """Test cancelling a transfer at the recipient prompt."""
        session = run_menu(world.directory, account_path(world) + ["2", "0"] + QUIT_FROM_ACCOUNT)

        assert "Transfer cancelled." in session.output

    def test_close_requires_empty_balance(self, world: World) -> None:
        """Test that a funded account cannot be closed."""
        session = run_menu(world.directory, account_path(world) + ["3", "YES"] + QUIT_FROM_ACCOUNT)

        assert "Please empty the account before closing it." in session.output
        assert world.alice.number_of_accounts == 1

    def test_close_after_withdrawing(self, world: World) -> None:
        """Test closing an account once it has been emptied."""
        session = run_menu(
            world.directory,
            account_path(world) + ["1", "100", "3", "YES"] + QUIT_FROM_CUSTOMER,
        )

        assert f"Account {world.account.account_number} has been closed." in session.output
        assert world.alice.number_of_accounts == 0
