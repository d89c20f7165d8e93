"""Entity hierarchy: banks own branches own customers own accounts."""

from bank_manager.models.banking.account import Account
from bank_manager.models.banking.bank import Bank
from bank_manager.models.banking.branch import Branch
from bank_manager.models.banking.customer import MAX_ACCOUNTS, Customer

__all__ = [
    "Account",
    "Bank",
    "Branch",
    "Customer",
    "MAX_ACCOUNTS",
]
