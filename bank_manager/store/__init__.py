"""In-memory root of the bank entity graph."""

from bank_manager.store.directory import BankDirectory

__all__ = ["BankDirectory"]
