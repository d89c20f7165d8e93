"""Domain models for the bank manager."""

from bank_manager.models.base import INVALID_ADDRESS, Address, format_currency, is_whole_cents

__all__ = ["Address", "INVALID_ADDRESS", "format_currency", "is_whole_cents"]
