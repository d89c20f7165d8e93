"""Persistence of the bank directory."""

from bank_manager.storage.json_file import JsonFileStorage

__all__ = ["JsonFileStorage"]
