"""Console front end."""

from bank_manager.console.menu import ConsoleMenu

__all__ = ["ConsoleMenu"]
