"""Pytest configuration and fixtures."""

from typing import Callable, Iterable

import pytest

from bank_manager.generators.identifier import IdentifierGenerator
from bank_manager.models.base import Address
from bank_manager.store.directory import BankDirectory


class ScriptedRandom:
    """Stand-in randomness source whose ``randint`` replays a fixed sequence."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = iter(values)

    def randint(self, a: int, b: int) -> int:
        return next(self._values)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def id_generator(seed: int) -> IdentifierGenerator:
    """Seeded identifier generator."""
    return IdentifierGenerator(seed=seed)


@pytest.fixture
def scripted_generator() -> Callable[[Iterable[int]], IdentifierGenerator]:
    """Build an identifier generator that yields the given values in order."""

    def build(values: Iterable[int]) -> IdentifierGenerator:
        return IdentifierGenerator(rng=ScriptedRandom(values))

    return build


@pytest.fixture
def address_line() -> str:
    """Valid delimited address."""
    return "742 Evergreen Terrace, Springfield, IL, 62704"


@pytest.fixture
def valid_address(address_line: str) -> Address:
    """Valid parsed address."""
    return Address.from_delimited_string(address_line)


@pytest.fixture
def directory(id_generator: IdentifierGenerator) -> BankDirectory:
    """Empty, seeded directory."""
    return BankDirectory(id_generator=id_generator)
