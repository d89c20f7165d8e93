"""Random fixed-width identifiers with collision retry."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Collection

from bank_manager.exceptions import IdentifierExhaustedError


@dataclass(frozen=True)
class IdRange:
    """Inclusive range of fixed-width decimal identifiers.

    Parameters
    ----------
    lower : int
        Smallest identifier (the range floor, e.g. ``1000`` for 4 digits).
    upper : int
        Largest identifier.
    """

    lower: int
    upper: int

    @property
    def digits(self) -> int:
        """Number of decimal digits of every identifier in the range."""
        return len(str(self.upper))

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.lower <= value <= self.upper

    def __len__(self) -> int:
        return self.upper - self.lower + 1


BANK_ID_RANGE = IdRange(1000, 9999)
BRANCH_CODE_RANGE = IdRange(100, 999)
CUSTOMER_ID_RANGE = IdRange(10000, 99999)
ACCOUNT_NUMBER_RANGE = IdRange(100000000, 999999999)


class IdentifierGenerator:
    """Source of random identifiers.

    Holds no identifier state of its own; uniqueness is always checked
    against the sibling set the caller passes in.

    Parameters
    ----------
    seed : int | None
        Seed for reproducible identifiers.
    rng : random.Random | None
        Randomness source. Takes precedence over ``seed``.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random(seed)

    def generate(self, lower: int, upper: int) -> int:
        """Return a uniformly distributed integer in ``[lower, upper]``."""
        return self._rng.randint(lower, upper)

    def unique(self, existing: Collection[int], id_range: IdRange) -> int:
        """Generate an identifier in ``id_range`` that is not in ``existing``.

        Parameters
        ----------
        existing : Collection[int]
            Identifiers already used by the siblings.
        id_range : IdRange
            Range the identifier must fall into.

        Returns
        -------
        int
            A free identifier.

        Raises
        ------
        IdentifierExhaustedError
            If every identifier of the range is taken.
        """
        taken = sum(1 for value in existing if value in id_range)
        if taken >= len(id_range):
            raise IdentifierExhaustedError(
                f"All {len(id_range)} identifiers in {id_range.lower}-{id_range.upper} are taken"
            )

        while True:
            candidate = self.generate(id_range.lower, id_range.upper)
            if candidate not in existing:
                return candidate
