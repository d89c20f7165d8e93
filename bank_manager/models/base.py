"""Base models shared across the entity hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

INVALID_ADDRESS = "Invalid Address"


@dataclass(frozen=True)
class Address:
    """US-style postal address with a validity flag.

    Invalid input never raises: the address is flagged ``valid=False`` and
    all four fields are blanked.

    Validation rules:
    - exactly four parts when parsed from a delimited string
    - city and state contain no digit
    - zip code is exactly 5 characters (any characters)
    """

    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    valid: bool = False

    @classmethod
    def from_delimited_string(cls, text: str | None) -> Address:
        """Parse ``"street, city, state, zip"``."""
        if text is None:
            return cls.invalid()
        parts = [part.strip() for part in text.split(",")]
        if len(parts) != 4:
            return cls.invalid()
        return cls.from_fields(*parts)

    @classmethod
    def from_fields(
        cls,
        street: str | None,
        city: str | None,
        state: str | None,
        zip_code: str | None,
    ) -> Address:
        """Build an address from its four discrete fields."""
        if street is None or not _is_valid_name(city) or not _is_valid_name(state):
            return cls.invalid()
        if zip_code is None or len(zip_code.strip()) != 5:
            return cls.invalid()
        return cls(
            street=street.strip(),
            city=city.strip(),
            state=state.strip(),
            zip_code=zip_code.strip(),
            valid=True,
        )

    @classmethod
    def invalid(cls) -> Address:
        """Return the blank, invalid address."""
        return cls()

    @classmethod
    def coerce(cls, value: Address | str | None) -> Address:
        """Accept an ``Address`` as is or parse a delimited string."""
        if isinstance(value, Address):
            return value
        return cls.from_delimited_string(value)

    def __str__(self) -> str:
        if not self.valid:
            return INVALID_ADDRESS
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}"


def _is_valid_name(value: str | None) -> bool:
    """City and state names must not contain digits."""
    if value is None:
        return False
    return not any(char.isdigit() for char in value)


def format_currency(amount: Decimal) -> str:
    """Render an amount as ``$1,234.50``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def is_whole_cents(amount: Decimal) -> bool:
    """Return whether ``amount`` has no digits below the cent."""
    return amount.normalize().as_tuple().exponent >= -2
