"""Address generation with Faker."""

from __future__ import annotations

from faker import Faker

from bank_manager.generators.base import BaseGenerator
from bank_manager.models.base import Address


class AddressFactory(BaseGenerator):
    """Generate addresses that pass ``Address`` validation.

    ``en_US`` produces valid addresses every time. Other locales go through
    a generic fallback whose postcodes may not be 5 characters long, in which
    case the resulting address is flagged invalid like any other bad input.
    """

    def generate(self) -> Address:
        """Generate a single address."""
        street, city, state, zip_code = _address_parts(self.fake)
        return Address.from_fields(street, city, state, zip_code)

    def generate_line(self) -> str:
        """Generate an address as a ``"street, city, state, zip"`` line."""
        return ", ".join(_address_parts(self.fake))


def _address_parts(fake: Faker) -> tuple[str, str, str, str]:
    # Commas would split the street when the line is parsed back
    street = fake.street_address().replace(",", "")
    city = strip_digits(fake.city())
    state = ""
    for method in ("state_abbr", "state", "province", "region"):
        if hasattr(fake, method):
            state = strip_digits(getattr(fake, method)())
            break
    zip_code = fake.zipcode() if hasattr(fake, "zipcode") else fake.postcode()
    return street, city, state, zip_code


def strip_digits(value: str) -> str:
    return "".join(char for char in value if not char.isdigit()).strip()
