"""Bank model for the banking hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from bank_manager.generators.identifier import BRANCH_CODE_RANGE, IdentifierGenerator
from bank_manager.models.banking.branch import Branch
from bank_manager.models.base import Address


@dataclass(eq=False)
class Bank:
    """Bank corporation owning its branches keyed by branch code.

    Branch names are unique within the bank, compared case-insensitively.
    """

    bank_id: int  # 4 digits
    name: str
    branches: dict[int, Branch] = field(default_factory=dict)
    id_generator: IdentifierGenerator = field(default_factory=IdentifierGenerator, repr=False)

    @property
    def number_of_branches(self) -> int:
        return len(self.branches)

    def find_branch(self, name: str) -> Branch | None:
        """Find a branch by name, ignoring case."""
        wanted = name.casefold()
        for branch in self.branches.values():
            if branch.name.casefold() == wanted:
                return branch
        return None

    def create_branch(self, name: str, address: Address | str) -> bool:
        """Open a branch unless the name is already used in this bank."""
        if self.find_branch(name) is not None:
            return False
        branch_code = self.id_generator.unique(self.branches.keys(), BRANCH_CODE_RANGE)
        self.branches[branch_code] = Branch(
            branch_code=branch_code,
            name=name,
            address=Address.coerce(address),
            id_generator=self.id_generator,
        )
        return True

    def remove_branch(self, branch_code: int) -> bool:
        return self.branches.pop(branch_code, None) is not None

    def get_branch(self, branch_code: int) -> Branch | None:
        return self.branches.get(branch_code)

    def rename_branch(self, branch_code: int, name: str) -> bool:
        """Rename a branch, refusing names held by another branch of this bank."""
        branch = self.branches.get(branch_code)
        if branch is None:
            return False
        holder = self.find_branch(name)
        if holder is not None and holder is not branch:
            return False
        branch.set_name(name)
        return True

    def set_name(self, name: str) -> None:
        self.name = name

    def short_label(self) -> str:
        """Return ``[bank id] name``."""
        return f"[{self.bank_id}] {self.name}"

    def long_label(self) -> str:
        """Return the bank header and its branch list."""
        lines = [f"{self.name} [{self.bank_id}]", "\tAvailable Branches:"]
        if not self.branches:
            lines.append("\t\t- No branches available -")
        else:
            lines.extend(f"\t\t{branch.short_label()}" for branch in self.branches.values())
        return "\n".join(lines)

    def __iter__(self) -> Iterator[Branch]:
        return iter(list(self.branches.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bank):
            return NotImplemented
        return self.bank_id == other.bank_id

    def __hash__(self) -> int:
        return hash(self.bank_id)
