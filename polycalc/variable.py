"""A single variable raised to an integer power."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Variable:
    """A named variable with an integer exponent.

    Variables order by name, and for the same name, higher exponents first.
    """

    name: str
    exponent: int = 1

    def differentiate(self) -> tuple[int, Variable]:
        """Apply the power rule: return the factor and the lowered variable."""
        return self.exponent, replace(self, exponent=self.exponent - 1)

    def inverted(self) -> Variable:
        """Return the variable with its exponent negated."""
        return replace(self, exponent=-self.exponent)

    def __str__(self) -> str:
        if self.exponent == 1:
            return self.name
        return f"{self.name}{self.exponent}"

    def __lt__(self, other: Variable) -> bool:
        if not isinstance(other, Variable):
            return NotImplemented
        if self == other:
            return False
        if self.name < other.name:
            return True
        return self.name == other.name and self.exponent > other.exponent

    def __gt__(self, other: Variable) -> bool:
        if not isinstance(other, Variable):
            return NotImplemented
        if self == other:
            return False
        if self.name > other.name:
            return True
        return self.name == other.name and self.exponent < other.exponent

    def __le__(self, other: Variable) -> bool:
        if not isinstance(other, Variable):
            return NotImplemented
        return self == other or self < other

    def __ge__(self, other: Variable) -> bool:
        if not isinstance(other, Variable):
            return NotImplemented
        return self == other or self > other