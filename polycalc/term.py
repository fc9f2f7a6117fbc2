"""A single term of a polynomial: an integer coefficient times variables."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby

from polycalc.scanner import Scanner
from polycalc.variable import Variable


class TermError(ValueError):
    """Raised when a term cannot be read."""


class Term:
    """An integer coefficient multiplied by a product of variables.

    The variables are kept sorted, with repeated names merged into one
    variable whose exponent is the sum.
    """

    __slots__ = ("coefficient", "variables")

    def __init__(self, coefficient: int, variables: Iterable[Variable] = ()) -> None:
        self.coefficient = coefficient
        self.variables = list(variables)
        self.simplify()

    @classmethod
    def parse(cls, text: str) -> list[Term]:
        """Read a term such as '-3x2y'.

        A trailing apostrophe asks for the derivative, which may consist of
        several terms; the result is therefore always a list of terms.
        """
        scanner = Scanner(text)
        coefficient = scanner.read_int()
        variables = []
        differentiate = False
        while not scanner.at_end():
            ch = scanner.get().lower()
            if not (ch.isascii() and ch.isalpha()):
                raise TermError(f"letter expected for variable, found {ch!r}")
            exponent = 1 if scanner.peek() == " " else scanner.read_int()
            variables.append(Variable(ch, exponent))
            if scanner.peek() == "'":
                differentiate = True
                break
        term = cls(coefficient, variables)
        return term.differentiate() if differentiate else [term]

    def simplify(self) -> None:
        """Sort the variables and merge those sharing a name."""
        self.variables.sort()
        self.variables = [
            Variable(name, sum(v.exponent for v in group))
            for name, group in groupby(self.variables, key=lambda v: v.name)
        ]

    def is_scalar(self) -> bool:
        """True when the term has no variables."""
        return not self.variables

    def same_variables(self, other: Term) -> bool:
        """True when both terms have identical variables and exponents."""
        return self.variables == other.variables

    def precedes(self, other: Term) -> bool:
        """True when this term sorts before the other within a polynomial."""
        for index, var in enumerate(self.variables):
            if index == len(other.variables):
                return True
            theirs = other.variables[index]
            if var < theirs:
                return True
            if var > theirs:
                return False
        return False

    def multiply(self, other: Term) -> Term:
        """Return the product of two terms."""
        return Term(self.coefficient * other.coefficient, [*self.variables, *other.variables])

    def divide(self, other: Term) -> Term:
        """Return the quotient of two terms; the coefficient truncates toward zero."""
        if other.coefficient == 0:
            raise ZeroDivisionError("division by a term with zero coefficient")
        quotient = abs(self.coefficient) // abs(other.coefficient)
        if (self.coefficient < 0) != (other.coefficient < 0):
            quotient = -quotient
        return Term(quotient, [*self.variables, *(v.inverted() for v in other.variables)])

    def scale(self, factor: int) -> Term:
        """Return the term with its coefficient multiplied by an integer."""
        return Term(self.coefficient * factor, self.variables)

    def differentiate(self) -> list[Term]:
        """Apply the power rule to each variable in turn, one term per variable.

        A term without variables differentiates to a single zero term.
        """
        if not self.variables:
            return [Term(0)]
        result = []
        for index, var in enumerate(self.variables):
            factor, lowered = var.differentiate()
            variables = list(self.variables)
            variables[index] = lowered
            result.append(Term(self.coefficient * factor, variables))
        return result

    def __mul__(self, other: Term | int) -> Term:
        if isinstance(other, Term):
            return self.multiply(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.coefficient == other.coefficient and self.variables == other.variables

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Term({self.coefficient!r}, {self.variables!r})"

    def __str__(self) -> str:
        if self.coefficient == 0:
            return ""
        return f"{self.coefficient}" + "".join(str(v) for v in self.variables)