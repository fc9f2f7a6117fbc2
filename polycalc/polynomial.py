"""Polynomials as ordered sums of terms, with parsing and calculus."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from polycalc.scanner import Scanner
from polycalc.term import Term

_TOKEN_STOPS = "+(';\n "


class ParseError(ValueError):
    """Raised when polynomial text cannot be read."""


class Polynomial:
    """An ordered sum of terms."""

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        self.terms = list(terms)

    @classmethod
    def constant(cls, coefficient: int) -> Polynomial:
        """Return a polynomial holding a single constant term."""
        return cls([Term(coefficient)])

    @classmethod
    def parse(cls, text: str) -> Polynomial:
        """Read a polynomial, stopping at ';', and simplify it."""
        poly = cls()
        poly._analyze(text)
        poly.simplify()
        return poly

    @classmethod
    def parse_group(cls, text: str) -> Polynomial:
        """Read a polynomial that may be wrapped in parentheses, and sort it."""
        poly = cls()
        if text.startswith("("):
            depth = 0
            for index, ch in enumerate(text[1:], start=1):
                if ch == "(":
                    depth += 1
                elif ch == ")":
                    if depth == 0:
                        inner = text[1:index]
                        break
                    depth -= 1
            else:
                raise ParseError("unbalanced parentheses")
            poly._analyze(inner)
        else:
            poly._analyze(text)
        poly.sort()
        return poly

    def _take_left(self, last: int | None) -> Polynomial:
        if last is None or not self.terms:
            raise ParseError("operator has no left operand")
        return self.split_from(last)

    @staticmethod
    def _read_group(scanner: Scanner) -> Polynomial:
        chars = [scanner.get()]
        depth = 1
        while depth:
            ch = scanner.peek()
            if ch in ("", ";"):
                raise ParseError("unbalanced parentheses")
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
            chars.append(scanner.get())
        return Polynomial.parse_group("".join(chars))

    def _analyze(self, text: str) -> None:
        scanner = Scanner(text)
        if scanner.peek() == "\n":
            scanner.get()
        last: int | None = None
        char_info = ""
        while not scanner.at_end():
            if scanner.peek() == ";":
                return
            start = scanner.pos
            scanner.skip_spaces()
            if scanner.at_end():
                break
            ch = scanner.peek()
            op = "add"
            sign = ""
            left: Polynomial | None = None
            if ch == "+":
                scanner.get()
            elif ch == "-":
                sign = scanner.get()
            elif ch in ("*", "'"):
                scanner.get()
                left = self._take_left(last)
                op = "mult" if ch == "*" else "diff"
            elif ch == ";":
                return
            scanner.skip_spaces()

            if op == "diff":
                last = len(self.terms)
                self.extend(left.differentiate())
                continue

            if scanner.peek() == "(":
                operand = self._read_group(scanner)
                while scanner.peek() == "'":
                    scanner.get()
                    operand = operand.differentiate()
                if sign:
                    operand = operand.multiply_term(Term(-1))
                scanner.skip_spaces()
            else:
                chars = [sign] if sign else []
                while (ch := scanner.peek()) and ch not in _TOKEN_STOPS:
                    if ch == "-" and not char_info.isalpha():
                        break
                    char_info = scanner.get()
                    chars.append(char_info)
                    if scanner.peek() == "'":
                        chars.append(scanner.get())
                        break
                    if scanner.peek() == " " and char_info != "-":
                        break
                token = "".join(chars)
                if not token.strip():
                    if scanner.pos == start:
                        raise ParseError(f"unexpected character {scanner.peek()!r}")
                    continue
                operand = Polynomial(Term.parse(token))

            last = len(self.terms)
            if op == "mult":
                self.extend(left.multiply(operand))
            else:
                self.extend(operand)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.terms == other.terms

    __hash__ = None  # type: ignore[assignment]

    def append(self, term: Term) -> None:
        """Add a term at the end."""
        self.terms.append(term)

    def extend(self, other: Iterable[Term]) -> None:
        """Add every term of another polynomial at the end."""
        self.terms.extend(other)

    def sort(self) -> None:
        """Order the terms by their variables, keeping equal terms in place."""
        ordered: list[Term] = []
        for term in self.terms:
            pos = len(ordered)
            while pos > 0 and term.precedes(ordered[pos - 1]):
                pos -= 1
            ordered.insert(pos, term)
        self.terms = ordered

    def combine_terms(self) -> None:
        """Add together neighbouring terms that share their variables."""
        merged: list[Term] = []
        for term in self.terms:
            if merged and merged[-1].same_variables(term):
                previous = merged[-1]
                merged[-1] = Term(previous.coefficient + term.coefficient, term.variables)
            else:
                merged.append(term)
        self.terms = merged

    def simplify(self) -> None:
        """Sort the terms and combine like terms."""
        if len(self.terms) <= 1:
            return
        self.sort()
        self.combine_terms()

    def split_from(self, index: int) -> Polynomial:
        """Remove the terms from index onward and return them, sorted."""
        tail = Polynomial(self.terms[index:])
        del self.terms[index:]
        tail.sort()
        return tail

    def differentiate(self) -> Polynomial:
        """Return the derivative, term by term."""
        return Polynomial(d for term in self.terms for d in term.differentiate())

    def multiply(self, other: Polynomial) -> Polynomial:
        """Return the product of every term of this with every term of other."""
        return Polynomial(lhs.multiply(rhs) for lhs in self.terms for rhs in other.terms)

    def multiply_term(self, term: Term) -> Polynomial:
        """Return the polynomial with each term multiplied by one term."""
        if not self.terms:
            raise ValueError("cannot multiply an empty polynomial")
        return Polynomial(lhs.multiply(term) for lhs in self.terms)

    def terms_text(self) -> str:
        """Return the terms one per line."""
        return "\n".join(str(term) for term in self.terms)

    def __repr__(self) -> str:
        return f"Polynomial({self.terms!r})"

    def __str__(self) -> str:
        pieces = []
        for term in self.terms:
            if term.coefficient == 0:
                continue
            prefix = "+" if pieces and term.coefficient > 0 else ""
            pieces.append(prefix + str(term))
        return " ".join(pieces)