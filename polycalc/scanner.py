"""Character scanner over polynomial input text."""

from __future__ import annotations


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


class Scanner:
    """Reads a string one character at a time, with one character of lookahead."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        """Return the next character without consuming it, or '' at the end."""
        return self.text[self.pos:self.pos + 1]

    def get(self) -> str:
        """Consume and return the next character, or '' at the end."""
        ch = self.peek()
        self.pos += len(ch)
        return ch

    def at_end(self) -> bool:
        """True when every character has been consumed."""
        return self.pos >= len(self.text)

    def skip_spaces(self) -> None:
        """Consume any run of space characters."""
        while self.peek() == " ":
            self.pos += 1

    def read_int(self) -> int:
        """Read a signed integer.

        A missing number counts as 1 and a lone minus sign as -1, so that
        coefficients and exponents may be left implicit.
        """
        self.skip_spaces()
        if self.peek() == "+":
            self.get()
        if not _is_digit(self.peek()) and self.peek() != "-":
            return 1
        sign = ""
        if self.peek() == "-":
            sign = self.get()
        self.skip_spaces()
        digits = []
        while _is_digit(self.peek()):
            digits.append(self.get())
        self.skip_spaces()
        if not digits:
            return -1 if sign else 1
        return int(sign + "".join(digits))