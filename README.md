# polycalc

polycalc reads polynomials in several variables, written as plain text,
and combines them. It sorts terms, adds up like terms, multiplies grouped
expressions and takes derivatives using the power rule. Coefficients and
exponents are integers.

## Installing

```
pip install .
```

Install the test extra to run the tests:

```
pip install ".[test]"
pytest
```

## The command

```
polycalc
```

With no arguments the command asks for two polynomials. Enter each one on
its own line, ended with a semicolon. It adds the two, simplifies the sum
and prints the result:

```
Enter two polynomials ended with a semicolon:
3x2 + 2xy - 5;
x2 - y;
Result: 4x2 +2xy -1y -5
```

The polynomials may also be given as arguments (at most two); any that are
missing are read from standard input:

```
polycalc "3x2 + 2xy - 5;" "x2 - y;"
```

If an input cannot be read, the command prints `error: ...` to standard
error and exits with status 1.

## Notation

- A term is an optional signed integer coefficient followed by variables,
  each a single letter with an optional integer exponent: `3x2y`, `-z`, `7`.
  Letters are read case-insensitively.
- Terms are separated by `+` or `-`.
- `*` multiplies what comes before it by the next term or parenthesised group.
- A trailing `'` differentiates: on a term (`x3'`), on a group (`(x2 + y)'`),
  or, written on its own, on what comes before it.
- `;` ends the input.

In printed output the first term carries only its own sign, later positive
terms are prefixed with `+`, and terms whose coefficient is zero are left out.

## Using it from Python

```python
from polycalc.polynomial import Polynomial

p = Polynomial.parse("(x + 1) * (x - 1);")
print(p)                 # 1x2 -1

d = Polynomial.parse("x3y2;").differentiate()
print(d.terms_text())    # 3x2y2
                         # 2x3y
```

The modules:

- `polycalc.polynomial` — `Polynomial`, an ordered list of terms, with
  `parse`, `parse_group`, `constant`, `append`, `extend`, `sort`,
  `combine_terms`, `simplify`, `split_from`, `differentiate`, `multiply`,
  `multiply_term` and `terms_text`; and `ParseError`.
- `polycalc.term` — `Term`, an integer coefficient times a sorted list of
  variables, with `parse`, `multiply`, `divide`, `scale`, `differentiate`,
  `same_variables` and `precedes`; and `TermError`.
- `polycalc.variable` — `Variable`, a letter raised to an integer power.
- `polycalc.scanner` — `Scanner`, the character reader used by the parsers.
- `polycalc.cli` — `main`, the command.

`Polynomial.parse` raises `ParseError` for unbalanced parentheses, for `*`
or `'` with nothing before it, and for characters it cannot read; it passes
on the `TermError` that `Term.parse` raises when a variable is not a letter.

## What it does not do

The command only adds two polynomials. There is no division of
polynomials (only `Term.divide`, for single terms), no evaluation at
values, and no fractional coefficients.