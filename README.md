# polypair

`polypair` provides two polynomial classes. They do the same job in slightly
different ways. The package also has a report generator that runs either class
over a fixed set of one hundred pairs of polynomials.

Both classes store coefficients in ascending order, lowest power first, as
floats. Both support the following:

- `+`, `-`, `*` and `==`;
- `degree()`, `evaluate(x)` and `compose(q)`;
- `derivative()`, `integral()` and `definite_integral(x1, x2)`;
- `coefficient(degree)`, which returns `0.0` when the degree is out of range;
- `to_string()` and `str()`;
- Newton-method root finding: `get_root(guess, tolerance, max_iter)`,
  `deflate(root)` and `get_roots(tolerance=1e-6, max_iter=1000)`.

The two classes differ as follows.

## `polypair.gpt_polynomial.Polynomial`

- Keeps the coefficient list exactly as given, trailing zeros included.
  `degree()` is always `len(coefficients) - 1`.
- With no arguments it is `[0.0]`.
- `str()` writes terms from the highest power, for example
  `-9x^10 -4x^9 -14x^8 ...`. Only positive terms after the first get a `+`.
- `to_string()` truncates each coefficient to an integer, for example
  `3*x^2 - 2*x + 1`.
- `get_roots` starts every Newton search at 0. It deflates after each root it
  finds, and it stops at the first search that does not land on a root.
- `*` raises `ValueError` if either side has no coefficients. `deflate` raises
  `ValueError` below degree one.

## `polypair.sonnet_polynomial.Polynomial`

- Removes trailing zero coefficients. The zero polynomial has no coefficients
  and degree `-1`.
- `str()` and `to_string()` are the same. They join terms with ` + `, for
  example `3x^2 + -2x + 1`.
- `get_roots` starts a search from each integer from -10 to 10 and recurses on
  each deflation. A start that converges to itself is not reported. The same
  root may be reported more than once.
- `deflate` raises `ValueError` for a non-zero constant.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Example

```python
from polypair.gpt_polynomial import Polynomial

p = Polynomial([-7, -5, -13, 1, 5, 12, 2, -3, -14, -4, -9])
q = Polynomial([-10, -1, 7, -3, -12, -4, 12, 12, -8, 9])

print(p + q)
print(p.degree())               # 10
print(p.evaluate(2))            # -14701.0
print(p.coefficient(3))         # 1.0
print(p.derivative())
print(p.definite_integral(0, 1))
print(p.compose(q).degree())
```

The same calls work on `polypair.sonnet_polynomial.Polynomial`.

`polypair.streamfmt.format_double` formats numbers with the `g` format, as
both classes do in `str()`. It uses six significant digits, for example `2.5`,
`-14701` or `1.23457e+06`.

## The cases and the report

`polypair.cases.iter_cases()` yields the hundred built-in `CaseInput` values in
a fixed order. Each value holds `degree1`, `coeffs1`, `degree2` and `coeffs2`.
The coefficients are tuples of floats.

`polypair.report.render_case(number, case, polynomial_class)` returns the text
for one case. `polypair.report.render_report(cases, polynomial_class)` returns
the text for all cases, numbered from 1. For each case the text lists:

- both polynomials;
- their sum, difference and product;
- their values at `x = 2.5`;
- their derivatives;
- their integrals;
- their definite integrals from 0 to 1.

Roots are not included in the report.

To write the report from the command line:

```
polypair
polypair --variant gpt -o gpt-report.txt
```

Options:

- `--variant {gpt,sonnet}` chooses the polynomial class. The default is
  `sonnet`.
- `-o` / `--output` sets the file to write. The default is `output.txt`.

The command only writes this fixed report. It reads no polynomials from input.

## Running the tests

```
pytest
```