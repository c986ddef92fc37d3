"""Text report exercising polynomial arithmetic over the fixed case set."""

from __future__ import annotations

import argparse
from typing import Dict, Iterable, List, Optional, Sequence, Type, Union

from polypair import gpt_polynomial, sonnet_polynomial
from polypair.cases import CaseInput, iter_cases
from polypair.streamfmt import format_double

__all__ = ["render_case", "render_report", "main"]

PolynomialClass = Union[
    Type[gpt_polynomial.Polynomial], Type[sonnet_polynomial.Polynomial]
]

_VARIANTS: Dict[str, PolynomialClass] = {
    "gpt": gpt_polynomial.Polynomial,
    "sonnet": sonnet_polynomial.Polynomial,
}

_EVAL_X = 2.5
_DEFAULT_OUTPUT = "output.txt"


def render_case(number: int, case: CaseInput, polynomial_class: PolynomialClass) -> str:
    """Return the report block for one case, numbered ``number``."""
    p1 = polynomial_class(case.coeffs1)
    p2 = polynomial_class(case.coeffs2)
    x_text = format_double(_EVAL_X)

    lines: List[str] = [
        f"Test Case {number}",
        f"p1: {p1}",
        f"p2: {p2}",
        f"p1 + p2: {p1 + p2}",
        f"p1 - p2: {p1 - p2}",
        f"p1 * p2: {p1 * p2}",
        "",
        f"p1 evaluated at x = {x_text}: {format_double(p1.evaluate(_EVAL_X))}",
        f"p2 evaluated at x = {x_text}: {format_double(p2.evaluate(_EVAL_X))}",
        "",
        f"Derivative of p1: {p1.derivative()}",
        f"Derivative of p2: {p2.derivative()}",
        "",
        f"Integral of p1: {p1.integral()}",
        f"Integral of p2: {p2.integral()}",
        "",
        "Definite integral of p1 from 0 to 1: "
        f"{format_double(p1.definite_integral(0, 1))}",
        "Definite integral of p2 from 0 to 1: "
        f"{format_double(p2.definite_integral(0, 1))}",
        "",
    ]
    return "\n".join(lines) + "\n"


def render_report(cases: Iterable[CaseInput], polynomial_class: PolynomialClass) -> str:
    """Return the report for every case, numbered from 1."""
    return "".join(
        render_case(number, case, polynomial_class)
        for number, case in enumerate(cases, start=1)
    )


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="polypair",
        description="Write the polynomial arithmetic report for the fixed cases.",
    )
    parser.add_argument(
        "--variant",
        choices=sorted(_VARIANTS),
        default="sonnet",
        help="polynomial implementation to use (default: sonnet)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=_DEFAULT_OUTPUT,
        help=f"file to write the report to (default: {_DEFAULT_OUTPUT})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the report to the output file and return the exit status."""
    args = _parse_args(argv)
    report = render_report(iter_cases(), _VARIANTS[args.variant])
    with open(args.output, "w", encoding="utf-8") as out:
        out.write(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())