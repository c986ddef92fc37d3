"""Dense polynomial that trims trailing zero coefficients."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

from polypair.streamfmt import format_double

__all__ = ["Polynomial"]


def _trimmed(coefficients: Iterable[float]) -> List[float]:
    coeffs = [float(c) for c in coefficients]
    while coeffs and coeffs[-1] == 0:
        coeffs.pop()
    return coeffs


def _divide(numerator: float, denominator: float) -> float:
    """Floating division that yields inf or nan instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Polynomial:
    """Polynomial stored as coefficients in ascending order of power.

    Trailing zero coefficients are removed, so the zero polynomial has no
    coefficients and degree -1.
    """

    def __init__(self, coefficients: Optional[Iterable[float]] = None) -> None:
        self._coeffs: List[float] = _trimmed(coefficients or ())

    def __repr__(self) -> str:
        return f"Polynomial({self._coeffs!r})"

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(_combine(self._coeffs, other._coeffs, 1.0))

    def __sub__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(_combine(self._coeffs, other._coeffs, -1.0))

    def __mul__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        if not self._coeffs or not other._coeffs:
            return Polynomial()
        result = [0.0] * (len(self._coeffs) + len(other._coeffs) - 1)
        for i, a in enumerate(self._coeffs):
            for j, b in enumerate(other._coeffs):
                result[i + j] += a * b
        return Polynomial(result)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __str__(self) -> str:
        return self.to_string()

    def degree(self) -> int:
        """Return the degree, or -1 for the zero polynomial."""
        return len(self._coeffs) - 1

    def evaluate(self, x: float) -> float:
        """Evaluate the polynomial at ``x`` by Horner's rule."""
        result = 0.0
        for c in reversed(self._coeffs):
            result = result * x + c
        return result

    def compose(self, q: Polynomial) -> Polynomial:
        """Return the polynomial ``self(q(x))``."""
        result = Polynomial()
        for c in reversed(self._coeffs):
            result = result * q + Polynomial([c])
        return result

    def derivative(self) -> Polynomial:
        """Return the first derivative."""
        if len(self._coeffs) <= 1:
            return Polynomial([0.0])
        return Polynomial(
            c * power for power, c in enumerate(self._coeffs) if power > 0
        )

    def integral(self) -> Polynomial:
        """Return the antiderivative with a zero constant term."""
        return Polynomial(
            [0.0] + [c / (power + 1) for power, c in enumerate(self._coeffs)]
        )

    def definite_integral(self, x1: float, x2: float) -> float:
        """Integrate from ``x1`` to ``x2``."""
        antiderivative = self.integral()
        return antiderivative.evaluate(x2) - antiderivative.evaluate(x1)

    def get_root(self, guess: float, tolerance: float, max_iter: int) -> float:
        """Newton's method from ``guess``; returns ``guess`` if it never converges."""
        slope = self.derivative()
        x = guess
        for _ in range(max_iter):
            x_new = x - _divide(self.evaluate(x), slope.evaluate(x))
            if abs(x_new - x) < tolerance:
                return x_new
            x = x_new
        return guess

    def deflate(self, root: float) -> Polynomial:
        """Divide by ``(x - root)`` with synthetic division, dropping the remainder."""
        if not self._coeffs:
            return Polynomial()
        if len(self._coeffs) == 1:
            raise ValueError("cannot deflate a constant polynomial")
        quotient = []
        carry = 0.0
        for c in reversed(self._coeffs[1:]):
            carry = c + carry * root
            quotient.append(carry)
        quotient.reverse()
        return Polynomial(quotient)

    def get_roots(self, tolerance: float = 1e-6, max_iter: int = 1000) -> List[float]:
        """Search from each integer start in -10..10, recursing on each deflation.

        A start that converges to itself is not reported, and the same root
        may be reported many times.
        """
        roots: List[float] = []
        for start in range(-10, 11):
            root = self.get_root(float(start), tolerance, max_iter)
            if root != start:
                roots.append(root)
                roots.extend(self.deflate(root).get_roots(tolerance, max_iter))
        return roots

    def coefficient(self, degree: int) -> float:
        """Return the coefficient of ``x**degree``, or 0 when out of range."""
        if 0 <= degree < len(self._coeffs):
            return self._coeffs[degree]
        return 0.0

    def to_string(self) -> str:
        """Render terms from the highest power, e.g. ``3x^2 + -2x + 1``."""
        parts = []
        for power in range(len(self._coeffs) - 1, -1, -1):
            c = self._coeffs[power]
            if c == 0:
                continue
            text = format_double(c)
            if power == 0:
                parts.append(text)
            elif power == 1:
                parts.append(f"{text}x + ")
            else:
                parts.append(f"{text}x^{power} + ")
        return "".join(parts)


def _combine(left: List[float], right: List[float], sign: float) -> List[float]:
    result = [0.0] * max(len(left), len(right))
    for i, c in enumerate(left):
        result[i] += c
    for i, c in enumerate(right):
        result[i] += sign * c
    return result