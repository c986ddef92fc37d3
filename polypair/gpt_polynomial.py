"""Dense polynomial that keeps its coefficient list exactly as given."""

from __future__ import annotations

from typing import Iterable, List, Optional

from polypair.streamfmt import format_double

__all__ = ["Polynomial"]


class Polynomial:
    """Polynomial stored as coefficients in ascending order of power.

    Coefficients are kept verbatim: trailing zeros are not removed, so the
    degree is always ``len(coefficients) - 1``.
    """

    def __init__(self, coefficients: Optional[Iterable[float]] = None) -> None:
        if coefficients is None:
            self._coeffs: List[float] = [0.0]
        else:
            self._coeffs = [float(c) for c in coefficients]

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
            raise ValueError("cannot multiply a polynomial with no coefficients")
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
        top = len(self._coeffs) - 1
        parts = []
        for power in range(top, -1, -1):
            c = self._coeffs[power]
            if c == 0:
                continue
            if power != top and c > 0:
                parts.append("+")
            parts.append(format_double(c))
            if power > 0:
                parts.append(f"x^{power} ")
        return "".join(parts)

    def degree(self) -> int:
        """Return ``len(coefficients) - 1``."""
        return len(self._coeffs) - 1

    def evaluate(self, x: float) -> float:
        """Evaluate the polynomial at ``x`` by Horner's rule."""
        result = 0.0
        for c in reversed(self._coeffs):
            result = result * x + c
        return result

    def compose(self, q: Polynomial) -> Polynomial:
        """Return the polynomial ``self(q(x))``."""
        result = Polynomial([0.0])
        for c in reversed(self._coeffs):
            result = result * q + Polynomial([c])
        return result

    def derivative(self) -> Polynomial:
        """Return the first derivative."""
        if len(self._coeffs) <= 1:
            return Polynomial([0.0])
        return Polynomial(
            power * c for power, c in enumerate(self._coeffs) if power > 0
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
        """Refine ``guess`` by Newton's method; stop on a flat slope."""
        slope = self.derivative()
        for _ in range(max_iter):
            y = self.evaluate(guess)
            y_prime = slope.evaluate(guess)
            if abs(y_prime) < tolerance:
                break
            next_guess = guess - y / y_prime
            if abs(next_guess - guess) < tolerance:
                return next_guess
            guess = next_guess
        return guess

    def deflate(self, root: float) -> Polynomial:
        """Divide by ``(x - root)`` with synthetic division, dropping the remainder."""
        if len(self._coeffs) < 2:
            raise ValueError("cannot deflate a polynomial of degree below one")
        quotient = []
        carry = 0.0
        for c in reversed(self._coeffs[1:]):
            carry = c + root * carry
            quotient.append(carry)
        quotient.reverse()
        return Polynomial(quotient)

    def get_roots(self, tolerance: float = 1e-6, max_iter: int = 1000) -> List[float]:
        """Find real roots one by one, starting each search at zero."""
        roots: List[float] = []
        p = self
        while p.degree() > 0:
            root = p.get_root(0.0, tolerance, max_iter)
            if abs(p.evaluate(root)) >= tolerance:
                break
            roots.append(root)
            p = p.deflate(root)
        return roots

    def coefficient(self, degree: int) -> float:
        """Return the coefficient of ``x**degree``, or 0 when out of range."""
        if 0 <= degree < len(self._coeffs):
            return self._coeffs[degree]
        return 0.0

    def to_string(self) -> str:
        """Render with integer-truncated coefficients, e.g. ``3*x^2 - 2*x + 1``."""
        top = len(self._coeffs) - 1
        parts = []
        for power in range(top, -1, -1):
            c = self._coeffs[power]
            if c == 0:
                continue
            if power != top and c > 0:
                parts.append(f" + {int(c)}")
            elif power != top and c < 0:
                parts.append(f" - {int(abs(c))}")
            else:
                parts.append(str(int(c)))
            if power > 0:
                parts.append("*x" if power == 1 else f"*x^{power}")
        return "".join(parts)


def _combine(left: List[float], right: List[float], sign: float) -> List[float]:
    result = [0.0] * max(len(left), len(right))
    for i, c in enumerate(left):
        result[i] += c
    for i, c in enumerate(right):
        result[i] += sign * c
    return result