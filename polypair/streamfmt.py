"""Number formatting shared by the polynomial text renderers."""

__all__ = ["format_double"]


def format_double(value: float) -> str:
    """Render a number in general notation with six significant digits.

    Trailing zeros are dropped and an exponent is used only for very large
    or very small magnitudes, e.g. ``2.5``, ``-14701``, ``1.23457e+06``.
    """
    return format(float(value), "g")