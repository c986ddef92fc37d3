"""Two polynomial classes, a fixed set of polynomial pairs, and a text report of their arithmetic."""

__version__ = "0.1.0"