"""Static values shared by the priority model, tables, and random sources."""

from __future__ import annotations

# Percentage requests always draw against a fixed denominator of 100, leaving any
# unregistered remainder as unselectable mass.
PERCENTAGE_TOTAL = 100

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Upper bound on consecutive dead-zone hits before drawing from the live span directly.
DEFAULT_MAX_REDRAWS = 1000


__all__ = [
    "DEFAULT_MAX_REDRAWS",
    "INT32_MAX",
    "INT32_MIN",
    "PERCENTAGE_TOTAL",
]
