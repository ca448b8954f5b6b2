"""Formatting helpers shared by the career guide."""

from __future__ import annotations


def format_salary(salary: int) -> str:
    """Render a salary in rupiah with dots between groups of three digits."""
    text = str(salary)
    length = len(text)
    pieces = []
    for position, char in enumerate(text):
        if position > 0 and (length - position) % 3 == 0:
            pieces.append(".")
        pieces.append(char)
    return "Rp " + "".join(pieces)