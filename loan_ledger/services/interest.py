"""Simple-interest math for loan applications.

Pure functions, no I/O. Shared by the calculator and the ledger write paths.
"""

from __future__ import annotations

MONTHS_PER_YEAR = 12


def compute_interest(principal: int, duration: int, rate: float) -> tuple[float, float]:
    """Return ``(interest, total_amount)`` for a term of ``duration`` months.

    The term is converted to years with true division, so a 6 month loan
    accrues half a year of interest.
    """

    interest = principal * rate * (duration / MONTHS_PER_YEAR)
    return interest, principal + interest
