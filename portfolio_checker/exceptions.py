"""
portfolio_checker/exceptions.py
-------------------------------
Exception hierarchy for the portfolio pipeline.

Every error derives from ``ValueError`` so callers that already guard
numeric input with ``except ValueError`` keep working.
"""


class PortfolioError(ValueError):
    """Base class for all portfolio pipeline errors."""


class InsufficientAmountError(PortfolioError):
    """Raised by the validator when the amount is below the minimum."""

    def __init__(self, amount: int, minimum: int):
        self.amount = amount
        self.minimum = minimum
        super().__init__(
            f"Amount {amount} is below the minimum investment of {minimum}."
        )


class CatalogError(PortfolioError):
    """Raised when the company catalog file is missing or malformed."""
