from __future__ import annotations

from portfolio_checker.config import CURRENCY_SYMBOL, MINIMUM_INVESTMENT
from portfolio_checker.constants import RISK_DISPLAY, SECTOR_DISPLAY
from portfolio_checker.enums import RiskLevel, Sector
from portfolio_checker.portfolio_engine import PortfolioOutcome, PortfolioResult


class ResponseGenerator:
    """
    Builds human-readable prompt and result text.

    **Formatting-only** — all computation is delegated to
    :class:`PortfolioEngine`. This class must not filter or allocate.
    """

    # ------------------------------------------------------------------ #
    #  Prompts
    # ------------------------------------------------------------------ #

    def ask_name(self) -> str:
        return "Your name: "

    def ask_pin(self) -> str:
        return "Your 4-digit code: "

    def ask_amount(self) -> str:
        return "Amount to invest: "

    def ask_horizon(self) -> str:
        return "Investment horizon (short/long): "

    def invalid_name(self) -> str:
        return "Please enter your name."

    def invalid_pin(self) -> str:
        return "Pin must be exactly 4 digits. Try again:"

    def invalid_amount(self) -> str:
        return "Please enter a whole number amount (e.g. '1000' or '₹1,000')."

    def insufficient_amount(self) -> str:
        return f"Insufficient amount. Minimum is {MINIMUM_INVESTMENT}."

    def invalid_horizon(self) -> str:
        return "Please type 'short' or 'long'"

    def quit_message(self) -> str:
        return "Goodbye!"

    # ------------------------------------------------------------------ #
    #  Labels
    # ------------------------------------------------------------------ #

    @staticmethod
    def string_of_sector(sector: Sector) -> str:
        return SECTOR_DISPLAY[sector]

    @staticmethod
    def string_of_risk(risk: RiskLevel) -> str:
        return RISK_DISPLAY[risk]

    # ------------------------------------------------------------------ #
    #  Results
    # ------------------------------------------------------------------ #

    def render_outcome(self, outcome: PortfolioOutcome, name: str) -> str:
        """Render either a built portfolio or the rejection message."""
        if not outcome.is_built:
            return outcome.message
        return self.render_portfolio(outcome.result, name)

    def render_portfolio(self, result: PortfolioResult, name: str) -> str:
        lines = [
            f"\nHello {name} 👋",
            f"Portfolio Risk: {self.string_of_risk(result.overall_risk)}",
            "",
            "Stock Allocation:",
        ]
        for alloc in result.allocations:
            lines.append(f" - {alloc.company_name} : {CURRENCY_SYMBOL}{alloc.amount}")

        if result.unallocated:
            lines.append(f" (unallocated: {CURRENCY_SYMBOL}{result.unallocated})")

        lines.append("")
        lines.append("Sector Breakdown:")
        for sector, count in result.sector_breakdown.items():
            lines.append(f" - {self.string_of_sector(sector)} : {count} stocks")

        return "\n".join(lines)
