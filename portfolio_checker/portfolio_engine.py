"""
portfolio_checker/portfolio_engine.py
-------------------------------------
Pure transformation engine: validated amount + horizon → portfolio.

Design contract:
  - No I/O beyond the (cached) catalog read
  - No prompt/FSM awareness
  - Fully deterministic and stateless (all methods are @staticmethod)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Union

from portfolio_checker.config import MINIMUM_INVESTMENT
from portfolio_checker.constants import SECTOR_RISK
from portfolio_checker.data_loader import Company
from portfolio_checker.enums import InvestmentHorizon, RiskLevel, Sector
from portfolio_checker.exceptions import InsufficientAmountError
from portfolio_checker.screener_engine import ScreenerEngine

logger = logging.getLogger(__name__)

REJECTION_MESSAGE = "Insufficient amount to build a diversified portfolio"


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Allocation:
    company_name: str
    amount: int


@dataclass(frozen=True)
class PortfolioResult:
    """
    A built portfolio.

    ``sector_breakdown`` is a read-only mapping of the sectors actually
    held; its iteration order carries no meaning. It is left out of the
    hash but still takes part in equality.
    """
    amount: int
    allocations: tuple[Allocation, ...]
    overall_risk: RiskLevel
    sector_breakdown: Mapping[Sector, int] = field(hash=False)

    @property
    def invested(self) -> int:
        return sum(a.amount for a in self.allocations)

    @property
    def unallocated(self) -> int:
        """Remainder lost to the integer split (always < number of stocks)."""
        return self.amount - self.invested


@dataclass(frozen=True)
class Built:
    result: PortfolioResult
    is_built = True


@dataclass(frozen=True)
class Rejected:
    message: str
    is_built = False


PortfolioOutcome = Union[Built, Rejected]


class PortfolioEngine:
    """Validation, equal-split allocation, risk scoring and sector breakdown."""

    # ------------------------------------------------------------------ #
    #  Public entry point
    # ------------------------------------------------------------------ #

    @staticmethod
    def build_portfolio(
        amount: int,
        horizon: InvestmentHorizon,
        catalog: Optional[Sequence[Company]] = None,
    ) -> PortfolioOutcome:
        """
        Run the full pipeline for one request.

        Returns :class:`Rejected` when the amount fails validation (nothing
        downstream runs), otherwise :class:`Built` wrapping a
        :class:`PortfolioResult`.
        """
        try:
            valid_amount = PortfolioEngine.validate_amount(amount)
        except InsufficientAmountError as exc:
            logger.warning("Rejected request: %s", exc)
            return Rejected(REJECTION_MESSAGE)

        stocks = ScreenerEngine.ensure_minimum_stocks(valid_amount, horizon, catalog)

        result = PortfolioResult(
            amount=valid_amount,
            allocations=PortfolioEngine.allocate_evenly(valid_amount, stocks),
            overall_risk=PortfolioEngine.portfolio_risk(stocks),
            sector_breakdown=PortfolioEngine.sector_breakdown(stocks),
        )
        logger.info(
            "Built %s portfolio: %d stocks, risk %s, %d unallocated",
            horizon.value, len(stocks), result.overall_risk.name, result.unallocated,
        )
        return Built(result)

    # ------------------------------------------------------------------ #
    #  Pipeline stages
    # ------------------------------------------------------------------ #

    @staticmethod
    def validate_amount(amount: int) -> int:
        """Return *amount* unchanged, or raise if it is below the minimum."""
        if amount < MINIMUM_INVESTMENT:
            raise InsufficientAmountError(amount, MINIMUM_INVESTMENT)
        return amount

    @staticmethod
    def allocate_evenly(
        amount: int,
        stocks: Sequence[Company],
    ) -> tuple[Allocation, ...]:
        """
        Give every stock the same floor(amount / n) share, in input order.

        Price plays no part here. The remainder of the integer division is
        left unallocated and surfaces as ``PortfolioResult.unallocated``.
        """
        if not stocks:
            return ()
        per_stock = amount // len(stocks)
        return tuple(Allocation(c.name, per_stock) for c in stocks)

    @staticmethod
    def sector_risk(sector: Sector) -> RiskLevel:
        return SECTOR_RISK[sector]

    @staticmethod
    def portfolio_risk(stocks: Sequence[Company]) -> RiskLevel:
        """Highest sector risk among *stocks*; LOW for an empty selection."""
        return max(
            (PortfolioEngine.sector_risk(c.sector) for c in stocks),
            default=RiskLevel.LOW,
        )

    @staticmethod
    def sector_breakdown(stocks: Sequence[Company]) -> Mapping[Sector, int]:
        """Read-only count of selected companies per sector, held sectors only."""
        counts: Dict[Sector, int] = {}
        for c in stocks:
            counts[c.sector] = counts.get(c.sector, 0) + 1
        return MappingProxyType(counts)


def build_portfolio(
    amount: int,
    horizon: InvestmentHorizon,
    catalog: Optional[Sequence[Company]] = None,
) -> PortfolioOutcome:
    """Module-level shortcut for :meth:`PortfolioEngine.build_portfolio`."""
    return PortfolioEngine.build_portfolio(amount, horizon, catalog)
