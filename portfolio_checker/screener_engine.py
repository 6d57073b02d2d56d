"""
portfolio_checker/screener_engine.py
------------------------------------
Narrows the catalog down to the companies a portfolio will hold.

Pipeline::

    horizon ─► preferred_sectors ─► companies_by_sector ─► affordable_companies
                                                              │
                                    ensure_minimum_stocks ◄───┘

Every stage returns a new tuple; the catalog itself is never mutated.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from portfolio_checker.config import MIN_DIVERSIFIED_STOCKS
from portfolio_checker.constants import PREFERRED_SECTORS
from portfolio_checker.data_loader import Company, load_catalog
from portfolio_checker.enums import InvestmentHorizon, Sector

logger = logging.getLogger(__name__)


class ScreenerEngine:
    """Stateless sector and affordability filters over the catalog."""

    @staticmethod
    def preferred_sectors(horizon: InvestmentHorizon) -> tuple[Sector, ...]:
        """Return the ordered sector preference for *horizon*."""
        return PREFERRED_SECTORS[horizon]

    @staticmethod
    def companies_by_sector(
        sectors: Iterable[Sector],
        catalog: Optional[Sequence[Company]] = None,
    ) -> tuple[Company, ...]:
        """Catalog entries whose sector is in *sectors*, catalog order kept."""
        if catalog is None:
            catalog = load_catalog()
        wanted = set(sectors)
        return tuple(c for c in catalog if c.sector in wanted)

    @staticmethod
    def affordable_companies(
        amount: int,
        companies: Sequence[Company],
    ) -> tuple[Company, ...]:
        """
        Keep companies whose unit price fits in the *total* amount.

        The comparison is against the whole budget, not the per-company
        share the allocator later hands out, so a company can pass here and
        still receive less than one unit's price.
        """
        return tuple(c for c in companies if c.price <= amount)

    @staticmethod
    def suggest_companies(
        amount: int,
        horizon: InvestmentHorizon,
        catalog: Optional[Sequence[Company]] = None,
    ) -> tuple[Company, ...]:
        """Sector filter followed by affordability filter."""
        sectors = ScreenerEngine.preferred_sectors(horizon)
        by_sector = ScreenerEngine.companies_by_sector(sectors, catalog)
        primary = ScreenerEngine.affordable_companies(amount, by_sector)
        logger.debug(
            "%s horizon: %d in preferred sectors, %d affordable at %d",
            horizon.value, len(by_sector), len(primary), amount,
        )
        return primary

    @staticmethod
    def ensure_minimum_stocks(
        amount: int,
        horizon: InvestmentHorizon,
        catalog: Optional[Sequence[Company]] = None,
    ) -> tuple[Company, ...]:
        """
        Return the primary suggestion when it holds at least
        ``MIN_DIVERSIFIED_STOCKS`` companies; otherwise drop the sector
        preference entirely and return every affordable catalog company.
        """
        if catalog is None:
            catalog = load_catalog()

        primary = ScreenerEngine.suggest_companies(amount, horizon, catalog)
        if len(primary) >= MIN_DIVERSIFIED_STOCKS:
            return primary

        fallback = ScreenerEngine.affordable_companies(amount, catalog)
        logger.debug(
            "Only %d preferred companies (< %d); falling back to %d affordable",
            len(primary), MIN_DIVERSIFIED_STOCKS, len(fallback),
        )
        return fallback
