"""
portfolio_checker/constants.py
------------------------------
Sector lookup tables shared across modules.

Placing these here keeps the formatting layer (ResponseGenerator) and the
processing layers (ScreenerEngine, PortfolioEngine) aligned on a single
source of truth without creating circular imports.
"""

from __future__ import annotations

from portfolio_checker.enums import InvestmentHorizon, RiskLevel, Sector


# ---------------------------------------------------------------------------
# Horizon → preferred sectors (order is significant)
# ---------------------------------------------------------------------------

PREFERRED_SECTORS: dict[InvestmentHorizon, tuple[Sector, ...]] = {
    InvestmentHorizon.SHORT: (Sector.TECH, Sector.FINANCE),
    InvestmentHorizon.LONG:  (Sector.PSU, Sector.ENERGY, Sector.DEFENCE),
}


# ---------------------------------------------------------------------------
# Sector → risk tier
# ---------------------------------------------------------------------------
# Must cover every Sector member; test_screener checks this.

SECTOR_RISK: dict[Sector, RiskLevel] = {
    Sector.PSU:         RiskLevel.LOW,
    Sector.ENERGY:      RiskLevel.MEDIUM,
    Sector.DEFENCE:     RiskLevel.MEDIUM,
    Sector.FINANCE:     RiskLevel.MEDIUM,
    Sector.TECH:        RiskLevel.HIGH,
    Sector.REAL_ESTATE: RiskLevel.HIGH,
}


# ---------------------------------------------------------------------------
# Display names
# ---------------------------------------------------------------------------

SECTOR_DISPLAY: dict[Sector, str] = {
    Sector.TECH:        "Tech",
    Sector.DEFENCE:     "Defence",
    Sector.ENERGY:      "Energy",
    Sector.FINANCE:     "Finance",
    Sector.REAL_ESTATE: "Real Estate",
    Sector.PSU:         "PSU",
}

RISK_DISPLAY: dict[RiskLevel, str] = {
    RiskLevel.LOW:    "Low",
    RiskLevel.MEDIUM: "Medium",
    RiskLevel.HIGH:   "High",
}
