"""
portfolio_checker/config.py
---------------------------
Shared financial configuration constants.

Keeping these separate from portfolio_checker/constants.py (which holds the
sector lookup tables) gives this file ownership of the tunable thresholds
that the validator, the diversification guard and the prompt layer share.
"""

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Investment thresholds
# ---------------------------------------------------------------------------
# Smallest amount the builder accepts. Anything below is rejected before any
# filtering happens, and the prompt layer re-asks with the same threshold.

MINIMUM_INVESTMENT: int = 500

# Primary (sector-preferred) suggestions shorter than this fall back to every
# affordable company in the catalog. With the bundled six-company catalog the
# fallback is always taken.

MIN_DIVERSIFIED_STOCKS: int = 10

# ---------------------------------------------------------------------------
# Prompt-layer format gates
# ---------------------------------------------------------------------------
# The 4-digit code is a format check only; it is never compared against
# stored credentials.

PIN_MIN: int = 1000
PIN_MAX: int = 9999

CURRENCY_SYMBOL: str = "₹"

# ---------------------------------------------------------------------------
# Catalog location
# ---------------------------------------------------------------------------
# Resolved relative to this file so it works regardless of which directory
# the user launches from. PORTFOLIO_CATALOG overrides it.

DEFAULT_CATALOG_PATH: Path = Path(__file__).parent / "data" / "companies.csv"

CATALOG_PATH: Path = Path(os.environ.get("PORTFOLIO_CATALOG", DEFAULT_CATALOG_PATH))
