from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

import pandas as pd

from portfolio_checker.config import CATALOG_PATH
from portfolio_checker.enums import Sector
from portfolio_checker.exceptions import CatalogError

logger = logging.getLogger(__name__)

_REQUIRED_COLUMNS = {"name", "sector", "price"}


@dataclass(frozen=True)
class Company:
    """One catalog entry. Created once per process and never mutated."""
    name: str
    sector: Sector
    price: int


class CatalogLoader:
    """
    Loads and caches the static company catalog.

    File layout::

        name,sector,price
        TCS,Tech,3500
        ...

    ``sector`` must be one of the :class:`Sector` values and ``price`` a
    strictly positive integer. Names must be unique.
    """

    def __init__(self, path: str | Path = CATALOG_PATH):
        self._path = Path(path)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def load(self) -> tuple[Company, ...]:
        """
        Return the full catalog in file order.

        Results are cached via ``@lru_cache`` on the private helper so that
        the file is read once per process.

        Raises
        ------
        CatalogError
            If the file is missing, empty, or violates the catalog rules.
        """
        return _load_cached(str(self._path.resolve()))

    def list_companies(self) -> list[str]:
        """Return company names in catalog order."""
        return [c.name for c in self.load()]

    def find(self, name: str) -> Optional[Company]:
        """Case-insensitive lookup by company name."""
        wanted = name.strip().upper()
        for company in self.load():
            if company.name.upper() == wanted:
                return company
        return None


def load_catalog(path: str | Path = CATALOG_PATH) -> tuple[Company, ...]:
    """Shortcut for ``CatalogLoader(path).load()``."""
    return CatalogLoader(path).load()


# ------------------------------------------------------------------
# Module-level cached loader (only the resolved path matters for the
# cache key, which is a plain string).
# ------------------------------------------------------------------

@lru_cache(maxsize=16)
def _load_cached(path: str) -> tuple[Company, ...]:
    if not Path(path).exists():
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        # Only empty cells count as missing; "NA" is a valid company name
        df = pd.read_csv(path, keep_default_na=False, na_values=[""])
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise CatalogError(f"Catalog file {path} is unreadable: {exc}") from exc

    missing = _REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise CatalogError(f"Catalog {path} is missing columns: {sorted(missing)}")

    if df.empty:
        raise CatalogError(f"Catalog {path} contains no companies.")

    if df[list(_REQUIRED_COLUMNS)].isnull().any().any():
        raise CatalogError(f"Catalog {path} has blank cells.")

    # Normalise before the uniqueness check so "TCS" and "TCS " collide
    df["name"] = df["name"].astype(str).str.strip()
    df["sector"] = df["sector"].astype(str).str.strip()

    if (df["name"] == "").any():
        raise CatalogError(f"Catalog {path} has blank company names.")

    if not pd.api.types.is_integer_dtype(df["price"]):
        raise CatalogError(f"Catalog {path}: every price must be an integer.")

    if (df["price"] <= 0).any():
        bad = df.loc[df["price"] <= 0, "name"].tolist()
        raise CatalogError(f"Catalog {path}: non-positive price for {bad}")

    dupes = df.loc[df["name"].duplicated(), "name"].unique().tolist()
    if dupes:
        raise CatalogError(f"Catalog {path}: duplicate company names {dupes}")

    companies = []
    for row in df.itertuples(index=False):
        try:
            sector = Sector(row.sector)
        except ValueError as exc:
            raise CatalogError(
                f"Catalog {path}: unknown sector {row.sector!r} for {row.name}"
            ) from exc
        companies.append(Company(name=row.name, sector=sector, price=int(row.price)))

    logger.info("Loaded %d companies from %s", len(companies), path)
    return tuple(companies)
