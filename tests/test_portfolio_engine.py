"""
tests/test_portfolio_engine.py
-------------------------------
Unit tests for PortfolioEngine.

Test coverage:
    Validation gate (minimum investment)
    Equal-split allocation and its rounding loss
    Risk scoring (max tier, empty selection)
    Sector breakdown counts
    End-to-end build_portfolio scenarios
"""

import unittest

from portfolio_checker.config import MINIMUM_INVESTMENT
from portfolio_checker.data_loader import Company, load_catalog
from portfolio_checker.enums import InvestmentHorizon, RiskLevel, Sector
from portfolio_checker.exceptions import InsufficientAmountError, PortfolioError
from portfolio_checker.portfolio_engine import (
    REJECTION_MESSAGE,
    Allocation,
    Built,
    PortfolioEngine,
    Rejected,
    build_portfolio,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _co(name: str, sector: Sector, price: int = 100) -> Company:
    return Company(name, sector, price)


def _alloc(amount: int, stocks) -> dict:
    """Return {name: amount} for easy assertion."""
    return {a.company_name: a.amount for a in PortfolioEngine.allocate_evenly(amount, stocks)}


# ===========================================================================
# 1. Validation
# ===========================================================================

class TestValidateAmount(unittest.TestCase):

    def test_minimum_is_accepted(self):
        self.assertEqual(PortfolioEngine.validate_amount(MINIMUM_INVESTMENT), 500)

    def test_large_amount_returned_unchanged(self):
        self.assertEqual(PortfolioEngine.validate_amount(123456), 123456)

    def test_one_below_minimum_raises(self):
        with self.assertRaises(InsufficientAmountError) as ctx:
            PortfolioEngine.validate_amount(499)
        self.assertEqual(ctx.exception.amount, 499)
        self.assertEqual(ctx.exception.minimum, 500)

    def test_negative_raises(self):
        with self.assertRaises(InsufficientAmountError):
            PortfolioEngine.validate_amount(-1000)

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            PortfolioEngine.validate_amount(0)
        self.assertTrue(issubclass(InsufficientAmountError, PortfolioError))


# ===========================================================================
# 2. Allocation
# ===========================================================================

class TestAllocateEvenly(unittest.TestCase):

    def test_empty_selection_returns_empty(self):
        self.assertEqual(PortfolioEngine.allocate_evenly(1000, []), ())

    def test_floor_division(self):
        stocks = [_co("A", Sector.TECH), _co("B", Sector.PSU), _co("C", Sector.ENERGY)]
        self.assertEqual(_alloc(1000, stocks), {"A": 333, "B": 333, "C": 333})

    def test_preserves_input_order(self):
        stocks = [_co("Z", Sector.TECH), _co("A", Sector.PSU)]
        result = PortfolioEngine.allocate_evenly(900, stocks)
        self.assertEqual(result, (Allocation("Z", 450), Allocation("A", 450)))

    def test_price_does_not_cap_allocation(self):
        stocks = [_co("CHEAP", Sector.PSU, price=1), _co("DEAR", Sector.TECH, price=999)]
        self.assertEqual(_alloc(10000, stocks), {"CHEAP": 5000, "DEAR": 5000})

    def test_remainder_bound(self):
        stocks = [_co(f"S{i}", Sector.PSU) for i in range(7)]
        for amount in (500, 501, 999, 1006, 98765):
            total = sum(a.amount for a in PortfolioEngine.allocate_evenly(amount, stocks))
            self.assertLessEqual(total, amount)
            self.assertLess(amount - total, len(stocks))


# ===========================================================================
# 3. Risk scoring
# ===========================================================================

class TestPortfolioRisk(unittest.TestCase):

    def test_empty_selection_is_low(self):
        self.assertEqual(PortfolioEngine.portfolio_risk([]), RiskLevel.LOW)

    def test_psu_only_is_low(self):
        self.assertEqual(
            PortfolioEngine.portfolio_risk([_co("NTPC", Sector.PSU)]), RiskLevel.LOW
        )

    def test_medium_sectors(self):
        for sector in (Sector.ENERGY, Sector.DEFENCE, Sector.FINANCE):
            stocks = [_co("P", Sector.PSU), _co("M", sector)]
            self.assertEqual(PortfolioEngine.portfolio_risk(stocks), RiskLevel.MEDIUM)

    def test_any_high_sector_dominates(self):
        for sector in (Sector.TECH, Sector.REAL_ESTATE):
            stocks = [_co("P", Sector.PSU), _co("M", Sector.FINANCE), _co("H", sector)]
            self.assertEqual(PortfolioEngine.portfolio_risk(stocks), RiskLevel.HIGH)

    def test_risk_levels_are_ordered(self):
        self.assertLess(RiskLevel.LOW, RiskLevel.MEDIUM)
        self.assertLess(RiskLevel.MEDIUM, RiskLevel.HIGH)

    def test_risk_levels_support_all_comparisons(self):
        self.assertTrue(RiskLevel.LOW <= RiskLevel.HIGH)
        self.assertTrue(RiskLevel.HIGH >= RiskLevel.MEDIUM)
        self.assertTrue(RiskLevel.HIGH > RiskLevel.LOW)
        self.assertTrue(RiskLevel.MEDIUM <= RiskLevel.MEDIUM)
        self.assertEqual(sorted(RiskLevel, reverse=True)[0], RiskLevel.HIGH)


# ===========================================================================
# 4. Sector breakdown
# ===========================================================================

class TestSectorBreakdown(unittest.TestCase):

    def test_empty_selection(self):
        self.assertEqual(PortfolioEngine.sector_breakdown([]), {})

    def test_counts_per_sector(self):
        stocks = [
            _co("A", Sector.TECH), _co("B", Sector.PSU),
            _co("C", Sector.TECH), _co("D", Sector.TECH),
        ]
        self.assertEqual(
            PortfolioEngine.sector_breakdown(stocks),
            {Sector.TECH: 3, Sector.PSU: 1},
        )

    def test_counts_sum_to_selection_size(self):
        catalog = load_catalog()
        breakdown = PortfolioEngine.sector_breakdown(catalog)
        self.assertEqual(sum(breakdown.values()), len(catalog))
        self.assertTrue(all(v >= 1 for v in breakdown.values()))

    def test_absent_sectors_omitted(self):
        breakdown = PortfolioEngine.sector_breakdown([_co("A", Sector.ENERGY)])
        self.assertNotIn(Sector.TECH, breakdown)

    def test_breakdown_is_read_only(self):
        breakdown = PortfolioEngine.sector_breakdown([_co("A", Sector.ENERGY)])
        with self.assertRaises(TypeError):
            breakdown[Sector.TECH] = 99


# ===========================================================================
# 5. build_portfolio end to end
# ===========================================================================

class TestBuildPortfolio(unittest.TestCase):

    def test_short_term_1000_scenario(self):
        outcome = build_portfolio(1000, InvestmentHorizon.SHORT)
        self.assertIsInstance(outcome, Built)
        result = outcome.result
        self.assertEqual(
            result.allocations,
            (Allocation("ONGC", 250), Allocation("SBI", 250),
             Allocation("DLF", 250), Allocation("NTPC", 250)),
        )
        self.assertEqual(result.overall_risk, RiskLevel.HIGH)

    def test_short_term_1000_without_real_estate(self):
        catalog = tuple(c for c in load_catalog() if c.name != "DLF")
        outcome = build_portfolio(1000, InvestmentHorizon.SHORT, catalog)
        result = outcome.result
        self.assertEqual(
            result.allocations,
            (Allocation("ONGC", 333), Allocation("SBI", 333), Allocation("NTPC", 333)),
        )
        self.assertEqual(result.overall_risk, RiskLevel.MEDIUM)
        self.assertEqual(
            result.sector_breakdown,
            {Sector.ENERGY: 1, Sector.FINANCE: 1, Sector.PSU: 1},
        )
        self.assertEqual(result.invested, 999)
        self.assertEqual(result.unallocated, 1)

    def test_below_minimum_rejected_for_every_horizon(self):
        for horizon in InvestmentHorizon:
            for amount in (-5, 0, 300, 499):
                outcome = build_portfolio(amount, horizon)
                self.assertIsInstance(outcome, Rejected)
                self.assertFalse(outcome.is_built)
                self.assertEqual(outcome.message, REJECTION_MESSAGE)

    def test_long_term_300_rejected(self):
        outcome = build_portfolio(300, InvestmentHorizon.LONG)
        self.assertTrue(outcome.message.startswith("Insufficient amount"))

    def test_rejection_skips_screening(self):
        # An empty catalog would still build; rejection must not touch it
        outcome = PortfolioEngine.build_portfolio(100, InvestmentHorizon.SHORT, ())
        self.assertIsInstance(outcome, Rejected)

    def test_minimum_with_only_cheap_companies(self):
        outcome = build_portfolio(500, InvestmentHorizon.LONG)
        self.assertTrue(outcome.is_built)
        names = [a.company_name for a in outcome.result.allocations]
        self.assertEqual(names, ["ONGC", "NTPC"])
        self.assertEqual(outcome.result.overall_risk, RiskLevel.MEDIUM)

    def test_empty_catalog_builds_empty_low_risk_portfolio(self):
        outcome = build_portfolio(1000, InvestmentHorizon.LONG, ())
        self.assertTrue(outcome.is_built)
        self.assertEqual(outcome.result.allocations, ())
        self.assertEqual(outcome.result.overall_risk, RiskLevel.LOW)
        self.assertEqual(outcome.result.sector_breakdown, {})
        self.assertEqual(outcome.result.unallocated, 1000)

    def test_built_result_cannot_be_modified(self):
        result = build_portfolio(1000, InvestmentHorizon.SHORT).result
        with self.assertRaises(TypeError):
            result.sector_breakdown[Sector.TECH] = 99
        self.assertNotIn(Sector.TECH, result.sector_breakdown)

    def test_built_result_is_hashable(self):
        first = build_portfolio(1000, InvestmentHorizon.SHORT)
        second = build_portfolio(1000, InvestmentHorizon.SHORT)
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))

    def test_no_duplicate_names(self):
        outcome = build_portfolio(10000, InvestmentHorizon.SHORT)
        names = [a.company_name for a in outcome.result.allocations]
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(len(names), 6)

    def test_allocation_sum_bound_across_amounts(self):
        for horizon in InvestmentHorizon:
            for amount in range(500, 4000, 137):
                result = build_portfolio(amount, horizon).result
                n = len(result.allocations)
                self.assertLessEqual(result.invested, amount)
                if n:
                    self.assertLess(amount - result.invested, n)


if __name__ == "__main__":
    unittest.main()
