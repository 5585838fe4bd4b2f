"""
Tests for portfolio statistics, frontier sampling and portfolio selection.
"""

import unittest
import numpy as np
from pydantic import ValidationError

from ..exceptions import PortfolioValidationError
from ..models.asset import Asset
from ..models.portfolio import PortfolioPoint, EfficientFrontier
from ..portfolio_optimization.statistics import (
    portfolio_return, portfolio_variance, portfolio_risk, sharpe_ratio, score_portfolios
)
from ..portfolio_optimization.frontier import FrontierSampler, compute_frontier
from ..portfolio_optimization.selector import (
    select_optimal, max_sharpe_portfolio, min_variance_portfolio
)
from ..portfolio_optimization.risk_profiles import RiskProfileManager


def two_asset_inputs():
    assets = [Asset(symbol="A", expected_return=12.0, volatility=25.0),
              Asset(symbol="B", expected_return=8.0, volatility=10.0)]
    return assets, np.eye(2)


def point(risk, expected_return, sharpe):
    return PortfolioPoint(weights=(1.0,), risk=risk, expected_return=expected_return, sharpe=sharpe)


class TestPortfolioStatistics(unittest.TestCase):
    """Tests for the portfolio statistics functions."""

    def test_portfolio_return(self):
        self.assertAlmostEqual(portfolio_return([0.5, 0.5], [10.0, 20.0]), 15.0)
        self.assertAlmostEqual(portfolio_return([0.25, 0.75], [8.0, 4.0]), 5.0)

    def test_variance_uses_fractional_volatility(self):
        self.assertAlmostEqual(portfolio_variance([1.0, 0.0], [20.0, 10.0], np.eye(2)), 0.04)
        self.assertAlmostEqual(portfolio_risk([1.0, 0.0], [20.0, 10.0], np.eye(2)), 20.0)

    def test_perfectly_correlated_risk_is_weighted_average(self):
        corr = np.ones((2, 2))
        self.assertAlmostEqual(portfolio_risk([0.5, 0.5], [20.0, 10.0], corr), 15.0)

    def test_risk_never_negative_for_inconsistent_matrix(self):
        """Test that a non-PSD correlation matrix clamps risk to zero."""
        corr = np.array([
            [1.0, -1.0, -1.0],
            [-1.0, 1.0, -1.0],
            [-1.0, -1.0, 1.0],
        ])
        weights = [1 / 3, 1 / 3, 1 / 3]
        self.assertLess(portfolio_variance(weights, [20.0, 20.0, 20.0], corr), 0.0)
        risk = portfolio_risk(weights, [20.0, 20.0, 20.0], corr)
        self.assertEqual(risk, 0.0)
        self.assertFalse(np.isnan(risk))

    def test_sharpe_ratio(self):
        self.assertAlmostEqual(sharpe_ratio(12.0, 20.0, 4.0), 0.4)

    def test_zero_risk_sharpe_is_zero(self):
        """Test a portfolio held entirely in a zero-volatility asset."""
        risk = portfolio_risk([1.0, 0.0], [0.0, 20.0], np.eye(2))
        self.assertEqual(risk, 0.0)
        sharpe = sharpe_ratio(portfolio_return([1.0, 0.0], [4.0, 10.0]), risk, 4.5)
        self.assertEqual(sharpe, 0.0)
        self.assertTrue(np.isfinite(sharpe))

    def test_score_portfolios_matches_scalar_functions(self):
        weights = np.array([[0.2, 0.3, 0.5], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
        returns = [12.0, 15.0, 11.0]
        vols = [25.0, 30.0, 0.0]
        corr = np.array([[1.0, 0.4, 0.4], [0.4, 1.0, 0.4], [0.4, 0.4, 1.0]])

        risk, expected, sharpe = score_portfolios(weights, returns, vols, corr, 4.5)

        for k, row in enumerate(weights):
            self.assertAlmostEqual(risk[k], portfolio_risk(row, vols, corr))
            self.assertAlmostEqual(expected[k], portfolio_return(row, returns))
            self.assertAlmostEqual(sharpe[k], sharpe_ratio(expected[k], risk[k], 4.5))
        self.assertEqual(sharpe[2], 0.0)


class TestFrontierSampler(unittest.TestCase):
    """Tests for FrontierSampler and compute_frontier."""

    def setUp(self):
        self.assets = [
            Asset(symbol="AAPL", expected_return=12.0, volatility=25.0),
            Asset(symbol="GOOGL", expected_return=15.0, volatility=30.0),
            Asset(symbol="MSFT", expected_return=11.0, volatility=22.0),
        ]
        self.corr = np.array([[1.0, 0.4, 0.4], [0.4, 1.0, 0.4], [0.4, 0.4, 1.0]])

    def test_sampled_weights_on_simplex(self):
        sampler = FrontierSampler(rng=np.random.default_rng(1))
        weights = sampler.sample_weights(4)
        self.assertEqual(weights.shape, (1000, 4))
        self.assertTrue(np.all(weights >= 0.0))
        np.testing.assert_allclose(weights.sum(axis=1), 1.0, atol=1e-12)

    def test_frontier_sorted_and_non_dominated(self):
        frontier = compute_frontier(self.assets, self.corr, 4.5, rng=np.random.default_rng(11))
        self.assertGreater(len(frontier), 1)

        risks = frontier.risks
        returns = frontier.returns
        for prev, curr in zip(risks, risks[1:]):
            self.assertLessEqual(prev, curr)
        for prev, curr in zip(returns, returns[1:]):
            self.assertLess(prev, curr)

    def test_frontier_points_are_consistent(self):
        frontier = compute_frontier(self.assets, self.corr, 4.5, rng=np.random.default_rng(5))
        vols = [a.volatility for a in self.assets]
        rets = [a.expected_return for a in self.assets]
        for p in frontier:
            self.assertAlmostEqual(sum(p.weights), 1.0)
            self.assertTrue(all(w >= 0.0 for w in p.weights))
            self.assertAlmostEqual(p.risk, portfolio_risk(p.weights, vols, self.corr))
            self.assertAlmostEqual(p.expected_return, portfolio_return(p.weights, rets))
            self.assertAlmostEqual(p.sharpe, (p.expected_return - 4.5) / p.risk)

    def test_frontier_carries_symbols(self):
        frontier = compute_frontier(self.assets, self.corr, rng=np.random.default_rng(2))
        self.assertEqual(frontier.symbols, ("AAPL", "GOOGL", "MSFT"))
        df = frontier.to_dataframe()
        self.assertEqual(list(df.columns), ['risk', 'expected_return', 'sharpe', 'AAPL', 'GOOGL', 'MSFT'])
        self.assertEqual(len(df), len(frontier))

    def test_fewer_than_two_assets_gives_empty_frontier(self):
        frontier = compute_frontier(self.assets[:1], np.eye(1), 4.5)
        self.assertTrue(frontier.is_empty)
        self.assertEqual(len(frontier), 0)

    def test_seeded_runs_are_reproducible(self):
        first = compute_frontier(self.assets, self.corr, 4.5, rng=np.random.default_rng(99))
        second = compute_frontier(self.assets, self.corr, 4.5, rng=np.random.default_rng(99))
        self.assertEqual(first.points, second.points)

    def test_diversification_benefit(self):
        """Test that uncorrelated assets give a min-variance risk below either asset's volatility."""
        assets, corr = two_asset_inputs()
        frontier = compute_frontier(assets, corr, 4.5, rng=np.random.default_rng(2024))
        min_var = min_variance_portfolio(frontier)
        self.assertLess(min_var.risk, 10.0)
        self.assertLess(min_var.risk, 25.0)

    def test_invalid_sample_count(self):
        with self.assertRaises(ValueError):
            FrontierSampler(num_samples=0)


class TestPortfolioPoint(unittest.TestCase):
    """Tests for PortfolioPoint validation."""

    def test_weights_must_sum_to_one(self):
        with self.assertRaises(ValidationError):
            PortfolioPoint(weights=(0.5, 0.4), risk=10.0, expected_return=5.0, sharpe=0.1)

    def test_negative_weight_rejected(self):
        with self.assertRaises(ValidationError):
            PortfolioPoint(weights=(1.2, -0.2), risk=10.0, expected_return=5.0, sharpe=0.1)

    def test_weight_map(self):
        p = PortfolioPoint(weights=(0.25, 0.75), risk=10.0, expected_return=5.0, sharpe=0.1)
        self.assertEqual(p.weight_map(["A", "B"]), {"A": 0.25, "B": 0.75})


class TestSelector(unittest.TestCase):
    """Tests for risk-tolerance selection."""

    def setUp(self):
        self.frontier = EfficientFrontier([
            point(10.0, 5.0, 0.05),
            point(12.0, 8.0, 0.29),
            point(15.0, 10.0, 0.367),
            point(20.0, 12.0, 0.375),
            point(30.0, 13.0, 0.283),
        ])

    def test_zero_tolerance_selects_lowest_risk_band(self):
        selected = select_optimal(self.frontier, 0)
        self.assertLessEqual(selected.risk, self.frontier.min_risk * 1.1)
        self.assertEqual(selected.risk, 10.0)

    def test_intermediate_tolerances(self):
        self.assertEqual(select_optimal(self.frontier, 25).risk, 15.0)
        self.assertEqual(select_optimal(self.frontier, 50).risk, 20.0)

    def test_full_tolerance_considers_whole_frontier(self):
        selected = select_optimal(self.frontier, 100)
        self.assertEqual(selected, max_sharpe_portfolio(self.frontier))

    def test_high_tolerance_reaches_highest_risk_when_it_has_best_sharpe(self):
        frontier = EfficientFrontier([
            point(10.0, 6.0, 0.15),
            point(20.0, 14.0, 0.475),
            point(30.0, 22.0, 0.583),
        ])
        self.assertEqual(select_optimal(frontier, 100).risk, 30.0)

    def test_distinguished_portfolios(self):
        self.assertEqual(max_sharpe_portfolio(self.frontier).risk, 20.0)
        self.assertEqual(min_variance_portfolio(self.frontier).risk, 10.0)

    def test_sharpe_ties_keep_first_point(self):
        frontier = EfficientFrontier([point(10.0, 6.0, 0.3), point(11.0, 7.0, 0.3)])
        self.assertEqual(max_sharpe_portfolio(frontier).risk, 10.0)

    def test_empty_frontier(self):
        empty = EfficientFrontier([])
        self.assertIsNone(select_optimal(empty, 50))
        self.assertIsNone(max_sharpe_portfolio(empty))
        self.assertIsNone(min_variance_portfolio(empty))

    def test_tolerance_out_of_range(self):
        with self.assertRaises(PortfolioValidationError):
            select_optimal(self.frontier, -1)
        with self.assertRaises(PortfolioValidationError):
            select_optimal(self.frontier, 100.5)

    def test_selection_on_sampled_frontier(self):
        assets, corr = two_asset_inputs()
        frontier = compute_frontier(assets, corr, 4.5, rng=np.random.default_rng(8))
        for tolerance in (0, 30, 60, 100):
            selected = select_optimal(frontier, tolerance)
            self.assertIn(selected, frontier.points)
        low = select_optimal(frontier, 0)
        self.assertLessEqual(low.risk, frontier.min_risk * 1.1)


class TestRiskProfileManager(unittest.TestCase):
    """Tests for RiskProfileManager."""

    def test_risk_labels(self):
        self.assertEqual(RiskProfileManager.get_risk_label(0), "Conservative")
        self.assertEqual(RiskProfileManager.get_risk_label(24.9), "Conservative")
        self.assertEqual(RiskProfileManager.get_risk_label(25), "Moderate")
        self.assertEqual(RiskProfileManager.get_risk_label(50), "Growth")
        self.assertEqual(RiskProfileManager.get_risk_label(74), "Growth")
        self.assertEqual(RiskProfileManager.get_risk_label(75), "Aggressive")
        self.assertEqual(RiskProfileManager.get_risk_label(100), "Aggressive")

    def test_profiles_match_their_labels(self):
        for profile in RiskProfileManager.get_all_profiles():
            self.assertEqual(RiskProfileManager.get_risk_label(profile["risk_tolerance"]), profile["name"])

    def test_get_profile_by_name(self):
        profile = RiskProfileManager.get_profile_by_name("growth")
        self.assertEqual(profile["name"], "Growth")
        with self.assertRaises(ValueError):
            RiskProfileManager.get_profile_by_name("Reckless")

    def test_custom_profile_bounds(self):
        self.assertEqual(RiskProfileManager.create_custom_profile("Mine", 33)["risk_tolerance"], 33)
        with self.assertRaises(PortfolioValidationError):
            RiskProfileManager.create_custom_profile("Too much", 120)


if __name__ == '__main__':
    unittest.main()
