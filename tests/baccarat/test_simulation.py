"""Tests for the simulation runner, statistics and CLI."""

import random

import pytest
from puntobanco.baccarat import BaccaratRules, Bet, BetType, Outcome
from puntobanco.baccarat.baccarat import compare_bet_types, main, run_simulation
from puntobanco.baccarat.statistics import (
    THEORETICAL_PROBABILITIES,
    ConfidenceInterval,
    confidence_interval,
    house_edge,
    outcome_chi_square,
    theoretical_house_edge,
)


class TestTheory:
    def test_probabilities_sum_to_one(self):
        assert sum(THEORETICAL_PROBABILITIES.values()) == pytest.approx(1.0, abs=1e-5)

    def test_theoretical_house_edges(self):
        assert theoretical_house_edge(BetType.BANKER) == pytest.approx(0.01058, abs=1e-4)
        assert theoretical_house_edge(BetType.PLAYER) == pytest.approx(0.01235, abs=1e-4)
        assert theoretical_house_edge("tie") == pytest.approx(0.1436, abs=1e-3)

    def test_tie_edge_with_better_payout(self):
        assert theoretical_house_edge(BetType.TIE, BaccaratRules(tie_payout=9.0)) == pytest.approx(0.0484, abs=1e-3)


class TestConfidenceInterval:
    def test_contains_mean(self):
        interval = confidence_interval([1.0, 2.0, 3.0, 4.0, 5.0])
        assert interval.contains(3.0)
        assert interval.lower < 3.0 < interval.upper
        assert interval.confidence == 0.95

    def test_degenerate_samples(self):
        assert confidence_interval([]) == ConfidenceInterval(0.0, 0.0, 0.95)
        assert confidence_interval([2.5]) == ConfidenceInterval(2.5, 2.5, 0.95)

    def test_to_dict(self):
        assert ConfidenceInterval(-1.0, 1.0, 0.9).to_dict() == {"lower": -1.0, "upper": 1.0, "confidence": 0.9}


class TestRunSimulation:
    def test_totals(self):
        result = run_simulation(2000, Bet(banker=10), rng=random.Random(42))

        assert result.num_rounds == 2000
        assert sum(result.outcome_counts.values()) == 2000
        assert result.total_wagered == 20000
        assert len(result.round_returns) == 2000
        assert result.shoes_used > 20
        assert 0 < result.naturals < 2000
        assert all(r in (-1.0, 0.0) or r == pytest.approx(0.95) for r in result.round_returns)

    def test_tie_rate_approximately_correct(self):
        """Test that tie rate is approximately 9.5% (historical average)."""
        result = run_simulation(3000, Bet(player=10), rng=random.Random(7))
        tie_rate = result.outcome_counts[Outcome.TIE] / result.num_rounds
        assert 0.05 <= tie_rate <= 0.15, f"Tie rate should be around 9.5%, got {tie_rate:.1%}"

    def test_reproducible_with_seed(self):
        first = run_simulation(500, Bet(player=10, tie=10), rng=random.Random(5))
        second = run_simulation(500, Bet(player=10, tie=10), rng=random.Random(5))
        assert first.outcome_counts == second.outcome_counts
        assert first.net_earnings == second.net_earnings
        assert first.round_returns == second.round_returns

    def test_default_bet(self):
        result = run_simulation(10, rng=random.Random(1))
        assert result.bets == Bet(banker=10)

    def test_zero_rounds(self):
        result = run_simulation(0, Bet(player=10), rng=random.Random(1))
        assert result.total_wagered == 0
        assert result.house_edge == 0.0
        assert house_edge(result)["sample_size"] == 0
        assert outcome_chi_square(result)["sample_size"] == 0


class TestStatistics:
    def test_outcomes_fit_theory(self):
        result = run_simulation(5000, Bet(banker=10), rng=random.Random(2024))
        fit = outcome_chi_square(result)

        assert fit["sample_size"] == 5000
        assert sum(fit["observed"].values()) == 5000
        assert sum(fit["expected"].values()) == pytest.approx(5000)
        assert fit["p_value"] > 0.001, f"Outcome frequencies far from theory: {fit}"

    def test_house_edge_matches_net(self):
        result = run_simulation(3000, Bet(banker=10), rng=random.Random(31))
        edge = house_edge(result)

        assert edge["house_edge"] == pytest.approx(result.house_edge)
        assert edge["sample_size"] == 3000
        interval = ConfidenceInterval(**edge["confidence_interval"])
        assert interval.contains(edge["house_edge"])
        assert edge["standard_deviation"] > 0

    def test_tie_bets_lose_most(self):
        """Tie bets should lose more money than Player or Banker bets over many rounds."""
        player = run_simulation(5000, Bet(player=10), rng=random.Random(12345))
        banker = run_simulation(5000, Bet(banker=10), rng=random.Random(12345))
        tie = run_simulation(5000, Bet(tie=10), rng=random.Random(12345))

        assert tie.net_earnings < player.net_earnings
        assert tie.net_earnings < banker.net_earnings


class TestCli:
    def test_simulate(self, capsys):
        main(["--simulate", "--num-rounds", "300", "--bet", "player", "--bet-amount", "25", "--seed", "1"])
        output = capsys.readouterr().out
        assert "Baccarat Simulation Results" in output
        assert "Rounds played: 300" in output
        assert "Total wagered: $7,500.00" in output

    def test_compare(self, capsys):
        main(["--compare", "--num-rounds", "200", "--seed", "3"])
        output = capsys.readouterr().out
        assert "BACCARAT BET TYPE COMPARISON" in output
        for name in ("Player", "Banker", "Tie"):
            assert name in output

    def test_compare_returns_results(self, capsys):
        results = compare_bet_types(100, 10, rng=random.Random(8))
        assert set(results) == set(BetType)
        assert results[BetType.TIE].bets == Bet(tie=10)

    def test_invalid_deck_count(self, capsys):
        with pytest.raises(SystemExit):
            main(["--simulate", "--num-decks", "0"])

    @pytest.mark.parametrize("amount", ["-10", "0", "nan", "inf"])
    def test_invalid_bet_amount(self, amount, capsys):
        with pytest.raises(SystemExit):
            main(["--simulate", "--num-rounds", "200", "--bet-amount", amount, "--seed", "1"])
        assert "--bet-amount" in capsys.readouterr().err

    @pytest.mark.parametrize("rounds", ["0", "-5"])
    def test_invalid_round_count(self, rounds, capsys):
        with pytest.raises(SystemExit):
            main(["--compare", "--num-rounds", rounds])
        assert "--num-rounds" in capsys.readouterr().err

    def test_invalid_bet_type(self, capsys):
        with pytest.raises(SystemExit):
            main(["--bet", "dragon"])
