"""Tests for payout calculation and betting configuration."""

import pytest
from puntobanco.baccarat import (
    BaccaratRules,
    Bet,
    BetType,
    Outcome,
    PayoutResult,
    TableLimits,
    calculate_payout,
    calculate_total_payout,
)


class TestCalculatePayout:
    """Winnings per area for each outcome."""

    def test_player_win_payout(self):
        """Test Player bet payout (1:1)."""
        result = calculate_payout(Bet(player=100), Outcome.PLAYER)
        assert result.player_payout == 100
        assert result.banker_payout == 0
        assert result.tie_payout == 0
        assert result.total_payout == 100

    def test_banker_win_payout_with_commission(self):
        """Test Banker bet payout (1:1 minus 5% commission)."""
        result = calculate_payout(Bet(banker=100), Outcome.BANKER)
        assert result.banker_payout == pytest.approx(95)
        assert result.total_payout == pytest.approx(95)

    def test_banker_payout_keeps_fractions(self):
        assert calculate_total_payout(Bet(banker=10), Outcome.BANKER) == pytest.approx(9.5)
        assert calculate_total_payout(Bet(banker=15), Outcome.BANKER) == pytest.approx(14.25)

    def test_tie_bet_payout(self):
        """Test Tie bet payout (8:1)."""
        result = calculate_payout(Bet(tie=100), Outcome.TIE)
        assert result.tie_payout == 800
        assert result.total_payout == 800

    def test_player_and_banker_push_on_tie(self):
        result = calculate_payout(Bet(player=100, banker=100), Outcome.TIE)
        assert result == PayoutResult()
        assert result.total_payout == 0

    def test_losing_areas_pay_nothing(self):
        bets = Bet(player=100, banker=50, tie=20)
        assert calculate_payout(bets, Outcome.PLAYER) == PayoutResult(player_payout=100)
        assert calculate_payout(bets, Outcome.BANKER).player_payout == 0
        assert calculate_payout(bets, Outcome.BANKER).tie_payout == 0

    def test_multi_area_bets(self):
        bets = Bet(player=100, banker=50, tie=20)
        assert calculate_total_payout(bets, Outcome.BANKER) == pytest.approx(47.5)
        assert calculate_total_payout(bets, Outcome.PLAYER) == pytest.approx(100)
        assert calculate_total_payout(bets, Outcome.TIE) == pytest.approx(160)

    def test_outcome_given_as_string(self):
        assert calculate_total_payout(Bet(player=100), "player") == 100
        assert calculate_total_payout(Bet(banker=100), "banker") == pytest.approx(95)
        assert calculate_total_payout(Bet(tie=100), "tie") == 800

    def test_unknown_outcome(self):
        with pytest.raises(ValueError):
            calculate_payout(Bet(player=10), "dragon")

    def test_zero_bets(self):
        for outcome in Outcome:
            assert calculate_total_payout(Bet(), outcome) == 0

    def test_custom_rates(self):
        rules = BaccaratRules(banker_payout=1.0, tie_payout=9.0)
        assert calculate_total_payout(Bet(banker=100), Outcome.BANKER, rules) == 100
        assert calculate_total_payout(Bet(tie=10), Outcome.TIE, rules) == 90


class TestBet:
    def test_total(self):
        assert Bet(player=100, banker=50, tie=20).total == 170
        assert Bet().total == 0

    def test_truthiness(self):
        assert not Bet()
        assert Bet(tie=10)

    def test_amount_for(self):
        bets = Bet(player=1, banker=2, tie=3)
        assert bets.amount_for(BetType.PLAYER) == 1
        assert bets.amount_for("banker") == 2
        assert bets.amount_for(BetType.TIE) == 3

    def test_add_returns_new_bet(self):
        bets = Bet()
        more = bets.add(BetType.PLAYER, 50).add("player", 10.25).add("tie", 10)
        assert bets == Bet()
        assert more.player == 60.25
        assert more.tie == 10
        assert more.banker == 0

    def test_add_unknown_area(self):
        with pytest.raises(ValueError):
            Bet().add("dragon", 10)


class TestConfiguration:
    def test_default_rules(self):
        rules = BaccaratRules()
        assert rules.num_decks == 8
        assert rules.total_cards == 416
        assert rules.shuffle_threshold == 52
        assert rules.player_payout == 1.0
        assert rules.banker_payout == 0.95
        assert rules.tie_payout == 8.0
        assert rules.banker_commission == 0.05

    def test_invalid_rules(self):
        with pytest.raises(ValueError):
            BaccaratRules(num_decks=0)
        with pytest.raises(ValueError):
            BaccaratRules(num_decks=1, shuffle_threshold=52)
        with pytest.raises(ValueError):
            BaccaratRules(shuffle_threshold=-1)
        with pytest.raises(ValueError):
            BaccaratRules(tie_payout=-8)

    def test_default_limits(self):
        limits = TableLimits()
        assert limits.min_bet == 10
        assert limits.max_bet == 10000
        assert limits.max_total_bet == 20000
        assert limits.chip_denominations == (10, 50, 100, 500, 1000)
        assert limits.initial_balance == 10000
        assert limits.max_history_entries == 10

    def test_invalid_limits(self):
        with pytest.raises(ValueError):
            TableLimits(min_bet=0)
        with pytest.raises(ValueError):
            TableLimits(min_bet=100, max_bet=50)
        with pytest.raises(ValueError):
            TableLimits(max_bet=500, max_total_bet=100)
