"""
Statistical validation for Baccarat simulations.

Compares simulated outcome frequencies and returns against the known
probabilities of the 8-deck game, with confidence intervals on the measured
house edge.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

import numpy as np
import scipy.stats as stats

from puntobanco.baccarat.payout import BetType, Outcome
from puntobanco.baccarat.rules import BaccaratRules

if TYPE_CHECKING:
    from puntobanco.baccarat.baccarat import SimulationResult

# Outcome probabilities for an 8-deck shoe
THEORETICAL_PROBABILITIES = {
    Outcome.PLAYER: 0.446247,
    Outcome.BANKER: 0.458597,
    Outcome.TIE: 0.095156,
}


@dataclass
class ConfidenceInterval:
    """
    Represents a confidence interval with lower and upper bounds.

    Attributes:
        lower: The lower bound of the confidence interval
        upper: The upper bound of the confidence interval
        confidence: The confidence level (e.g., 0.95 for 95% confidence)
    """

    lower: float
    upper: float
    confidence: float

    def contains(self, value: float) -> bool:
        """Check if the interval contains a value."""
        return self.lower <= value <= self.upper

    def to_dict(self) -> Dict[str, float]:
        """Convert to a dictionary."""
        return {"lower": self.lower, "upper": self.upper, "confidence": self.confidence}


def theoretical_house_edge(area: Union[BetType, str], rules: Optional[BaccaratRules] = None) -> float:
    """
    House edge of a single-area bet, as a fraction of the stake.

    Player and Banker bets push on a tie, so ties do not enter their edge.

    Args:
        area: The area bet on
        rules: Payout rates (standard rates if None)

    Returns:
        The expected loss per unit staked (about 0.0124 Player, 0.0106 Banker, 0.1436 Tie)
    """
    rules = rules or BaccaratRules()
    area = BetType(area)
    p_player = THEORETICAL_PROBABILITIES[Outcome.PLAYER]
    p_banker = THEORETICAL_PROBABILITIES[Outcome.BANKER]
    p_tie = THEORETICAL_PROBABILITIES[Outcome.TIE]

    if area is BetType.PLAYER:
        expected_value = p_player * rules.player_payout - p_banker
    elif area is BetType.BANKER:
        expected_value = p_banker * rules.banker_payout - p_player
    else:
        expected_value = p_tie * rules.tie_payout - (1 - p_tie)
    return -expected_value


def confidence_interval(values, confidence: float = 0.95) -> ConfidenceInterval:
    """
    Calculate a t-based confidence interval for the mean of `values`.

    Args:
        values: The values to calculate the confidence interval for
        confidence: The confidence level (e.g., 0.95 for 95% confidence)

    Returns:
        A ConfidenceInterval object
    """
    values = np.asarray(values, dtype=float)
    if values.size < 2:
        mean = float(values.mean()) if values.size else 0.0
        return ConfidenceInterval(mean, mean, confidence)

    mean = float(np.mean(values))
    std_err = stats.sem(values)

    margin = float(std_err * stats.t.ppf((1 + confidence) / 2, values.size - 1))
    return ConfidenceInterval(mean - margin, mean + margin, confidence)


def outcome_chi_square(result: "SimulationResult") -> Dict[str, Any]:
    """
    Goodness-of-fit test of simulated outcomes against the theoretical frequencies.

    Args:
        result: A finished simulation

    Returns:
        Dictionary with the chi-square statistic, p-value, and observed and
        expected counts per outcome
    """
    outcomes = list(Outcome)
    observed = np.array([result.outcome_counts.get(outcome, 0) for outcome in outcomes], dtype=float)
    total = observed.sum()
    if total == 0:
        return {"chi_square": 0.0, "p_value": 1.0, "observed": {}, "expected": {}, "sample_size": 0}

    probabilities = np.array([THEORETICAL_PROBABILITIES[outcome] for outcome in outcomes])
    expected = probabilities / probabilities.sum() * total

    chi_square, p_value = stats.chisquare(observed, expected)

    return {
        "chi_square": float(chi_square),
        "p_value": float(p_value),
        "observed": {outcome.value: int(count) for outcome, count in zip(outcomes, observed)},
        "expected": {outcome.value: float(count) for outcome, count in zip(outcomes, expected)},
        "sample_size": int(total),
    }


def house_edge(result: "SimulationResult", confidence: float = 0.95) -> Dict[str, Any]:
    """
    Measured house edge of a simulation, per unit staked.

    Args:
        result: A finished simulation
        confidence: Confidence level for the interval

    Returns:
        Dictionary with the measured edge, its confidence interval, the
        per-round standard deviation and the sample size
    """
    returns = np.asarray(result.round_returns, dtype=float)
    if returns.size == 0:
        return {
            "house_edge": 0.0,
            "confidence_interval": ConfidenceInterval(0.0, 0.0, confidence).to_dict(),
            "standard_deviation": 0.0,
            "sample_size": 0,
        }

    interval = confidence_interval(-returns, confidence)
    return {
        "house_edge": float(-returns.mean()),
        "confidence_interval": interval.to_dict(),
        "standard_deviation": float(np.std(returns)),
        "sample_size": int(returns.size),
    }
