"""
Baccarat simulation CLI.

Run simulations and analyze the house edge for different bet types.
"""

import argparse
import logging
import random
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from puntobanco.common.shoe import create_shoe, needs_shuffle
from puntobanco.common.util import RandomSource
from puntobanco.baccarat.game import execute_game_round
from puntobanco.baccarat.ledger import settle_round
from puntobanco.baccarat.payout import Bet, BetType, Outcome
from puntobanco.baccarat.rules import BaccaratRules
from puntobanco.baccarat.statistics import house_edge, outcome_chi_square, theoretical_house_edge
from puntobanco.baccarat.validators import validate_bet_amount

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """
    Totals collected over a simulation run.

    Attributes:
        num_rounds: Rounds played
        bets: Stakes placed every round
        outcome_counts: Rounds won by each side
        naturals: Rounds ended by a natural
        total_wagered: Sum of all stakes
        net_earnings: Sum of all returns minus stakes
        shoes_used: Shoes shuffled during the run
        round_returns: Net result of each round per unit staked
        duration: Wall-clock seconds taken
    """

    num_rounds: int
    bets: Bet
    outcome_counts: Dict[Outcome, int] = field(default_factory=lambda: {outcome: 0 for outcome in Outcome})
    naturals: int = 0
    total_wagered: float = 0.0
    net_earnings: float = 0.0
    shoes_used: int = 1
    round_returns: List[float] = field(default_factory=list, repr=False)
    duration: float = 0.0

    @property
    def house_edge(self) -> float:
        """Observed house edge as a fraction of the total wagered."""
        return -self.net_earnings / self.total_wagered if self.total_wagered > 0 else 0.0

    @property
    def rounds_per_second(self) -> float:
        return self.num_rounds / self.duration if self.duration > 0 else 0.0


def run_simulation(
    num_rounds: int = 10000,
    bets: Optional[Bet] = None,
    rules: Optional[BaccaratRules] = None,
    rng: Optional[RandomSource] = None,
) -> SimulationResult:
    """
    Run a Baccarat simulation with the same bets every round.

    The shoe is threaded from round to round and replaced whenever it reaches
    the shuffle threshold.

    Args:
        num_rounds: Number of rounds to simulate
        bets: Stakes placed every round (10 on Banker if None)
        rules: Game rules configuration
        rng: Random source for shuffling, for reproducible runs

    Returns:
        SimulationResult with the collected totals
    """
    rules = rules or BaccaratRules()
    bets = bets if bets is not None else Bet(banker=10)
    result = SimulationResult(num_rounds=num_rounds, bets=bets)

    shoe = create_shoe(rules.num_decks, rules.shuffle_threshold, rng)
    start_time = time.time()

    for _ in range(num_rounds):
        if needs_shuffle(shoe):
            shoe = create_shoe(rules.num_decks, rules.shuffle_threshold, rng)
            result.shoes_used += 1

        round_result = execute_game_round(shoe, bets, rules)
        shoe = round_result.shoe

        settlement = settle_round(bets, round_result.outcome, round_result.payout)
        result.outcome_counts[round_result.outcome] += 1
        if round_result.is_natural:
            result.naturals += 1
        result.total_wagered += settlement.stake
        result.net_earnings += settlement.net
        if settlement.stake > 0:
            result.round_returns.append(settlement.net / settlement.stake)

    result.duration = time.time() - start_time
    logger.debug("Simulated %d rounds over %d shoes in %.2fs", num_rounds, result.shoes_used, result.duration)
    return result


def print_simulation(result: SimulationResult) -> None:
    """Print a simulation report."""
    num_rounds = result.num_rounds or 1
    counts = result.outcome_counts
    edge = house_edge(result)
    fit = outcome_chi_square(result)
    interval = edge["confidence_interval"]

    print(f"\nBaccarat Simulation Results ({result.bets})")
    print("=" * 60)
    print(f"Rounds played: {result.num_rounds:,}")
    print(f"Shoes used: {result.shoes_used:,}")
    print(f"Total wagered: ${result.total_wagered:,.2f}")
    print(f"Net earnings: ${result.net_earnings:,.2f}")
    print(f"House edge: {result.house_edge * 100:.2f}%")
    print(f"  95% interval (per round): {interval['lower'] * 100:.2f}% to {interval['upper'] * 100:.2f}%")
    print(f"\nOutcome Distribution:")
    print(f"  Player wins: {counts[Outcome.PLAYER]:,} ({counts[Outcome.PLAYER] / num_rounds * 100:.1f}%)")
    print(f"  Banker wins: {counts[Outcome.BANKER]:,} ({counts[Outcome.BANKER] / num_rounds * 100:.1f}%)")
    print(f"  Ties: {counts[Outcome.TIE]:,} ({counts[Outcome.TIE] / num_rounds * 100:.1f}%)")
    print(f"  Naturals: {result.naturals:,} ({result.naturals / num_rounds * 100:.1f}%)")
    print(f"  Chi-square vs theory: {fit['chi_square']:.2f} (p = {fit['p_value']:.3f})")
    print(f"\nDuration: {result.duration:.2f} seconds")
    print(f"Rounds per second: {result.rounds_per_second:,.0f}")
    print("=" * 60)


def compare_bet_types(
    num_rounds: int = 10000,
    bet_amount: float = 10,
    rules: Optional[BaccaratRules] = None,
    rng: Optional[RandomSource] = None,
) -> Dict[BetType, SimulationResult]:
    """
    Compare all three bet types (Player, Banker, Tie) to show house edges.

    Args:
        num_rounds: Number of rounds to simulate for each bet type
        bet_amount: Amount to bet per round
        rules: Game rules configuration
        rng: Random source for shuffling

    Returns:
        The simulation result for each bet type
    """
    print("\n" + "=" * 70)
    print("BACCARAT BET TYPE COMPARISON")
    print("=" * 70)
    print(f"Simulating {num_rounds:,} rounds for each bet type...")
    print()

    results = {}
    for bet_type in BetType:
        bets = Bet().add(bet_type, bet_amount)
        results[bet_type] = run_simulation(num_rounds, bets, rules, rng)

    print(f"{'Bet Type':<10} {'House Edge':<12} {'Theory':<10} {'Net Earnings'}")
    print("-" * 70)

    for bet_type, r in results.items():
        print(f"{bet_type.value.capitalize():<10} "
              f"{r.house_edge * 100:>10.2f}%  "
              f"{theoretical_house_edge(bet_type, rules) * 100:>7.2f}%  "
              f"${r.net_earnings:>12,.2f}")

    print("-" * 70)
    return results


def main(argv: Optional[List[str]] = None):
    """Main CLI interface for Baccarat simulation."""
    parser = argparse.ArgumentParser(
        description="Baccarat Game Simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run 10,000 rounds with Banker bets
  puntobanco-baccarat --simulate --num-rounds 10000 --bet banker

  # Compare all bet types
  puntobanco-baccarat --compare

  # Reproducible simulation with a custom bet amount
  puntobanco-baccarat --simulate --num-rounds 1000 --bet player --bet-amount 25 --seed 42
        """
    )

    parser.add_argument("--simulate", action="store_true", help="Run simulation mode")
    parser.add_argument(
        "--compare", action="store_true", help="Compare all bet types (Player, Banker, Tie)"
    )
    parser.add_argument(
        "--num-rounds",
        type=int,
        default=10000,
        help="Number of rounds to simulate (default: 10000)",
    )
    parser.add_argument(
        "--bet",
        type=str,
        choices=["player", "banker", "tie"],
        default="banker",
        help="Bet type (default: banker)",
    )
    parser.add_argument(
        "--bet-amount", type=float, default=10.0, help="Bet amount per round (default: 10)"
    )
    parser.add_argument(
        "--num-decks", type=int, default=8, help="Number of decks in shoe (default: 8)"
    )
    parser.add_argument(
        "--shuffle-threshold",
        type=int,
        default=52,
        help="Reshuffle when this many cards remain (default: 52)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible shuffles")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.num_rounds < 1:
        parser.error("--num-rounds must be at least 1")
    if not validate_bet_amount(args.bet_amount):
        parser.error(f"--bet-amount must be a positive finite number, got {args.bet_amount}")

    try:
        rules = BaccaratRules(num_decks=args.num_decks, shuffle_threshold=args.shuffle_threshold)
    except ValueError as e:
        parser.error(str(e))
    rng = random.Random(args.seed) if args.seed is not None else None

    if args.simulate:
        bets = Bet().add(args.bet, args.bet_amount)
        print_simulation(run_simulation(args.num_rounds, bets, rules, rng))
    else:
        compare_bet_types(args.num_rounds, args.bet_amount, rules, rng)


if __name__ == "__main__":
    main()
