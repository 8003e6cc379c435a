#!/usr/bin/env python3
"""
Example demonstrating a Baccarat session.

Plays a handful of rounds with a fixed set of bets, printing both hands, the
winner and the running balance, then the session statistics.
"""

import argparse
import logging
import random
import sys

try:
    from puntobanco.baccarat import BaccaratError, Bet, GameSession, TableLimits
except ImportError:
    print("ERROR: puntobanco package not found or incompletely installed.")
    print("Please ensure puntobanco is installed properly with: pip install -e .")
    sys.exit(1)


def main():
    parser = argparse.ArgumentParser(description="Play a few rounds of Baccarat.")
    parser.add_argument("-r", "--rounds", type=int, default=10, help="number of rounds to play (default: 10)")
    parser.add_argument("--player", type=float, default=0, help="stake on Player each round")
    parser.add_argument("--banker", type=float, default=100, help="stake on Banker each round (default: 100)")
    parser.add_argument("--tie", type=float, default=10, help="stake on Tie each round (default: 10)")
    parser.add_argument("--balance", type=float, default=1000, help="starting balance (default: 1000)")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible shuffles")
    parser.add_argument("-v", "--verbose", action="store_true", help="show session log messages")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    session = GameSession(
        limits=TableLimits(initial_balance=args.balance),
        rng=random.Random(args.seed) if args.seed is not None else None,
    )
    bets = Bet(player=args.player, banker=args.banker, tie=args.tie)

    for number in range(1, args.rounds + 1):
        try:
            record = session.play_round(bets)
        except BaccaratError as e:
            print(f"Stopping after {number - 1} rounds: {e}")
            break

        print(f"Round {number}")
        print(f"  Player: {record.player_hand}")
        print(f"  Banker: {record.banker_hand}")
        print(f"  {record.outcome.value.capitalize()} wins, "
              f"net {record.settlement.net:+.2f}, balance {record.balance_after:.2f}")

    print("\nSession statistics:")
    for key, value in session.get_statistics().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
