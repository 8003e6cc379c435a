#!/usr/bin/env python3
"""Profile baccarat simulation to identify performance bottlenecks."""

import cProfile
import pstats
import io
import random

from puntobanco.baccarat.baccarat import run_simulation
from puntobanco.baccarat.game import execute_game_round
from puntobanco.baccarat.payout import Bet
from puntobanco.common.shoe import create_shoe, needs_shuffle


def profile_rounds():
    """Profile raw round resolution, threading the shoe by hand."""
    rng = random.Random(1)
    bets = Bet(player=10, banker=10, tie=10)
    shoe = create_shoe(rng=rng)

    profiler = cProfile.Profile()
    profiler.enable()

    for _ in range(20000):
        if needs_shuffle(shoe):
            shoe = create_shoe(rng=rng)
        shoe = execute_game_round(shoe, bets).shoe

    profiler.disable()

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats("cumulative")
    ps.print_stats(40)
    print(s.getvalue())

    print("\n\n=== BY TOTAL TIME ===\n")
    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats("tottime")
    ps.print_stats(30)
    print(s.getvalue())


def profile_simulation():
    """Profile the full simulation runner including settlement bookkeeping."""
    profiler = cProfile.Profile()
    profiler.enable()

    run_simulation(20000, Bet(banker=10), rng=random.Random(2))

    profiler.disable()

    print("\n\n=== SIMULATION PROFILING ===\n")
    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats("cumulative")
    ps.print_stats(40)
    print(s.getvalue())


if __name__ == "__main__":
    print("Profiling round resolution...")
    profile_rounds()

    print("\n\n" + "=" * 80 + "\n\n")

    print("Profiling simulation runner...")
    profile_simulation()
