"""Simulate many battles between two circles and print a matchup report.

Usage:
    python scripts/simulate_battles.py --runs 500
    python scripts/simulate_battles.py --pool cards.json --mine c1 --opponent c2
"""

from __future__ import annotations

import argparse
import logging
import time

from circle_battle.balance import compute_battle_metrics, generate_text_report
from circle_battle.content import JsonCardPool, generate_mock_roster
from circle_battle.core import BattleConfig
from circle_battle.play_agents import (
    AlwaysAttackAgent,
    AlwaysAttackPolicy,
    CautiousPolicy,
    RandomAgent,
)
from circle_battle.sim import BattleRunner

_POLICIES = {"always_attack": AlwaysAttackPolicy, "cautious": CautiousPolicy}
_AGENTS = {"always_attack": AlwaysAttackAgent, "random": RandomAgent}


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate circle battles")
    parser.add_argument("--runs", type=int, default=500)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--pool", type=str, default=None, help="JSON card pool export")
    parser.add_argument("--mine", type=str, default="circle-a")
    parser.add_argument("--opponent", type=str, default="circle-b")
    parser.add_argument("--policy", choices=sorted(_POLICIES), default="always_attack")
    parser.add_argument("--agent", choices=sorted(_AGENTS), default="always_attack")
    parser.add_argument("--parallel", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = BattleConfig.from_env()
    if args.pool:
        pool = JsonCardPool(args.pool)
        my_roster = pool.get_roster(args.mine)
        opponent_roster = pool.get_roster(args.opponent)
    else:
        my_roster = generate_mock_roster(args.mine, config.mock_roster_size)
        opponent_roster = generate_mock_roster(args.opponent, config.mock_roster_size)

    runner = BattleRunner(
        policy_class=_POLICIES[args.policy],
        agent_class=_AGENTS[args.agent],
        config=config,
    )

    t0 = time.time()
    results = runner.run_batch(
        args.runs, my_roster, opponent_roster,
        base_seed=args.seed, parallel=args.parallel,
    )
    elapsed = time.time() - t0

    metrics = compute_battle_metrics(results)
    label = f"{args.mine} ({args.agent}) vs {args.opponent} ({args.policy})"
    print(generate_text_report(metrics, label))
    print(f"\nTime: {elapsed:.2f}s ({elapsed / max(args.runs, 1) * 1000:.1f}ms/battle)")


if __name__ == "__main__":
    main()
