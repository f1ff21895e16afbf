#!/usr/bin/env python3
"""
Yahtzee Rule Scorer — Score one hand of five dice against every rule.

Usage: uv run python score_hand.py 2 2 3 3 3
       uv run python score_hand.py 1 2 3 4 6 --rule small_straight --rule chance
       uv run python score_hand.py 4 4 4 4 4 --best
       uv run python score_hand.py 6 6 6 1 2 --csv --total
"""
from __future__ import annotations

import argparse
import logging
import sys

from rules import RULES, InvalidHandError, best_rule, validate_hand
from settings import catalog_from_settings, load_settings

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Optional list of args (for testing). None uses sys.argv.

    Returns:
        Parsed argparse.Namespace.
    """
    parser = argparse.ArgumentParser(description="Score a Yahtzee hand")
    parser.add_argument("dice", nargs="+", type=int, metavar="DIE",
                        help="Five die values, 1-6")
    parser.add_argument("--rule", action="append", choices=list(RULES), metavar="NAME",
                        help="Only score this rule (repeatable, default: all)")
    parser.add_argument("--best", action="store_true",
                        help="Print only the highest-scoring rule")
    parser.add_argument("--total", action="store_true",
                        help="Append the sum of the printed scores")
    parser.add_argument("--csv", action="store_true",
                        help="Output results as CSV")
    parser.add_argument("--settings", metavar="PATH",
                        help="Settings file (default: ~/.yahtzee_rules.json)")
    parser.add_argument("--verbose", action="store_true",
                        help="Log each rule evaluation")
    return parser.parse_args(argv)


def print_table(results, catalog, show_descriptions=True):
    """Print one aligned line per (name, score)."""
    for name, score in results:
        line = f"  {name:15s}  {score:3d}"
        if show_descriptions:
            line += f"  {catalog[name].description}"
        print(line)


def print_csv(results, catalog):
    """Print a CSV header row followed by one row per (name, score)."""
    print("rule,score,description")
    for name, score in results:
        print(f"{name},{score},{catalog[name].description}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    settings = load_settings(args.settings)
    catalog = catalog_from_settings(settings)

    try:
        hand = validate_hand(args.dice)
    except InvalidHandError as exc:
        logger.error("Invalid hand %s: %s", args.dice, exc)
        return 2

    selected = {name: catalog[name] for name in args.rule or catalog}
    if args.best:
        results = [best_rule(hand, selected)]
    else:
        results = []
        for name, rule in selected.items():
            score = rule.evaluate(hand)
            logger.debug("%s %s -> %d", name, hand, score)
            results.append((name, score))

    if args.csv:
        print_csv(results, catalog)
        if args.total:
            print(f"total,{sum(score for _, score in results)},")
    else:
        print(f"Hand: {' '.join(str(die) for die in hand)}")
        print_table(results, catalog, show_descriptions=settings["show_descriptions"])
        if args.total:
            print(f"  {'total':15s}  {sum(score for _, score in results):3d}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
