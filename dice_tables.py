"""
Dice Tables — Precomputed single-roll combinatorics for the rule catalog.

All constants are computed at import time. No randomness involved.

Constants:
    ALL_COMBOS       — 252 distinct unordered 5-dice outcomes (sorted tuples)
    COMBO_TO_INDEX   — Reverse lookup: sorted tuple → index (0-251)
    COMBO_PROBS      — Multinomial probability of each combo when rolling 5 dice
    RULE_NAMES       — Column order of SCORE_TABLE (catalog order)
    SCORE_TABLE      — 252×13 table: score for each combo under each rule
    HIT_PROBABILITY  — Dict: rule name → chance one roll scores above zero
    EXPECTED_SCORE   — Dict: rule name → expected score of one roll

Functions:
    score_lookup(hand, name) — Table lookup equivalent to rules.calculate_score
"""
import itertools
import logging
import math
import time
from collections import Counter

from rules import NUM_DICE, MAX_FACE, MIN_FACE, RULES, get_rule, validate_hand

logger = logging.getLogger(__name__)

# ── ALL_COMBOS: 252 distinct unordered 5-dice outcomes ───────────────────────

ALL_COMBOS = list(itertools.combinations_with_replacement(range(MIN_FACE, MAX_FACE + 1), NUM_DICE))

COMBO_TO_INDEX = {combo: i for i, combo in enumerate(ALL_COMBOS)}


# ── COMBO_PROBS: multinomial probability of each combo ───────────────────────

def _multinomial_prob(combo):
    """Probability of rolling this unordered combo with 5 fair dice.

    P = (5! / (n1! × n2! × ... × nk!)) / 6^5
    where n_i are the counts of each distinct value.
    """
    ways = math.factorial(len(combo))
    for count in Counter(combo).values():
        ways //= math.factorial(count)
    return ways / (MAX_FACE ** len(combo))

COMBO_PROBS = [_multinomial_prob(combo) for combo in ALL_COMBOS]


# ── SCORE_TABLE: 252×13 score lookup ─────────────────────────────────────────

RULE_NAMES = list(RULES)

def _build_score_table():
    """Build SCORE_TABLE[combo_idx][rule_idx] from each rule's strategy."""
    t0 = time.perf_counter()
    # Combos are valid by construction, so skip per-call validation
    table = [[RULES[name].strategy.score(combo) for name in RULE_NAMES]
             for combo in ALL_COMBOS]
    logger.debug("Built %dx%d score table in %.1fms",
                 len(table), len(RULE_NAMES), (time.perf_counter() - t0) * 1000)
    return table

SCORE_TABLE = _build_score_table()


# ── HIT_PROBABILITY / EXPECTED_SCORE: single-roll statistics per rule ────────

def _rule_statistics():
    """Probability of a nonzero score and the expected score, per rule."""
    hit = {}
    expected = {}
    for rule_idx, name in enumerate(RULE_NAMES):
        hit[name] = sum(prob for prob, row in zip(COMBO_PROBS, SCORE_TABLE)
                        if row[rule_idx] > 0)
        expected[name] = sum(prob * row[rule_idx]
                             for prob, row in zip(COMBO_PROBS, SCORE_TABLE))
    return hit, expected

HIT_PROBABILITY, EXPECTED_SCORE = _rule_statistics()


def score_lookup(hand, name):
    """
    Look up a hand's score under a rule from SCORE_TABLE

    Args:
        hand: Sequence of five die values (1-6), in any order
        name: Rule name from the default catalog

    Returns:
        Same value as rules.calculate_score(name, hand)
    """
    combo = tuple(sorted(validate_hand(hand)))
    get_rule(name)  # raises UnknownRuleError
    return SCORE_TABLE[COMBO_TO_INDEX[combo]][RULE_NAMES.index(name)]
