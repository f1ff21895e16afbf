"""
Yahtzee Rules - Pure scoring rules for a single roll of five dice

Every rule is an immutable value: a name, a description, and one scoring
strategy holding its own parameters. Rules never mutate the hand and never
keep state between calls, so the module-level constants can be shared freely.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Integral
from types import MappingProxyType
from typing import Mapping, Tuple, Union

NUM_DICE = 5
MIN_FACE = 1
MAX_FACE = 6


class InvalidHandError(ValueError):
    """Raised when a hand is not exactly five dice valued 1-6."""


class UnknownRuleError(KeyError):
    """Raised when a rule name is not in the catalog."""

    def __str__(self):
        return f"Unknown rule: {self.args[0]!r}"


def validate_hand(hand) -> Tuple[int, ...]:
    """
    Check that hand is a sequence of five dice valued 1-6

    Args:
        hand: Sequence of die values

    Returns:
        The hand as a tuple

    Raises:
        InvalidHandError: If the hand has the wrong length or a bad die
    """
    if isinstance(hand, (str, bytes)) or not isinstance(hand, Sequence):
        raise InvalidHandError(f"Hand must be a sequence of dice, got {type(hand).__name__}")
    if len(hand) != NUM_DICE:
        raise InvalidHandError(f"Hand must have {NUM_DICE} dice, got {len(hand)}")
    for i, die in enumerate(hand):
        # bool is Integral, but True is not a die
        if isinstance(die, bool) or not isinstance(die, Integral):
            raise InvalidHandError(f"Die {i} is not an integer: {die!r}")
        if not MIN_FACE <= die <= MAX_FACE:
            raise InvalidHandError(f"Die {i} is out of range {MIN_FACE}-{MAX_FACE}: {die}")
    return tuple(int(die) for die in hand)


# Shared helpers

def hand_sum(hand):
    """Sum of all dice in the hand"""
    return sum(hand)


def frequencies(hand):
    """
    Repeat counts of each distinct face value

    Args:
        hand: Sequence of die values

    Returns:
        List with one count per distinct value, e.g. [2,2,2,5,5] -> [3, 2]
    """
    return list(Counter(hand).values())


def count_of(hand, value):
    """Number of dice showing value"""
    return sum(1 for die in hand if die == value)


# Scoring strategies

def _check_award(award):
    """Raise ValueError unless award is a non-negative int"""
    if isinstance(award, bool) or not isinstance(award, int) or award < 0:
        raise ValueError(f"Award must be a non-negative integer, got {award!r}")


@dataclass(frozen=True)
class PerFaceTotal:
    """Sum of the dice showing one face value"""
    value: int  # 1-6

    def score(self, hand) -> int:
        return self.value * count_of(hand, self.value)


@dataclass(frozen=True)
class SumIfDistribution:
    """Sum of all dice when some face appears at least min_count times"""
    min_count: int  # 0 means always score

    def score(self, hand) -> int:
        if any(count >= self.min_count for count in frequencies(hand)):
            return hand_sum(hand)
        return 0


@dataclass(frozen=True)
class FullHouse:
    """Flat award for three of one face and two of another"""
    award: int

    def __post_init__(self):
        _check_award(self.award)

    def score(self, hand) -> int:
        counts = frequencies(hand)
        return self.award if 2 in counts and 3 in counts else 0


@dataclass(frozen=True)
class SmallStraight:
    """Flat award for four consecutive values"""
    award: int

    def __post_init__(self):
        _check_award(self.award)

    def score(self, hand) -> int:
        values = set(hand)
        # 1-2-3-4 or 2-3-4-5
        if {2, 3, 4} <= values and (1 in values or 5 in values):
            return self.award
        # 2-3-4-5 or 3-4-5-6
        if {3, 4, 5} <= values and (2 in values or 6 in values):
            return self.award
        return 0


@dataclass(frozen=True)
class LargeStraight:
    """Flat award for five consecutive values"""
    award: int

    def __post_init__(self):
        _check_award(self.award)

    def score(self, hand) -> int:
        values = set(hand)
        # Five distinct faces holding both 1 and 6 must skip an interior value
        if len(values) == NUM_DICE and not (1 in values and 6 in values):
            return self.award
        return 0


@dataclass(frozen=True)
class AllSame:
    """Flat award when every die shows the same face"""
    award: int

    def __post_init__(self):
        _check_award(self.award)

    def score(self, hand) -> int:
        counts = frequencies(hand)
        return self.award if len(counts) == 1 and counts[0] == NUM_DICE else 0


Strategy = Union[PerFaceTotal, SumIfDistribution, FullHouse,
                 SmallStraight, LargeStraight, AllSame]


@dataclass(frozen=True)
class Rule:
    """A named scoring rule bound to one strategy"""
    name: str
    description: str
    strategy: Strategy

    def evaluate(self, hand) -> int:
        """
        Score a hand under this rule

        Args:
            hand: Sequence of five die values (1-6)

        Returns:
            Non-negative score; 0 when the rule is not satisfied

        Raises:
            InvalidHandError: If hand is not five dice valued 1-6
        """
        return self.strategy.score(validate_hand(hand))


# Catalog

UPPER_RULES = ("ones", "twos", "threes", "fours", "fives", "sixes")
LOWER_RULES = ("three_of_kind", "four_of_kind", "full_house",
               "small_straight", "large_straight", "yahtzee", "chance")

_FACE_NAMES = dict(zip(range(MIN_FACE, MAX_FACE + 1), UPPER_RULES))


def _points(n):
    return "1 point" if n == 1 else f"{n} points"


def make_catalog(full_house=25, small_straight=30, large_straight=40, yahtzee=50) -> Mapping[str, Rule]:
    """
    Build a read-only catalog of all thirteen rules

    Args:
        full_house: Flat award for a full house
        small_straight: Flat award for a small straight
        large_straight: Flat award for a large straight
        yahtzee: Flat award for five of a kind

    Returns:
        Mapping of rule name to Rule, in scorecard order

    Raises:
        ValueError: If an award is not a non-negative integer
    """
    rules = [
        Rule(name, f"{_points(face)} per {face}", PerFaceTotal(value=face))
        for face, name in _FACE_NAMES.items()
    ]
    rules += [
        Rule("three_of_kind", "sum all dice if 3 are the same", SumIfDistribution(min_count=3)),
        Rule("four_of_kind", "sum all dice if 4 are the same", SumIfDistribution(min_count=4)),
        Rule("full_house", f"{_points(full_house)} for a full house", FullHouse(award=full_house)),
        Rule("small_straight", f"{_points(small_straight)} for a small straight",
             SmallStraight(award=small_straight)),
        Rule("large_straight", f"{_points(large_straight)} for a large straight",
             LargeStraight(award=large_straight)),
        Rule("yahtzee", f"{_points(yahtzee)} for yahtzee", AllSame(award=yahtzee)),
        # Every face appears at least zero times, so chance always scores the sum
        Rule("chance", "sum of all dice", SumIfDistribution(min_count=0)),
    ]
    return MappingProxyType({rule.name: rule for rule in rules})


RULES = make_catalog()

ones = RULES["ones"]
twos = RULES["twos"]
threes = RULES["threes"]
fours = RULES["fours"]
fives = RULES["fives"]
sixes = RULES["sixes"]
three_of_kind = RULES["three_of_kind"]
four_of_kind = RULES["four_of_kind"]
full_house = RULES["full_house"]
small_straight = RULES["small_straight"]
large_straight = RULES["large_straight"]
yahtzee = RULES["yahtzee"]
chance = RULES["chance"]


def get_rule(name, rules=RULES) -> Rule:
    """Look up a rule by name, raising UnknownRuleError if it is missing"""
    try:
        return rules[name]
    except KeyError:
        raise UnknownRuleError(name) from None


def calculate_score(name, hand, rules=RULES) -> int:
    """
    Calculate the score for a named rule and a hand

    Args:
        name: Rule name, e.g. "full_house"
        hand: Sequence of five die values (1-6)
        rules: Catalog to look the rule up in

    Returns:
        Integer score for the rule (0 if the hand doesn't qualify)
    """
    return get_rule(name, rules).evaluate(hand)


def score_all(hand, rules=RULES) -> dict[str, int]:
    """Score a hand under every rule, in catalog order"""
    hand = validate_hand(hand)
    return {name: rule.strategy.score(hand) for name, rule in rules.items()}


def best_rule(hand, rules=RULES) -> tuple[str, int]:
    """
    Find the highest-scoring rule for a hand

    Ties go to the rule that comes first in the catalog.

    Returns:
        (rule name, score)
    """
    scores = score_all(hand, rules)
    name = max(scores, key=scores.__getitem__)
    return name, scores[name]
