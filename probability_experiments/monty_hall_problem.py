# Monty hall problem
import enum
import logging
from typing import NamedTuple

import numpy as np

from probability_experiments.exceptions import InvalidDoorError, MalformedGameError

logger = logging.getLogger(__name__)

DOORS = (1, 2, 3)


class DoorContent(enum.Enum):
    GOAT = "goat"
    CAR = "car"


class Strategy(enum.Enum):
    STAY = "stay"
    SWITCH = "switch"


class Outcome(enum.Enum):
    WIN = "WIN"
    LOSE = "LOSE"


class TrialResult(NamedTuple):
    strategy: Strategy
    outcome: Outcome


def _get_rng(rng):
    if rng is None:
        return np.random.default_rng()
    return rng


def _check_door(door, name="door"):
    # bool is an int subclass but never a door number
    if isinstance(door, bool) or not isinstance(door, (int, np.integer)) or door not in DOORS:
        raise InvalidDoorError(f"{name} must be one of {DOORS}, got {door!r}")
    return int(door)


def _check_game(game):
    if len(game) != len(DOORS) or not all(isinstance(content, DoorContent) for content in game):
        raise MalformedGameError(f"game must hold {len(DOORS)} DoorContent values, got {game!r}")
    if list(game).count(DoorContent.CAR) != 1:
        raise MalformedGameError(f"game must have exactly one car, got {game!r}")


def create_game(rng=None):
    """Shuffle two goats and one car behind doors 1, 2 and 3."""
    rng = _get_rng(rng)
    contents = [DoorContent.GOAT, DoorContent.GOAT, DoorContent.CAR]
    order = rng.permutation(len(contents))
    return tuple(contents[i] for i in order)


def select_door(rng=None):
    rng = _get_rng(rng)
    return int(rng.integers(1, len(DOORS) + 1))


def open_goat_door(game, pick, rng=None):
    """Door the host opens: never the contestant's pick and never the car.

    When the contestant already holds the car both other doors hide goats and
    the host picks one at random. Otherwise only one door qualifies.
    """
    _check_game(game)
    pick = _check_door(pick, "pick")
    goat_doors = [door for door in DOORS if game[door - 1] == DoorContent.GOAT and door != pick]

    if game[pick - 1] == DoorContent.CAR:
        opened_door = int(_get_rng(rng).choice(goat_doors))
    else:
        opened_door = goat_doors[0]
    return opened_door


def change_door(stay, opened_door, pick):
    """Final pick after the reveal. `stay` is a bool or a Strategy."""
    if isinstance(stay, Strategy):
        stay = stay == Strategy.STAY
    opened_door = _check_door(opened_door, "opened_door")
    pick = _check_door(pick, "pick")
    if opened_door == pick:
        raise InvalidDoorError(f"host cannot open the contestant's pick ({pick})")

    if stay:
        return pick
    # Exactly one door is left once the opened one and the pick are removed
    return [door for door in DOORS if door != opened_door and door != pick][0]


def determine_winner(final_pick, game):
    _check_game(game)
    final_pick = _check_door(final_pick, "final_pick")
    if game[final_pick - 1] == DoorContent.CAR:
        return Outcome.WIN
    return Outcome.LOSE


def play_game(rng=None):
    # Both strategies are judged against the same game, pick and reveal
    rng = _get_rng(rng)
    game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(game, first_pick, rng)

    final_pick_stay = change_door(True, opened_door, first_pick)
    final_pick_switch = change_door(False, opened_door, first_pick)

    outcome_stay = determine_winner(final_pick_stay, game)
    outcome_switch = determine_winner(final_pick_switch, game)
    logger.debug("game=%s pick=%d opened=%d stay=%s switch=%s",
                 [content.value for content in game], first_pick, opened_door,
                 outcome_stay.value, outcome_switch.value)

    return [TrialResult(Strategy.STAY, outcome_stay),
            TrialResult(Strategy.SWITCH, outcome_switch)]
