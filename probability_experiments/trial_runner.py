import logging
import numbers

import pandas as pd

from probability_experiments.exceptions import NoDataError
from probability_experiments.monty_hall_problem import Outcome, Strategy, _get_rng, play_game

logger = logging.getLogger(__name__)

COLUMNS = ["strategy", "outcome"]


def _to_frame(results):
    if isinstance(results, pd.DataFrame):
        return results
    return pd.DataFrame([(result.strategy.value, result.outcome.value) for result in results],
                        columns=COLUMNS)


def count_wins(results):
    """Wins and games played per strategy, as {Strategy: (wins, total)}."""
    results = _to_frame(results)
    counts = {}
    for strategy in Strategy:
        outcomes = results.loc[results["strategy"] == strategy.value, "outcome"]
        counts[strategy] = (int((outcomes == Outcome.WIN.value).sum()), len(outcomes))
    return counts


def merge_win_counts(left, right):
    # Order of merging does not matter, so chunks of trials can be combined freely
    merged = {}
    for strategy in Strategy:
        left_wins, left_total = left.get(strategy, (0, 0))
        right_wins, right_total = right.get(strategy, (0, 0))
        merged[strategy] = (left_wins + right_wins, left_total + right_total)
    return merged


def win_proportions(results):
    """Row-normalised strategy x outcome table rounded to 2 decimals."""
    results = _to_frame(results)
    if results.empty:
        raise NoDataError("no games were played, win proportions are undefined")

    table = pd.crosstab(results["strategy"], results["outcome"], normalize="index")
    # A short run can miss an outcome entirely, keep both columns anyway
    table = table.reindex(index=[strategy.value for strategy in Strategy],
                          columns=[Outcome.LOSE.value, Outcome.WIN.value],
                          fill_value=0.0)
    return table.round(2)


def play_n_games(n, rng=None, verbose=True):
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"number of games must be an integer, got {n!r}")
    if n < 0:
        raise ValueError(f"number of games must not be negative, got {n}")

    rng = _get_rng(rng)
    results_list = []
    for _ in range(n):
        results_list.extend(play_game(rng))

    results_df = _to_frame(results_list)

    if n == 0:
        logger.warning("no games played, skipping win proportions")
        if verbose:
            print("No data: no games were played.")
        return results_df

    table = win_proportions(results_df)
    logger.info("played %d games, win proportions:\n%s", n, table)
    if verbose:
        print(table)
    return results_df
