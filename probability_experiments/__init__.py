from probability_experiments.exceptions import (InvalidDoorError, MalformedGameError, MontyHallError,
                                                NoDataError)
from probability_experiments.experiment import MontyHallProblem
from probability_experiments.monty_hall_problem import (DOORS, DoorContent, Outcome, Strategy, TrialResult,
                                                        change_door, create_game, determine_winner,
                                                        open_goat_door, play_game, select_door)
from probability_experiments.trial_runner import count_wins, merge_win_counts, play_n_games, win_proportions
