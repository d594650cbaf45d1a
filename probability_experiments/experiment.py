import numpy as np

from probability_experiments.monty_hall_problem import play_game
from probability_experiments.trial_runner import play_n_games


class MontyHallProblem:
    def __init__(self,
                 random_state=None  # Seed for reproducing results, None draws fresh entropy
                 ):
        self.random_state = random_state
        self.rng = np.random.default_rng(random_state)

    def play_game(self):
        return play_game(self.rng)

    def play_many_games(self, num_games_to_play, verbose=False):
        return play_n_games(num_games_to_play, rng=self.rng, verbose=verbose)
