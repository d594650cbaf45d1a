import argparse
import logging
import sys

from probability_experiments.exceptions import MontyHallError
from probability_experiments.experiment import MontyHallProblem


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="monty-hall",
                                     description="Compare staying and switching in the Monty Hall game")
    parser.add_argument("-n", "--games", type=int, required=True,
                        help="number of games to play (10000 or more for the rates to settle)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random generator")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser, parser.parse_args(argv)


def main(argv=None):
    parser, args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s",
                        stream=sys.stderr)

    mhp = MontyHallProblem(random_state=args.seed)
    try:
        mhp.play_many_games(num_games_to_play=args.games, verbose=True)
    except (MontyHallError, ValueError) as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
