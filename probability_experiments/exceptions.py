class MontyHallError(Exception):
    """Base class for errors raised by the Monty Hall simulation."""


class InvalidDoorError(MontyHallError, ValueError):
    """Door index outside 1..3, or an opened door equal to the contestant's pick."""


class MalformedGameError(MontyHallError, ValueError):
    """Game is not three doors with exactly one car behind them."""


class NoDataError(MontyHallError):
    """Win proportions were asked for but no games were played."""
