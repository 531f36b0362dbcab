"""
Low Dice - Engine Errors

Every failure raised by the engine derives from DiceGameError. Errors are
raised where they are detected and are never patched up internally.
"""


class DiceGameError(Exception):
    """Base class for all Low Dice errors."""


class InvalidArgumentError(DiceGameError, ValueError):
    """A caller passed a structurally invalid input (None, negative count)."""


class InvalidStateError(DiceGameError, RuntimeError):
    """The operation cannot proceed given the current configuration."""


class DataIntegrityError(DiceGameError):
    """Recorded history contradicts the declared players or score table."""


class InvalidMoveError(DiceGameError):
    """An agent returned an empty or impossible selection of dice to keep."""
