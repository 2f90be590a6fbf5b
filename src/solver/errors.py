"""
Solver error types.
"""


class InvariantViolation(AssertionError):
    """
    Raised when grid bookkeeping is inconsistent.

    Examples are moving a group id that does not exist or grabbing a cell
    that is not movable. These indicate a bug in successor generation and
    are never expected on well-formed levels.
    """
