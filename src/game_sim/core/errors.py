"""
Error types shared by the simulation core.
"""


class ContractViolation(AssertionError):
    """
    Raised when a caller breaks the Simulator contract.

    Examples: an action outside the player's legal set, or a joint action
    missing an entry for an active player. This is a programming error in
    the caller, so it derives from AssertionError and is never caught by
    the engine.
    """
