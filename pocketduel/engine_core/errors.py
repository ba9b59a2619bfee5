"""Engine error kinds."""


class InvariantViolation(Exception):
    """
    Raised when the game state is corrupt or was set up incorrectly.

    This is never a user mistake. The reducer converts it into a
    FATAL ActionResult and the caller should abort the match.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
