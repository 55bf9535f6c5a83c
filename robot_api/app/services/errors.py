"""
Errors raised by the robot store.

Both errors are reported conditions rather than crashes: the API layer
turns ``ValidationError`` into HTTP 400 and ``RobotNotFoundError`` into
HTTP 404.
"""


class RobotStoreError(Exception):
    """Base class for errors raised by the robot store."""


class ValidationError(RobotStoreError):
    """A robot failed validation.

    ``field`` names the offending field (``Code``, ``Model``, ``Tech``,
    ``Status`` or ``Name``) and ``message`` lists the values currently
    allowed for it where that applies.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class RobotNotFoundError(RobotStoreError):
    """No robot is stored under the requested code."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Robot not found: {code}")
        self.code = code
