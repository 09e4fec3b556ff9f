"""
flakeid.errors - Exceptions raised by the identifier engine.
"""


class ConfigurationError(ValueError):
    """Raised when a generator is configured with invalid parameters."""


class ClockRegressionError(RuntimeError):
    """
    Raised when the clock reports a time earlier than the last issued ID.

    The generator keeps its state untouched; retrying, aborting or alerting
    is up to the caller.
    """

    def __init__(self, last_timestamp: int, current_timestamp: int):
        self.last_timestamp = last_timestamp
        self.current_timestamp = current_timestamp
        super().__init__(
            f"Clock moved backwards. Refusing to generate ID for "
            f"{last_timestamp - current_timestamp}ms"
        )
