# kvargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used inside the kvargs dispatch loop.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so an
extension catching `Exception` cannot swallow them.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in kvargs."""


class HelpSignal(FlowSignal):
    """Raised when the built-in help option is seen."""

    def __init__(self, message: str = "Help signal received.") -> None:
        super().__init__(message)
