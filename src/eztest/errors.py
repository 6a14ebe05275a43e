"""Error types raised by the harness itself.

Assertion failures are never raised; they are recorded on the active
result state. The exceptions below signal misuse of the harness.
"""


class EzTestError(Exception):
    """Base class for harness errors."""


class RegistrationError(EzTestError):
    """Raised when a test or suite fixture cannot be registered (developer error)."""


class ConfigurationError(EzTestError):
    """Raised when the runner is started without a usable configuration."""


class NoActiveTestError(EzTestError, RuntimeError):
    """Raised when an assertion is evaluated while no test is running."""

    def __init__(self, assertion_name: str | None = None) -> None:
        self.assertion_name = assertion_name
        message = "No test is running"
        if assertion_name:
            message = f"{assertion_name} used outside of a running test"
        super().__init__(message)
