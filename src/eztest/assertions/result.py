from pathlib import Path

from pydantic import BaseModel


class SourceLocation(BaseModel):
    """File and line of the statement that evaluated an assertion."""

    file: str
    line: int

    @property
    def basename(self) -> str:
        return Path(self.file).name

    def __str__(self) -> str:
        return f"{self.basename}:{self.line}"


class AssertionFailure(BaseModel):
    """Diagnostic for one failed assertion.

    Attributes:
    ----------
    suite: str
        Suite of the test that was running
    test: str
        Name of the test that was running
    message: str
        Family-specific message with the offending values
    location: SourceLocation
        Call site of the failing assertion
    """

    suite: str
    test: str
    message: str
    location: SourceLocation
