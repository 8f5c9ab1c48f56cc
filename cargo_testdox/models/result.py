"""Models for parsed test outcomes and runner errors."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

Status = Literal["pass", "fail", "ignored"]


@dataclass(frozen=True, kw_only=True)
class FailureDetail:
    """Panic message and source location of a failing test."""

    message: str
    location: str

    def __str__(self) -> str:
        return f"At {self.location}\n{self.message}"


@dataclass(frozen=True, kw_only=True)
class TestOutcome:
    """Result of a single test as reported by the runner.

    ``identifier`` is the fully-qualified name (``foo::tests::bar``) and is
    the unique key of an outcome. ``name`` is its humanized display form.
    """

    __test__ = False

    identifier: str
    module: str | None = None
    name: str
    status: Status
    failure: FailureDetail | None = None


@dataclass(frozen=True, kw_only=True)
class InvocationError:
    """Runner-level error, e.g. an unexpected command-line argument."""

    message: str
    tip: str | None = None

    def __str__(self) -> str:
        text = f"{self.message}\n\n"
        if self.tip:
            text += f"    {self.tip}\n"
        return text


@dataclass(frozen=True, kw_only=True)
class RunReport:
    """Everything needed to present one test run."""

    outcomes: Sequence[TestOutcome] = field(default_factory=tuple)
    error: InvocationError | None = None
    success: bool = True

    @property
    def failed(self) -> bool:
        """True if the process failed or any test failed.

        The two are independent: a compile error fails the run with no
        tests executed at all.
        """
        return not self.success or any(
            outcome.status == "fail" for outcome in self.outcomes
        )
