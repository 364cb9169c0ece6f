"""
Property evaluation primitives.

A Prop evaluates to a Result under generation Parameters. Only the outcome
primitives and the two combinators needed to build synthetic properties live
here; running and reporting property checks is the runner's job.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .gen import Gen, Parameters


class Status(Enum):
    """Outcome of evaluating a property once."""

    PASSED = "passed"
    FALSIFIED = "falsified"
    PROVED = "proved"
    UNDECIDED = "undecided"
    EXCEPTION = "exception"

    def is_success(self) -> bool:
        """Check if status counts as a successful evaluation."""
        return self in (Status.PASSED, Status.PROVED)

    def is_failure(self) -> bool:
        """Check if status indicates a failed evaluation."""
        return self in (Status.FALSIFIED, Status.EXCEPTION)


@dataclass(frozen=True)
class Result:
    """Result of one property evaluation."""

    status: Status
    args: tuple = ()
    error: BaseException | None = field(default=None, compare=False)


class Prop:
    """A property: evaluates to a Result under the given parameters."""

    __slots__ = ("_evaluate", "name")

    def __init__(self, evaluate: Callable[[Parameters], Result], name: str = "prop"):
        self._evaluate = evaluate
        self.name = name

    def __call__(self, params: Parameters) -> Result:
        return self._evaluate(params)

    @classmethod
    def of(cls, status: Status, name: str | None = None) -> "Prop":
        """A property that always evaluates to status."""
        result = Result(status)
        return cls(lambda p: result, name or status.value)

    def __repr__(self) -> str:
        return f"Prop({self.name})"


passed = Prop.of(Status.PASSED)
falsified = Prop.of(Status.FALSIFIED)
proved = Prop.of(Status.PROVED)
undecided = Prop.of(Status.UNDECIDED)


def exception(error: BaseException | None = None) -> Prop:
    """A property that always evaluates to an exception outcome."""
    result = Result(Status.EXCEPTION, error=error)
    return Prop(lambda p: result, "exception")


def _as_prop(value: Any) -> Prop:
    if isinstance(value, Prop):
        return value
    return passed if value else falsified


def implies(condition: bool, prop: Any) -> Prop:
    """Evaluate prop only when condition holds; otherwise undecided."""
    return _as_prop(prop) if condition else undecided


def for_all(gen: Gen, predicate: Callable[[Any], Any]) -> Prop:
    """
    Property holding when predicate holds for a value drawn from gen.

    The predicate may return a bool or a Prop. A proof about one drawn value
    is reported as passed; an exception raised by the predicate is reported
    as an exception outcome carrying the drawn argument.
    """

    def evaluate(params: Parameters) -> Result:
        value = gen.apply(params)
        try:
            result = _as_prop(predicate(value))(params)
        except Exception as e:
            return Result(Status.EXCEPTION, (value,), e)
        status = Status.PASSED if result.status is Status.PROVED else result.status
        return Result(status, (value, *result.args), result.error)

    return Prop(evaluate, "for_all")
