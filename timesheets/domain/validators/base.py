"""
Validator interface shared by entity validators.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one item: every failing rule, in rule order."""

    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class Validator(ABC, Generic[T]):
    """
    Pure, deterministic validation with no I/O.
    Every rule runs; all failures are reported rather than only the first.
    """

    @abstractmethod
    def validate(self, item: T) -> ValidationResult:
        pass
