"""Tagged success/failure values returned by the record handlers."""
import enum
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @classmethod
    def wrap(cls, kind: ErrorKind, prefix: str, detail: str) -> "Err":
        return cls(kind, f"{prefix} [Error: {detail}]")


Result = Union[Ok[T], Err]
