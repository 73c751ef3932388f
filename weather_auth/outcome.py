"""Result union returned from the identity and NWS adapter boundaries.

Adapters never raise for backend failures; they hand back one of these and the
tool handlers branch on the type.
"""
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Denied:
    """The backend answered and refused the request."""
    reason: str


@dataclass(frozen=True)
class Unavailable:
    """The backend could not be reached or returned something unusable."""
    reason: str


Outcome = Union[Ok[Any], Denied, Unavailable]
