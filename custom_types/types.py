"""Shared types definitions for the root finding package."""

from typing import Callable, Protocol, TypeVar


class Real(Protocol):
    """Anything ordered with abs() and the four arithmetic operators.

    float, numpy floating scalars, Fraction and Decimal all qualify.
    """

    def __add__(self, other): ...
    def __sub__(self, other): ...
    def __mul__(self, other): ...
    def __truediv__(self, other): ...
    def __abs__(self): ...
    def __lt__(self, other) -> bool: ...
    def __gt__(self, other) -> bool: ...


# Type aliases for cleaner signatures
R = TypeVar("R", bound=Real)
RealFunc = Callable[[R], R]
