"""
Named scalar fit parameters.

FitParameter is a closed value type: a name, a value and an estimated
error, plus fix/release bookkeeping. An error of zero fixes a parameter
permanently; fix() fixes it temporarily and release() restores the error
it had before.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence, final

import numpy as np
from numpy.typing import NDArray

from pylikely.core.exceptions import ValidationError


@final
class FitParameter:
    """
    A fit parameter specified by its name, value and estimated error.

    Args:
        name: Parameter name
        value: Current value
        error: Estimated error, >= 0. Zero means the parameter is fixed.

    Raises:
        ValidationError: If error is negative

    Not designed for subclassing; copy with copy.copy().
    """

    __slots__ = ('_name', '_value', '_error')

    def __init_subclass__(cls, **kwargs):
        raise TypeError("FitParameter is a value type and cannot be subclassed")

    def __init__(self, name: str, value: float, error: float = 0.0):
        self._name = str(name)
        self._value = float(value)
        self._error = 0.0
        self.error = error

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        self._value = float(value)

    @property
    def error(self) -> float:
        """Estimated error, or zero while the parameter is fixed."""
        return self._error if self._error > 0 else 0.0

    @error.setter
    def error(self, error: float) -> None:
        error = float(error)
        if not error >= 0:
            raise ValidationError(f"FitParameter {self._name!r}: error must be >= 0, got {error}")
        self._error = error

    def fix(self) -> None:
        """Fix temporarily; release() restores the current error."""
        # A negative stored error marks a temporarily fixed parameter.
        if self._error > 0:
            self._error = -self._error

    def release(self) -> None:
        if self._error < 0:
            self._error = -self._error

    @property
    def is_floating(self) -> bool:
        return self._error > 0

    def __copy__(self) -> FitParameter:
        clone = object.__new__(FitParameter)
        clone._name, clone._value, clone._error = self._name, self._value, self._error
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FitParameter):
            return NotImplemented
        return (self._name, self._value, self._error) == (other._name, other._value, other._error)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "floating" if self.is_floating else "fixed"
        return f"FitParameter({self._name!r}, value={self._value!r}, error={self.error!r}, {state})"


def _selected(parameters: Iterable[FitParameter], only_floating: bool) -> list[FitParameter]:
    return [p for p in parameters if p.is_floating or not only_floating]


def get_fit_parameter_values(
    parameters: Iterable[FitParameter],
    only_floating: bool = False,
) -> NDArray[np.floating[Any]]:
    """Parameter values, optionally restricted to floating parameters."""
    return np.array([p.value for p in _selected(parameters, only_floating)], dtype=np.float64)


def get_fit_parameter_errors(
    parameters: Iterable[FitParameter],
    only_floating: bool = False,
) -> NDArray[np.floating[Any]]:
    """Parameter errors (zero for fixed parameters)."""
    return np.array([p.error for p in _selected(parameters, only_floating)], dtype=np.float64)


def get_fit_parameter_names(
    parameters: Iterable[FitParameter],
    only_floating: bool = False,
) -> list[str]:
    return [p.name for p in _selected(parameters, only_floating)]


def count_floating_fit_parameters(parameters: Iterable[FitParameter]) -> int:
    return sum(1 for p in parameters if p.is_floating)


def find_fit_parameter_by_name(parameters: Sequence[FitParameter], name: str) -> int:
    """
    Index of the parameter with the given name.

    Raises:
        ValidationError: If no parameter has that name
    """
    for index, p in enumerate(parameters):
        if p.name == name:
            return index
    raise ValidationError(f"no fit parameter named {name!r}")
