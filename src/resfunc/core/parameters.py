"""Coefficient storage for energy-dependent resolution parameters.

A resolution is described by a handful of shape parameters (means, widths,
relative scales). Each of them is a polynomial in the true value ``x``, so
the full parameter set is a flat sequence of coefficients made of
``n_groups`` consecutive blocks of ``order + 1`` coefficients::

    [g0_c0, g0_c1, ..., g0_cN, g1_c0, ..., g1_cN, ...]

Group ``k`` evaluates to ``c0 + c1*x + c2*x**2 + ...``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, overload

import numpy as np
from numpy.polynomial import polynomial as P

from resfunc.core.shared.exceptions import (
    ParameterCountError,
    ParameterIndexError,
    ParameterValueError,
)

if TYPE_CHECKING:
    from resfunc.core.shared.typing import Coefficients, FloatArray


def expected_size(n_groups: int, order: int) -> int:
    """Return the number of coefficients of a layout with ``n_groups`` polynomials."""
    if n_groups < 1:
        msg = f"A parameter set needs at least one group, got {n_groups}"
        raise ValueError(msg)
    if order < 0:
        msg = f"Polynomial order must be >= 0, got {order}"
        raise ValueError(msg)
    return n_groups * (order + 1)


def _is_index(index: object) -> bool:
    return isinstance(index, int | np.integer) and not isinstance(index, bool)


class ParameterSet:
    """Immutable, fixed-size collection of polynomial coefficients."""

    __slots__ = ("_group_names", "_n_groups", "_order", "_values")

    def __init__(
        self,
        values: Coefficients,
        n_groups: int,
        order: int = 0,
        group_names: Sequence[str] | None = None,
    ) -> None:
        size = expected_size(n_groups, order)

        array = np.array(values, dtype=float).ravel()
        if array.size != size:
            msg = (
                f"Expected {size} coefficients ({n_groups} groups of order {order}), "
                f"got {array.size}"
            )
            raise ParameterCountError(msg)
        if not np.all(np.isfinite(array)):
            bad = [int(i) for i in np.flatnonzero(~np.isfinite(array))]
            msg = f"Coefficients must be finite, got non-finite values at {bad}"
            raise ParameterValueError(msg)

        if group_names is None:
            group_names = [f"p{k}" for k in range(n_groups)]
        if len(group_names) != n_groups:
            msg = f"Expected {n_groups} group names, got {len(group_names)}"
            raise ValueError(msg)

        array.flags.writeable = False
        self._values = array
        self._n_groups = n_groups
        self._order = order
        self._group_names = tuple(group_names)

    @classmethod
    def from_groups(
        cls,
        groups: Sequence[Coefficients],
        group_names: Sequence[str] | None = None,
    ) -> ParameterSet:
        """Build a parameter set from one coefficient sequence per group.

        All groups must have the same number of coefficients; that number
        fixes the polynomial order.
        """
        if not groups:
            msg = "At least one coefficient group is required"
            raise ParameterCountError(msg)
        arrays = [np.atleast_1d(np.asarray(group, dtype=float)) for group in groups]
        lengths = {array.size for array in arrays}
        if len(lengths) != 1:
            msg = f"All coefficient groups must have the same length, got {sorted(lengths)}"
            raise ParameterCountError(msg)
        (length,) = lengths
        if length == 0:
            msg = "Coefficient groups must not be empty"
            raise ParameterCountError(msg)
        return cls(np.concatenate(arrays), len(arrays), length - 1, group_names)

    @property
    def n_groups(self) -> int:
        return self._n_groups

    @property
    def order(self) -> int:
        return self._order

    @property
    def group_names(self) -> tuple[str, ...]:
        return self._group_names

    @property
    def values(self) -> list[float]:
        """Copy of the coefficients as a list of floats."""
        return self._values.tolist()

    @property
    def array(self) -> FloatArray:
        """Read-only view of the coefficients."""
        return self._values

    def __len__(self) -> int:
        return self._values.size

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    @overload
    def __getitem__(self, index: int) -> float: ...
    @overload
    def __getitem__(self, index: str) -> FloatArray: ...
    def __getitem__(self, index: int | str) -> float | FloatArray:
        if isinstance(index, str):
            return self.group(index)
        return self.par(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterSet):
            return NotImplemented
        return (
            self._n_groups == other._n_groups
            and self._order == other._order
            and np.array_equal(self._values, other._values)
        )

    def __hash__(self) -> int:
        return hash((self._n_groups, self._order, self._values.tobytes()))

    def __repr__(self) -> str:
        return (
            f"ParameterSet(n_groups={self._n_groups}, order={self._order}, "
            f"values={self.values})"
        )

    def par(self, index: int) -> float:
        """Return a single coefficient by its flat index.

        Negative indices are rejected rather than wrapped around, as are
        indices that are not integers (including booleans).
        """
        if not _is_index(index):
            msg = f"Parameter index must be an integer, got {index!r}"
            raise ParameterIndexError(msg)
        if not 0 <= index < self._values.size:
            msg = f"Parameter index {index} out of range [0, {self._values.size})"
            raise ParameterIndexError(msg)
        return float(self._values[index])

    def _group_index(self, group: int | str) -> int:
        if isinstance(group, str):
            try:
                return self._group_names.index(group)
            except ValueError:
                msg = f"Unknown parameter group {group!r}; known: {', '.join(self._group_names)}"
                raise ParameterIndexError(msg) from None
        if not _is_index(group):
            msg = f"Group index must be an integer or a group name, got {group!r}"
            raise ParameterIndexError(msg)
        if not 0 <= group < self._n_groups:
            msg = f"Group index {group} out of range [0, {self._n_groups})"
            raise ParameterIndexError(msg)
        return group

    def group(self, group: int | str) -> FloatArray:
        """Return the coefficients ``[c0, c1, ...]`` of one group."""
        k = self._group_index(group)
        width = self._order + 1
        return self._values[k * width : (k + 1) * width]

    def evaluate_group(self, group: int | str, x: float) -> float:
        """Evaluate one group polynomial at ``x``."""
        with np.errstate(over="ignore", invalid="ignore"):
            return float(P.polyval(x, self.group(group)))

    def evaluate(self, x: float) -> FloatArray:
        """Evaluate every group polynomial at ``x``.

        Returns
        -------
            Array of shape ``(n_groups,)`` in group order
        """
        coefficients = self._values.reshape(self._n_groups, self._order + 1)
        # polyval treats each column of a 2D coefficient array as one polynomial
        with np.errstate(over="ignore", invalid="ignore"):
            return np.asarray(P.polyval(x, coefficients.T), dtype=float)

    def summary(self) -> str:
        """Return a multi-line, human-readable summary of the groups."""
        lines = [f"{'group':<10s} coefficients (c0, c1, ...)"]
        for name in self._group_names:
            coefs = ", ".join(f"{c:.6g}" for c in self.group(name))
            lines.append(f"{name:<10s} {coefs}")
        return "\n".join(lines)


__all__ = ["ParameterSet", "expected_size"]
