"""Base classes for resolution functions."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

import numpy as np

from resfunc.core.parameters import ParameterSet, expected_size
from resfunc.core.shared.exceptions import (
    ParameterCountError,
    ParameterLoadError,
    ParameterValueError,
)
from resfunc.core.shared.reporter import default_reporter

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    import numpy.typing as npt

    from resfunc.core.shared.reporter import Reporter
    from resfunc.core.shared.typing import Coefficients, FloatArray

    ParameterLoader = Callable[..., Sequence[float]]


@runtime_checkable
class Resolution(Protocol):
    """Protocol for resolution functions p(xmeas | x)."""

    name: str
    parameters: ParameterSet

    def density(self, true_value: float, measured_value: float) -> float: ...
    def log_density(self, true_value: float, measured_value: float) -> float: ...
    def density_grid(self, true_value: float, measured_values: npt.ArrayLike) -> FloatArray: ...
    def sigma(self, true_value: float) -> float: ...
    def par(self, index: int) -> float: ...
    @property
    def n_parameters(self) -> int: ...


class ResolutionBase:
    """Base class for all resolution functions.

    Owns the coefficient storage and implements the construction protocol.
    Subclasses declare their shape parameters through ``GROUP_NAMES`` and
    implement :meth:`density`.
    """

    NAME: ClassVar[str] = "base"
    GROUP_NAMES: ClassVar[tuple[str, ...]] = ()
    DEFAULT_ORDER: ClassVar[int] = 1

    def __init__(
        self,
        parameters: Coefficients | ParameterSet,
        *,
        order: int | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.name = self.NAME
        self.parameters = self._build_parameter_set(parameters, order)
        self._reporter = reporter if reporter is not None else default_reporter()

    @classmethod
    def _build_parameter_set(
        cls, parameters: Coefficients | ParameterSet, order: int | None
    ) -> ParameterSet:
        n_groups = len(cls.GROUP_NAMES)
        if isinstance(parameters, ParameterSet):
            if parameters.n_groups != n_groups:
                msg = (
                    f"{cls.__name__} needs {n_groups} parameter groups, "
                    f"got {parameters.n_groups}"
                )
                raise ParameterCountError(msg)
            if order is not None and parameters.order != order:
                msg = f"Requested order {order} but parameter set has order {parameters.order}"
                raise ParameterCountError(msg)
            return ParameterSet(parameters.array, n_groups, parameters.order, cls.GROUP_NAMES)
        if order is None:
            order = cls.DEFAULT_ORDER
        return ParameterSet(parameters, n_groups, order, cls.GROUP_NAMES)

    @classmethod
    def expected_parameters(cls, order: int | None = None) -> int:
        """Number of coefficients for the given polynomial order."""
        return expected_size(len(cls.GROUP_NAMES), cls.DEFAULT_ORDER if order is None else order)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        order: int | None = None,
        reporter: Reporter | None = None,
        loader: ParameterLoader | None = None,
    ) -> ResolutionBase:
        """Create a resolution from a parameter file.

        Args:
            path: File holding the coefficients
            order: Polynomial order of every shape parameter
            reporter: Sink for evaluation diagnostics
            loader: Parameter source; defaults to :func:`resfunc.io.parameters.load_parameters`

        Raises
        ------
            ParameterLoadError: If the file cannot be read or does not match the layout
        """
        if loader is None:
            from resfunc.io.parameters import load_parameters

            loader = load_parameters

        path = Path(path)
        values = loader(
            path,
            expected=cls.expected_parameters(order),
            group_names=cls.GROUP_NAMES,
        )
        try:
            return cls(values, order=order, reporter=reporter)
        except (ParameterCountError, ParameterValueError) as exc:
            msg = f"Invalid parameters in {path}: {exc}"
            raise ParameterLoadError(msg) from exc

    @property
    def reporter(self) -> Reporter:
        return self._reporter

    @property
    def order(self) -> int:
        return self.parameters.order

    @property
    def n_parameters(self) -> int:
        return len(self.parameters)

    @property
    def values(self) -> list[float]:
        return self.parameters.values

    def par(self, index: int) -> float:
        """Return a single coefficient; out-of-range indices raise ``ParameterIndexError``."""
        return self.parameters.par(index)

    def with_parameters(self, parameters: Coefficients | ParameterSet) -> ResolutionBase:
        """Return a new resolution of the same kind and order with other coefficients."""
        order = parameters.order if isinstance(parameters, ParameterSet) else self.order
        return type(self)(parameters, order=order, reporter=self._reporter)

    def shape_parameters(self, true_value: float) -> dict[str, float]:
        """Evaluate every shape parameter at ``true_value``."""
        evaluated = self.parameters.evaluate(true_value)
        return dict(zip(self.GROUP_NAMES, evaluated.tolist(), strict=True))

    def density(self, true_value: float, measured_value: float) -> float:
        """Return p(measured_value | true_value)."""
        raise NotImplementedError

    def density_grid(self, true_value: float, measured_values: npt.ArrayLike) -> FloatArray:
        """Evaluate the density for many measured values at one true value."""
        measured = np.asarray(measured_values, dtype=float)
        return np.array(
            [self.density(true_value, m) for m in measured.ravel()], dtype=float
        ).reshape(measured.shape)

    def log_density(self, true_value: float, measured_value: float) -> float:
        """Natural log of :meth:`density`; ``-inf`` where the density is zero."""
        with np.errstate(divide="ignore"):
            return float(np.log(self.density(true_value, measured_value)))

    def sigma(self, true_value: float) -> float:
        """Characteristic width of the resolution at ``true_value``."""
        raise NotImplementedError

    def describe(self) -> dict[str, Any]:
        """Summarise the resolution layout."""
        return {
            "name": self.name,
            "class": type(self).__name__,
            "order": self.order,
            "n_parameters": self.n_parameters,
            "groups": {
                name: self.parameters.group(name).tolist() for name in self.GROUP_NAMES
            },
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order={self.order}, values={self.values})"
