"""Cone types used to describe conic constraints."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Union


def _check_dim(dim: Any) -> None:
    if isinstance(dim, bool) or not isinstance(dim, int):
        raise TypeError(f"cone dimension must be an integer, got {dim!r}")
    if dim < 0:
        raise ValueError(f"cone dimension must be non-negative, got {dim}")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True, repr=False)
class _DimCone:
    dim: int

    def __post_init__(self) -> None:
        _check_dim(self.dim)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.dim})"

    @property
    def numel(self) -> int:
        return self.dim


@dataclass(frozen=True, repr=False)
class ZeroConeT(_DimCone):
    """The zero cone {0}^dim."""

    @property
    def degree(self) -> int:
        return 0


@dataclass(frozen=True, repr=False)
class NonnegativeConeT(_DimCone):
    """The nonnegative orthant of dimension ``dim``."""

    @property
    def degree(self) -> int:
        return self.dim


@dataclass(frozen=True, repr=False)
class SecondOrderConeT(_DimCone):
    """The second order cone of dimension ``dim``."""

    @property
    def degree(self) -> int:
        return 1


@dataclass(frozen=True, repr=False)
class PSDTriangleConeT(_DimCone):
    """Positive semidefinite ``dim`` x ``dim`` matrices in triangular form."""

    @property
    def numel(self) -> int:
        return self.dim * (self.dim + 1) // 2

    @property
    def degree(self) -> int:
        return self.dim


@dataclass(frozen=True, repr=False)
class ExponentialConeT:
    """The three dimensional exponential cone."""

    def __repr__(self) -> str:
        return "ExponentialConeT()"

    @property
    def numel(self) -> int:
        return 3

    @property
    def degree(self) -> int:
        return 3


@dataclass(frozen=True, repr=False)
class PowerConeT:
    """The three dimensional power cone with exponent ``alpha``."""

    alpha: float

    def __post_init__(self) -> None:
        if isinstance(self.alpha, bool) or not isinstance(self.alpha, (int, float)):
            raise TypeError(f"power cone exponent must be a number, got {self.alpha!r}")
        object.__setattr__(self, "alpha", float(self.alpha))

    @property
    def α(self) -> float:
        return self.alpha

    def __repr__(self) -> str:
        return f"PowerConeT({_format_float(self.alpha)})"

    @property
    def numel(self) -> int:
        return 3

    @property
    def degree(self) -> int:
        return 3


SupportedCone = Union[
    ZeroConeT,
    NonnegativeConeT,
    SecondOrderConeT,
    ExponentialConeT,
    PowerConeT,
    PSDTriangleConeT,
]

_DIM_CONES = {
    "ZeroConeT": ZeroConeT,
    "NonnegativeConeT": NonnegativeConeT,
    "SecondOrderConeT": SecondOrderConeT,
    "PSDTriangleConeT": PSDTriangleConeT,
}


def to_supported_cone(obj: Any) -> SupportedCone:
    """Convert any cone-like object to a supported cone by its type name."""
    name = type(obj).__name__
    if name in _DIM_CONES:
        return _DIM_CONES[name](getattr(obj, "dim"))
    if name == "ExponentialConeT":
        return ExponentialConeT()
    if name == "PowerConeT":
        return PowerConeT(getattr(obj, "α"))
    raise TypeError(f"Unrecognized cone type : {name}")


def to_native_cones(cones: Iterable[Any]) -> list[SupportedCone]:
    """Convert a sequence of cone-like objects to supported cones."""
    return [to_supported_cone(cone) for cone in cones]