"""
Description and validation of model parameters.

Model parameters are dataclass fields annotated with
``Annotated[float, Param(label, desc, range)]``. The annotation serves two purposes:
`describe` lists the parameters of a model class together with their meaning and
default values, and `check_ranges` rejects parameter sets with values outside of the
biologically meaningful range, e.g. a negative mortality or a conversion efficiency
above one.

Only the parameters are checked. State variables and attack rates computed from
temperature are never restricted.
"""
from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Range:
    """
    Range of valid parameter values, possibly unbounded on either side.

    Attributes
    ----------
    min, max : float, optional
        Bounds, ``None`` if unbounded.
    open_min : bool
        If ``True``, the lower bound itself is excluded.
    """

    min: float | None = None
    max: float | None = None
    open_min: bool = False

    def __contains__(self, x) -> bool:
        if self.min is not None:
            above = x > self.min if self.open_min else x >= self.min
            if not above:
                return False
        if self.max is not None and not x <= self.max:
            return False
        return True

    def __str__(self) -> str:
        lower = "-inf" if self.min is None else str(self.min)
        upper = "inf" if self.max is None else str(self.max)
        left = "(" if self.open_min or self.min is None else "["
        right = ")" if self.max is None else "]"
        return f"{left}{lower}, {upper}{right}"


UNBOUNDED = Range()


@dataclass(frozen=True)
class Param:
    """
    Annotation describing a model parameter.

    Examples
    --------
    >>> from typing import Annotated
    >>> @dataclass(frozen=True)
    ... class Decay:
    ...     m: Annotated[float, Param("m", desc="Mortality", range=Range(min=0))] = 0.1
    """

    label: str | None = None
    desc: str | None = None
    range: Range = UNBOUNDED


@dataclass(frozen=True)
class ParamInfo:
    """Parameter of a model class, as listed by `describe`."""

    name: str
    label: str | None
    desc: str | None
    default: Any
    range: Range


def _annotated_params(cls: type) -> dict[str, Param]:
    hints = typing.get_type_hints(cls, include_extras=True)
    params = {}
    for field in dataclasses.fields(cls):
        metadata = getattr(hints[field.name], "__metadata__", ())
        found = [m for m in metadata if isinstance(m, Param)]
        params[field.name] = found[0] if found else Param()
    return params


def describe(cls: type) -> tuple[ParamInfo, ...]:
    """
    List parameters of a dataclass model.

    Parameters
    ----------
    cls : type
        Dataclass whose fields are the model parameters.

    Returns
    -------
    tuple of ParamInfo
        Parameters in field order. Fields without a `Param` annotation are unbounded
        and have no label.

    Raises
    ------
    TypeError
        If `cls` is not a dataclass.
    """
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"'{cls.__name__}' is not a dataclass")

    defaults = {
        f.name: None if f.default is dataclasses.MISSING else f.default
        for f in dataclasses.fields(cls)
    }
    return tuple(
        ParamInfo(name, p.label, p.desc, defaults[name], p.range)
        for name, p in _annotated_params(cls).items()
    )


def check_ranges(instance: object) -> None:
    """
    Verify that all parameters of a dataclass instance lie within their ranges.

    Parameters
    ----------
    instance : object
        Dataclass instance to check.

    Raises
    ------
    ValueError
        If any parameter is out of range. The message lists all the offending
        parameters.
    """
    bad = [
        f"{name}={getattr(instance, name)!r} not in {p.range}"
        for name, p in _annotated_params(type(instance)).items()
        if getattr(instance, name) not in p.range
    ]
    if bad:
        raise ValueError(
            f"Invalid parameters of {type(instance).__name__}: " + ", ".join(bad)
        )
