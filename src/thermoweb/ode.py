import logging
import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.integrate import solve_ivp

from thermoweb import Interval
from thermoweb.utils import stopwatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ODE(ABC):
    """
    Base class for autonomous ODE systems with immutable parameters.

    Parameters are the dataclass fields of the subclass. A modified copy is created
    with `dataclasses.replace`, so one instance can safely be shared by runs executed
    concurrently.

    Subclasses define the ``state_vars`` and ``derived_vars`` name tuples, the
    right-hand side `rhs` and the diagnostic quantities `derived`.
    """

    @property
    @abstractmethod
    def state_vars(self) -> tuple[str, ...]:
        """Names of the state variables, in state vector order."""

    @property
    @abstractmethod
    def derived_vars(self) -> tuple[str, ...]:
        """Names of quantities computed from the state, in `derived` order."""

    @abstractmethod
    def rhs(self, t: float, state: NDArray) -> ArrayLike:
        """Time derivative of `state`, in the ``fun(t, y)`` form of `solve_ivp`."""

    @abstractmethod
    def derived(self, state: NDArray) -> ArrayLike:
        """Values of the derived variables at `state`."""

    @property
    def params(self) -> tuple[str, ...]:
        """Names of the parameters, in field order."""
        return tuple(f.name for f in fields(type(self)))

    def param_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.params}


def solve(
    ode: ODE, init: ArrayLike, time_points: NDArray, **solver_options
) -> dict[str, NDArray]:
    """
    Integrate an ODE system and sample the solution.

    Parameters
    ----------
    ode : ODE
        System to integrate.
    init : array_like, shape (N,)
        State at ``time_points[0]``.
    time_points : ndarray, shape (M,)
        Sorted times at which the solution is stored.

    Returns
    -------
    dict of ndarray
        One time series per state and derived variable. If the solver stopped early,
        the series only cover the time points reached, and may be empty.

    Other Parameters
    ----------------
    **solver_options : dict, optional
        Passed on to `scipy.integrate.solve_ivp`, e.g. ``method``, ``rtol``, ``atol``.

    Raises
    ------
    ValueError
        If the time axis is not one-dimensional, or `init` does not match
        ``ode.state_vars``.

    Warns
    -----
    UserWarning
        If the ODE solver does not converge.
    """
    time_points = np.asarray(time_points, dtype=float)
    init = np.asarray(init, dtype=float)

    if time_points.ndim != 1:
        raise ValueError(
            f"Time axis is not one-dimensional (shape {time_points.shape})"
        )
    if init.shape != (len(ode.state_vars),):
        raise ValueError(
            f"Initial state does not match state variables "
            f"({init.shape} != ({len(ode.state_vars)},))"
        )

    span = Interval(time_points[0], time_points[-1])

    with stopwatch() as s:
        result = solve_ivp(ode.rhs, span, init, t_eval=time_points, **solver_options)

    logger.debug(
        "Solved %s on %s: %d rhs evaluations in %s",
        type(ode).__name__,
        span,
        result.nfev,
        s,
    )

    if not result.success:
        warnings.warn(f"ODE solver did not converge: {result.message}", stacklevel=2)

    state = result.y
    n_samples = state.shape[1]
    if n_samples > 0:
        derived = np.apply_along_axis(ode.derived, axis=0, arr=state)
    else:
        derived = np.empty((len(ode.derived_vars), 0))

    series = dict(zip(ode.state_vars, state, strict=True))
    series.update(zip(ode.derived_vars, derived, strict=True))
    return series
