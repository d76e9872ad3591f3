"""
Default experiment setup of the omnivory module.

The defaults reproduce the reference run: all parameters at their default values
(``T = 0``), integrated over ``[0, 500]`` with relative and absolute tolerance of
``1e-8``.
"""
from numpy.typing import ArrayLike, NDArray

from thermoweb import Interval
from thermoweb.models.omnivory import OmnivoryModule
from thermoweb.ode import solve

DEFAULT_INIT = (0.5, 0.4, 0.6, 0.7, 0.1)
"""Initial densities of ``(R_litt, R_pel, C_litt, C_pel, P)``."""

DEFAULT_SPAN = Interval(0.0, 500.0)
"""Integration time span."""

RTOL = 1e-8
ATOL = 1e-8


def simulate(
    model: OmnivoryModule | None = None,
    init: ArrayLike = DEFAULT_INIT,
    span: Interval = DEFAULT_SPAN,
    num: int = 501,
    **solver_options,
) -> dict[str, NDArray]:
    """
    Integrate the omnivory module.

    Parameters
    ----------
    model : OmnivoryModule, optional
        Model to integrate. Model with default parameters is used if not specified.
    init : array_like, shape (5,), optional
        Initial state.
    span : Interval, optional
        Time span of the integration.
    num : int, optional
        Number of evenly spaced time points at which the solution is stored.

    Returns
    -------
    dict of ndarray
        Time series of state and derived variables, with the time axis stored
        under ``"t"``.

    Other Parameters
    ----------------
    **solver_options : dict, optional
        Additional arguments passed to `thermoweb.ode.solve`. Tolerances default to
        `RTOL` and `ATOL`.

    Raises
    ------
    ValueError
        If `num` is less than 2.

    Warns
    -----
    UserWarning
        If the ODE solver does not converge.
    """
    if num < 2:
        raise ValueError(f"At least two time points are needed (num={num})")

    if model is None:
        model = OmnivoryModule()

    solver_options.setdefault("rtol", RTOL)
    solver_options.setdefault("atol", ATOL)

    ts = span.sample(num)
    solution = solve(model, init, ts, **solver_options)
    return {"t": ts[: solution["P"].size]} | solution
