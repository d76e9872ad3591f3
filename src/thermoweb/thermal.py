"""
Thermal performance curve of the predator attack rate.

The curve has two pieces joined at the optimum temperature ``Topt``. Below it, the
rate rises along a Gaussian limb of width ``sigma``. At and above it, the rate falls
along a downward parabola that reaches zero at ``Tmax``, or more precisely at
``Topt + |Topt - Tmax|``, since only the squared distance enters the formula.

Both pieces evaluate to ``aT`` at ``T = Topt``, so the curve is continuous there, but
its derivative generally is not.

.. warning::
    The parabolic piece is not clamped. Far enough past the critical temperature the
    returned rate is negative, and a negative attack rate turns predation into a source
    term of the prey equations. Such temperatures are outside the range where the model
    is biologically meaningful.
"""
import math

import numpy as np
from numpy.typing import ArrayLike, NDArray


def thermal_response(
    T: ArrayLike,
    Topt: float,
    Tmax: float,
    aT: float,
    sigma: float,
) -> float | NDArray[np.float64]:
    """
    Evaluate the thermal performance curve.

    Parameters
    ----------
    T : float or array_like
        Ambient temperature(s).
    Topt : float
        Temperature of peak performance.
    Tmax : float
        Critical thermal maximum. Must differ from `Topt`.
    aT : float
        Peak value, attained at `Topt`.
    sigma : float
        Width of the rising limb, must be positive.

    Returns
    -------
    float or ndarray
        Attack rate at `T`. A float if `T` is a scalar, otherwise an array of the same
        shape as `T`.

    Examples
    --------
    >>> thermal_response(32.0, Topt=32.0, Tmax=40.0, aT=3.0, sigma=6.0)
    3.0
    >>> thermal_response(36.0, Topt=32.0, Tmax=40.0, aT=3.0, sigma=6.0)
    2.25
    """
    if np.ndim(T) == 0:
        return _scalar_response(float(T), Topt, Tmax, aT, sigma)

    T = np.asarray(T, dtype=float)
    rising = aT * np.exp(-(((T - Topt) / (2 * sigma)) ** 2))
    falling = aT * (1 - ((T - Topt) / (Topt - Tmax)) ** 2)
    return np.where(T < Topt, rising, falling)


def _scalar_response(
    T: float, Topt: float, Tmax: float, aT: float, sigma: float
) -> float:
    if T < Topt:
        return aT * math.exp(-(((T - Topt) / (2 * sigma)) ** 2))
    else:
        return aT * (1 - ((T - Topt) / (Topt - Tmax)) ** 2)
