"""
Omnivory module with temperature-dependent attack rates.

A generalist, omnivorous predator ``P`` feeds on two consumers (``C_litt``, ``C_pel``)
and on their resources (``R_litt``, ``R_pel``) in two macrohabitats, littoral and
pelagic. Its attack rates on the two consumers follow different thermal performance
curves, so a change of temperature shifts the predator between prey in alternate
habitats. All other attack rates are constant.

Parameters with the ``_litt`` suffix hold littoral values, those with ``_pel`` hold
pelagic values.

.. note::
    The equations are kept exactly as originally formulated, including
    two terms that break the littoral/pelagic symmetry:

    - the pelagic resource equation uses ``alpha_litt * R_pel + R_litt / k_pel`` as its
      competition term, where ``alpha_litt * R_litt + R_pel / k_pel`` would be the mirror
      image of the littoral equation;
    - the predator gain from the pelagic resource is ``e_PR * a_PR_pel * R_litt * P``,
      where ``R_pel`` would be expected.

    Both are likely defects. They are kept as is until the intended form is
    confirmed.

Parameters are checked against their ranges on construction, see `thermoweb.params`.
Neither the state nor the attack rates are clamped. Negative densities and negative
attack rates (temperatures far past ``Tmax``) propagate into the integrator.
"""
import dataclasses
import math
from dataclasses import dataclass
from typing import Annotated, ClassVar

import numpy as np
from numpy.typing import NDArray

from thermoweb.ode import ODE
from thermoweb.params import Param, Range, check_ranges
from thermoweb.thermal import thermal_response

_NON_NEGATIVE = Range(min=0.0)
_POSITIVE = Range(min=0.0, open_min=True)
_FRACTION = Range(0.0, 1.0)


@dataclass(frozen=True)
class OmnivoryModule(ODE):
    # resources
    r_litt: Annotated[
        float, Param("r_litt", desc="Littoral resource growth rate", range=_NON_NEGATIVE)
    ] = 1.0
    r_pel: Annotated[
        float, Param("r_pel", desc="Pelagic resource growth rate", range=_NON_NEGATIVE)
    ] = 1.0
    k_litt: Annotated[
        float,
        Param("K_litt", desc="Littoral resource carrying capacity", range=_POSITIVE),
    ] = 1.0
    k_pel: Annotated[
        float,
        Param("K_pel", desc="Pelagic resource carrying capacity", range=_POSITIVE),
    ] = 1.0
    alpha_pel: Annotated[
        float,
        Param(
            "α_pel",
            desc="Competitive influence of the pelagic resource on the littoral resource",
            range=_NON_NEGATIVE,
        ),
    ] = 0.8
    alpha_litt: Annotated[
        float,
        Param(
            "α_litt",
            desc="Competitive influence of the littoral resource on the pelagic resource",
            range=_NON_NEGATIVE,
        ),
    ] = 0.8

    # consumers
    a_CR_litt: Annotated[
        float,
        Param("a_CR_litt", desc="Attack rate of C_litt on R_litt", range=_NON_NEGATIVE),
    ] = 1.0
    a_CR_pel: Annotated[
        float,
        Param("a_CR_pel", desc="Attack rate of C_pel on R_pel", range=_NON_NEGATIVE),
    ] = 1.0
    h_CR: Annotated[
        float, Param("h_CR", desc="Consumer handling time", range=_NON_NEGATIVE)
    ] = 0.5
    e_CR: Annotated[
        float, Param("e_CR", desc="Consumer conversion efficiency", range=_FRACTION)
    ] = 0.8
    m_C: Annotated[
        float, Param("m_C", desc="Consumer mortality rate", range=_NON_NEGATIVE)
    ] = 0.2

    # predator
    a_PR_litt: Annotated[
        float,
        Param("a_PR_litt", desc="Attack rate of P on R_litt", range=_NON_NEGATIVE),
    ] = 0.2
    a_PR_pel: Annotated[
        float,
        Param("a_PR_pel", desc="Attack rate of P on R_pel", range=_NON_NEGATIVE),
    ] = 0.2
    h_PR: Annotated[
        float,
        Param("h_PR", desc="Predator handling time of resources", range=_NON_NEGATIVE),
    ] = 0.5
    h_PC: Annotated[
        float,
        Param("h_PC", desc="Predator handling time of consumers", range=_NON_NEGATIVE),
    ] = 0.5
    e_PR: Annotated[
        float,
        Param("e_PR", desc="Predator conversion efficiency of resources", range=_FRACTION),
    ] = 0.8
    e_PC: Annotated[
        float,
        Param("e_PC", desc="Predator conversion efficiency of consumers", range=_FRACTION),
    ] = 0.8
    m_P: Annotated[
        float, Param("m_P", desc="Predator mortality rate", range=_NON_NEGATIVE)
    ] = 0.3

    # thermal response of the attack rates of P on C_litt and C_pel
    aT_litt: Annotated[
        float,
        Param("aT_litt", desc="Peak attack rate of P on C_litt", range=_NON_NEGATIVE),
    ] = 3.0
    aT_pel: Annotated[
        float,
        Param("aT_pel", desc="Peak attack rate of P on C_pel", range=_NON_NEGATIVE),
    ] = 7.0
    Topt_litt: Annotated[
        float, Param("Topt_litt", desc="Optimum temperature, littoral habitat")
    ] = 32.0
    Topt_pel: Annotated[
        float, Param("Topt_pel", desc="Optimum temperature, pelagic habitat")
    ] = 25.0
    Tmax_litt: Annotated[
        float, Param("Tmax_litt", desc="Critical thermal maximum, littoral habitat")
    ] = 40.0
    Tmax_pel: Annotated[
        float, Param("Tmax_pel", desc="Critical thermal maximum, pelagic habitat")
    ] = 32.0
    sigma: Annotated[
        float,
        Param(
            "σ",
            desc="Width of the rising limb of the thermal performance curves",
            range=_POSITIVE,
        ),
    ] = 6.0
    T: Annotated[float, Param("T", desc="Ambient temperature")] = 0.0

    state_vars: ClassVar = ("R_litt", "R_pel", "C_litt", "C_pel", "P")
    derived_vars: ClassVar = (
        "littoral_feeding",
        "pelagic_feeding",
        "littoral_diet_share",
    )

    def __post_init__(self):
        check_ranges(self)

    def with_temperature(self, T: float) -> "OmnivoryModule":
        """Return a copy of the model at a different ambient temperature."""
        return dataclasses.replace(self, T=T)

    def attack_rates(self) -> tuple[float, float]:
        """
        Compute attack rates of the predator on the two consumers.

        Returns
        -------
        a_litt : float
            Attack rate on the littoral consumer ``C_litt``.
        a_pel : float
            Attack rate on the pelagic consumer ``C_pel``.
        """
        a_litt = thermal_response(
            self.T, self.Topt_litt, self.Tmax_litt, self.aT_litt, self.sigma
        )
        a_pel = thermal_response(
            self.T, self.Topt_pel, self.Tmax_pel, self.aT_pel, self.sigma
        )
        return a_litt, a_pel

    def rhs(self, t: float, state: NDArray) -> NDArray:
        du = np.empty(len(self.state_vars))
        omnivory_rates(du, state, self, t)
        return du

    def derived(self, state: NDArray) -> list[float]:
        R_litt, R_pel, C_litt, C_pel, P = state
        a_litt, a_pel = self.attack_rates()
        D = _predator_denominator(self, a_litt, a_pel, R_litt, R_pel, C_litt, C_pel)

        littoral = (self.a_PR_litt * R_litt + a_litt * C_litt) / D
        pelagic = (self.a_PR_pel * R_pel + a_pel * C_pel) / D
        total = littoral + pelagic
        share = littoral / total if total != 0 else math.nan
        return [littoral, pelagic, share]


def _predator_denominator(
    p: OmnivoryModule,
    a_litt: float,
    a_pel: float,
    R_litt: float,
    R_pel: float,
    C_litt: float,
    C_pel: float,
) -> float:
    # shared by all four prey: feeding on any of them saturates feeding on the others
    return (
        1
        + p.a_PR_litt * p.h_PR * R_litt
        + p.a_PR_pel * p.h_PR * R_pel
        + a_litt * p.h_PC * C_litt
        + a_pel * p.h_PC * C_pel
    )


def omnivory_rates(du: NDArray, u: NDArray, p: OmnivoryModule, t: float) -> None:
    """
    Compute time derivatives of the omnivory module in place.

    The signature follows the in-place convention of generic initial value problem
    solvers. The system is autonomous, `t` does not enter the equations.

    Parameters
    ----------
    du : ndarray, shape (5,)
        Output vector, overwritten with the derivatives of
        ``(R_litt, R_pel, C_litt, C_pel, P)``.
    u : array_like, shape (5,)
        Current state ``(R_litt, R_pel, C_litt, C_pel, P)``.
    p : OmnivoryModule
        Model parameters.
    t : float
        Time, unused.
    """
    R_litt, R_pel, C_litt, C_pel, P = u
    a_litt, a_pel = p.attack_rates()
    D = _predator_denominator(p, a_litt, a_pel, R_litt, R_pel, C_litt, C_pel)

    du[0] = (
        p.r_litt * R_litt * (1 - (p.alpha_pel * R_pel + R_litt / p.k_litt))
        - p.a_CR_litt * R_litt * C_litt / (1 + p.a_CR_litt * p.h_CR * R_litt)
        - p.a_PR_litt * R_litt * P / D
    )
    du[1] = (
        p.r_pel * R_pel * (1 - (p.alpha_litt * R_pel + R_litt / p.k_pel))
        - p.a_CR_pel * R_pel * C_pel / (1 + p.a_CR_pel * p.h_CR * R_pel)
        - p.a_PR_pel * R_pel * P / D
    )
    du[2] = (
        p.e_CR * p.a_CR_litt * R_litt * C_litt / (1 + p.a_CR_litt * R_litt * p.h_CR)
        - a_litt * C_litt * P / D
        - p.m_C * C_litt
    )
    du[3] = (
        p.e_CR * p.a_CR_pel * R_pel * C_pel / (1 + p.a_CR_pel * R_pel * p.h_CR)
        - a_pel * C_pel * P / D
        - p.m_C * C_pel
    )
    du[4] = (
        p.e_PR * p.a_PR_litt * R_litt * P
        + p.e_PR * p.a_PR_pel * R_litt * P
        + p.e_PC * a_litt * C_litt * P
        + p.e_PC * a_pel * C_pel * P
    ) / D - p.m_P * P
