import dataclasses
import math

import numpy as np
import pytest

from thermoweb.models import OmnivoryModule, omnivory_rates
from thermoweb.params import Range, describe

LITTORAL_PELAGIC_PAIRS = [
    ("r_litt", "r_pel"),
    ("k_litt", "k_pel"),
    ("alpha_pel", "alpha_litt"),
    ("a_CR_litt", "a_CR_pel"),
    ("a_PR_litt", "a_PR_pel"),
    ("aT_litt", "aT_pel"),
    ("Topt_litt", "Topt_pel"),
    ("Tmax_litt", "Tmax_pel"),
]


def mirrored(p: OmnivoryModule) -> OmnivoryModule:
    changes = {}
    for litt, pel in LITTORAL_PELAGIC_PAIRS:
        changes[litt] = getattr(p, pel)
        changes[pel] = getattr(p, litt)
    return dataclasses.replace(p, **changes)


def rates(p, u, t=0.0):
    du = np.full(5, np.nan)
    omnivory_rates(du, np.asarray(u, dtype=float), p, t)
    return du


@pytest.fixture()
def simple():
    # both consumers at their thermal optimum: a_litt = aT_litt, a_pel = aT_pel
    return OmnivoryModule(
        Topt_litt=20.0,
        Topt_pel=20.0,
        Tmax_litt=30.0,
        Tmax_pel=30.0,
        aT_litt=1.0,
        aT_pel=2.0,
        T=20.0,
    )


def test_default_parameters():
    p = OmnivoryModule()

    assert p.param_dict() == {
        "r_litt": 1.0,
        "r_pel": 1.0,
        "k_litt": 1.0,
        "k_pel": 1.0,
        "alpha_pel": 0.8,
        "alpha_litt": 0.8,
        "a_CR_litt": 1.0,
        "a_CR_pel": 1.0,
        "h_CR": 0.5,
        "e_CR": 0.8,
        "m_C": 0.2,
        "a_PR_litt": 0.2,
        "a_PR_pel": 0.2,
        "h_PR": 0.5,
        "h_PC": 0.5,
        "e_PR": 0.8,
        "e_PC": 0.8,
        "m_P": 0.3,
        "aT_litt": 3.0,
        "aT_pel": 7.0,
        "Topt_litt": 32.0,
        "Topt_pel": 25.0,
        "Tmax_litt": 40.0,
        "Tmax_pel": 32.0,
        "sigma": 6.0,
        "T": 0.0,
    }


def test_state_vars():
    p = OmnivoryModule()
    assert p.state_vars == ("R_litt", "R_pel", "C_litt", "C_pel", "P")


def test_with_temperature_leaves_original_unchanged():
    p = OmnivoryModule(m_P=0.4)
    warm = p.with_temperature(28.0)

    assert warm.T == 28.0
    assert warm.m_P == 0.4
    assert p.T == 0.0


def test_attack_rates_follow_thermal_response():
    a_litt, a_pel = OmnivoryModule().attack_rates()

    assert a_litt == pytest.approx(3.0 * math.exp(-((32 / 12) ** 2)))
    assert a_pel == pytest.approx(7.0 * math.exp(-((25 / 12) ** 2)))


def test_attack_rate_on_littoral_consumer_negative_at_extreme_temperature():
    a_litt, _ = OmnivoryModule(T=100.0).attack_rates()
    assert a_litt < 0


@pytest.mark.parametrize("T", [0.0, 22.0, 28.0, 35.0])
def test_zero_density_is_fixed_point(T):
    du = rates(OmnivoryModule(T=T), [0, 0, 0, 0, 0])
    np.testing.assert_array_equal(du, 0)


def test_output_vector_is_overwritten():
    du = np.full(5, 123.0)
    result = omnivory_rates(du, np.zeros(5), OmnivoryModule(), 0.0)

    assert result is None
    np.testing.assert_array_equal(du, 0)


def test_no_predation_without_predator(simple):
    u = [0.5, 0.25, 0.4, 0.2, 0.0]
    du = rates(simple, u)

    expected = [
        0.5 * (1 - (0.8 * 0.25 + 0.5)) - 0.5 * 0.4 / (1 + 0.5 * 0.5),
        0.25 * (1 - (0.8 * 0.25 + 0.5)) - 0.25 * 0.2 / (1 + 0.5 * 0.25),
        0.8 * 0.5 * 0.4 / (1 + 0.5 * 0.5) - 0.2 * 0.4,
        0.8 * 0.25 * 0.2 / (1 + 0.25 * 0.5) - 0.2 * 0.2,
        0.0,
    ]
    np.testing.assert_allclose(du, expected, rtol=1e-12, atol=0)
    assert du[4] == 0


def test_rates_match_reference_values(simple):
    u = [0.5, 0.25, 0.4, 0.2, 1.0]
    du = rates(simple, u)

    # shared denominator: 1 + 0.05 + 0.025 + 0.2 + 0.2
    D = 1.475
    expected = [
        0.15 - 0.2 / 1.25 - 0.1 / D,
        0.075 - 0.05 / 1.125 - 0.05 / D,
        0.16 / 1.25 - 0.4 / D - 0.08,
        0.04 / 1.125 - 0.4 / D - 0.04,
        0.8 / D - 0.3,
    ]
    np.testing.assert_allclose(du, expected, rtol=1e-12)


def test_pelagic_competition_term_uses_pelagic_density_twice(simple):
    # the pelagic logistic term is 1 - (alpha_litt * R_pel + R_litt / k_pel)
    p = dataclasses.replace(simple, alpha_litt=0.5, k_pel=4.0)
    u = [0.6, 0.3, 0.0, 0.0, 0.0]
    du = rates(p, u)

    assert du[1] == pytest.approx(0.3 * (1 - (0.5 * 0.3 + 0.6 / 4.0)))
    assert du[1] != pytest.approx(0.3 * (1 - (0.5 * 0.6 + 0.3 / 4.0)))


def test_predator_gain_from_pelagic_resource_uses_littoral_density(simple):
    # predator feeds on resources only, P gain is e_PR * (a_PR_litt + a_PR_pel) * R_litt
    p = dataclasses.replace(simple, a_PR_litt=0.0, a_PR_pel=0.4, h_PR=0.0)
    u = [0.6, 0.3, 0.0, 0.0, 1.0]
    du = rates(p, u)

    assert du[4] == pytest.approx(0.8 * 0.4 * 0.6 - 0.3)


@pytest.mark.parametrize("T", [10.0, 26.0, 33.0])
def test_mirror_symmetry_with_equal_resources(T):
    p = OmnivoryModule(
        r_litt=1.2,
        k_litt=0.9,
        alpha_pel=0.6,
        a_CR_litt=1.3,
        a_PR_litt=0.3,
        T=T,
    )
    u = [0.45, 0.45, 0.3, 0.55, 0.2]
    u_mirrored = [0.45, 0.45, 0.55, 0.3, 0.2]

    du = rates(p, u)
    du_mirrored = rates(mirrored(p), u_mirrored)

    np.testing.assert_allclose(
        du_mirrored[[1, 0, 3, 2, 4]], du, rtol=1e-12, atol=1e-15
    )


def test_mirror_symmetry_broken_with_unequal_resources():
    p = OmnivoryModule(T=26.0)
    u = [0.6, 0.2, 0.3, 0.5, 0.2]
    u_mirrored = [0.2, 0.6, 0.5, 0.3, 0.2]

    du = rates(p, u)
    du_mirrored = rates(mirrored(p), u_mirrored)

    # consumer equations are symmetric, resource and predator equations are not
    np.testing.assert_allclose(du_mirrored[[3, 2]], du[[2, 3]], rtol=1e-12)
    assert du_mirrored[1] != pytest.approx(du[0])
    assert du_mirrored[4] != pytest.approx(du[4])


def test_time_does_not_enter_equations(simple):
    u = [0.5, 0.25, 0.4, 0.2, 1.0]
    np.testing.assert_array_equal(rates(simple, u, t=0.0), rates(simple, u, t=321.5))


def test_rhs_returns_new_vector(simple):
    u = np.array([0.5, 0.25, 0.4, 0.2, 1.0])

    du = simple.rhs(0.0, u)

    np.testing.assert_array_equal(du, rates(simple, u))
    np.testing.assert_array_equal(u, [0.5, 0.25, 0.4, 0.2, 1.0])


def test_negative_densities_are_not_clamped(simple):
    du = rates(simple, [-0.1, 0.25, 0.4, 0.2, 1.0])
    assert np.all(np.isfinite(du))


def test_diet_share(simple):
    u = [0.5, 0.25, 0.4, 0.2, 1.0]
    littoral, pelagic, share = simple.derived(np.array(u))

    assert littoral == pytest.approx((0.2 * 0.5 + 1.0 * 0.4) / 1.475)
    assert pelagic == pytest.approx((0.2 * 0.25 + 2.0 * 0.2) / 1.475)
    assert share == pytest.approx(0.5 / 0.95)


def test_diet_share_undefined_without_prey():
    _, _, share = OmnivoryModule().derived(np.array([0, 0, 0, 0, 1.0]))
    assert math.isnan(share)



def test_parameter_descriptions():
    params = {p.name: p for p in describe(OmnivoryModule)}

    assert list(params) == list(OmnivoryModule().params)
    assert params["alpha_pel"].label == "α_pel"
    assert params["e_CR"].range == Range(0.0, 1.0)
    assert params["Topt_pel"].default == 25.0
    assert params["T"].range == Range()


@pytest.mark.parametrize(
    "overrides",
    [
        {"m_P": -0.1},
        {"e_PC": 1.2},
        {"sigma": 0.0},
        {"k_pel": 0.0},
        {"aT_litt": math.nan},
    ],
)
def test_rejects_parameters_out_of_range(overrides):
    (name,) = overrides
    with pytest.raises(ValueError, match=f"{name}="):
        OmnivoryModule(**overrides)


def test_replace_is_validated():
    with pytest.raises(ValueError, match="h_CR="):
        dataclasses.replace(OmnivoryModule(), h_CR=-1.0)


def test_reports_all_invalid_parameters():
    with pytest.raises(ValueError) as excinfo:
        OmnivoryModule(r_litt=-1.0, e_CR=2.0)

    msg = str(excinfo.value)
    assert "r_litt=-1.0" in msg
    assert "e_CR=2.0" in msg


@pytest.mark.parametrize("T", [-20.0, 100.0])
def test_any_temperature_is_accepted(T):
    assert OmnivoryModule(T=T).T == T
