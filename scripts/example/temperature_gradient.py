# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.16.1
#   kernelspec:
#     display_name: Python 3 (ipykernel)
#     language: python
#     name: python3
# ---

# %% jupyter={"source_hidden": true}
from concurrent.futures import ProcessPoolExecutor

import matplotlib.pyplot as plt
import numpy as np

from thermoweb.models import OmnivoryModule
from thermoweb.plot import plot_thermal_response
from thermoweb.simulation import simulate

# %% [markdown]
# Predator attack rates on the two consumers along the temperature gradient. Past the
# critical maximum the parabolic limb of the curve becomes negative.
#
# Worker processes import this script, so everything that runs is kept under the
# ``__main__`` guard and only `final_state` is defined at module level.

# %%
if __name__ == "__main__":
    base = OmnivoryModule()
    plot_thermal_response(base, np.linspace(0, 45, num=200))
    plt.show()

# %% [markdown]
# Between 20C and 30C the predator switches between prey in alternate habitats. Each
# temperature is an independent run with its own (immutable) model instance, so the
# runs can be executed in parallel.


# %%
def final_state(T):
    solution = simulate(OmnivoryModule(T=T))
    return {name: series[-1] for name, series in solution.items()}


if __name__ == "__main__":
    temperatures = np.linspace(20, 30, num=11)

    with ProcessPoolExecutor() as executor:
        finals = list(executor.map(final_state, temperatures))

# %%
if __name__ == "__main__":
    fig, (top, bottom) = plt.subplots(2, 1, sharex=True)
    for name in ("C_litt", "C_pel", "P"):
        top.plot(temperatures, [f[name] for f in finals], "o-", label=name)
    top.set_ylabel("Density at t = 500")
    top.legend()

    bottom.plot(temperatures, [f["littoral_diet_share"] for f in finals], "o-")
    bottom.set_xlabel("Temperature")
    bottom.set_ylabel("Littoral diet share")
    plt.show()
