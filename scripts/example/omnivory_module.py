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
import matplotlib.pyplot as plt

from thermoweb.models import OmnivoryModule
from thermoweb.plot import plot_trajectory
from thermoweb.simulation import DEFAULT_INIT, DEFAULT_SPAN, simulate

# %% [markdown]
# Omnivory module with temperature-dependent attack rates.
#
# A generalist, omnivorous predator feeds on littoral and pelagic consumers and on
# their resources. Its attack rates on the two consumers respond differently to
# temperature, so warming shifts the predator between prey in alternate habitats.
#
# Parameters are plain dataclass fields, so the model with all the default values is
# created by calling the class with no arguments. Any subset can be overridden by
# keyword, usually just the temperature ``T``.

# %%
system = OmnivoryModule()
system.param_dict()

# %% [markdown]
# Integrate from the default initial state over the default time span, with relative
# and absolute tolerance ``1e-8``.

# %%
print(f"init = {DEFAULT_INIT}, span = {DEFAULT_SPAN}")
solution = simulate(system)

# %%
plot_trajectory(solution)
plt.show()
