import matplotlib.pyplot as plt
import numpy as np
from numpy.typing import ArrayLike

from thermoweb.models.omnivory import OmnivoryModule
from thermoweb.thermal import thermal_response


class PlotItem:
    def __init__(self, key, label, style, color):
        self.key = key
        self.label = label
        self.style = style
        self.color = color


DENSITY_ITEMS = [
    PlotItem("R_litt", "Littoral resource", "-", "tab:green"),
    PlotItem("R_pel", "Pelagic resource", "-", "tab:blue"),
    PlotItem("C_litt", "Littoral consumer", "--", "tab:green"),
    PlotItem("C_pel", "Pelagic consumer", "--", "tab:blue"),
    PlotItem("P", "Predator", "-", "tab:red"),
]


def _axis(ax):
    if ax is None:
        _, ax = plt.subplots()
    return ax


def plot_trajectory(solution, ax=None, items=DENSITY_ITEMS):
    """
    Plot population densities against time.

    Parameters
    ----------
    solution : dict of ndarray
        Result of `thermoweb.simulation.simulate`, must contain the time axis ``"t"``.
    ax : matplotlib.axes.Axes, optional
        Axis to draw on. New figure is created if not specified.
    items : list of PlotItem, optional
        Series to plot.

    Returns
    -------
    matplotlib.axes.Axes
        Axis containing the plot.
    """
    ax = _axis(ax)
    ts = solution["t"]
    for it in items:
        ax.plot(ts, solution[it.key], it.style, color=it.color, label=it.label)
    ax.set_xlabel("time")
    ax.set_ylabel("Density")
    ax.legend(loc="upper right")
    return ax


def plot_thermal_response(model: OmnivoryModule, temperatures: ArrayLike, ax=None):
    """
    Plot attack rates of the predator on both consumers against temperature.

    Parameters
    ----------
    model : OmnivoryModule
        Model supplying the thermal response parameters.
    temperatures : array_like
        Temperatures at which to evaluate the curves.
    ax : matplotlib.axes.Axes, optional
        Axis to draw on. New figure is created if not specified.

    Returns
    -------
    matplotlib.axes.Axes
        Axis containing the plot.
    """
    ax = _axis(ax)
    ts = np.asarray(temperatures, dtype=float)
    a_litt = thermal_response(
        ts, model.Topt_litt, model.Tmax_litt, model.aT_litt, model.sigma
    )
    a_pel = thermal_response(ts, model.Topt_pel, model.Tmax_pel, model.aT_pel, model.sigma)

    ax.plot(ts, a_litt, color="tab:green", label="P on C_litt")
    ax.plot(ts, a_pel, color="tab:blue", label="P on C_pel")
    ax.axhline(0, color="gray", linewidth=0.5)
    ax.set_xlabel("Temperature")
    ax.set_ylabel("Attack rate")
    ax.legend()
    return ax
