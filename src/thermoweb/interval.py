from __future__ import annotations

from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray


class Interval(NamedTuple):
    """Closed interval, used mostly as an integration time span."""

    start: float
    end: float

    @property
    def length(self) -> float:
        return self.end - self.start

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"

    def __contains__(self, x) -> bool:
        return self.start <= x <= self.end

    def sample(self, num: int) -> NDArray[np.float64]:
        """
        Return evenly spaced points covering the interval, both ends included.

        Parameters
        ----------
        num : int
            Number of points.

        Returns
        -------
        ndarray, shape (num,)
            Sample points.
        """
        return np.linspace(self.start, self.end, num=num)
