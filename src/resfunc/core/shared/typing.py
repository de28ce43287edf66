"""Shared typing aliases used across resfunc."""

import numpy as np
import numpy.typing as npt

FloatArray = npt.NDArray[np.float64]
Coefficients = npt.ArrayLike
