import numpy as np
from numpy.typing import DTypeLike, NDArray

VecFloat = NDArray[np.float64]
MatFloat = NDArray[np.float64]
VecInexact = NDArray[np.inexact]
