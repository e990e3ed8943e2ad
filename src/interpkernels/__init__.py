__version__ = "0.1.0"
__author__ = "interpkernels developers"
__email__ = "interpkernels@users.noreply.github.com"
__uri__ = "https://github.com/interpkernels/interpkernels"
__description__ = "Bicubic and Lanczos resampling kernels in JAX"

from . import (
    constants as constants,
    kernels as kernels,
    typing as typing,
)
