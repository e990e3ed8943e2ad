from ._kernel_functions import (
    bicubic_kernel as bicubic_kernel,
    lanczos_kernel as lanczos_kernel,
)
from ._kernel_modules import (
    AbstractResamplingKernel as AbstractResamplingKernel,
    BicubicKernel as BicubicKernel,
    LanczosKernel as LanczosKernel,
    get_resampling_kernel as get_resampling_kernel,
)
