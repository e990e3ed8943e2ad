"""
Kernel objects that pair a kernel function with its support radius.
"""

import warnings
from abc import abstractmethod
from typing import ClassVar
from typing_extensions import override

import equinox as eqx
import jax
from jaxtyping import ArrayLike

from ..constants import BICUBIC_SUPPORT_RADIUS, LANCZOS_SUPPORT_RADIUS
from ..typing import KernelWeights
from ._kernel_functions import bicubic_kernel, lanczos_kernel


class AbstractResamplingKernel(eqx.Module):
    """Base class for a resampling kernel.

    A resampler should gather source samples within `support_radius` of an
    interpolation point and weight them by calling the kernel on their signed
    distances.
    """

    support_radius: eqx.AbstractClassVar[int]
    name: eqx.AbstractClassVar[str]

    @abstractmethod
    def __call__(self, x: ArrayLike) -> KernelWeights:
        raise NotImplementedError


class BicubicKernel(AbstractResamplingKernel):
    """The cubic convolution kernel with coefficient `a = -0.5`.

    See `interpkernels.kernels.bicubic_kernel`.
    """

    support_radius: ClassVar[int] = BICUBIC_SUPPORT_RADIUS
    name: ClassVar[str] = "bicubic"

    @override
    def __call__(self, x: ArrayLike) -> KernelWeights:
        return bicubic_kernel(x)


class LanczosKernel(AbstractResamplingKernel):
    """The Lanczos kernel with a support radius of 3.

    See `interpkernels.kernels.lanczos_kernel`.
    """

    support_radius: ClassVar[int] = LANCZOS_SUPPORT_RADIUS
    name: ClassVar[str] = "lanczos3"

    @override
    def __call__(self, x: ArrayLike) -> KernelWeights:
        return lanczos_kernel(x)


_KERNELS_BY_NAME: dict[str, type[AbstractResamplingKernel]] = {
    "bicubic": BicubicKernel,
    "cubic": BicubicKernel,
    "lanczos": LanczosKernel,
    "lanczos3": LanczosKernel,
}


def get_resampling_kernel(name: str) -> AbstractResamplingKernel:
    """Get a resampling kernel by name.

    **Arguments:**

    - `name`:
        The kernel name, case-insensitive. Either `"bicubic"` (alias
        `"cubic"`) or `"lanczos3"` (alias `"lanczos"`).

    **Returns:**

    An instance of the corresponding `AbstractResamplingKernel`.
    """
    try:
        kernel_cls = _KERNELS_BY_NAME[name.lower()]
    except KeyError:
        raise ValueError(
            f"Resampling kernel `{name}` is not supported. Supported kernels "
            f"are {list(_KERNELS_BY_NAME.keys())}."
        ) from None
    if not _is_double_precision_enabled():
        warnings.warn(
            "JAX double precision is disabled, so weights from the "
            f"`{kernel_cls.name}` kernel will be computed in single precision. "
            "Enable it with `jax.config.update('jax_enable_x64', True)` to match "
            "double-precision reference values."
        )
    return kernel_cls()


def _is_double_precision_enabled() -> bool:
    return bool(jax.config.jax_enable_x64)
