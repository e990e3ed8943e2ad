"""
Interpolation kernels for resampling, evaluated at signed distances from a
sample center. Both kernels are even, so negative distances are reflected
before evaluation.

See https://en.wikipedia.org/wiki/Lanczos_resampling#Algorithm and
https://en.wikipedia.org/wiki/Bicubic_interpolation#Bicubic_convolution_algorithm.
"""

import jax.numpy as jnp
from jaxtyping import Array, ArrayLike, Float

from ..constants import (
    BICUBIC_COEFFICIENT,
    BICUBIC_SUPPORT_RADIUS,
    LANCZOS_SUPPORT_RADIUS,
    SINC_ZERO_THRESHOLD,
)
from ..typing import KernelWeights


def bicubic_kernel(x: ArrayLike) -> KernelWeights:
    """Evaluate the cubic convolution kernel with coefficient `a = -0.5`.

    $$W(x) = \\begin{cases}
        (a + 2)|x|^3 - (a + 3)|x|^2 + 1 & |x| \\leq 1 \\\\
        a|x|^3 - 5a|x|^2 + 8a|x| - 4a & 1 < |x| < 2 \\\\
        0 & \\text{otherwise}
    \\end{cases}$$

    **Arguments:**

    - `x`:
        The signed distance, in source pixels, from the sample center.
        Arrays are evaluated element-wise.

    **Returns:**

    The kernel weight, with the same shape as `x`. This is exactly `1` at
    `x = 0` and exactly `0` for `|x| >= 2`.
    """
    x = jnp.abs(_as_inexact_array(x))
    a = BICUBIC_COEFFICIENT
    inner_weight = (1.5 * x - 2.5) * x * x + 1
    outer_weight = ((a * x + 2.5) * x - 4) * x + 2
    return jnp.where(
        x <= 1,
        inner_weight,
        jnp.where(x < BICUBIC_SUPPORT_RADIUS, outer_weight, 0.0),
    )


def lanczos_kernel(x: ArrayLike) -> KernelWeights:
    """Evaluate the Lanczos kernel with a support radius of 3.

    $$L(x) = \\begin{cases}
        \\textrm{sinc}(x) \\, \\textrm{sinc}(x / 3) & |x| < 3 \\\\
        0 & \\text{otherwise}
    \\end{cases}$$

    where $\\textrm{sinc}(x) = \\sin(\\pi x) / (\\pi x)$ is the normalized sinc.

    **Arguments:**

    - `x`:
        The signed distance, in source pixels, from the sample center.
        Arrays are evaluated element-wise.

    **Returns:**

    The kernel weight, with the same shape as `x`. This is exactly `1` at
    `x = 0` and exactly `0` for `|x| >= 3`.
    """
    x = jnp.abs(_as_inexact_array(x))
    radius = LANCZOS_SUPPORT_RADIUS
    return jnp.where(x < radius, _sinc(x) * _sinc(x / radius), 0.0)


def _sinc(x: Float[Array, "..."]) -> Float[Array, "..."]:
    # Unlike `jnp.sinc`, switch to the limit at a fixed threshold
    is_away_from_zero = jnp.abs(x) > SINC_ZERO_THRESHOLD
    # Keep the untaken branch finite so that gradients at zero are not nan
    safe_x = jnp.where(is_away_from_zero, x, 1.0)
    pi_x = safe_x * jnp.pi
    return jnp.where(is_away_from_zero, jnp.sin(pi_x) / pi_x, 1.0)


def _as_inexact_array(x: ArrayLike) -> Array:
    x = jnp.asarray(x)
    if not jnp.issubdtype(x.dtype, jnp.inexact):
        x = x.astype(float)
    return x
