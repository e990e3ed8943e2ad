"""
A type hint utility module using jaxtyping. This module is primarily used to
communicate conventions across `interpkernels`.
"""

import jaxtyping as jt


KernelWeights = jt.Float[jt.Array, "..."]
"""Type alias for `jaxtyping.Float[jax.Array, "..."]`. The weights returned by a
kernel have the same shape as the distances passed in."""
