"""
Fixed numerical constants of the resampling kernels.
"""

BICUBIC_COEFFICIENT = -0.5
"""The free parameter `a` of the cubic convolution family. The value
`-0.5` gives the Catmull-Rom-like kernel commonly used for image resampling."""

BICUBIC_SUPPORT_RADIUS = 2
"""The bicubic kernel is zero for distances `|x| >= 2`."""

LANCZOS_SUPPORT_RADIUS = 3
"""The Lanczos kernel is zero for distances `|x| >= 3`."""

SINC_ZERO_THRESHOLD = 0.0001
"""Below this magnitude the normalized sinc returns its limit, `1`, instead of
evaluating `sin(pi x) / (pi x)`. Changing it shifts outputs near zero."""
