from ._kernel_constants import (
    BICUBIC_COEFFICIENT as BICUBIC_COEFFICIENT,
    BICUBIC_SUPPORT_RADIUS as BICUBIC_SUPPORT_RADIUS,
    LANCZOS_SUPPORT_RADIUS as LANCZOS_SUPPORT_RADIUS,
    SINC_ZERO_THRESHOLD as SINC_ZERO_THRESHOLD,
)
