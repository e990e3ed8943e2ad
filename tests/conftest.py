import jax
import jax.numpy as jnp
import pytest
from jaxtyping import install_import_hook


with install_import_hook("interpkernels", "typeguard.typechecked"):
    import interpkernels.kernels as ik


jax.config.update("jax_enable_x64", True)


@pytest.fixture
def bicubic():
    return ik.BicubicKernel()


@pytest.fixture
def lanczos():
    return ik.LanczosKernel()


@pytest.fixture
def sample_distances():
    return jnp.linspace(-4.0, 4.0, 801)
