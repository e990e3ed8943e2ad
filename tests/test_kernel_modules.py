import jax
import jax.numpy as jnp
import numpy as np
import pytest

import interpkernels.kernels as ik
from interpkernels.kernels import _kernel_modules


jax.config.update("jax_enable_x64", True)


@pytest.mark.parametrize(
    "kernel, fn, radius",
    [
        ("bicubic", ik.bicubic_kernel, 2),
        ("lanczos", ik.lanczos_kernel, 3),
    ],
)
def test_kernel_wraps_function(kernel, fn, radius, sample_distances, request):
    kernel = request.getfixturevalue(kernel)
    assert isinstance(kernel, ik.AbstractResamplingKernel)
    assert kernel.support_radius == radius
    np.testing.assert_array_equal(kernel(sample_distances), fn(sample_distances))


@pytest.mark.parametrize("kernel", ["bicubic", "lanczos"])
def test_kernel_is_zero_at_support_radius(kernel, request):
    kernel = request.getfixturevalue(kernel)
    r = kernel.support_radius
    np.testing.assert_array_equal(
        kernel(jnp.asarray([-r - 0.5, -r, r, r + 0.5])), jnp.zeros(4)
    )


@pytest.mark.parametrize(
    "name, cls",
    [
        ("bicubic", ik.BicubicKernel),
        ("cubic", ik.BicubicKernel),
        ("BiCubic", ik.BicubicKernel),
        ("lanczos", ik.LanczosKernel),
        ("lanczos3", ik.LanczosKernel),
        ("LANCZOS3", ik.LanczosKernel),
    ],
)
def test_get_resampling_kernel(name, cls):
    kernel = ik.get_resampling_kernel(name)
    assert type(kernel) is cls


def test_kernel_names_round_trip():
    for cls in (ik.BicubicKernel, ik.LanczosKernel):
        assert type(ik.get_resampling_kernel(cls.name)) is cls


@pytest.mark.parametrize("name", ["bilinear", "lanczos2", ""])
def test_get_resampling_kernel_unknown_name(name):
    with pytest.raises(ValueError, match="not supported"):
        ik.get_resampling_kernel(name)


def test_get_resampling_kernel_warns_in_single_precision(monkeypatch):
    monkeypatch.setattr(_kernel_modules, "_is_double_precision_enabled", lambda: False)
    with pytest.warns(UserWarning, match="single precision"):
        kernel = ik.get_resampling_kernel("lanczos")
    assert isinstance(kernel, ik.LanczosKernel)


def test_abstract_kernel_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ik.AbstractResamplingKernel()  # type: ignore
