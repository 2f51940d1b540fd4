"""
Shared pytest fixtures for rendermath tests.
"""

from typing import Iterator

import pytest

from rendermath.config import runtime
from rendermath.config.schema import MatrixDtype, NumericsConfig, RenderMathConfig
from rendermath.core import quaternion
from rendermath.core.matrix import Matrix, compose
from rendermath.core.quaternion import Quaternion
from rendermath.core.vector3 import Vector3
from rendermath.geometry.viewport import Viewport


@pytest.fixture(autouse=True)
def reset_numerics() -> Iterator[None]:
    """Run every test against default numerics."""
    runtime.reset_active_config()
    yield
    runtime.reset_active_config()


@pytest.fixture
def float64_numerics() -> None:
    """Store new matrices in double precision."""
    runtime.configure(
        RenderMathConfig(numerics=NumericsConfig(matrix_dtype=MatrixDtype.FLOAT64))
    )


@pytest.fixture
def sample_scale() -> Vector3:
    """Non-uniform positive scale."""
    return Vector3(2.0, 3.0, 4.0)


@pytest.fixture
def sample_rotation() -> Quaternion:
    """Rotation with all three Euler angles non-zero."""
    return quaternion.rotation_yaw_pitch_roll(0.3, 0.2, 0.1)


@pytest.fixture
def sample_translation() -> Vector3:
    """Translation with mixed signs."""
    return Vector3(1.0, -2.0, 3.0)


@pytest.fixture
def sample_transform(
    sample_scale: Vector3, sample_rotation: Quaternion, sample_translation: Vector3
) -> Matrix:
    """Matrix composed from the sample scale, rotation and translation."""
    return compose(sample_scale, sample_rotation, sample_translation)


@pytest.fixture
def hd_viewport() -> Viewport:
    """1280x720 pixel viewport at the origin."""
    return Viewport(0.0, 0.0, 1280.0, 720.0)
