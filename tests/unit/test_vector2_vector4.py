"""Unit tests for Vector2 and Vector4."""

import pytest

from rendermath.core import matrix
from rendermath.core import vector2 as vec2
from rendermath.core import vector4 as vec4
from rendermath.core.vector2 import Vector2
from rendermath.core.vector3 import Vector3
from rendermath.core.vector4 import Vector4


class TestVector2:
    """Tests for Vector2."""

    def test_arithmetic(self) -> None:
        """Test add, subtract, multiply and divide."""
        a = Vector2(4.0, 6.0)
        b = Vector2(2.0, 3.0)
        assert a.add(b).equals(Vector2(6.0, 9.0))
        assert a.subtract(b).equals(Vector2(2.0, 3.0))
        assert a.multiply(b).equals(Vector2(8.0, 18.0))
        assert a.divide(b).equals(Vector2(2.0, 2.0))
        assert a.negate().equals(Vector2(-4.0, -6.0))

    def test_add_vector3_ignores_z(self) -> None:
        """Test mixed-dimension addition."""
        assert Vector2(1.0, 1.0).add_vector3(Vector3(1.0, 2.0, 3.0)).equals(Vector2(2.0, 3.0))

    def test_normalize(self) -> None:
        """Test normalization and the zero case."""
        assert Vector2(3.0, 4.0).normalize().equals_with_epsilon(Vector2(0.6, 0.8))
        assert Vector2.zero().normalize().equals(Vector2.zero())

    def test_transform_uses_affine_part(self) -> None:
        """Test the 2D transform with translation."""
        transform = matrix.translation(5.0, -1.0, 7.0)
        assert vec2.transform(Vector2(1.0, 1.0), transform).equals(Vector2(6.0, 0.0))

    def test_point_in_triangle(self) -> None:
        """Test inside, outside and either winding."""
        p0 = Vector2(0.0, 0.0)
        p1 = Vector2(4.0, 0.0)
        p2 = Vector2(0.0, 4.0)
        assert vec2.point_in_triangle(Vector2(1.0, 1.0), p0, p1, p2)
        assert vec2.point_in_triangle(Vector2(1.0, 1.0), p0, p2, p1)
        assert not vec2.point_in_triangle(Vector2(3.0, 3.0), p0, p1, p2)

    def test_distance_of_point_from_segment(self) -> None:
        """Test projection onto the segment and clamping to its ends."""
        a = Vector2(0.0, 0.0)
        b = Vector2(10.0, 0.0)
        assert vec2.distance_of_point_from_segment(Vector2(5.0, 3.0), a, b) == pytest.approx(3.0)
        assert vec2.distance_of_point_from_segment(Vector2(13.0, 4.0), a, b) == pytest.approx(5.0)
        assert vec2.distance_of_point_from_segment(Vector2(3.0, 4.0), a, a) == pytest.approx(5.0)

    def test_interpolation(self) -> None:
        """Test lerp, Hermite and Catmull-Rom endpoints."""
        v1 = Vector2(0.0, 0.0)
        v2 = Vector2(1.0, 2.0)
        v3 = Vector2(3.0, 3.0)
        v4 = Vector2(5.0, 1.0)
        assert vec2.lerp(v1, v3, 0.5).equals(Vector2(1.5, 1.5))
        assert vec2.catmull_rom(v1, v2, v3, v4, 0.0).equals_with_epsilon(v2)
        assert vec2.catmull_rom(v1, v2, v3, v4, 1.0).equals_with_epsilon(v3)
        assert vec2.hermite(v1, v4, v3, v4, 1.0).equals_with_epsilon(v3)

    def test_min_max_clamp_center(self) -> None:
        """Test component-wise helpers."""
        a = Vector2(1.0, 5.0)
        b = Vector2(3.0, 2.0)
        assert vec2.minimize(a, b).equals(Vector2(1.0, 2.0))
        assert vec2.maximize(a, b).equals(Vector2(3.0, 5.0))
        assert vec2.clamp(Vector2(-1.0, 9.0), Vector2.zero(), Vector2.one()).equals(Vector2(0.0, 1.0))
        assert vec2.center(a, b).equals(Vector2(2.0, 3.5))
        assert vec2.dot(a, b) == 13.0


class TestVector4:
    """Tests for Vector4."""

    def test_arithmetic(self) -> None:
        """Test add, subtract and scale."""
        a = Vector4(1.0, 2.0, 3.0, 4.0)
        assert a.add(Vector4.one()).equals(Vector4(2.0, 3.0, 4.0, 5.0))
        assert a.subtract(Vector4.one()).equals(Vector4(0.0, 1.0, 2.0, 3.0))
        assert a.scale(2.0).equals(Vector4(2.0, 4.0, 6.0, 8.0))

    def test_normalize(self) -> None:
        """Test normalization and the zero case."""
        assert Vector4(1.0, 1.0, 1.0, 1.0).normalize().equals_with_epsilon(
            Vector4(0.5, 0.5, 0.5, 0.5)
        )
        assert Vector4.zero().normalize().equals(Vector4.zero())

    def test_to_vector3_drops_w(self) -> None:
        """Test narrowing to Vector3."""
        assert Vector4(1.0, 2.0, 3.0, 4.0).to_vector3().equals_to_floats(1.0, 2.0, 3.0)

    def test_transform_normal_keeps_w(self) -> None:
        """Test that w passes through the 3x3 transform."""
        result = vec4.transform_normal(
            Vector4(1.0, 0.0, 0.0, 7.0), matrix.scaling(2.0, 2.0, 2.0).set_translation_from_floats(9.0, 9.0, 9.0)
        )
        assert result.equals(Vector4(2.0, 0.0, 0.0, 7.0))

    def test_distance_helpers(self) -> None:
        """Test distance and center."""
        a = Vector4(0.0, 0.0, 0.0, 0.0)
        b = Vector4(2.0, 2.0, 2.0, 2.0)
        assert vec4.distance(a, b) == pytest.approx(4.0)
        assert vec4.distance_squared(a, b) == pytest.approx(16.0)
        assert vec4.center(a, b).equals(Vector4.one())
        assert vec4.minimize(a, b).equals(a)
        assert vec4.maximize(a, b).equals(b)
