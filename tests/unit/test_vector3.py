"""Unit tests for Vector3 and its module operations."""

import math

import pytest

from rendermath.config import runtime
from rendermath.core import matrix
from rendermath.core import vector3 as vec3
from rendermath.core.errors import DegenerateVectorError
from rendermath.core.matrix import Matrix
from rendermath.core.vector3 import Vector3
from rendermath.geometry.viewport import Viewport


def assert_vector_close(actual: Vector3, expected: Vector3, places: int = 5) -> None:
    assert actual.x == pytest.approx(expected.x, abs=10**-places)
    assert actual.y == pytest.approx(expected.y, abs=10**-places)
    assert actual.z == pytest.approx(expected.z, abs=10**-places)


class TestVector3Basics:
    """Tests for construction, copying and comparison."""

    def test_named_constructors(self) -> None:
        """Test the unit and zero vectors."""
        assert Vector3.zero().equals_to_floats(0.0, 0.0, 0.0)
        assert Vector3.one().equals_to_floats(1.0, 1.0, 1.0)
        assert Vector3.up().equals_to_floats(0.0, 1.0, 0.0)
        assert Vector3.forward().equals_to_floats(0.0, 0.0, 1.0)
        assert Vector3.right().equals_to_floats(1.0, 0.0, 0.0)
        assert Vector3.left().equals_to_floats(-1.0, 0.0, 0.0)

    def test_from_array_with_offset(self) -> None:
        """Test reading three components at an offset."""
        vector = Vector3.from_array([9.0, 1.0, 2.0, 3.0], 1)
        assert vector.equals_to_floats(1.0, 2.0, 3.0)

    def test_to_array_writes_at_index(self) -> None:
        """Test writing into a caller buffer."""
        buffer = [0.0] * 5
        Vector3(1.0, 2.0, 3.0).to_array(buffer, 2)
        assert buffer == [0.0, 0.0, 1.0, 2.0, 3.0]

    def test_clone_is_independent(self) -> None:
        """Test that clones do not share state."""
        original = Vector3(1.0, 2.0, 3.0)
        copy = original.clone()
        copy.x = 10.0
        assert original.x == 1.0

    def test_equals_with_epsilon(self) -> None:
        """Test tolerant comparison."""
        a = Vector3(1.0, 2.0, 3.0)
        assert a.equals_with_epsilon(Vector3(1.0005, 2.0, 3.0))
        assert not a.equals_with_epsilon(Vector3(1.01, 2.0, 3.0))
        assert not a.equals(None)

    def test_is_non_uniform(self) -> None:
        """Test detection of non-uniform scale vectors."""
        assert Vector3(1.0, 2.0, 1.0).is_non_uniform
        assert not Vector3(2.0, -2.0, 2.0).is_non_uniform

    def test_hash_code_truncates_components(self) -> None:
        """Test that nearby vectors share a hash code."""
        assert Vector3(1.2, 2.7, 3.1).get_hash_code() == Vector3(1.9, 2.1, 3.5).get_hash_code()

    def test_hash_code_value(self) -> None:
        """Test the combined value for small integer components."""
        assert Vector3(1.0, 2.0, 3.0).get_hash_code() == 158400

    def test_hash_code_wraps_to_int32(self) -> None:
        """Test that large components keep the code in signed 32-bit range."""
        code = Vector3(3.0e9, -7.5e9, 1.0e12).get_hash_code()
        assert -(2**31) <= code < 2**31


class TestVector3Arithmetic:
    """Tests for arithmetic forms."""

    def test_add_forms_agree(self) -> None:
        """Test new, in-place and to-ref addition."""
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, 5.0, 6.0)
        result = Vector3()
        a.add_to_ref(b, result)
        assert a.add(b).equals(result)
        assert (a + b).equals(result)
        assert a.clone().add_in_place(b).equals(result)

    def test_subtract_and_negate(self) -> None:
        """Test subtraction and negation."""
        a = Vector3(1.0, 2.0, 3.0)
        assert a.subtract(Vector3(1.0, 1.0, 1.0)).equals_to_floats(0.0, 1.0, 2.0)
        assert (-a).equals_to_floats(-1.0, -2.0, -3.0)
        assert a.subtract_from_floats(1.0, 2.0, 3.0).equals(Vector3.zero())

    def test_scale_and_add_to_ref_accumulates(self) -> None:
        """Test accumulation into the result."""
        result = Vector3(1.0, 1.0, 1.0)
        Vector3(1.0, 2.0, 3.0).scale_and_add_to_ref(2.0, result)
        assert result.equals_to_floats(3.0, 5.0, 7.0)

    def test_multiply_and_divide(self) -> None:
        """Test component-wise product and quotient."""
        a = Vector3(2.0, 4.0, 6.0)
        b = Vector3(2.0, 2.0, 3.0)
        assert a.multiply(b).equals_to_floats(4.0, 8.0, 18.0)
        assert a.divide(b).equals_to_floats(1.0, 2.0, 2.0)
        assert (2.0 * b).equals_to_floats(4.0, 4.0, 6.0)

    def test_minimize_maximize_in_place(self) -> None:
        """Test component-wise min and max."""
        a = Vector3(1.0, 5.0, 3.0)
        b = Vector3(2.0, 4.0, 3.0)
        assert a.clone().minimize_in_place(b).equals_to_floats(1.0, 4.0, 3.0)
        assert a.clone().maximize_in_place(b).equals_to_floats(2.0, 5.0, 3.0)
        assert vec3.minimize(a, b).equals_to_floats(1.0, 4.0, 3.0)
        assert vec3.maximize(a, b).equals_to_floats(2.0, 5.0, 3.0)


class TestVector3Normalize:
    """Tests for normalization."""

    def test_normalize_in_place(self) -> None:
        """Test that a 3-4-5 vector becomes unit length."""
        vector = Vector3(3.0, 4.0, 0.0).normalize()
        assert vector.x == pytest.approx(0.6)
        assert vector.y == pytest.approx(0.8)
        assert vector.length() == pytest.approx(1.0)

    def test_normalize_zero_is_noop(self) -> None:
        """Test that a zero vector is left unchanged."""
        vector = Vector3.zero().normalize()
        assert vector.equals(Vector3.zero())

    def test_normalize_zero_raises_in_strict_mode(self) -> None:
        """Test strict handling of a zero vector."""
        with runtime.strict_mode():
            with pytest.raises(DegenerateVectorError):
                Vector3.zero().normalize()

    def test_degenerate_vector_error_is_value_error(self) -> None:
        """Test that strict errors can be caught as ValueError."""
        with runtime.strict_mode():
            with pytest.raises(ValueError):
                Vector3.zero().normalize()

    def test_normalize_to_ref_leaves_source(self) -> None:
        """Test that normalize_to_ref does not modify the source."""
        source = Vector3(0.0, 0.0, 5.0)
        result = Vector3()
        source.normalize_to_ref(result)
        assert source.z == 5.0
        assert result.equals_to_floats(0.0, 0.0, 1.0)
        assert vec3.normalize(source).equals_to_floats(0.0, 0.0, 1.0)


class TestVector3Products:
    """Tests for dot, cross and angles."""

    def test_cross_of_right_and_up_is_forward(self) -> None:
        """Test the cross product of the X and Y axes."""
        assert vec3.cross(Vector3.right(), Vector3.up()).equals(Vector3.forward())

    def test_cross_to_ref_allows_aliasing(self) -> None:
        """Test writing the cross product into an operand."""
        left = Vector3.right()
        vec3.cross_to_ref(left, Vector3.up(), left)
        assert left.equals_to_floats(0.0, 0.0, 1.0)

    def test_cross_is_orthogonal(self) -> None:
        """Test that the cross product is orthogonal to both inputs."""
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-2.0, 0.5, 4.0)
        c = vec3.cross(a, b)
        assert vec3.dot(a, c) == pytest.approx(0.0)
        assert vec3.dot(b, c) == pytest.approx(0.0)

    def test_angle_between_vectors_is_signed(self) -> None:
        """Test the sign follows the reference normal."""
        x = Vector3.right()
        y = Vector3.up()
        assert vec3.get_angle_between_vectors(x, y, Vector3(0.0, 0.0, 1.0)) == pytest.approx(
            math.pi / 2
        )
        assert vec3.get_angle_between_vectors(x, y, Vector3(0.0, 0.0, -1.0)) == pytest.approx(
            -math.pi / 2
        )

    def test_angle_between_parallel_vectors(self) -> None:
        """Test that rounding past 1 in the cosine does not leave the acos domain."""
        angle = vec3.get_angle_between_vectors(
            Vector3(1.0, 1.0, 1.0), Vector3(2.0, 2.0, 2.0), Vector3(0.0, 1.0, 0.0)
        )
        assert angle == pytest.approx(0.0, abs=1e-6)

    def test_angle_between_opposite_vectors(self) -> None:
        """Test anti-parallel inputs."""
        angle = vec3.get_angle_between_vectors(
            Vector3(1.0, 1.0, 1.0), Vector3(-3.0, -3.0, -3.0), Vector3(0.0, 1.0, 0.0)
        )
        assert abs(angle) == pytest.approx(math.pi, abs=1e-6)

    def test_clip_factor(self) -> None:
        """Test the parametric slab crossing."""
        factor = vec3.get_clip_factor(
            Vector3.zero(), Vector3(10.0, 0.0, 0.0), Vector3.right(), 5.0
        )
        assert factor == pytest.approx(0.5)


class TestVector3Interpolation:
    """Tests for interpolation helpers."""

    def test_lerp(self) -> None:
        """Test linear interpolation at the midpoint."""
        result = vec3.lerp(Vector3.zero(), Vector3(2.0, 4.0, 6.0), 0.5)
        assert result.equals_to_floats(1.0, 2.0, 3.0)

    def test_catmull_rom_passes_through_inner_points(self) -> None:
        """Test Catmull-Rom endpoints are value2 and value3."""
        v1 = Vector3(0.0, 0.0, 0.0)
        v2 = Vector3(1.0, 2.0, 0.0)
        v3 = Vector3(3.0, 1.0, 1.0)
        v4 = Vector3(4.0, 0.0, 2.0)
        assert_vector_close(vec3.catmull_rom(v1, v2, v3, v4, 0.0), v2)
        assert_vector_close(vec3.catmull_rom(v1, v2, v3, v4, 1.0), v3)

    def test_hermite_endpoints(self) -> None:
        """Test Hermite endpoints are value1 and value2."""
        v1 = Vector3(1.0, 0.0, 0.0)
        v2 = Vector3(0.0, 1.0, 0.0)
        t1 = Vector3(5.0, 5.0, 5.0)
        t2 = Vector3(-5.0, 2.0, 1.0)
        assert_vector_close(vec3.hermite(v1, t1, v2, t2, 0.0), v1)
        assert_vector_close(vec3.hermite(v1, t1, v2, t2, 1.0), v2)

    def test_clamp(self) -> None:
        """Test clamping into a box."""
        result = vec3.clamp(
            Vector3(-1.0, 0.5, 3.0), Vector3.zero(), Vector3.one()
        )
        assert result.equals_to_floats(0.0, 0.5, 1.0)

    def test_distance_and_center(self) -> None:
        """Test distance helpers and the midpoint."""
        a = Vector3(1.0, 1.0, 1.0)
        b = Vector3(4.0, 5.0, 1.0)
        assert vec3.distance(a, b) == pytest.approx(5.0)
        assert vec3.distance_squared(a, b) == pytest.approx(25.0)
        assert vec3.center(a, b).equals_to_floats(2.5, 3.0, 1.0)


class TestVector3Transforms:
    """Tests for matrix transforms, projection and unprojection."""

    def test_transform_coordinates_applies_translation(self) -> None:
        """Test that points are translated."""
        result = vec3.transform_coordinates(
            Vector3(1.0, 2.0, 3.0), matrix.translation(10.0, 0.0, 0.0)
        )
        assert_vector_close(result, Vector3(11.0, 2.0, 3.0))

    def test_transform_normal_ignores_translation(self) -> None:
        """Test that directions are not translated."""
        result = vec3.transform_normal(
            Vector3(1.0, 2.0, 3.0), matrix.translation(10.0, 0.0, 0.0)
        )
        assert_vector_close(result, Vector3(1.0, 2.0, 3.0))

    def test_transform_coordinates_divides_by_w(self) -> None:
        """Test the perspective divide."""
        scaled_w = matrix.from_values(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 2.0,
        )
        result = vec3.transform_coordinates(Vector3(2.0, 4.0, 6.0), scaled_w)
        assert_vector_close(result, Vector3(1.0, 2.0, 3.0))

    def test_transform_coordinates_zero_w_gives_ieee_values(self) -> None:
        """Test that a point on the camera plane divides to inf and nan."""
        projection = matrix.perspective_fov_lh(math.pi / 2, 1.0, 0.1, 100.0)
        result = vec3.transform_coordinates(Vector3(1.0, 0.0, 0.0), projection)
        assert result.x == math.inf
        assert math.isnan(result.y)
        assert result.z == -math.inf

    def test_project_point_at_eye_does_not_raise(self) -> None:
        """Test projecting the camera position itself."""
        eye = Vector3(0.0, 0.0, -10.0)
        view = matrix.look_at_lh(eye, Vector3.zero(), Vector3.up())
        projection = matrix.perspective_fov_lh(math.pi / 2, 1.0, 0.1, 100.0)
        viewport = Viewport(0.0, 0.0, 100.0, 100.0)
        result = vec3.project(eye, Matrix.identity(), view.multiply(projection), viewport)
        assert not math.isfinite(result.x)
        assert not math.isfinite(result.z)

    def test_project_origin_to_viewport_center(self) -> None:
        """Test projecting through identity matrices."""
        viewport = Viewport(0.0, 0.0, 800.0, 600.0)
        result = vec3.project(Vector3.zero(), Matrix.identity(), Matrix.identity(), viewport)
        assert_vector_close(result, Vector3(400.0, 300.0, 0.5))

    def test_unproject_maps_depth_from_unit_range(self) -> None:
        """Test that screen depth 0.5 is clip depth 0."""
        identity = Matrix.identity()
        center = vec3.unproject(Vector3(400.0, 300.0, 0.5), 800.0, 600.0, identity, identity, identity)
        corner = vec3.unproject(Vector3(800.0, 0.0, 1.0), 800.0, 600.0, identity, identity, identity)
        assert_vector_close(center, Vector3.zero())
        assert_vector_close(corner, Vector3(1.0, 1.0, 1.0))

    def test_unproject_from_transform_uses_depth_as_given(self) -> None:
        """Test that the precombined variant does not remap depth."""
        identity = Matrix.identity()
        result = vec3.unproject_from_transform(
            Vector3(400.0, 300.0, 0.25), 800.0, 600.0, identity, identity
        )
        assert_vector_close(result, Vector3(0.0, 0.0, 0.25))

    def test_rotation_from_unit_axes_is_zero(self) -> None:
        """Test that the canonical axes give no rotation."""
        result = vec3.rotation_from_axis(Vector3.right(), Vector3.up(), Vector3.forward())
        assert_vector_close(result, Vector3.zero())

    def test_to_quaternion_uses_yaw_pitch_roll(self) -> None:
        """Test that x is read as yaw."""
        quat = Vector3(math.pi / 2, 0.0, 0.0).to_quaternion()
        assert quat.y == pytest.approx(math.sin(math.pi / 4))
        assert quat.w == pytest.approx(math.cos(math.pi / 4))
