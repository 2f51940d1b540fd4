"""
Integration tests for a camera transform pipeline.

Builds world, view and projection matrices, projects points to pixels and
back, culls against the frustum and interpolates transforms, the way a
render loop uses the library.
"""

import math

import pytest

from rendermath.config import runtime
from rendermath.core import matrix
from rendermath.core import quaternion
from rendermath.core import vector3 as vec3
from rendermath.core.errors import SingularMatrixError
from rendermath.core.matrix import Matrix
from rendermath.core.quaternion import Quaternion
from rendermath.core.tmp import get_tmp
from rendermath.core.vector3 import Vector3
from rendermath.geometry import frustum
from rendermath.geometry.viewport import Viewport

FOV = math.pi / 2
NEAR = 1.0
FAR = 100.0


@pytest.fixture
def camera(hd_viewport: Viewport) -> tuple[Matrix, Matrix]:
    """View and projection for a camera at z=-10 looking at the origin."""
    view = matrix.look_at_lh(Vector3(0.0, 0.0, -10.0), Vector3.zero(), Vector3.up())
    aspect = hd_viewport.width / hd_viewport.height
    projection = matrix.perspective_fov_lh(FOV, aspect, NEAR, FAR)
    return view, projection


class TestProjection:
    """Tests for world to screen and back."""

    def test_origin_lands_on_viewport_center(
        self, camera: tuple[Matrix, Matrix], hd_viewport: Viewport
    ) -> None:
        """Test that the look-at target projects to the center pixel."""
        view, projection = camera
        screen = vec3.project(
            Vector3.zero(), Matrix.identity(), view.multiply(projection), hd_viewport
        )
        assert screen.x == pytest.approx(640.0, abs=1e-3)
        assert screen.y == pytest.approx(360.0, abs=1e-3)
        assert 0.0 < screen.z < 1.0

    def test_off_axis_point(
        self, camera: tuple[Matrix, Matrix], hd_viewport: Viewport
    ) -> None:
        """Test pixel position of a point right of and above the target."""
        view, projection = camera
        screen = vec3.project(
            Vector3(2.0, 1.0, 5.0), Matrix.identity(), view.multiply(projection), hd_viewport
        )
        assert screen.x == pytest.approx(688.0, abs=1e-2)
        assert screen.y == pytest.approx(336.0, abs=1e-2)

    def test_final_matrix_matches_project(
        self, camera: tuple[Matrix, Matrix], hd_viewport: Viewport
    ) -> None:
        """Test the combined object-to-pixel matrix."""
        view, projection = camera
        world = matrix.translation(2.0, 1.0, 5.0)
        final = matrix.get_final_matrix(hd_viewport, world, view, projection, 0.0, 1.0)
        screen = vec3.transform_coordinates(Vector3.zero(), final)
        assert screen.x == pytest.approx(688.0, abs=1e-2)
        assert screen.y == pytest.approx(336.0, abs=1e-2)

    def test_unproject_round_trip(
        self,
        float64_numerics: None,
        camera: tuple[Matrix, Matrix],
        hd_viewport: Viewport,
    ) -> None:
        """Test that unprojecting a projected point recovers it."""
        view, projection = camera
        world = Matrix.identity()
        point = Vector3(2.0, 1.0, 5.0)
        screen = vec3.project(point, world, view.multiply(projection), hd_viewport)
        restored = vec3.unproject(
            screen, hd_viewport.width, hd_viewport.height, world, view, projection
        )
        assert restored.x == pytest.approx(point.x, abs=1e-3)
        assert restored.y == pytest.approx(point.y, abs=1e-3)
        assert restored.z == pytest.approx(point.z, abs=1e-3)

    def test_unproject_singular_world_in_strict_mode(
        self, camera: tuple[Matrix, Matrix], hd_viewport: Viewport
    ) -> None:
        """Test that a degenerate world matrix is rejected in strict mode."""
        view, projection = camera
        with runtime.strict_mode():
            with pytest.raises(SingularMatrixError):
                vec3.unproject(
                    Vector3(640.0, 360.0, 0.5),
                    hd_viewport.width,
                    hd_viewport.height,
                    Matrix.zero(),
                    view,
                    projection,
                )


class TestFrustumCulling:
    """Tests for point containment against view-projection planes."""

    @staticmethod
    def _inside(planes: list, point: Vector3) -> bool:
        return all(plane.dot_coordinate(point) >= 0.0 for plane in planes)

    def test_target_inside(self, camera: tuple[Matrix, Matrix]) -> None:
        """Test points in front of the camera."""
        view, projection = camera
        planes = frustum.get_planes(view.multiply(projection))
        assert self._inside(planes, Vector3.zero())
        assert self._inside(planes, Vector3(2.0, 1.0, 5.0))

    def test_culled_points(self, camera: tuple[Matrix, Matrix]) -> None:
        """Test points behind, beyond and beside the frustum."""
        view, projection = camera
        planes = frustum.get_planes(view.multiply(projection))
        assert not self._inside(planes, Vector3(0.0, 0.0, -20.0))
        assert not self._inside(planes, Vector3(0.0, 0.0, 200.0))
        assert not self._inside(planes, Vector3(50.0, 0.0, 0.0))
        assert planes[frustum.NEAR].dot_coordinate(Vector3(0.0, 0.0, -20.0)) < 0.0
        assert planes[frustum.FAR].dot_coordinate(Vector3(0.0, 0.0, 200.0)) < 0.0


class TestTransformInterpolation:
    """Tests for blending two object transforms."""

    def test_decompose_lerp_halfway(self) -> None:
        """Test scale, rotation and translation at the midpoint."""
        start = matrix.compose(Vector3.one(), Quaternion.identity(), Vector3.zero())
        end = matrix.compose(
            Vector3(3.0, 3.0, 3.0),
            quaternion.rotation_axis(Vector3.up(), math.pi / 2),
            Vector3(10.0, 0.0, 0.0),
        )
        halfway = matrix.decompose_lerp(start, end, 0.5)

        scale = Vector3()
        rotation = Quaternion()
        translation = Vector3()
        assert halfway.decompose(scale, rotation, translation)

        assert scale.equals_with_epsilon(Vector3(2.0, 2.0, 2.0))
        assert translation.equals_with_epsilon(Vector3(5.0, 0.0, 0.0))
        expected = quaternion.rotation_axis(Vector3.up(), math.pi / 4)
        assert abs(quaternion.dot(rotation, expected)) == pytest.approx(1.0, abs=1e-4)

    def test_decompose_lerp_endpoints(self, sample_transform: Matrix) -> None:
        """Test that gradient 0 returns the start transform."""
        result = matrix.decompose_lerp(sample_transform, Matrix.identity(), 0.0)
        for got, want in zip(result.m.tolist(), sample_transform.m.tolist()):
            assert got == pytest.approx(want, abs=1e-4)


class TestScratchPools:
    """Tests for a per-frame loop on scratch instances."""

    def test_loop_matches_allocating_api(self, camera: tuple[Matrix, Matrix]) -> None:
        """Test that reusing slots gives the same results as fresh objects."""
        view, projection = camera
        scratch = get_tmp()
        view_projection = scratch.matrix[0]
        world_view_projection = scratch.matrix[1]
        projected = scratch.vector3[0]

        view.multiply_to_ref(projection, view_projection)
        for step in range(5):
            world = matrix.translation(float(step), 0.0, float(step))
            world.multiply_to_ref(view_projection, world_view_projection)
            vec3.transform_coordinates_to_ref(
                Vector3.zero(), world_view_projection, projected
            )

            expected = vec3.transform_coordinates(
                Vector3.zero(), world.multiply(view.multiply(projection))
            )
            assert projected.equals_with_epsilon(expected)
