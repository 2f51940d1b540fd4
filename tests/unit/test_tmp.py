"""Unit tests for the per-thread scratch pools."""

import threading

from rendermath.color.color3 import Color3
from rendermath.core.matrix import Matrix
from rendermath.core.quaternion import Quaternion
from rendermath.core.tmp import POOL_SIZES, Tmp, get_tmp
from rendermath.core.vector3 import Vector3


class TestTmp:
    """Tests for Tmp and get_tmp."""

    def test_pool_sizes(self) -> None:
        """Test that each pool has its documented length."""
        scratch = get_tmp()
        for name, size in POOL_SIZES.items():
            assert len(getattr(scratch, name)) == size

    def test_slot_types(self) -> None:
        """Test the element types of the pools."""
        scratch = get_tmp()
        assert all(isinstance(c, Color3) for c in scratch.color3)
        assert all(isinstance(v, Vector3) for v in scratch.vector3)
        assert all(isinstance(m, Matrix) for m in scratch.matrix)

    def test_fresh_pools_are_zeroed(self) -> None:
        """Test initial slot contents, including all-zero quaternions."""
        scratch = Tmp()
        assert scratch.vector3[0].equals(Vector3.zero())
        assert scratch.quaternion[0].equals(Quaternion(0.0, 0.0, 0.0, 0.0))
        assert scratch.color3[0].equals(Color3.black())
        assert not scratch.matrix[0].m.any()

    def test_same_thread_same_instances(self) -> None:
        """Test that repeated lookups on one thread share slots."""
        first = get_tmp()
        second = get_tmp()
        assert first is second
        assert first.matrix[0] is second.matrix[0]

    def test_other_thread_gets_own_instances(self) -> None:
        """Test that slots are never shared across threads."""
        main_slot = get_tmp().vector3[0]
        seen: list[Vector3] = []

        def worker() -> None:
            slot = get_tmp().vector3[0]
            slot.copy_from_floats(7.0, 8.0, 9.0)
            seen.append(slot)

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert len(seen) == 1
        assert seen[0] is not main_slot
        assert not main_slot.equals_to_floats(7.0, 8.0, 9.0)
