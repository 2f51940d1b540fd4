#!/usr/bin/env python3
"""
Math Benchmark Utility for rendermath.

Measures per-call latency of the hot matrix and quaternion operations a
render loop runs every frame: multiplication, inversion, composition,
decomposition, slerp and frustum extraction.

Usage:
    python scripts/benchmark_math.py --iterations 10000 --dtype float64
"""

import argparse
import statistics
import sys
from typing import Callable, List

from rendermath.config import get_default_config, runtime
from rendermath.config.schema import MatrixDtype
from rendermath.core import matrix, quaternion
from rendermath.core.quaternion import Quaternion
from rendermath.core.vector3 import Vector3
from rendermath.geometry import frustum
from rendermath.geometry.plane import Plane
from rendermath.logging import configure_from_settings
from rendermath.utils.time import Timer


def benchmark_operation(
    iterations: int,
    operation: Callable[[], object],
    warmup: int = 10,
) -> List[float]:
    """
    Benchmark a zero-argument callable.

    Args:
        iterations: Number of iterations.
        operation: Callable to time.
        warmup: Unmeasured calls made first.

    Returns:
        List of latency measurements in microseconds.
    """
    latencies = []

    for _ in range(warmup):
        operation()

    for _ in range(iterations):
        with Timer() as t:
            operation()
        latencies.append(t.elapsed_us)

    return latencies


def print_statistics(name: str, latencies: List[float]) -> None:
    """Print latency statistics."""
    if not latencies:
        print(f"{name}: No data")
        return

    ordered = sorted(latencies)
    print(f"\n{name}")
    print("-" * 50)
    print(f"  Samples:     {len(latencies)}")
    print(f"  Mean:        {statistics.mean(latencies):.3f} us")
    print(f"  Median:      {statistics.median(latencies):.3f} us")
    if len(latencies) > 1:
        print(f"  Std Dev:     {statistics.stdev(latencies):.3f} us")
    print(f"  Min:         {ordered[0]:.3f} us")
    print(f"  Max:         {ordered[-1]:.3f} us")
    print(f"  P95:         {ordered[int(len(ordered) * 0.95)]:.3f} us")
    print(f"  P99:         {ordered[int(len(ordered) * 0.99)]:.3f} us")
    print(f"  Throughput:  {1_000_000 / statistics.mean(latencies):.0f} ops/s")


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Latency benchmark utility for rendermath.",
    )

    parser.add_argument(
        "--iterations",
        "-n",
        type=int,
        default=10000,
        help="Number of benchmark iterations",
    )

    parser.add_argument(
        "--dtype",
        choices=[dtype.value for dtype in MatrixDtype],
        default=MatrixDtype.FLOAT32.value,
        help="Matrix storage type",
    )

    args = parser.parse_args()

    config = get_default_config()
    config.numerics.matrix_dtype = MatrixDtype(args.dtype)
    configure_from_settings(config.logging)
    runtime.configure(config)

    print("=" * 60)
    print("RENDERMATH MATH BENCHMARK")
    print("=" * 60)
    print(f"Iterations: {args.iterations}")
    print(f"Matrix dtype: {args.dtype}")

    rotation = quaternion.rotation_yaw_pitch_roll(0.3, 0.2, 0.1)
    world = matrix.compose(Vector3(1.0, 2.0, 3.0), rotation, Vector3(4.0, 5.0, 6.0))
    view = matrix.look_at_lh(Vector3(0.0, 5.0, -10.0), Vector3.zero(), Vector3.up())
    projection = matrix.perspective_fov_lh(0.8, 16 / 9, 0.1, 1000.0)
    view_projection = view.multiply(projection)

    result = matrix.Matrix()
    scale = Vector3()
    out_rotation = Quaternion()
    translation = Vector3()
    slerped = Quaternion()
    planes = [Plane(0.0, 0.0, 0.0, 0.0) for _ in range(6)]

    benchmarks = [
        ("Matrix multiply_to_ref", lambda: world.multiply_to_ref(view, result)),
        ("Matrix invert_to_ref", lambda: world.invert_to_ref(result)),
        (
            "compose_to_ref",
            lambda: matrix.compose_to_ref(Vector3.one(), rotation, Vector3.zero(), result),
        ),
        ("Matrix decompose", lambda: world.decompose(scale, out_rotation, translation)),
        (
            "slerp_to_ref",
            lambda: quaternion.slerp_to_ref(Quaternion(), rotation, 0.5, slerped),
        ),
        ("Frustum get_planes_to_ref", lambda: frustum.get_planes_to_ref(view_projection, planes)),
    ]

    for name, operation in benchmarks:
        print(f"\nRunning {name} ({args.iterations} iterations)...")
        print_statistics(name, benchmark_operation(args.iterations, operation))

    print("\n" + "=" * 60)
    print("BENCHMARK COMPLETE")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
