"""
rendermath CLI - Command-line tools around the math library.

Provides commands for decomposing matrices, converting quaternions to Euler
angles, inspecting frustum planes, parsing colors, validating configuration
and timing core operations.

Negative numbers must follow a ``--`` separator so they are not read as
options, e.g. ``rendermath euler -- 0 -0.7071 0 0.7071``.
"""

import math
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from rendermath.version import __version__

app = typer.Typer(
    name="rendermath",
    help="rendermath - 3D math value types for real-time rendering.",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]rendermath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """rendermath - 3D math value types for real-time rendering."""
    pass


def _fmt(value: float) -> str:
    return f"{value:.6f}"


@app.command()
def decompose(
    values: list[float] = typer.Argument(
        ...,
        help="16 matrix components in storage order (translation at 12, 13, 14).",
    ),
) -> None:
    """Split a 4x4 matrix into scale, rotation and translation."""
    from rendermath.core.matrix import from_values
    from rendermath.core.quaternion import Quaternion
    from rendermath.core.vector3 import Vector3

    if len(values) != 16:
        console.print(f"[red]Error:[/red] Expected 16 values, got {len(values)}")
        raise typer.Exit(code=1)

    matrix = from_values(*values)
    scale = Vector3()
    rotation = Quaternion()
    translation = Vector3()

    if not matrix.decompose(scale, rotation, translation):
        console.print("[red]Error:[/red] Matrix has a zero scale axis")
        raise typer.Exit(code=1)

    table = Table(title="Decomposition")
    table.add_column("Part", style="cyan")
    table.add_column("X", style="green")
    table.add_column("Y", style="green")
    table.add_column("Z", style="green")
    table.add_column("W", style="green")

    table.add_row("Scale", _fmt(scale.x), _fmt(scale.y), _fmt(scale.z), "")
    table.add_row(
        "Rotation", _fmt(rotation.x), _fmt(rotation.y), _fmt(rotation.z), _fmt(rotation.w)
    )
    table.add_row(
        "Translation", _fmt(translation.x), _fmt(translation.y), _fmt(translation.z), ""
    )

    console.print(table)


@app.command()
def euler(
    x: float = typer.Argument(..., help="Quaternion x."),
    y: float = typer.Argument(..., help="Quaternion y."),
    z: float = typer.Argument(..., help="Quaternion z."),
    w: float = typer.Argument(..., help="Quaternion w."),
) -> None:
    """Convert a quaternion to YZX Euler angles."""
    from rendermath.core.quaternion import Quaternion

    angles = Quaternion(x, y, z, w).to_euler_angles()

    table = Table(title="Euler Angles (YZX)")
    table.add_column("Axis", style="cyan")
    table.add_column("Radians", style="green")
    table.add_column("Degrees", style="green")

    table.add_row("Pitch (x)", _fmt(angles.x), _fmt(math.degrees(angles.x)))
    table.add_row("Yaw (y)", _fmt(angles.y), _fmt(math.degrees(angles.y)))
    table.add_row("Roll (z)", _fmt(angles.z), _fmt(math.degrees(angles.z)))

    console.print(table)


@app.command()
def frustum(
    fov: float = typer.Option(0.8, "--fov", help="Vertical field of view in radians."),
    aspect: float = typer.Option(16 / 9, "--aspect", help="Width over height."),
    near: float = typer.Option(0.1, "--near", help="Near clip distance."),
    far: float = typer.Option(1000.0, "--far", help="Far clip distance."),
    right_handed: bool = typer.Option(
        False, "--right-handed", help="Use the right-handed projection."
    ),
) -> None:
    """Print the six clip planes of a perspective projection."""
    from rendermath.core import matrix
    from rendermath.geometry import frustum as frustum_planes

    if near <= 0 or far <= near:
        console.print("[red]Error:[/red] Require 0 < near < far")
        raise typer.Exit(code=1)

    projection = matrix.Matrix()
    if right_handed:
        matrix.perspective_fov_rh_to_ref(fov, aspect, near, far, projection)
    else:
        matrix.perspective_fov_lh_to_ref(fov, aspect, near, far, projection)

    planes = frustum_planes.get_planes(projection)

    table = Table(title="Frustum Planes")
    table.add_column("Plane", style="cyan")
    table.add_column("Normal", style="green")
    table.add_column("D", style="green")

    for name, plane in zip(("Near", "Far", "Left", "Right", "Top", "Bottom"), planes):
        normal = plane.normal
        table.add_row(
            name, f"({_fmt(normal.x)}, {_fmt(normal.y)}, {_fmt(normal.z)})", _fmt(plane.d)
        )

    console.print(table)


@app.command()
def color(
    hex_string: str = typer.Argument(..., help="Color as #RRGGBB or #RRGGBBAA."),
) -> None:
    """Parse a hex color and show its channels and luminance."""
    from rendermath.color.color3 import Color3, parse_hex_channels
    from rendermath.color.color4 import Color4

    channel_count = 4 if len(hex_string) == 9 else 3
    if parse_hex_channels(hex_string, channel_count) is None:
        console.print(f"[red]Error:[/red] Invalid hex color '{hex_string}'")
        raise typer.Exit(code=1)

    table = Table(title=f"Color {hex_string}")
    table.add_column("Channel", style="cyan")
    table.add_column("Value", style="green")

    if channel_count == 4:
        rgba = Color4.from_hex_string(hex_string)
        rgb = Color3(rgba.r, rgba.g, rgba.b)
    else:
        rgb = Color3.from_hex_string(hex_string)
        rgba = rgb.to_color4()

    table.add_row("R", _fmt(rgba.r))
    table.add_row("G", _fmt(rgba.g))
    table.add_row("B", _fmt(rgba.b))
    table.add_row("A", _fmt(rgba.a))
    table.add_row("Luminance", _fmt(rgb.to_luminance()))
    table.add_row("Linear", rgb.to_linear_space().to_hex_string())

    console.print(table)


@app.command()
def diagnostics(
    config: Path = typer.Option(
        Path("configs/default.yaml"),
        "--config",
        "-c",
        help="Path to configuration file.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override log level (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Run configuration validation and report numerics settings."""
    import numpy as np

    from rendermath.config import runtime
    from rendermath.config.loader import load_config
    from rendermath.config.schema import LogLevel
    from rendermath.config.validation import ConfigurationError
    from rendermath.logging.setup import configure_from_settings

    console.print("[bold]rendermath Diagnostics[/bold]\n")

    table = Table(title="System Information")
    table.add_column("Component", style="cyan")
    table.add_column("Status", style="green")

    table.add_row("rendermath Version", __version__)
    table.add_row("NumPy", np.__version__)

    try:
        cfg = load_config(config)
        if log_level:
            cfg.logging.level = LogLevel(log_level.upper())
        configure_from_settings(cfg.logging)
        runtime.configure(cfg)
        table.add_row("Configuration", f"✓ Valid ({config})")
        table.add_row("Run ID", cfg.logging.run_id)
        table.add_row("Log Level", cfg.logging.level.value)
        table.add_row("Strict Mode", str(cfg.numerics.strict))
        table.add_row("Matrix dtype", cfg.numerics.matrix_dtype.value)
        table.add_row("Singular Tolerance", str(cfg.numerics.singular_tolerance))
    except FileNotFoundError:
        table.add_row("Configuration", f"⚠ Not found ({config})")
    except (ValueError, ConfigurationError) as e:
        table.add_row("Configuration", f"✗ Error: {e}")

    console.print(table)


@app.command()
def bench(
    iterations: int = typer.Option(
        1000, "--iterations", "-n", min=1, help="Number of timed calls per operation."
    ),
) -> None:
    """Time core matrix and quaternion operations."""
    from rendermath.core import matrix, quaternion
    from rendermath.core.quaternion import Quaternion
    from rendermath.core.tmp import get_tmp
    from rendermath.core.vector3 import Vector3
    from rendermath.utils.time import time_operation

    rotation = quaternion.rotation_yaw_pitch_roll(0.3, 0.2, 0.1)
    world = matrix.compose(Vector3(1.0, 2.0, 3.0), rotation, Vector3(4.0, 5.0, 6.0))
    other = matrix.rotation_y(0.5)

    scratch = get_tmp()
    result = scratch.matrix[0]
    scale = scratch.vector3[0]
    translation = scratch.vector3[1]
    out_rotation = scratch.quaternion[0]
    target = scratch.quaternion[1]
    start = Quaternion.identity()

    operations = {
        "Matrix.multiply_to_ref": lambda: world.multiply_to_ref(other, result),
        "Matrix.invert_to_ref": lambda: world.invert_to_ref(result),
        "Matrix.decompose": lambda: world.decompose(scale, out_rotation, translation),
        "compose_to_ref": lambda: matrix.compose_to_ref(
            scale, rotation, translation, result
        ),
        "slerp_to_ref": lambda: quaternion.slerp_to_ref(
            start, rotation, 0.5, target
        ),
    }

    table = Table(title=f"Benchmark ({iterations} iterations)")
    table.add_column("Operation", style="cyan")
    table.add_column("Mean (µs)", style="green")
    table.add_column("Median (µs)", style="green")
    table.add_column("P95 (µs)", style="green")

    for name, operation in operations.items():
        stats = time_operation(operation, iterations=iterations)
        table.add_row(
            name,
            f"{stats['mean_us']:.2f}",
            f"{stats['median_us']:.2f}",
            f"{stats['p95_us']:.2f}",
        )

    console.print(table)


@app.command(name="version")
def show_version() -> None:
    """Show version information."""
    console.print(f"[bold blue]rendermath[/bold blue] v{__version__}")
    console.print("3D math value types for real-time rendering.")


if __name__ == "__main__":
    app()
