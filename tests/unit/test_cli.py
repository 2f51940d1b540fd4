"""Unit tests for the command-line interface."""

from pathlib import Path

from typer.testing import CliRunner

from rendermath.cli import app
from rendermath.version import __version__

REPO_ROOT = Path(__file__).resolve().parents[2]

runner = CliRunner()

IDENTITY = ["1", "0", "0", "0", "0", "1", "0", "0", "0", "0", "1", "0", "0", "0", "0", "1"]


class TestVersion:
    """Tests for version output."""

    def test_version_command(self) -> None:
        """Test the version subcommand."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_flag(self) -> None:
        """Test the eager --version option."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "rendermath" in result.output


class TestDecompose:
    """Tests for the decompose command."""

    def test_identity(self) -> None:
        """Test decomposing the identity matrix."""
        result = runner.invoke(app, ["decompose", *IDENTITY])
        assert result.exit_code == 0
        assert "Decomposition" in result.output
        assert "1.000000" in result.output

    def test_translation_with_negative_values(self) -> None:
        """Test negative components after the separator."""
        values = IDENTITY[:12] + ["-3", "4", "5", "1"]
        result = runner.invoke(app, ["decompose", "--", *values])
        assert result.exit_code == 0
        assert "-3.000000" in result.output

    def test_wrong_value_count(self) -> None:
        """Test that anything but 16 values is rejected."""
        result = runner.invoke(app, ["decompose", "1", "2", "3"])
        assert result.exit_code == 1
        assert "Expected 16 values" in result.output

    def test_zero_scale(self) -> None:
        """Test that a matrix with a zero axis is reported."""
        result = runner.invoke(app, ["decompose", *(["0"] * 16)])
        assert result.exit_code == 1
        assert "zero scale" in result.output


class TestEuler:
    """Tests for the euler command."""

    def test_identity_quaternion(self) -> None:
        """Test that the identity rotation gives zero angles."""
        result = runner.invoke(app, ["euler", "0", "0", "0", "1"])
        assert result.exit_code == 0
        assert "0.000000" in result.output

    def test_yaw_quarter_turn(self) -> None:
        """Test a 90 degree rotation about Y."""
        result = runner.invoke(app, ["euler", "--", "0", "0.7071068", "0", "0.7071068"])
        assert result.exit_code == 0
        assert "90.0000" in result.output


class TestFrustum:
    """Tests for the frustum command."""

    def test_default_planes(self) -> None:
        """Test that all six planes are listed."""
        result = runner.invoke(app, ["frustum"])
        assert result.exit_code == 0
        for name in ("Near", "Far", "Left", "Right", "Top", "Bottom"):
            assert name in result.output

    def test_right_handed(self) -> None:
        """Test the right-handed projection option."""
        result = runner.invoke(app, ["frustum", "--right-handed"])
        assert result.exit_code == 0

    def test_near_beyond_far(self) -> None:
        """Test invalid clip distances."""
        result = runner.invoke(app, ["frustum", "--near", "10", "--far", "1"])
        assert result.exit_code == 1
        assert "near" in result.output


class TestColor:
    """Tests for the color command."""

    def test_rgb(self) -> None:
        """Test parsing a #RRGGBB color."""
        result = runner.invoke(app, ["color", "#FF0000"])
        assert result.exit_code == 0
        assert "Luminance" in result.output
        assert "0.300000" in result.output

    def test_rgba(self) -> None:
        """Test parsing a #RRGGBBAA color."""
        result = runner.invoke(app, ["color", "#00FF0080"])
        assert result.exit_code == 0
        assert "0.501961" in result.output

    def test_invalid(self) -> None:
        """Test that malformed colors are rejected."""
        result = runner.invoke(app, ["color", "#GG0000"])
        assert result.exit_code == 1
        assert "Invalid hex color" in result.output


class TestDiagnostics:
    """Tests for the diagnostics command."""

    def test_shipped_config(self) -> None:
        """Test reporting the default configuration."""
        config = REPO_ROOT / "configs" / "default.yaml"
        result = runner.invoke(app, ["diagnostics", "--config", str(config)])
        assert result.exit_code == 0
        assert "Valid" in result.output
        assert "float32" in result.output

    def test_missing_config(self) -> None:
        """Test that a missing file is reported, not raised."""
        result = runner.invoke(app, ["diagnostics", "--config", "missing.yaml"])
        assert result.exit_code == 0
        assert "Not found" in result.output

    def test_invalid_log_level(self) -> None:
        """Test that a bad override is reported as a configuration error."""
        config = REPO_ROOT / "configs" / "default.yaml"
        result = runner.invoke(
            app, ["diagnostics", "--config", str(config), "--log-level", "LOUD"]
        )
        assert result.exit_code == 0
        assert "Error" in result.output


class TestBench:
    """Tests for the bench command."""

    def test_runs(self) -> None:
        """Test a short benchmark run."""
        result = runner.invoke(app, ["bench", "-n", "5"])
        assert result.exit_code == 0
        assert "Benchmark" in result.output

    def test_rejects_zero_iterations(self) -> None:
        """Test the iteration lower bound."""
        result = runner.invoke(app, ["bench", "-n", "0"])
        assert result.exit_code != 0
