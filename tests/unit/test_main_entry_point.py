"""Test main entry point."""

import importlib.util
from pathlib import Path
import re

from typer.testing import CliRunner

import authflow
from authflow import main
from authflow.cli.main import app

runner = CliRunner()


def test_version_exists():
    """Test that __version__ is defined and is a valid semver string."""
    assert hasattr(authflow, "__version__")
    assert re.match(r"^\d+\.\d+\.\d+$", authflow.__version__)


def test_main_invokes_cli():
    """Test that the Typer app behind main() answers --help."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "authflow" in result.output


def test_main_is_callable():
    """Test that main is a callable function."""
    assert callable(main)


def test_main_module_exists():
    """Test that ``python -m authflow`` has a __main__ module."""
    root = Path(__file__).parent.parent.parent
    main_py = root / "src" / "authflow" / "__main__.py"

    assert main_py.exists()
    spec = importlib.util.spec_from_file_location("authflow.__main__", main_py)
    assert spec is not None
    assert spec.loader is not None
