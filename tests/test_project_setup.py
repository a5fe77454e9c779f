"""Test suite for project setup."""

import pytest
from pathlib import Path
from click.testing import CliRunner


# Set up project root for tests
PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_ROOT = PROJECT_ROOT / "src" / "terminal_feedback"


def test_package_structure_exists():
    """Verify all required directories exist"""
    assert PACKAGE_ROOT.exists()
    assert (PACKAGE_ROOT / "ui").exists()
    assert (PACKAGE_ROOT / "utils").exists()
    assert (PROJECT_ROOT / "tests").exists()


def test_init_files_present():
    """All packages have __init__.py"""
    assert (PACKAGE_ROOT / "__init__.py").exists()
    assert (PACKAGE_ROOT / "ui" / "__init__.py").exists()
    assert (PACKAGE_ROOT / "utils" / "__init__.py").exists()


def test_setup_py_valid():
    """setup.py contains required metadata"""
    setup_content = (PROJECT_ROOT / "setup.py").read_text()
    assert "name=" in setup_content
    assert "version=" in setup_content
    assert "packages=" in setup_content
    assert "entry_points=" in setup_content


def test_entry_point_configured():
    """CLI entry point is properly configured"""
    setup_content = (PROJECT_ROOT / "setup.py").read_text()
    assert "terminal-feedback" in setup_content
    assert "terminal_feedback.cli:main" in setup_content


def test_dependencies_declared():
    """Runtime dependencies listed with version constraints"""
    setup_content = (PROJECT_ROOT / "setup.py").read_text()
    for requirement in ["click>=", "rich>=", "questionary>=", "pytest>="]:
        assert requirement in setup_content


def test_readme_has_installation():
    """README includes installation instructions"""
    content = (PROJECT_ROOT / "README.md").read_text()
    assert "install" in content.lower()
    assert "pip" in content.lower()


def test_readme_has_usage():
    """README includes usage examples"""
    content = (PROJECT_ROOT / "README.md").read_text()
    assert "usage" in content.lower()


def test_package_imports():
    """Main package can be imported"""
    import terminal_feedback
    assert hasattr(terminal_feedback, "__version__")
    assert hasattr(terminal_feedback, "ProgressReporter")


def test_ui_modules_importable():
    """UI modules can be imported"""
    from terminal_feedback.ui import progress, output, interaction
    assert progress is not None
    assert output is not None
    assert interaction is not None


def test_utils_modules_importable():
    """Utility modules can be imported"""
    from terminal_feedback.utils import tokens, config
    assert tokens is not None
    assert config is not None


def test_version_defined():
    """Package version is properly defined"""
    from terminal_feedback import __version__
    assert isinstance(__version__, str)
    assert "." in __version__  # Semantic versioning


def test_cli_help_works():
    """CLI --help flag works"""
    from terminal_feedback.cli import main
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
