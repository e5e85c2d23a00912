"""Packaging regression tests.

Tests that verify the installed package structure and behavior.
"""

from pathlib import Path


def test_source_layout():
    """Check the src/ layout the wheel is built from."""
    here = Path(__file__).resolve().parent
    repo_root = here.parent
    src_package = repo_root / "src" / "hashcontract"
    src_kernel = src_package / "kernel"

    assert src_package.exists(), "hashcontract package should exist in src/"
    assert src_kernel.exists(), "hashcontract.kernel package should exist in src/"
    assert (repo_root / "pyproject.toml").exists()


def test_import_boundary():
    """Installed package can import hashcontract and its kernel."""
    import hashcontract
    import hashcontract.kernel  # noqa: F401
    import hashcontract.kernel.structural  # noqa: F401

    # in dev mode it's "dev", in installed mode it's "1.0.0"
    assert hashcontract.__version__ in ("1.0.0", "dev")
