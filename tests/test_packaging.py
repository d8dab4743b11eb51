"""Packaging regression tests.

Tests that verify the package source structure.
"""

from pathlib import Path


def test_source_layout():
    here = Path(__file__).resolve().parent
    repo_root = here.parent
    src_pkg = repo_root / "src" / "verirun"

    assert src_pkg.exists(), "verirun package should exist in src/"
    assert (src_pkg / "kernel").exists(), "verirun.kernel should exist"
    assert (src_pkg / "_internal").exists(), "verirun._internal should exist"
    assert (repo_root / "pyproject.toml").exists()


def test_import_boundary():
    import verirun
    import verirun.kernel  # noqa: F401

    # In dev mode the version is "dev", installed it is "1.0.0"
    assert verirun.__version__ in ("1.0.0", "dev")


def test_kernel_does_not_import_cli():
    """Kernel modules stay importable without the CLI or file IO layers."""
    import sys
    import verirun.kernel  # noqa: F401

    kernel_modules = [name for name in sys.modules if name.startswith("verirun.kernel")]
    assert kernel_modules
    for name in kernel_modules:
        source = Path(sys.modules[name].__file__).read_text(encoding="utf-8")
        assert "verirun.cli" not in source
        assert "_internal.io" not in source
