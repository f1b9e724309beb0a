"""Test configuration and fixtures for treecreator."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project layout.

    project/
    ├── docs/
    │   └── guide.md
    ├── node_modules/
    │   └── pkg.js
    ├── src/
    │   ├── app/
    │   │   └── main.py
    │   └── lib/
    │       ├── core.py
    │       └── core.pyc
    └── README.md
    """
    root = tmp_path / "project"
    (root / "docs").mkdir(parents=True)
    (root / "docs" / "guide.md").write_text("# Guide\n")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "pkg.js").write_text("module.exports = {}\n")
    (root / "src" / "app").mkdir(parents=True)
    (root / "src" / "app" / "main.py").write_text("print('hi')\n")
    (root / "src" / "lib").mkdir()
    (root / "src" / "lib" / "core.py").write_text("X = 1\n")
    (root / "src" / "lib" / "core.pyc").write_bytes(b"\x00\x01")
    (root / "README.md").write_text("# Project\n")
    return root
