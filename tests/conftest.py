"""Test configuration and fixtures for dirtree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def project_dir(tmp_path):
    """Create a small project tree with nested directories and mixed-case names.

    Layout::

        <tmp>/
        ├── docs/readme.md
        ├── src/main.py
        ├── src/utils/helpers.py
        ├── alpha.txt   (1536 bytes)
        └── Zeta.txt    (empty)
    """
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "utils").mkdir()
    (tmp_path / "docs").mkdir()
    (tmp_path / "src" / "main.py").write_text("def main(): pass\n")
    (tmp_path / "src" / "utils" / "helpers.py").write_text("def helper(): pass\n")
    (tmp_path / "docs" / "readme.md").write_text("# Documentation\n")
    (tmp_path / "alpha.txt").write_bytes(b"a" * 1536)
    (tmp_path / "Zeta.txt").touch()
    return tmp_path
