"""Unit tests for the CLI entry point."""

import errno
import os
import sys
from unittest.mock import patch

import pytest

from dirtree.cli.main import format_counts, main
from dirtree.cli.signal_handler import SignalHandler


@pytest.fixture(autouse=True)
def no_signal_setup():
    """Keep the test process's own signal handlers in place."""
    with patch("dirtree.cli.main.setup_signal_handling"):
        yield


def run_main(*argv):
    """Run main() with the given arguments, returning its exit code (0 if it returned normally)."""
    with patch("sys.argv", ["dirtree", *argv]):
        try:
            main()
        except SystemExit as e:
            return e.code
    return 0


def test_format_counts():
    assert format_counts({"directories": 3, "files": 4}) == "Directories: 3\nFiles: 4"


def test_main_renders_tree(project_dir, capfd):
    assert run_main(str(project_dir)) == 0

    captured = capfd.readouterr()
    assert captured.out.splitlines() == [
        project_dir.name,
        "├── docs",
        "│   └── readme.md",
        "├── src",
        "│   ├── utils",
        "│   │   └── helpers.py",
        "│   └── main.py",
        "├── alpha.txt",
        "└── Zeta.txt",
    ]
    assert captured.err == ""


def test_main_defaults_to_current_directory(project_dir, capfd, monkeypatch):
    monkeypatch.chdir(project_dir / "docs")
    assert run_main() == 0
    assert capfd.readouterr().out == "docs\n└── readme.md\n"


def test_main_with_options(project_dir, capfd):
    assert run_main("--depth", "1", "--size", str(project_dir)) == 0
    assert capfd.readouterr().out.splitlines()[1:] == [
        "├── docs",
        "├── src",
        "├── alpha.txt (1.5KiB)",
        "└── Zeta.txt (0B)",
    ]


def test_main_with_ignore_patterns(project_dir, capfd):
    assert run_main("-i", "src/", "-i", "*.txt", str(project_dir)) == 0
    assert capfd.readouterr().out.splitlines()[1:] == ["└── docs", "    └── readme.md"]


def test_main_non_existent_root(tmp_path, capfd):
    missing = tmp_path / "missing"
    assert run_main(str(missing)) == 1

    captured = capfd.readouterr()
    assert captured.out == ""
    assert captured.err == f"dirtree: {missing}: No such file or directory\n"


def test_main_file_as_root(tmp_path, capfd):
    (tmp_path / "notes.txt").touch()
    assert run_main(str(tmp_path / "notes.txt")) == 1

    captured = capfd.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("dirtree: ")
    assert captured.err.rstrip().endswith("not a directory")


def test_main_listing_error(project_dir, capfd):
    real_scandir = os.scandir

    def scandir(path):
        if os.path.basename(path) == "src":
            raise PermissionError(errno.EACCES, "Permission denied", path)
        return real_scandir(path)

    with patch("dirtree.file_system_tree.file_system_tree.os.scandir", side_effect=scandir):
        assert run_main(str(project_dir)) == 1

    captured = capfd.readouterr()
    assert captured.out.splitlines() == [project_dir.name, "├── docs", "│   └── readme.md", "├── src"]
    assert captured.err == f"dirtree: cannot list directory {project_dir / 'src'}: Permission denied\n"


def test_main_missing_rules_file(project_dir, capfd):
    assert run_main("-e", str(project_dir / "nope.ignore"), str(project_dir)) == 1

    captured = capfd.readouterr()
    assert captured.out == ""
    assert "dirtree: Rules file not found" in captured.err


def test_main_summary_to_stderr(project_dir, capfd):
    assert run_main("-S", "stderr", str(project_dir)) == 0

    captured = capfd.readouterr()
    assert captured.err == "Directories: 3\nFiles: 4\n"
    assert "Directories" not in captured.out


def test_main_summary_to_stdout(project_dir, capfd):
    assert run_main("--dirs-only", "--summary", "stdout", str(project_dir)) == 0

    out = capfd.readouterr().out
    assert out.endswith("    └── utils\n\nDirectories: 3\nFiles: 0\n")


def test_main_help(capfd):
    assert run_main("--help") == 0

    captured = capfd.readouterr()
    assert captured.out == ""
    assert "usage: dirtree [options] [PATH]" in captured.err


def test_main_usage_error(capfd):
    assert run_main("--depth") == 2
    assert "usage: dirtree" in capfd.readouterr().err


@pytest.mark.parametrize("signal_name,expected_code", [("sigpipe_received", 141), ("sigint_received", 130)])
def test_main_exit_code_after_signal(project_dir, capfd, signal_name, expected_code):
    """A received signal stops output and sets the conventional exit status."""
    handler = SignalHandler()
    getattr(handler, signal_name).set()

    with patch("dirtree.cli.main.signal_handler", handler), patch("dirtree.cli.safe_writer.signal_handler", handler):
        assert run_main(str(project_dir)) == expected_code

    assert capfd.readouterr().out == ""


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="file names must be valid Unicode")
def test_main_non_utf8_file_name(tmp_path, capfdbinary):
    """Names that are not valid UTF-8 are printed as their original bytes."""
    with open(os.path.join(os.fsencode(tmp_path), b"bad\xff.txt"), "wb"):
        pass
    (tmp_path / "ok.txt").write_text("")

    assert run_main(str(tmp_path)) == 0

    captured = capfdbinary.readouterr()
    assert captured.out.splitlines() == [
        os.fsencode(tmp_path.name),
        "├── ".encode() + b"bad\xff.txt",
        "└── ok.txt".encode(),
    ]
    assert captured.err == b""
