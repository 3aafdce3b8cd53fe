from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from simple_command.cli import build_parser, main


def test_parser_collects_command_and_flags() -> None:
    args = build_parser().parse_args(["-v", "tree", "--foo"])
    assert args.verbose is True
    assert args.command == ["tree", "--foo"]


def test_main_success(tmp_path: Path) -> None:
    script = tmp_path / "ok.py"
    script.write_text("print('fine')\n", encoding="utf-8")
    assert main([sys.executable, str(script)]) == 0


def test_main_failure_exits_with_output(tmp_path: Path) -> None:
    script = tmp_path / "bad.py"
    script.write_text("import sys\nprint('bad input')\nsys.exit(5)\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main([sys.executable, str(script)])
    msg = str(exc_info.value.code)
    assert "failed with return value 5" in msg
    assert "bad input" in msg


def test_main_without_command_exits() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert "No command specified" in str(exc_info.value.code)


def test_main_drops_leading_separator(tmp_path: Path) -> None:
    script = tmp_path / "flags.py"
    script.write_text(
        "import sys\nprint(sys.argv[1:])\nsys.exit(1)\n", encoding="utf-8"
    )
    with pytest.raises(SystemExit) as exc_info:
        main(["--", sys.executable, str(script), "-v"])
    msg = str(exc_info.value.code)
    assert "failed with return value 1" in msg
    assert "['-v']" in msg


def test_main_verbose_logs_the_command(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    script = tmp_path / "ok.py"
    script.write_text("print('fine')\n", encoding="utf-8")
    with caplog.at_level(logging.DEBUG, logger="simple_command.runner"):
        assert main(["-v", sys.executable, str(script)]) == 0
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Running: ") for m in messages)
    assert any(m.startswith("Finished: ") for m in messages)
