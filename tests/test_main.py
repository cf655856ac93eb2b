import gzip
import io
from pathlib import Path

import pytest

import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FILE_LOGGER_GZIP", "FILE_LOGGER_APPEND", "FILE_LOGGER_SILENT"):
        monkeypatch.delenv(name, raising=False)


def test_main_logs_messages_and_compresses(
    tmp_path: Path, capsys: pytest.CaptureFixture
) -> None:
    target = tmp_path / "cli.log"

    code = main.main([str(target), "first", "second", "--no-timestamp"])

    assert code == 0
    assert capsys.readouterr().out == "first\nsecond\n"
    with gzip.open(tmp_path / "cli.log.gz", "rt", encoding="utf-8") as handle:
        assert handle.read() == "first\nsecond\n"
    assert not target.exists()


def test_main_silent_token_suppresses_echo(
    tmp_path: Path, capsys: pytest.CaptureFixture
) -> None:
    target = tmp_path / "quiet.log"

    code = main.main(["SILENT", str(target), "hush", "--no-gzip", "--no-timestamp"])

    assert code == 0
    assert capsys.readouterr().out == ""
    assert target.read_text(encoding="utf-8") == "hush\n"


def test_main_reads_stdin_when_no_messages(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "stdin.log"
    monkeypatch.setattr("sys.stdin", io.StringIO("a\nb\r\n"))

    code = main.main([str(target), "--no-gzip", "--no-timestamp", "silent"])

    assert code == 0
    assert target.read_text(encoding="utf-8") == "a\nb\n"


def test_main_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    code = main.main([str(blocker / "sub" / "x.log"), "lost", "silent"])

    assert code == 1
    assert "error: could not create folder" in capsys.readouterr().err


def test_main_appends_when_requested(tmp_path: Path) -> None:
    target = tmp_path / "keep.log"
    target.write_text("old\n", encoding="utf-8")

    code = main.main([str(target), "new", "--append", "--no-gzip", "--no-timestamp", "silent"])

    assert code == 0
    assert target.read_text(encoding="utf-8") == "old\nnew\n"


def test_main_falls_back_to_environment_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("FILE_LOGGER_GZIP", "false")
    monkeypatch.setenv("FILE_LOGGER_SILENT", "true")
    target = tmp_path / "env.log"

    code = main.main([str(target), "from env", "--no-timestamp"])

    assert code == 0
    assert target.read_text(encoding="utf-8") == "from env\n"
    assert not (tmp_path / "env.log.gz").exists()
