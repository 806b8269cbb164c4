# tests/test_cli.py
import re

import pytest

import hhMonitor
from src.core.monitor import VacancyMonitor


@pytest.fixture
def patched_monitor(monkeypatch, fake_session):
    seen = {}

    def factory(settings, verbose=False):
        seen["settings"] = settings
        return VacancyMonitor(settings, session=fake_session, verbose=verbose)

    monkeypatch.setattr(hhMonitor, "VacancyMonitor", factory)
    return seen


def test_no_arguments_is_fatal(patched_monitor, fake_session, capsys):
    with pytest.raises(SystemExit) as exc:
        hhMonitor.main([])

    assert exc.value.code != 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "arguments are missing" in captured.err
    assert fake_session.calls == []


def test_stdout_report(patched_monitor, capsys):
    hhMonitor.main(["go", "broken", "rust"])
    lines = capsys.readouterr().out.splitlines()

    assert re.match(r"^\[\d{2}-\d{2}-\d{2} \d{2}:\d{2}\]$", lines[0])
    assert lines[1:] == ["go=120", "broken=connection refused", "rust=15"]


def test_file_mode_appends_twice(patched_monitor, tmp_path, capsys):
    target = tmp_path / "existingfile.txt"
    target.write_text("", encoding="utf-8")

    hhMonitor.main(["-f", str(target), "go", "rust"])
    hhMonitor.main(["-f", str(target), "go", "rust"])

    assert capsys.readouterr().out == ""
    blocks = target.read_text(encoding="utf-8").split("\n\n")
    assert blocks[-1] == ""
    assert len(blocks) == 3
    for block in blocks[:2]:
        assert block.splitlines()[1:] == ["go=120", "rust=15"]


def test_file_without_languages_writes_header_only(patched_monitor, tmp_path):
    target = tmp_path / "out.txt"
    hhMonitor.main(["-f", str(target)])
    content = target.read_text(encoding="utf-8")
    assert len(content.splitlines()) == 2
    assert content.endswith("]\n\n")


def test_unwritable_file_is_fatal(patched_monitor, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        hhMonitor.main(["-f", str(tmp_path / "nope" / "out.txt"), "go"])

    assert exc.value.code == 1
    assert "Cannot write report" in capsys.readouterr().err


def test_timeout_flag_overrides_settings(patched_monitor, fake_session):
    hhMonitor.main(["--timeout", "3", "go"])
    assert patched_monitor["settings"]["timeout"] == 3.0
    assert fake_session.calls[0]["timeout"] == 3.0


def test_bad_config_is_fatal(patched_monitor, tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text("not json", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        hhMonitor.main(["--config", str(cfg), "go"])

    assert exc.value.code == 1
    assert "Configuration error" in capsys.readouterr().err


def test_options_after_first_language_are_languages(patched_monitor, tmp_path, capsys):
    target = tmp_path / "out.txt"

    hhMonitor.main(["go", "-f", str(target)])

    lines = capsys.readouterr().out.splitlines()
    assert lines[1:] == ["go=120", "-f=0", f"{target}=0"]
    assert not target.exists()


def test_option_prefixes_are_not_expanded(patched_monitor, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        hhMonitor.main(["--verb", "go"])

    assert exc.value.code == 2
    assert capsys.readouterr().out == ""


def test_invalid_timeout_flag_is_fatal(patched_monitor, fake_session, capsys):
    with pytest.raises(SystemExit) as exc:
        hhMonitor.main(["--timeout", "0", "go"])

    assert exc.value.code == 1
    assert "Configuration error" in capsys.readouterr().err
    assert fake_session.calls == []


def test_wrongly_typed_config_value_is_fatal(patched_monitor, fake_session, tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text('{"timeout": "5"}', encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        hhMonitor.main(["--config", str(cfg), "go"])

    assert exc.value.code == 1
    assert "timeout" in capsys.readouterr().err
    assert fake_session.calls == []
