from unittest import mock

import pytest

from tzcli import config
from tzcli.cli import build_parser, main


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("AppData", str(tmp_path))
    return tmp_path


def run(capsys, *argv):
    code = main(list(argv))
    return code, capsys.readouterr().out


def test_add_stores_matching_zone(capsys):
    code, out = run(capsys, "add", "new york")
    assert code == 0
    assert out == "✅ Added timezone: America/New_York\n"
    assert config.load_zones() == ["America/New_York"]


def test_add_joins_multiple_words(capsys):
    _, out = run(capsys, "add", "los", "angeles")
    assert "America/Los_Angeles" in out
    assert config.load_zones() == ["America/Los_Angeles"]


def test_add_duplicate_reports_failure(capsys):
    run(capsys, "add", "Tokyo")
    _, out = run(capsys, "add", "tokyo")
    assert out == "❌ Failed to add timezone: timezone already exists\n"
    assert config.load_zones() == ["Asia/Tokyo"]


def test_add_unknown_zone(capsys):
    _, out = run(capsys, "add", "zzzz")
    assert out == "❌ no timezone found matching: zzzz\n"
    assert config.load_zones() == []


def test_add_ambiguous_zone(capsys):
    _, out = run(capsys, "add", "america")
    assert out.startswith("❌ multiple matches found for 'america':")
    assert config.load_zones() == []


def test_add_requires_argument(capsys):
    with pytest.raises(SystemExit) as info:
        main(["add"])
    assert info.value.code == 2


def test_remove_configured_zone(capsys):
    run(capsys, "add", "Tokyo")
    run(capsys, "add", "Paris")
    _, out = run(capsys, "remove", "tokyo")
    assert out == "✅ Removed timezone: Asia/Tokyo\n"
    assert config.load_zones() == ["Europe/Paris"]


def test_remove_missing_zone(capsys):
    _, out = run(capsys, "remove", "Tokyo")
    assert out == "❌ Failed to remove timezone: timezone not found in config\n"


def test_list_empty(capsys):
    _, out = run(capsys, "list")
    assert out == "No timezones configured.\n"


def test_list_configured(capsys):
    run(capsys, "add", "Tokyo")
    run(capsys, "add", "Paris")
    _, out = run(capsys, "list")
    assert out.splitlines() == [
        "Configured timezones:",
        " - Asia/Tokyo",
        " - Europe/Paris",
    ]


def test_reset_without_config(capsys):
    _, out = run(capsys, "reset")
    assert out.startswith("Error deleting config:")


def test_reset_removes_config(capsys):
    run(capsys, "add", "Tokyo")
    _, out = run(capsys, "reset")
    assert out == "All timezones reset.\n"
    assert config.load_zones() == []
    assert not config.config_file_path().exists()


def test_root_prints_overview(capsys):
    run(capsys, "add", "Tokyo")
    code, out = run(capsys)
    assert code == 0
    assert "🕒 Timezone Overview (relative):" in out
    assert "Asia/Tokyo" in out


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert capsys.readouterr().out == "tz version dev\n"


def test_live_clears_screen_and_refreshes(capsys):
    with mock.patch("time.sleep", side_effect=KeyboardInterrupt) as sleep:
        code = main(["--live"])
    out = capsys.readouterr().out
    assert out.startswith("\033[H\033[2J")
    assert "Timezone Overview" in out
    sleep.assert_called_once_with(1)
    assert code == 130


def test_parser_flags():
    parser = build_parser()
    assert parser.parse_args(["-l"]).live is True
    assert parser.parse_args([]).live is False
    assert parser.parse_args(["add", "new", "york"]).timezone == ["new", "york"]