import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from miluk_wordlist import cli  # noqa: E402
from miluk_wordlist.common import config  # noqa: E402


@pytest.fixture
def dataset(tmp_path, monkeypatch):
    records = [
        {
            "headword": "Water",
            "pronunciation_table": {
                "lolly": {"americanist": "[ʔíkʷ]"},
                "annie": {"jacobs": "ʔíkʷ (water)"},
            },
            "linguistics_notes": "One.\n\nTwo.",
            "soundcloud_urls": [
                "https://api.soundcloud.com/tracks/1",
                "https://example.org/2.mp3",
            ],
        },
        {"headword": "Fire", "pronunciation_table": {"lolly": {"americanist": "tíił"}}},
        {"headword": "Fire", "pronunciation_table": {"annie": {"jacobs": "tíłtʃ (firewood)"}}},
        {"headword": "Owl", "pronunciation_table": {"lolly": {"americanist": "[Boo]"}}},
    ]
    path = tmp_path / "wordlist.json"
    path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
    for key in (config.ENV_DEFAULT_MODE, config.ENV_LOG_LEVEL):
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    monkeypatch.setenv(config.ENV_WORDLIST_PATH, str(path))
    monkeypatch.setattr(config, "find_dotenv", lambda *_, **__: "")
    return path


def test_browse_json_lists_view(dataset, capsys):
    exit_code = cli.main(["browse", "--format", "json"])
    assert exit_code == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["count"] == 4
    assert payload["total"] == 4
    assert payload["letters"] == ["F", "O", "W"]
    assert [row["id"] for row in payload["entries"]] == ["fire", "fire-1", "owl", "water"]
    assert [row["index"] for row in payload["entries"]] == [1, 2, 3, 0]


def test_browse_text_in_miluk_mode(dataset, capsys):
    assert cli.main(["browse", "--mode", "miluk", "--filter", "lhm-only"]) == 0
    out = capsys.readouterr().out
    assert "Showing 2 of 4 entries" in out
    assert "== B ==" in out
    assert "== T ==" in out
    assert "Boo — Owl  [#owl]" in out


def test_browse_reports_empty_result(dataset, capsys):
    assert cli.main(["browse", "--query", "nothing here"]) == 0
    out = capsys.readouterr().out
    assert "Showing 0 of 4 entries" in out
    assert "No entries found" in out


def test_browse_writes_output_file(dataset, tmp_path):
    target = tmp_path / "out" / "view.json"
    assert cli.main(["browse", "--format", "json", "--pretty", "--output", str(target)]) == 0
    assert json.loads(target.read_text(encoding="utf-8"))["count"] == 4


def test_show_resolves_id_within_current_view(dataset, capsys):
    assert cli.main(["show", "water", "--format", "json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["index"] == 0
    assert payload["form"] == "ʔíkʷ"
    assert payload["notes"] == ["One.", "Two."]
    assert payload["audio"][0]["url"].startswith("https://w.soundcloud.com/player/?url=")
    assert payload["audio"][1] == {"label": "Contemporary Recording", "url": "https://example.org/2.mp3"}


def test_show_text_marks_secondary_only_entries(dataset, capsys):
    assert cli.main(["show", "fire-1"]) == 0
    out = capsys.readouterr().out
    assert "Jacobs texts only" in out
    assert "secondary_speaker.jacobs: tíłtʃ (firewood)" in out


def test_show_unknown_id_fails(dataset, capsys):
    assert cli.main(["show", "fire-9"]) == 2
    assert "fire-9" in capsys.readouterr().err


def test_letters_marks_inactive_letters(dataset, capsys):
    assert cli.main(["letters", "--mode", "miluk"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].split()[1] == "B"
    assert out[0].split()[0] == "·"
    assert out[1] == "(+ Other)"


def test_missing_dataset_is_a_user_error(dataset, tmp_path, capsys):
    assert cli.main(["browse", "--dataset", str(tmp_path / "missing.json")]) == 2
    assert "does not exist" in capsys.readouterr().err


def test_logging_is_configured_before_settings_are_read(dataset, monkeypatch, capsys):
    calls = []
    real_load_settings = cli.load_settings
    monkeypatch.setattr(cli, "_configure_logging", lambda *_, **__: calls.append("logging"))
    monkeypatch.setattr(
        cli, "load_settings", lambda *a, **kw: calls.append("settings") or real_load_settings(*a, **kw)
    )
    assert cli.main(["letters"]) == 0
    assert calls == ["logging", "settings"]
