from __future__ import annotations

from phraseguard.adapters.env_export import export_phrases, format_export_line, rewrite_export_lines
from phraseguard.core.phrase_store import parse_phrase_list


def test_rewrite_replaces_only_matching_line() -> None:
    lines = ['export BOT_TOKEN="secret"', 'export SPAM_PHRASES="old"', "# comment"]

    result = rewrite_export_lines(lines, "SPAM_PHRASES", {"casino", "free money"})

    assert result == [
        'export BOT_TOKEN="secret"',
        'export SPAM_PHRASES="casino:free money"',
        "# comment",
    ]


def test_rewrite_appends_missing_line() -> None:
    result = rewrite_export_lines(['export API_ID="1"'], "SPAM_PHRASES", {"casino"})
    assert result[-1] == 'export SPAM_PHRASES="casino"'


def test_format_escapes_shell_characters() -> None:
    assert format_export_line("SPAM_PHRASES", ['say "$hi"']) == 'export SPAM_PHRASES="say \\"\\$hi\\""'


def test_export_phrases_writes_file(tmp_path) -> None:
    path = tmp_path / "env.sh"
    path.write_text('export API_ID="1"\nexport SPAM_PHRASES="old"\n', encoding="utf-8")

    assert export_phrases(str(path), "SPAM_PHRASES", {"casino"}) is True
    assert path.read_text(encoding="utf-8") == 'export API_ID="1"\nexport SPAM_PHRASES="casino"\n'


def test_export_skipped_when_file_unreadable(tmp_path, caplog) -> None:
    path = tmp_path / "missing.sh"

    assert export_phrases(str(path), "SPAM_PHRASES", {"casino"}) is False
    assert not path.exists()
    assert "casino" in caplog.text


def test_exported_phrases_reload_unchanged(tmp_path) -> None:
    path = tmp_path / "env.sh"
    path.write_text('export SPAM_PHRASES="old"\n', encoding="utf-8")
    phrases = {"scam.example/login", "free money"}

    export_phrases(str(path), "SPAM_PHRASES", phrases)

    line = path.read_text(encoding="utf-8").strip()
    value = line.split("=", 1)[1].strip('"')
    assert set(parse_phrase_list(value)) == phrases


def test_phrases_with_separator_are_not_exported(tmp_path, caplog) -> None:
    path = tmp_path / "env.sh"
    path.write_text('export SPAM_PHRASES="old"\n', encoding="utf-8")

    export_phrases(str(path), "SPAM_PHRASES", {"casino", "https://scam.example"})

    assert path.read_text(encoding="utf-8") == 'export SPAM_PHRASES="casino"\n'
    assert "https://scam.example" in caplog.text
