from pathlib import Path

import pytest

from responder.keywords import BUILTIN_RESPONSES, KeywordTable, normalize_token

DATA_PATH = Path(__file__).parent / "tests_data" / "keywords.json"


def test_builtin_table_has_all_keywords():
    table = KeywordTable()

    assert len(table) == len(BUILTIN_RESPONSES) == 13
    assert table.match("bug").response.startswith("Well, you know, all software has some bugs.")
    assert table.match("bug").response == table.match("buggy").response


def test_match_normalizes_tokens():
    table = KeywordTable()

    assert table.match("Bug\n").keyword == "bug"
    assert table.match("  LINUX ").keyword == "linux"
    assert table.match("bugs") is None
    assert table.match("") is None
    assert table.match("\n") is None


def test_responses_have_no_trailing_newline():
    table = KeywordTable()

    for entry in table.entries().values():
        assert not entry.response.endswith("\n")


def test_entries_returns_copy():
    table = KeywordTable()

    table.entries().clear()

    assert "crash" in table
    assert 42 not in table


def test_from_json_normalizes_entries():
    table = KeywordTable.from_json(DATA_PATH)

    assert len(table) == 2
    assert table.match("printer").response == "Printers are outside our support contract."
    assert table.match("bug") is None


def test_from_json_rejects_malformed(tmp_path):
    sample = tmp_path / "keywords.json"
    sample.write_text('[{"keyword": "status"}]', encoding="utf-8")

    with pytest.raises(ValueError):
        KeywordTable.from_json(sample)


def test_blank_keyword_rejected():
    with pytest.raises(ValueError):
        KeywordTable([("  ", "nothing")])


def test_normalize_token():
    assert normalize_token("Crash\r\n") == "crash"
