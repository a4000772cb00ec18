import pytest

from lextrie import Dictionary, InputFormatError, UnsupportedCharacterError, parse_batch, read_tokens


@pytest.fixture
def lines():
    return []


@pytest.fixture
def session(lines):
    return Dictionary(lines.append)


def test_parse_batch_splits_inserts_and_queries():
    assert parse_batch(["2", "ab", "ac", "a", "ab"]) == (["ab", "ac"], ["a", "ab"])


def test_parse_batch_without_queries():
    assert parse_batch(["1", "ab"]) == (["ab"], [])


def test_parse_batch_zero_count():
    assert parse_batch(["0", "ab"]) == ([], ["ab"])


@pytest.mark.parametrize("tokens", [
    [],
    ["two", "ab"],
    ["-1"],
    ["3", "a", "b"],
])
def test_parse_batch_rejects_bad_input(tokens):
    with pytest.raises(InputFormatError):
        parse_batch(tokens)


def test_insert_reports_rendering_or_prefix(session, lines):
    assert session.insert("ab") is True
    assert session.insert("ac") is True
    assert session.insert("a") is False
    assert lines == ["ab (ab)", "ac (a(b)(c))", "a PREFIX"]


def test_find_reports_yes_no(session, lines):
    session.insert("ab")
    session.find("ab")
    session.find("a")
    session.find("zz")
    assert lines == ["ab (ab)", "ab YES", "a NO", "zz NO"]


def test_run_full_batch(session, lines):
    session.run("3 a ab ab a ab b".split())
    assert lines == [
        "a (a)",
        "ab (ab)",
        "ab PREFIX",
        "a NO",
        "ab YES",
        "b NO",
    ]
    assert (session.created, session.prefixes) == (2, 1)
    assert (session.found, session.missing) == (1, 2)


def test_run_stops_at_bad_token(session, lines):
    with pytest.raises(UnsupportedCharacterError):
        session.run(["2", "ab", "Cd", "ab"])
    assert lines == ["ab (ab)"]


def test_read_tokens_ignores_line_layout(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("2\nab  ac\n\n a\tab\n", encoding="utf-8")
    assert read_tokens(str(path)) == ["2", "ab", "ac", "a", "ab"]
