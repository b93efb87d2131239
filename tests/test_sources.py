import pytest

from backronym.core import DecodeError, ParseError, TemplateLibrary, WordIndex
from backronym.core import sources


@pytest.mark.parametrize(
    "line, expected",
    [
        ("anchor×N\n", ("anchor", "N")),
        ("light×NAt\r\n", ("light", "NAt")),
        ("lantern\tN", ("lantern", "N")),
        ("ice cream×N", ("ice cream", "N")),
        ("", None),
        ("   \n", None),
        ("# comment×N", None),
    ],
)
def test_parse_word_line(line, expected):
    assert sources.parse_word_line(line) == expected


def test_parse_word_line_without_separator_reports_line():
    with pytest.raises(DecodeError, match="line 7"):
        sources.parse_word_line("orphan", line_number=7)


def test_parse_word_line_without_codes():
    with pytest.raises(DecodeError, match="no part-of-speech codes"):
        sources.parse_word_line("orphan×  ")


def test_iter_word_records_reads_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# header\nanchor×N\n\nbold×A\nhot dog×h\n", encoding="utf-8")

    records = sources.read_word_records(path)

    assert records == [("anchor", "N"), ("bold", "A"), ("hot dog", "h")]
    assert WordIndex(records).size() == 2


def test_read_template_source_rejects_invalid_json(tmp_path):
    path = tmp_path / "templates.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ParseError, match="not valid JSON"):
        sources.read_template_source(path)


def test_environment_overrides_default_paths(tmp_path, monkeypatch):
    monkeypatch.setenv(sources.WORDLIST_ENV, str(tmp_path / "custom.txt"))
    monkeypatch.setenv(sources.TEMPLATES_ENV, str(tmp_path / "custom.json"))

    assert sources.default_wordlist_path() == tmp_path / "custom.txt"
    assert sources.default_template_path() == tmp_path / "custom.json"


def test_bundled_data_loads(monkeypatch):
    monkeypatch.delenv(sources.WORDLIST_ENV, raising=False)
    monkeypatch.delenv(sources.TEMPLATES_ENV, raising=False)

    words = WordIndex(sources.read_word_records(sources.default_wordlist_path()))
    library = TemplateLibrary(sources.read_template_source(sources.default_template_path()))

    assert words.size() > 400
    assert library.max_length() == 6
    assert library.size() == 27


def test_unknown_code_reports_file_line(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# header\n# more\n\nanchor×N\nbold×Q\n", encoding="utf-8")

    with pytest.raises(DecodeError, match="line 5: unrecognised part-of-speech code 'Q'") as info:
        sources.read_word_records(path)

    assert info.value.line == 5
    assert "bold" in str(info.value)


def test_latin1_word_list_is_a_decode_error(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes("# moby\nanchor×N\nbold×A\n".encode("latin-1"))

    with pytest.raises(DecodeError, match="not valid UTF-8") as info:
        sources.read_word_records(path)

    assert info.value.line == 2


def test_latin1_template_file_is_a_parse_error(tmp_path):
    path = tmp_path / "templates.json"
    path.write_bytes('{"1": [["<noun>", "caf\xe9"]]}'.encode("latin-1"))

    with pytest.raises(ParseError, match="not valid UTF-8"):
        sources.read_template_source(path)
