import pytest

from catalog_join.join import format_csv_cell
from catalog_join.parse import CatalogReadError, decode_text, parse_csv_text


def test_simple_rows():
    assert parse_csv_text("a,b,c\n1,2,3\n") == [["a", "b", "c"], ["1", "2", "3"]]

def test_no_trailing_newline():
    assert parse_csv_text("a,b\n1,2") == [["a", "b"], ["1", "2"]]

@pytest.mark.parametrize("text", ["a,b\r\n1,2\r\n", "a,b\r1,2\r", "a,b\n1,2\n"], ids=["crlf", "cr", "lf"])
def test_line_endings(text):
    assert parse_csv_text(text) == [["a", "b"], ["1", "2"]]

def test_multiline_quoted_field_is_one_record():
    records = parse_csv_text('id,"line1\nline2",47\n')
    assert records == [["id", "line1\nline2", "47"]]

def test_crlf_inside_quotes_becomes_lf():
    assert parse_csv_text('"a\r\nb",c') == [["a\nb", "c"]]

def test_escaped_quotes():
    assert parse_csv_text('"He said ""hi"""') == [['He said "hi"']]

def test_field_of_only_escaped_quotes():
    assert parse_csv_text('x,"""""",y') == [["x", '""', "y"]]

def test_quoted_comma():
    assert parse_csv_text('1,"Table, round",77') == [["1", "Table, round", "77"]]

def test_empty_fields():
    assert parse_csv_text(",,\n") == [["", "", ""]]
    assert parse_csv_text('a,"",b') == [["a", "", "b"]]

def test_quote_mid_field_is_literal():
    assert parse_csv_text('ab"c,d') == [['ab"c', "d"]]

def test_ragged_rows_are_kept_as_is():
    assert parse_csv_text("a,b,c\n1\n") == [["a", "b", "c"], ["1"]]

def test_trailing_blank_line_dropped():
    assert parse_csv_text("a\n\n") == [["a"]]

def test_empty_input():
    assert parse_csv_text("") == []

@pytest.mark.parametrize(
    "value",
    ["plain", "with, comma", 'with "quote"', "two\nlines", '"', ",\n\""],
)
def test_cell_round_trip(value):
    assert parse_csv_text(format_csv_cell(value)) == [[value]]

def test_decode_utf8_with_bom():
    text, encoding = decode_text("\ufeffID,名称\n".encode("utf-8"))
    assert text == "ID,名称\n"
    assert encoding == "utf-8"

def test_decode_falls_back_to_detection():
    raw = ("name,city\n" + "Paul,Montréal\n" * 20).encode("latin-1")
    text, encoding = decode_text(raw)
    assert "Montréal" in text
    assert encoding != "utf-8"

def test_decode_rejects_binary():
    with pytest.raises(CatalogReadError):
        decode_text(bytes(range(256)) * 4)
