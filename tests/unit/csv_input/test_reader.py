"""Unit tests for the CSV reader."""

import pytest

from tagmap.io.reader import parse_rows, read_rows


class TestParseRows:
    def test_header_keys(self):
        records = parse_rows("Handle,Title,Tags\nsencha,Sencha,\"green, organic\"\n")

        assert records == [{"Handle": "sencha", "Title": "Sencha", "Tags": "green, organic"}]

    def test_skips_blank_lines(self):
        records = parse_rows("Title,Tags\n\nA,x\n\nB,y\n")
        assert [r["Title"] for r in records] == ["A", "B"]

    def test_short_rows_get_none(self):
        records = parse_rows("Title,Tags,Handle\nA,x\n")
        assert records[0]["Handle"] is None

    def test_strips_bom(self):
        records = parse_rows("\ufeffTitle,Tags\nA,x\n")
        assert "Title" in records[0]

    def test_quoted_newlines(self):
        records = parse_rows('Title,Tags\n"Multi\nLine",x\n')
        assert records[0]["Title"] == "Multi\nLine"

    def test_header_only(self):
        assert parse_rows("Title,Tags\n") == []

    def test_oversized_html_body_cell(self):
        body = "<p>" + "x" * 200_000 + "</p>"
        text = f'Handle,Title,Body (HTML),Tags\nchai,Chai,"{body}","spiced,black"\n'

        records = parse_rows(text)

        assert len(records) == 1
        assert records[0]["Body (HTML)"] == body
        assert records[0]["Tags"] == "spiced,black"


class TestReadRows:
    def test_reads_utf8_with_bom(self, tmp_path):
        path = tmp_path / "products.csv"
        path.write_bytes("Title,Tags\nCafé Blend,roast\n".encode("utf-8-sig"))

        records = read_rows(path)

        assert records == [{"Title": "Café Blend", "Tags": "roast"}]

    def test_reads_utf8_without_bom(self, tmp_path):
        path = tmp_path / "products.csv"
        path.write_bytes("Title,Tags\nCafé Blend,roast\n".encode("utf-8"))

        assert read_rows(path) == [{"Title": "Café Blend", "Tags": "roast"}]

    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_rows(tmp_path / "missing.csv")
