"""Tests for reading and filtering the links file."""

from __future__ import annotations

from pathlib import Path

from refresher.refresh.loader import LINK_PREFIX, load_links


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "links.txt"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadLinks:
    def test_filters_and_trims(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "https://streamtape.com/v/abc\nnot-a-link\n  \nhttps://streamtape.com/v/def  ",
        )
        assert load_links(path) == [
            "https://streamtape.com/v/abc",
            "https://streamtape.com/v/def",
        ]

    def test_preserves_file_order_and_duplicates(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "https://streamtape.com/v/2\nhttps://streamtape.com/v/1\nhttps://streamtape.com/v/2\n",
        )
        assert load_links(path) == [
            "https://streamtape.com/v/2",
            "https://streamtape.com/v/1",
            "https://streamtape.com/v/2",
        ]

    def test_windows_line_endings(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "https://streamtape.com/v/a\r\nhttps://streamtape.com/v/b\r\n")
        assert load_links(path) == ["https://streamtape.com/v/a", "https://streamtape.com/v/b"]

    def test_rejects_other_hosts_and_schemes(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "http://streamtape.com/v/a\nhttps://example.com/v/b\n# https://streamtape.com/v/c\n",
        )
        assert load_links(path) == []

    def test_every_result_is_trimmed_and_prefixed(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "\t https://streamtape.com/e/x \n\n\nfoo\n https://streamtape.com \n")
        links = load_links(path)
        assert links == ["https://streamtape.com/e/x", "https://streamtape.com"]
        for link in links:
            assert link == link.strip()
            assert link.startswith(LINK_PREFIX)

    def test_empty_file(self, tmp_path: Path) -> None:
        assert load_links(_write(tmp_path, "")) == []

    def test_missing_file_returns_empty(self, tmp_path: Path, capsys) -> None:
        missing = tmp_path / "nope.txt"
        assert load_links(missing) == []
        captured = capsys.readouterr()
        assert "file not found" in captured.err
        assert captured.out == ""

    def test_unreadable_path_returns_empty(self, tmp_path: Path, capsys) -> None:
        """A directory cannot be read as text; the error is reported, not raised."""
        assert load_links(tmp_path) == []
        assert "Error reading" in capsys.readouterr().err

    def test_invalid_utf8_keeps_valid_links(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "links.txt"
        path.write_bytes(b"https://streamtape.com/v/a\n# caf\xe9\nhttps://streamtape.com/v/b\n")
        assert load_links(path) == [
            "https://streamtape.com/v/a",
            "https://streamtape.com/v/b",
        ]
        assert "Error reading" not in capsys.readouterr().err

    def test_leading_byte_order_mark_is_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "links.txt"
        path.write_bytes(b"\xef\xbb\xbfhttps://streamtape.com/v/a\nhttps://streamtape.com/v/b\n")
        assert load_links(path) == [
            "https://streamtape.com/v/a",
            "https://streamtape.com/v/b",
        ]

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "https://streamtape.com/v/a\n")
        assert load_links(str(path)) == ["https://streamtape.com/v/a"]
