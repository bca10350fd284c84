from __future__ import annotations

import json
import types

import pytest

from lrc_lyrics.errors import ConfigError
from lrc_lyrics.lrc.model import LyricLine
from lrc_lyrics.sources.fallback import FallbackTable


class TestFallbackTable:
    def test_lookup_mapping_and_attribute_entries(self):
        lines_a = [{"time": 0, "text": "a"}]
        lines_b = (LyricLine(3, "b"),)
        table = FallbackTable({"a": {"lines": lines_a}, "b": types.SimpleNamespace(lines=lines_b)})

        assert table.lookup("a") is lines_a
        assert table.lookup("b") is lines_b

    def test_lookup_missing(self):
        table = FallbackTable({"a": {"title": "no lines"}, "b": object()})
        assert table.lookup("a") is None
        assert table.lookup("b") is None
        assert table.lookup("zzz") is None

    def test_from_json(self, tmp_path):
        path = tmp_path / "lyrics.json"
        path.write_text(
            json.dumps(
                {
                    "song": {"title": "Song", "lines": [{"time": 0, "text": "♪"}, {"time": 5, "text": "Hi"}]},
                    "no-lines": {"title": "x"},
                },
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )
        table = FallbackTable.from_json(path)
        assert table.lookup("song") == (LyricLine(0, "♪"), LyricLine(5, "Hi"))
        assert table.lookup("no-lines") is None

    @pytest.mark.parametrize(
        "content",
        [
            "not json",
            "[1, 2]",
            '{"s": {"lines": [{"time": "x", "text": "a"}]}}',
            '{"s": {"lines": [{"text": "a"}]}}',
            '{"s": {"lines": [{"time": -3, "text": "a"}]}}',
            '{"s": {"lines": [{"time": 2.9, "text": "b"}]}}',
            '{"s": {"lines": [{"time": true, "text": "b"}]}}',
            '{"s": {"lines": [{"time": Infinity, "text": "b"}]}}',
        ],
    )
    def test_from_json_invalid(self, tmp_path, content):
        path = tmp_path / "lyrics.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError):
            FallbackTable.from_json(path)

    def test_from_json_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            FallbackTable.from_json(tmp_path / "missing.json")

    def test_from_json_integral_float_time(self, tmp_path):
        path = tmp_path / "lyrics.json"
        path.write_text('{"s": {"lines": [{"time": 3.0, "text": "a"}]}}', encoding="utf-8")
        assert FallbackTable.from_json(path).lookup("s") == (LyricLine(3, "a"),)
