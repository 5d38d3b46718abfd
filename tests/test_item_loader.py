"""
Tests for the item loader.

Loading is all-or-nothing: malformed text or a single bad record raises
MalformedInputError and no items are returned.
"""

import io
import json
import logging

import pytest

from wf_items.data_models import MalformedInputError
from wf_items.item_loader import load_items, load_items_from_stream, read_input_line
from helpers import make_record


class TestLoadItems:
    """Test load_items on valid documents."""

    def test_preserves_source_order(self, mixed_records):
        items = load_items(json.dumps(mixed_records))

        assert [i.name for i in items] == [r["name"] for r in mixed_records]

    def test_empty_array(self):
        assert load_items("[]") == []


class TestLoadItemsRaises:
    """Test that load_items fails fast on malformed input."""

    def test_truncated_json(self, mixed_records):
        text = json.dumps(mixed_records)[:-10]

        with pytest.raises(MalformedInputError) as exc_info:
            load_items(text)

        assert "JSON" in str(exc_info.value)

    def test_empty_text(self):
        with pytest.raises(MalformedInputError):
            load_items("")

    def test_top_level_object(self):
        with pytest.raises(MalformedInputError) as exc_info:
            load_items('{"name": "X"}')

        assert "array" in str(exc_info.value)

    def test_record_missing_name_reports_index(self):
        records = [make_record("A", "a"), {"uniqueName": "b", "tradable": True}]

        with pytest.raises(MalformedInputError) as exc_info:
            load_items(json.dumps(records))

        assert exc_info.value.index == 1
        assert "name" in exc_info.value.message


class TestStreamLoading:
    """Test reading from a text stream."""

    def test_read_input_line_reads_only_first_line(self):
        stream = io.StringIO("[]\nsecond line\n")
        assert read_input_line(stream) == "[]\n"

    def test_load_items_from_stream(self, mixed_json_line, caplog):
        with caplog.at_level(logging.INFO, logger="wf_items.item_loader"):
            items = load_items_from_stream(io.StringIO(mixed_json_line))

        assert len(items) == 7
        assert "Loaded 7 items" in caplog.text

    def test_multi_line_document_is_malformed(self, mixed_records):
        stream = io.StringIO(json.dumps(mixed_records, indent=2))

        with pytest.raises(MalformedInputError):
            load_items_from_stream(stream)

    def test_invalid_utf8_is_malformed(self):
        stream = io.TextIOWrapper(io.BytesIO(b"[\xff\xfe]\n"), encoding="utf-8")

        with pytest.raises(MalformedInputError) as exc_info:
            read_input_line(stream)

        assert "UTF-8" in exc_info.value.message
