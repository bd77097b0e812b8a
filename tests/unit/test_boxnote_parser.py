#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for decoding Box Notes JSON into document trees."""

import io
import json

import pytest

from boxnote2md.ast import Mark, Node, document_from_dict, json_to_document, node_from_dict
from boxnote2md.exceptions import FileAccessError, ParsingError
from boxnote2md.parsers import BoxNoteParser, is_blank_input

SAMPLE = {
    "doc": {
        "type": "doc",
        "content": [
            {"type": "heading", "attrs": {"level": 2.0}, "content": [{"type": "text", "text": "Title"}]},
            {
                "type": "paragraph",
                "content": [
                    {"type": "text", "text": "Hello "},
                    {
                        "type": "text",
                        "text": "world",
                        "marks": [{"type": "strong"}, {"type": "author_id", "attrs": {"authorId": "42"}}],
                    },
                ],
            },
        ],
    },
    "schema_version": 1,
}


@pytest.mark.unit
class TestNodeFromDict:
    """Test lenient node decoding."""

    def test_full_node(self):
        data = {
            "type": "text",
            "text": "x",
            "attrs": {"a": 1},
            "marks": [{"type": "link", "attrs": {"href": "u"}}],
        }

        assert node_from_dict(data) == Node(
            type="text", attrs={"a": 1}, text="x", marks=[Mark(type="link", attrs={"href": "u"})]
        )

    def test_missing_fields_default_to_empty(self):
        assert node_from_dict({"type": "paragraph"}) == Node(type="paragraph")

    def test_null_fields_default_to_empty(self):
        data = {"type": "paragraph", "attrs": None, "content": None, "marks": None, "text": None}

        assert node_from_dict(data) == Node(type="paragraph")

    def test_wrong_field_types_default_to_empty(self):
        data = {"type": 5, "attrs": [1], "content": "x", "marks": {"type": "em"}, "text": 3}

        assert node_from_dict(data) == Node(type="")

    def test_non_object_children_are_skipped(self):
        data = {"type": "paragraph", "content": [None, "x", 3, {"type": "text", "text": "kept"}]}

        assert node_from_dict(data).content == [Node(type="text", text="kept")]

    def test_non_object_marks_are_skipped(self):
        data = {"type": "text", "text": "x", "marks": ["strong", {"type": "em"}]}

        assert node_from_dict(data).marks == [Mark(type="em")]

    def test_unknown_types_are_preserved(self):
        data = {"type": "image", "attrs": {"src": "a.png"}, "content": [{"type": "caption"}]}

        node = node_from_dict(data)

        assert node.type == "image"
        assert node.content[0].type == "caption"


@pytest.mark.unit
class TestDocumentDecoding:
    """Test extraction of the document root."""

    def test_document_from_dict(self):
        doc = document_from_dict(SAMPLE)

        assert doc.type == "doc"
        assert [child.type for child in doc.content] == ["heading", "paragraph"]
        assert doc.content[0].attrs["level"] == 2.0
        assert [m.type for m in doc.content[1].content[1].marks] == ["strong", "author_id"]

    def test_json_to_document(self):
        assert json_to_document(json.dumps(SAMPLE)) == document_from_dict(SAMPLE)

    def test_json_bytes(self):
        assert json_to_document(json.dumps(SAMPLE).encode("utf-8")).type == "doc"

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"doc": None},
            {"doc": []},
            {"doc": {}},
            {"doc": {"type": ""}},
            {"doc": {"content": []}},
            {"document": {"type": "doc"}},
        ],
    )
    def test_missing_doc_node(self, data):
        with pytest.raises(ParsingError, match="missing doc node") as exc_info:
            document_from_dict(data)

        assert exc_info.value.parsing_stage == "document_validation"

    @pytest.mark.parametrize("data", [[], "doc", 3, None])
    def test_non_object_top_level(self, data):
        with pytest.raises(ParsingError, match="failed to parse JSON"):
            document_from_dict(data)

    @pytest.mark.parametrize("text", ["{", "not json", '{"doc": }', "[1,"])
    def test_invalid_json(self, text):
        with pytest.raises(ParsingError, match="failed to parse JSON") as exc_info:
            json_to_document(text)

        assert exc_info.value.parsing_stage == "json_parsing"
        assert exc_info.value.original_error is not None

    def test_deeply_nested_tree(self):
        inner = {"type": "paragraph"}
        for _ in range(5000):
            inner = {"type": "blockquote", "content": [inner]}

        with pytest.raises(ParsingError, match="document nesting too deep") as exc_info:
            document_from_dict({"doc": {"type": "doc", "content": [inner]}})

        assert isinstance(exc_info.value.original_error, RecursionError)

    def test_deeply_nested_json(self):
        with pytest.raises(ParsingError, match="document nesting too deep") as exc_info:
            json_to_document('{"doc": ' + "[" * 100000)

        assert exc_info.value.parsing_stage == "json_parsing"

    def test_root_type_need_not_be_doc(self):
        """Test that any non-empty tag is accepted for the root."""
        assert document_from_dict({"doc": {"type": "page"}}).type == "page"


@pytest.mark.unit
class TestBoxNoteParser:
    """Test BoxNoteParser input handling."""

    def test_parse_string(self):
        assert BoxNoteParser().parse(json.dumps(SAMPLE)).type == "doc"

    def test_parse_bytes(self):
        assert BoxNoteParser().parse(json.dumps(SAMPLE).encode("utf-8")).type == "doc"

    def test_parse_dict(self):
        assert BoxNoteParser().parse(SAMPLE) == document_from_dict(SAMPLE)

    def test_parse_path(self, tmp_path):
        path = tmp_path / "note.boxnote"
        path.write_text(json.dumps(SAMPLE), encoding="utf-8")

        assert BoxNoteParser().parse(path).content[0].type == "heading"

    def test_parse_text_stream(self):
        assert BoxNoteParser().parse(io.StringIO(json.dumps(SAMPLE))).type == "doc"

    def test_parse_binary_stream(self):
        assert BoxNoteParser().parse(io.BytesIO(json.dumps(SAMPLE).encode("utf-8"))).type == "doc"

    def test_non_ascii_content(self):
        data = {"doc": {"type": "doc", "content": [{"type": "text", "text": "「引用」"}]}}

        doc = BoxNoteParser().parse(json.dumps(data, ensure_ascii=False).encode("utf-8"))

        assert doc.content[0].text == "「引用」"

    def test_invalid_utf8_inside_string_is_replaced(self):
        raw = b'{"doc": {"type": "doc", "content": [{"type": "text", "text": "a\xffb"}]}}'

        doc = BoxNoteParser().parse(raw)

        assert doc.content[0].text == "a�b"

    def test_invalid_utf8_from_path_is_replaced(self, tmp_path):
        path = tmp_path / "note.boxnote"
        path.write_bytes(b'{"doc": {"type": "doc", "content": [{"type": "text", "text": "\xfe"}]}}')

        assert BoxNoteParser().parse(path).content[0].text == "�"

    def test_invalid_utf8_outside_string(self):
        with pytest.raises(ParsingError, match="failed to parse JSON"):
            BoxNoteParser().parse(b'\xff{"doc": {"type": "doc"}}')

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.boxnote"

        with pytest.raises(FileAccessError) as exc_info:
            BoxNoteParser().parse(missing)

        assert exc_info.value.file_path == str(missing)
        assert exc_info.value.message.startswith("failed to read:")

    def test_unsupported_source_type(self):
        with pytest.raises(TypeError):
            BoxNoteParser().parse(42)  # type: ignore[arg-type]


@pytest.mark.unit
@pytest.mark.parametrize("text,expected", [("", True), ("  \n\t", True), ("{}", False), (" x ", False)])
def test_is_blank_input(text, expected):
    assert is_blank_input(text) is expected
