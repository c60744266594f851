"""Tests for notebook parsing functionality."""

import json

import pytest

from nbtohtml import (
    NotebookNotFoundError,
    NotebookParseError,
    NotebookReadError,
    VersionUnsupportedError,
)
from nbtohtml.parsing import MIN_NBFORMAT, NotebookParser, read_notebook


class TestNotebookParser:
    """Tests for NotebookParser class."""

    def test_parse_valid_notebook(self, sample_notebook_json):
        """Test parsing a valid notebook."""
        parser = NotebookParser()

        notebook = parser.parse_string(sample_notebook_json)

        assert notebook.nbformat == 4
        assert len(notebook.cells) == 3
        assert notebook.metadata.language_info.file_extension == ".py"

    def test_parse_extracts_cell_content(self, sample_notebook_json):
        """Test that cell content is properly extracted."""
        notebook = NotebookParser().parse_string(sample_notebook_json)

        markdown_cell, code_cell, raw_cell = notebook.cells
        assert markdown_cell.source_text.startswith("# Hello World")
        assert code_cell.execution_count == 1
        assert [o.output_type for o in code_cell.outputs] == [
            "stream",
            "display_data",
            "execute_result",
            "error",
        ]
        assert code_cell.outputs[2].execution_count == 42
        assert code_cell.outputs[3].traceback == ("Trace part 1", "Trace part 2")
        assert raw_cell.source == ("some nbformat mime-type data",)

    def test_parse_nbformat_built_notebook(self, three_cell_notebook):
        """Test parsing a notebook written by nbformat."""
        notebook = NotebookParser().parse_string(three_cell_notebook)

        assert [cell.cell_type for cell in notebook.cells] == ["markdown", "code", "raw"]
        assert notebook.cells[1].outputs[0].text_content == "hello\n"

    def test_missing_fields_are_empty(self):
        """Test that absent optional fields are not errors."""
        notebook = NotebookParser().parse_string(
            json.dumps({"nbformat": 4, "cells": [{"cell_type": "code"}]})
        )

        assert notebook.cells[0].source == ()
        assert notebook.language_id == ""

    def test_empty_cells(self):
        """Test a current notebook without cells."""
        notebook = NotebookParser().parse_string(
            json.dumps({"nbformat": 4, "nbformat_minor": 4, "cells": [], "metadata": {}})
        )

        assert notebook.cells == ()

    def test_old_version_is_rejected(self):
        """Test that nbformat 3 documents are refused."""
        with pytest.raises(VersionUnsupportedError) as exc_info:
            NotebookParser().parse_string(
                json.dumps({"nbformat": 3, "nbformat_minor": 0, "worksheets": []})
            )

        assert exc_info.value.version == 3
        assert exc_info.value.minimum == MIN_NBFORMAT

    def test_missing_version_is_rejected(self):
        """Test that a document without nbformat counts as version 1."""
        with pytest.raises(VersionUnsupportedError):
            NotebookParser().parse_string(json.dumps({"cells": []}))

    def test_version_error_is_parse_error(self):
        """Test that version errors are fatal parse errors."""
        with pytest.raises(NotebookParseError, match="Unsupported notebook format version"):
            NotebookParser().parse_string(json.dumps({"nbformat": 2, "cells": []}))

    @pytest.mark.parametrize("version", ["4", 4.0, None, True])
    def test_non_integer_version(self, version):
        """Test that a non-integer nbformat is malformed, not too old."""
        with pytest.raises(NotebookParseError, match="nbformat must be an integer") as exc_info:
            NotebookParser().parse_string(json.dumps({"nbformat": version, "cells": []}))

        assert not isinstance(exc_info.value, VersionUnsupportedError)

    def test_invalid_json(self):
        """Test that malformed JSON raises a parse error."""
        with pytest.raises(NotebookParseError, match="not valid JSON"):
            NotebookParser().parse_string("{not json")

    def test_non_object_document(self):
        """Test that a JSON array is not a notebook."""
        with pytest.raises(NotebookParseError, match="JSON object"):
            NotebookParser().parse_string("[1, 2, 3]")

    def test_wrongly_typed_field(self):
        """Test that fields of the wrong shape raise a parse error."""
        with pytest.raises(NotebookParseError, match="Failed to parse notebook"):
            NotebookParser().parse_string(
                json.dumps({"nbformat": 4, "cells": [{"cell_type": "code", "execution_count": "one"}]})
            )

    def test_parse_file(self, notebook_file):
        """Test parsing a notebook from disk."""
        notebook = NotebookParser().parse_file(notebook_file)

        assert len(notebook.cells) == 3


class TestReadNotebook:
    """Tests for read_notebook."""

    def test_read_existing_file(self, notebook_file):
        """Test reading a notebook file."""
        content = read_notebook(notebook_file)

        assert '"nbformat": 4' in content

    def test_read_nonexistent_file(self, tmp_path):
        """Test that a missing file raises NotebookNotFoundError."""
        with pytest.raises(NotebookNotFoundError, match="not found"):
            read_notebook(tmp_path / "missing.ipynb")

    def test_read_undecodable_file(self, tmp_path):
        """Test that a non-UTF-8 file raises NotebookReadError."""
        path = tmp_path / "latin1.ipynb"
        path.write_bytes(b"\xff\xfe\x00bad")

        with pytest.raises(NotebookReadError, match="Failed to read"):
            read_notebook(path)
