"""Integration tests for the full conversion pipeline."""

import json

import nbformat
import pytest

import nbtohtml
from nbtohtml import NotebookNotFoundError, NotebookParseError, VersionUnsupportedError

EVIL = "<script>window.alert('I am evil!');</script>"


@pytest.fixture
def hostile_notebook():
    """Notebook with script tags in every author-controlled payload."""
    nb = nbformat.v4.new_notebook()
    nb.cells.append(nbformat.v4.new_markdown_cell(f"# Hi\n\n{EVIL}\n\n[x](javascript:alert(1))"))
    nb.cells.append(nbformat.v4.new_raw_cell(EVIL))

    code_cell = nbformat.v4.new_code_cell(f"print({EVIL!r})", execution_count=1)
    code_cell.outputs = [
        nbformat.v4.new_output("stream", name="stdout", text=f"out\n{EVIL}\n"),
        nbformat.v4.new_output(
            "execute_result",
            execution_count=1,
            data={"text/plain": EVIL},
        ),
        nbformat.v4.new_output(
            "display_data",
            data={"text/html": f"<b>bold</b>{EVIL}", "text/plain": "bold"},
        ),
        nbformat.v4.new_output(
            "display_data",
            data={"image/svg+xml": f'<svg onload="alert(1)">{EVIL}</svg>'},
        ),
        nbformat.v4.new_output(
            "display_data",
            data={"text/markdown": f"*md* {EVIL}"},
        ),
        nbformat.v4.new_output(
            "error", ename="Evil", evalue="x", traceback=[f"\x1b[31m{EVIL}\x1b[0m"]
        ),
    ]
    nb.cells.append(code_cell)
    return nbformat.writes(nb)


class TestEndToEnd:
    """End-to-end conversion tests."""

    def test_three_cell_notebook(self, three_cell_notebook):
        """Test markdown, code with stream output, and raw cell in order."""
        html = nbtohtml.convert_string(three_cell_notebook)

        heading = html.index("<h1>Title</h1>")
        code_cell = html.index('<div class="cell cell-code">')
        stream = html.index("<pre>hello\n</pre>")
        raw_cell = html.index('<div class="cell cell-raw">')
        raw = html.index("<pre>plain</pre>")

        assert heading < code_cell < stream < raw_cell < raw
        assert html.startswith('<div class="notebook">')
        assert html.endswith("</div>")

    def test_convert_file(self, notebook_file):
        """Test the file-based entry point."""
        html = nbtohtml.convert_file(notebook_file)

        assert "<h1>Title</h1>" in html

    def test_convert_missing_file(self, tmp_path):
        """Test that a missing file is a fatal error."""
        with pytest.raises(NotebookNotFoundError):
            nbtohtml.convert_file(tmp_path / "missing.ipynb")

    def test_no_script_survives(self, hostile_notebook):
        """Test that no executable script element reaches the fragment."""
        html = nbtohtml.convert_string(hostile_notebook)

        assert "<script" not in html.lower()
        assert "onload" not in html
        assert "javascript:" not in html
        assert "<b>bold</b>" in html
        assert "&lt;script&gt;" in html

    def test_version_3_notebook(self):
        """Test that nbformat 3 yields a version error and no fragment."""
        v3 = json.dumps({"nbformat": 3, "nbformat_minor": 0, "metadata": {}, "worksheets": []})

        with pytest.raises(VersionUnsupportedError):
            nbtohtml.convert_string(v3)

    def test_malformed_input(self):
        """Test that unparseable input is fatal."""
        with pytest.raises(NotebookParseError):
            nbtohtml.convert_string("this is not a notebook")

    def test_empty_v4_notebook(self):
        """Test that an empty current notebook is a well-formed container."""
        html = nbtohtml.convert_string(nbformat.writes(nbformat.v4.new_notebook()))

        assert html == '<div class="notebook">\n</div>'
