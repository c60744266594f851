"""Pytest configuration and fixtures."""

import json

import nbformat
import pytest

from nbtohtml.config import reset_config

PNG_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="


@pytest.fixture(autouse=True)
def reset_config_after_test():
    """Reset global config after each test."""
    yield
    reset_config()


@pytest.fixture
def sample_notebook_data():
    """Sample notebook data for testing."""
    return {
        "cells": [
            {
                "cell_type": "markdown",
                "source": ["# Hello World\n", "\n", "This is **bold** and *italic*"],
                "metadata": {},
            },
            {
                "cell_type": "code",
                "execution_count": 1,
                "source": ["print('Hello')\n", "print('World')"],
                "metadata": {"collapsed": True},
                "outputs": [
                    {
                        "output_type": "stream",
                        "name": "stdout",
                        "text": ["Hello\n", "World\n"],
                    },
                    {
                        "output_type": "display_data",
                        "data": {"image/png": PNG_BASE64, "text/plain": ["<Figure>"]},
                        "metadata": {"image/png": {"width": 640, "height": 480}},
                    },
                    {
                        "output_type": "execute_result",
                        "execution_count": 42,
                        "data": {"text/plain": ["multiline\n", "text data"]},
                        "metadata": {},
                    },
                    {
                        "output_type": "error",
                        "ename": "ValueError",
                        "evalue": "bad value",
                        "traceback": ["Trace part 1", "Trace part 2"],
                    },
                ],
            },
            {
                "cell_type": "raw",
                "source": "some nbformat mime-type data",
                "metadata": {"format": "mime/type"},
            },
        ],
        "metadata": {
            "kernelspec": {
                "display_name": "Python 3",
                "language": "python",
                "name": "python3",
            },
            "language_info": {
                "file_extension": ".py",
                "mimetype": "text/x-python",
                "name": "python",
                "pygments_lexer": "ipython3",
                "version": "3.11.4",
            },
        },
        "nbformat": 4,
        "nbformat_minor": 5,
    }


@pytest.fixture
def sample_notebook_json(sample_notebook_data):
    """Sample notebook serialized as JSON text."""
    return json.dumps(sample_notebook_data)


@pytest.fixture
def three_cell_notebook():
    """Markdown, code (with stream output) and raw cell, built with nbformat."""
    nb = nbformat.v4.new_notebook()
    nb.metadata["language_info"] = {"name": "python", "file_extension": ".py"}
    nb.cells.append(nbformat.v4.new_markdown_cell("# Title"))

    code_cell = nbformat.v4.new_code_cell("print('hello')", execution_count=1)
    code_cell.outputs = [nbformat.v4.new_output("stream", name="stdout", text="hello\n")]
    nb.cells.append(code_cell)

    nb.cells.append(nbformat.v4.new_raw_cell("plain"))
    return nbformat.writes(nb)


@pytest.fixture
def notebook_file(tmp_path, three_cell_notebook):
    """Three-cell notebook written to disk."""
    path = tmp_path / "notebook.ipynb"
    path.write_text(three_cell_notebook, encoding="utf-8")
    return path
