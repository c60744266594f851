"""Jupyter notebook parsing functionality."""

import logging
from pathlib import Path

from nbformat.reader import NotJSONError, get_version, parse_json
from pydantic import ValidationError

from nbtohtml import (
    NotebookNotFoundError,
    NotebookParseError,
    NotebookReadError,
    VersionUnsupportedError,
)
from nbtohtml.models import Notebook

logger = logging.getLogger(__name__)

# Oldest nbformat major version with the cells/outputs layout used here
MIN_NBFORMAT = 4


def read_notebook(filepath: Path | str) -> str:
    """Read a notebook file from disk.

    Args:
        filepath: Path to the .ipynb file

    Returns:
        str: The file content decoded as UTF-8

    Raises:
        NotebookNotFoundError: If the file does not exist
        NotebookReadError: If the file cannot be read or decoded
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise NotebookNotFoundError(f"Notebook file not found: {filepath}")

    try:
        return filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise NotebookReadError(f"Failed to read notebook {filepath}: {e}") from e


class NotebookParser:
    """Parser for Jupyter notebooks.

    Decodes the notebook JSON with nbformat's reader and validates it into the
    immutable document model. Only the format version is checked semantically.
    """

    def __init__(self, min_version: int = MIN_NBFORMAT):
        """Initialize parser.

        Args:
            min_version: Lowest accepted nbformat major version
        """
        self.min_version = min_version

    def parse_string(self, content: str) -> Notebook:
        """Parse a notebook from its JSON text.

        Args:
            content: Serialized notebook

        Returns:
            Notebook: Parsed notebook

        Raises:
            NotebookParseError: If the text is not a valid notebook document
            VersionUnsupportedError: If the format version is too old
        """
        try:
            nb_dict = parse_json(content)
        except NotJSONError as e:
            raise NotebookParseError(f"Notebook is not valid JSON: {e}") from e

        if not isinstance(nb_dict, dict):
            raise NotebookParseError(
                f"Notebook must be a JSON object, got {type(nb_dict).__name__}"
            )

        major, minor = get_version(nb_dict)

        if not isinstance(major, int) or isinstance(major, bool):
            raise NotebookParseError(
                f"nbformat must be an integer, got {type(major).__name__}"
            )
        if major < self.min_version:
            raise VersionUnsupportedError(major, self.min_version)

        try:
            notebook = Notebook.model_validate(nb_dict)
        except ValidationError as e:
            raise NotebookParseError(f"Failed to parse notebook: {e}") from e

        logger.debug(
            "Parsed notebook v%d.%s with %d cells", major, minor, len(notebook.cells)
        )
        return notebook

    def parse_file(self, filepath: Path | str) -> Notebook:
        """Read and parse a notebook file.

        Args:
            filepath: Path to the .ipynb file

        Returns:
            Notebook: Parsed notebook

        Raises:
            NotebookReadError: If the file cannot be read
            NotebookParseError: If parsing fails
        """
        return self.parse_string(read_notebook(filepath))
