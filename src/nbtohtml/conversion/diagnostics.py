"""Collection of recoverable conversion problems."""

import logging
from typing import Optional, Protocol

from nbtohtml.models import Diagnostic

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Callable that records a diagnostic for the item being rendered."""

    def __call__(self, code: str, message: str) -> None: ...


class DiagnosticCollector:
    """Collects diagnostics for one conversion and logs each as a warning."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def add(
        self,
        code: str,
        message: str,
        cell_index: Optional[int] = None,
        output_index: Optional[int] = None,
    ) -> Diagnostic:
        """Record a diagnostic.

        Args:
            code: Diagnostic code (e.g. unsupported-mime-type)
            message: Human-readable description
            cell_index: Index of the affected cell
            output_index: Index of the affected output

        Returns:
            Diagnostic: The recorded diagnostic
        """
        diagnostic = Diagnostic(
            code=code,
            message=message,
            cell_index=cell_index,
            output_index=output_index,
        )
        self.diagnostics.append(diagnostic)
        logger.warning("%s [%s]", diagnostic, code)
        return diagnostic

    def reporter(
        self, cell_index: Optional[int] = None, output_index: Optional[int] = None
    ) -> Reporter:
        """Return a reporter bound to one cell or output."""

        def report(code: str, message: str) -> None:
            self.add(code, message, cell_index=cell_index, output_index=output_index)

        return report


def log_only(code: str, message: str) -> None:
    """Reporter used when no collector is given."""
    logger.warning("%s [%s]", message, code)
