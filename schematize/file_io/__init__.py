"""File I/O related utilities.

Small modules that locate diagnostics inside instance files and render
file-backed reports.
"""

from .source_location import SourceLocation, lookup_source, format_source, to_document_path
from .template_renderer import ReportRenderer

__all__ = [
    "SourceLocation",
    "lookup_source",
    "format_source",
    "to_document_path",
    "ReportRenderer",
]
