"""Markdown check reports rendered with Jinja2.

The bundled ``check_report.md.jinja2`` lists each checked instance file with
its first rejection (path, line, column and reason) or the reason it was
accepted, under a summary table of file, error and warning counts.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from jinja2 import Environment, FileSystemLoader

if TYPE_CHECKING:
    from ..checker.report import CheckResult


TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "template"

CHECK_REPORT_TEMPLATE = "check_report.md.jinja2"


class ReportRenderer:
    """Renders check results into a markdown report.

    ``template_dir`` replaces the bundled templates; a directory passed here
    must provide its own ``check_report.md.jinja2``.
    """

    def __init__(self, template_dir: str | Path | None = None):
        self.template_dir = Path(template_dir) if template_dir is not None else TEMPLATE_DIR
        # markdown output, nothing to escape
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def render_check_report(self, results: Sequence[CheckResult], schema_ref: str) -> str:
        """Render ``results`` of checking files against the schema named ``schema_ref``."""
        template = self.env.get_template(CHECK_REPORT_TEMPLATE)
        return template.render(
            schema_ref=schema_ref,
            results=list(results),
            total_errors=sum(len(r.errors) for r in results),
            total_warnings=sum(len(r.warnings) for r in results),
            rejected_files=sum(1 for r in results if not r.ok),
        )
