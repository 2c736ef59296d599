"""Markdown rendering of résumés, sample forms and run results."""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .consts import TEMPLATE_FORM, TEMPLATE_RESUME, TEMPLATE_RUN_RESULT
from .enums import FieldKind
from .form import FieldDescriptor
from .models import CodeSample, Resume, RunResult

logger = logging.getLogger(__name__)


def kind_label(field: FieldDescriptor) -> str:
    """Describe a field's type for humans, e.g. ``array of integer (1, 2)``."""
    if field.kind is not FieldKind.ARRAY:
        return field.kind.value
    label = f"array of {field.item_kind.value}"
    if field.enum_values:
        label += " (one of " + ", ".join(str(v) for v in field.enum_values) + ")"
    return label


class MarkdownReporter:
    """Render Markdown documents with Jinja2 templates."""

    def __init__(self):
        template_dir = Path(__file__).parent / "templates"
        self.jinja_env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.jinja_env.globals["kind_label"] = kind_label

    def render_resume(self, resume: Resume) -> str:
        template = self.jinja_env.get_template(TEMPLATE_RESUME)
        return template.render(resume=resume)

    def render_form(self, sample: CodeSample, fields: list[FieldDescriptor]) -> str:
        """Describe the input form of a code sample.

        Args:
            sample: Code sample owning the schema
            fields: Parsed field descriptors, in declaration order

        Returns:
            Markdown listing one line per field, required fields marked with ``*``
        """
        template = self.jinja_env.get_template(TEMPLATE_FORM)
        return template.render(sample=sample, fields=fields)

    def render_run_result(self, result: RunResult) -> str:
        template = self.jinja_env.get_template(TEMPLATE_RUN_RESULT)
        logger.debug(f"Rendering run result (detailed={result.is_detailed})")
        return template.render(result=result)
