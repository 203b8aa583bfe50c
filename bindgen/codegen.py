"""Render templates and write generated output.

Takes the context from context_builder and produces <output_dir>/<file_name>.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from .config import GeneratorConfig
from .context_builder import build_context
from .exceptions import OutputError
from .filters import FILTERS
from .headers import parse_include_headers
from .loader import load_spec

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "api.h.j2"


def create_environment(template_dir: Path = TEMPLATE_DIR) -> jinja2.Environment:
    """Create the Jinja2 environment with the bindgen filter table."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters.update(FILTERS)
    return env


def render(context: dict[str, Any], env: jinja2.Environment | None = None) -> str:
    """Render the header template with a prepared context."""
    env = env or create_environment()
    template = env.get_template(TEMPLATE_NAME)
    return template.render(**context)


def write_output(output: str, output_dir: str | Path, file_name: str) -> Path:
    output_path = Path(output_dir) / file_name
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output, encoding="utf-8")
    except OSError as e:
        raise OutputError(str(output_path), cause=e) from e
    return output_path


def generate(config: GeneratorConfig) -> Path:
    """Load the document, resolve every operation, render and write the header."""
    spec = load_spec(config.source, config.format)
    context = build_context(
        spec,
        module_name=config.module_name,
        file_name=config.file_name,
        include_headers=parse_include_headers(config.extra_headers),
    )
    output = render(context)
    output_path = write_output(output, config.output_dir, config.file_name)

    logger.info("Generated %s (%d operations)", output_path, context["operation_count"])
    return output_path
