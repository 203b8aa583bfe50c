"""Generator settings from a YAML file or the ``[tool.bindgen]`` table of pyproject.toml."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError

DEFAULT_FILENAMES = ["bindgen.yaml", "bindgen.yml"]


class GeneratorConfig(BaseModel):
    """Settings for one generation run."""

    source: str = Field(..., description="Path or URL to the OpenAPI document.")

    output_dir: str = Field(..., description="Directory the header is written to.")

    file_name: str = Field(..., description="Name of the generated header file.")

    module_name: str = Field(
        ..., description="Unreal module name used for the export macro and namespace."
    )

    extra_headers: str = Field(
        "", description="Extra #include directives or ';'-separated header names."
    )

    format: Literal["json", "yaml"] | None = Field(
        None, description="Document format. Inferred from the source suffix when unset."
    )


def load_yaml(path: str | Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(Path(path).read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(str(e), config_path=str(path)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration root must be a mapping", config_path=str(path))
    return data


def _load_pyproject(path: Path) -> dict[str, Any] | None:
    try:
        pyproject = tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(str(e), config_path=str(path)) from e
    return pyproject.get("tool", {}).get("bindgen")


def load_raw_config(path: str | None = None) -> tuple[dict[str, Any], str | None]:
    """Find and read configuration without validating it.

    Returns the raw settings and the file they came from. Lookup order is an
    explicit path, then bindgen.yaml/.yml in the working directory, then
    ``[tool.bindgen]`` in pyproject.toml.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError("Configuration file not found", config_path=path)
        return load_yaml(path), path

    cwd = Path(os.getcwd())

    for filename in DEFAULT_FILENAMES:
        candidate = cwd / filename
        if candidate.exists():
            return load_yaml(candidate), str(candidate)

    candidate = cwd / "pyproject.toml"

    if candidate.exists():
        tool_config = _load_pyproject(candidate)
        if tool_config is not None:
            return dict(tool_config), str(candidate)

    raise ConfigurationError("No bindgen configuration found")


def validate_config(data: dict[str, Any], config_path: str | None = None) -> GeneratorConfig:
    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(str(e), config_path=config_path) from e


def get_config(path: str | None = None) -> GeneratorConfig:
    """Load configuration from a file, the working directory or pyproject.toml."""
    data, config_path = load_raw_config(path)
    return validate_config(data, config_path)
