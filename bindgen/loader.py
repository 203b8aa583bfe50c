"""Load and parse an OpenAPI document.

Reads a local file or an http(s) URL, parses JSON or YAML by suffix (or an
explicit format), and extracts paths, schemas and $ref targets.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import httpx
import yaml

from .exceptions import InvalidInputShape, SpecLoadError

logger = logging.getLogger(__name__)

FORMATS = ("json", "yaml")

_SUFFIX_FORMATS: dict[str, str] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}

HTTP_TIMEOUT = 30.0


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def infer_format(source: str) -> str:
    """Infer 'json' or 'yaml' from the path or URL suffix."""
    path = urlparse(source).path if is_url(source) else source
    suffix = Path(path).suffix.lower()
    if suffix not in _SUFFIX_FORMATS:
        raise SpecLoadError(
            source,
            reason="cannot detect format from suffix, expected .json, .yaml, or .yml",
        )
    return _SUFFIX_FORMATS[suffix]


def _read_source(source: str) -> str:
    if is_url(source):
        logger.debug("Fetching %s", source)
        response = httpx.get(source, timeout=HTTP_TIMEOUT, follow_redirects=True)
        response.raise_for_status()
        return response.text
    logger.debug("Reading %s", source)
    return Path(source).read_text(encoding="utf-8")


def parse_spec(raw: str, fmt: str, source: str = "<string>") -> dict[str, Any]:
    """Parse document text in the given format into a dict."""
    if fmt not in FORMATS:
        raise SpecLoadError(source, reason=f"unknown format '{fmt}'")
    try:
        spec = json.loads(raw) if fmt == "json" else yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SpecLoadError(source, cause=e) from e
    if not isinstance(spec, dict):
        raise SpecLoadError(source, reason="document root must be an object")
    return spec


def load_spec(source: str | Path, fmt: str | None = None) -> dict[str, Any]:
    """Load an OpenAPI document from a file path or URL."""
    source = str(source)
    fmt = fmt or infer_format(source)
    try:
        raw = _read_source(source)
    except (OSError, httpx.HTTPError) as e:
        raise SpecLoadError(source, cause=e) from e
    spec = parse_spec(raw, fmt, source)
    logger.info("Loaded %s (%s, %d paths)", source, fmt, len(get_paths(spec)))
    return spec


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the spec."""
    return spec.get("paths") or {}


def get_schemas(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract component schemas from the spec."""
    return (spec.get("components") or {}).get("schemas") or {}


def resolve_ref(spec: dict[str, Any], ref: str) -> Any:
    """Resolve a local '#/...' JSON pointer in the spec."""
    if not ref.startswith("#/"):
        raise InvalidInputShape(f"Only local references are supported: '{ref}'")
    node: Any = spec
    for part in ref[2:].split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(node, dict) or part not in node:
            raise InvalidInputShape(f"Dangling reference: '{ref}'")
        node = node[part]
    return node


def deref(spec: dict[str, Any], node: Any) -> Any:
    """Follow a chain of $ref objects to the first non-reference node."""
    seen: set[str] = set()
    while isinstance(node, dict) and isinstance(node.get("$ref"), str):
        ref = node["$ref"]
        if ref in seen:
            raise InvalidInputShape(f"Circular reference: '{ref}'")
        seen.add(ref)
        node = resolve_ref(spec, ref)
    return node
