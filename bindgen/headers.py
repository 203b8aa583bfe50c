"""Parse the extra-headers option into #include directives.

Two input forms are accepted:
  - full directives:   '#include "a.h";#include <vector>'
  - bare file names:   'a.h;b.h'   -> '#include "a.h";', '#include "b.h";'
"""

from __future__ import annotations

INCLUDE_KEYWORD = "#include"


def _clean(part: str) -> str:
    return part.strip().rstrip(";").strip()


def parse_include_headers(raw: str) -> list[str]:
    """Split a free-form header string into ';'-terminated #include lines."""
    if not raw or not raw.strip():
        return []

    if INCLUDE_KEYWORD in raw:
        parts = (_clean(part) for part in raw.split(INCLUDE_KEYWORD))
        return [f"{INCLUDE_KEYWORD} {part};" for part in parts if part]

    parts = (_clean(part) for part in raw.split(";"))
    return [f'{INCLUDE_KEYWORD} "{part}";' for part in parts if part]
