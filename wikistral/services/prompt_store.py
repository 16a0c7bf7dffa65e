"""Prompt catalog for article generation.

Entries live in ``prompts/prompts.json``. A value may be a string or a list of
lines (joined with newlines); ``$name`` placeholders are filled with
``string.Template``. Each generation step has a section holding a
``system_prompt`` and a ``user_prompt``.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from string import Template
from typing import Any


PROMPTS_PATH = Path(__file__).resolve().parents[1] / "prompts" / "prompts.json"


@dataclass(frozen=True, slots=True)
class PromptPair:
    system: str
    user: str


@lru_cache(maxsize=4)
def _read_catalog(path: Path, mtime_ns: int) -> dict[str, Any]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Prompt catalog must be a JSON object: {path}")
    return payload


def _template_for(key: str) -> Template:
    # mtime is part of the cache key so edits to the catalog are picked up
    node: Any = _read_catalog(PROMPTS_PATH, PROMPTS_PATH.stat().st_mtime_ns)
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            raise KeyError(f"Prompt key not found: {key}")
        node = node[part]
    if isinstance(node, list) and all(isinstance(line, str) for line in node):
        node = "\n".join(node)
    if not isinstance(node, str):
        raise TypeError(f"Prompt key must map to text or a list of lines: {key}")
    return Template(node)


def render_prompt(key: str, **values: Any) -> str:
    template = _template_for(key)
    try:
        return template.substitute(**values)
    except KeyError as exc:
        missing = str(exc.args[0])
        raise KeyError(f"Missing template value '{missing}' for prompt '{key}'") from exc


def render_prompt_pair(section: str, **values: Any) -> PromptPair:
    """Render the system and user prompts of one generation step."""
    return PromptPair(
        system=render_prompt(f"{section}.system_prompt", **values),
        user=render_prompt(f"{section}.user_prompt", **values),
    )
