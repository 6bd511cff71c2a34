"""System prompts stored as one JSON file each under ``settings.prompts_dir``."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from summary_tester.config import settings

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def prompt_filename(name: str) -> str:
    """Return the file name a prompt called *name* is stored under."""
    slug = _NON_SLUG.sub("_", name.lower())
    if not slug.strip("_"):
        raise ValueError(f"Prompt name {name!r} has no usable characters.")
    return f"{slug}.json"


def list_prompts(prompts_dir: Path | None = None) -> list[dict[str, Any]]:
    """Return every stored prompt, sorted by file name.

    Each dict carries the stored fields plus ``filename``.
    """
    directory = prompts_dir or settings.prompts_dir
    if not directory.is_dir():
        return []

    prompts = []
    for path in sorted(directory.glob("*.json")):
        data = json.loads(path.read_text(encoding="utf-8"))
        data["filename"] = path.name
        prompts.append(data)
    return prompts


def save_prompt(
    name: str,
    system_prompt: str,
    model: str | None = None,
    max_tokens: int | None = None,
    temperature: float | None = None,
    prompts_dir: Path | None = None,
) -> str:
    """Write a prompt to disk, overwriting a prompt with the same slug.

    Returns:
        The file name the prompt was saved under.

    Raises:
        ValueError: If *name* reduces to an empty slug.
    """
    directory = prompts_dir or settings.prompts_dir
    filename = prompt_filename(name)
    directory.mkdir(parents=True, exist_ok=True)
    payload = {
        "name": name,
        "model": model,
        "max_tokens": max_tokens,
        "temperature": temperature,
        "system_prompt": system_prompt,
    }
    (directory / filename).write_text(
        json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
    )
    return filename
