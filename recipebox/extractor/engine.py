from __future__ import annotations

from typing import Any, Iterable, List

from .classifier import classify_line
from .tables import DEFAULT_CONFIG, ExtractorConfig


def _contains_any(line: str, keywords: Iterable[str]) -> bool:
    lower = line.lower()
    return any(k.lower() in lower for k in keywords)


def _dedupe(items: List[str], limit: int) -> List[str]:
    seen = set()
    unique: List[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        unique.append(item)
    return unique[:limit]


def extract(description: Any, config: ExtractorConfig = DEFAULT_CONFIG) -> List[str]:
    """
    Pull likely ingredient lines out of a video description.

    Pipeline:
    1. Find the first materials heading (材料, Ingredients, ...).
    2. Classify every non-blank line until an instructions heading.
    3. If there was no heading at all, classify every non-blank line.
    4. Dedupe (first occurrence wins) and cap at config.max_results.

    Never raises: None, non-strings and blank text give [].
    """
    if not description or not isinstance(description, str):
        return []

    lines = [line.strip() for line in description.splitlines()]
    lines = [line for line in lines if line]

    found: List[str] = []
    in_section = False
    section_found = False

    for line in lines:
        if not section_found and _contains_any(line, config.section_keywords):
            in_section = True
            section_found = True
            continue

        if not in_section:
            continue

        if _contains_any(line, config.end_keywords):
            break

        candidate = classify_line(line, config)
        if candidate:
            found.append(candidate)

    if not section_found:
        for line in lines:
            candidate = classify_line(line, config)
            if candidate:
                found.append(candidate)

    return _dedupe(found, config.max_results)
