from __future__ import annotations

import re
import unicodedata
from typing import Optional

from .tables import DEFAULT_CONFIG, ELLIPSIS, ExtractorConfig

TIMESTAMP = re.compile(r"[0-9]+:[0-9]+")
ONLY_NUMBERS = re.compile(r"^[0-9\s.,()（）]+$")
ONLY_LATIN = re.compile(r"^[a-zA-Z\s]+$")


# ---------------------------------------------------------------------------
# PREDICATES
# ---------------------------------------------------------------------------

def looks_like_quantity(token: str, config: ExtractorConfig = DEFAULT_CONFIG) -> bool:
    """
    True when the token is an amount rather than an item name.

    "200g", "2個", "大さじ1", "1/2カップ" and "少々" are amounts;
    "トマト" or "鶏もも肉" are not.
    """
    token = token.strip()
    if not token:
        return False
    return config.quantity_pattern.fullmatch(token) is not None


def is_single_letter_word(text: str) -> bool:
    """One kanji or kana on its own: 塩, 卵, 酢."""
    return len(text) == 1 and unicodedata.category(text) == "Lo"


def is_symbols_only(text: str) -> bool:
    """Digits, punctuation and symbols (ASCII or 全角) with nothing else."""
    return all(
        ch.isspace() or unicodedata.category(ch)[0] in ("N", "P", "S")
        for ch in text
    )


def is_valid_ingredient(candidate: str, config: ExtractorConfig = DEFAULT_CONFIG) -> bool:
    """Final sanity check on a candidate before it is emitted."""
    if len(candidate) < 2 and not is_single_letter_word(candidate):
        return False
    if ONLY_NUMBERS.match(candidate) or is_symbols_only(candidate):
        return False
    # Pure Latin text in these descriptions is channel chatter, not food
    if ONLY_LATIN.match(candidate):
        return False
    if config.meta_pattern.search(candidate):
        return False
    return True


def is_noise_line(line: str, config: ExtractorConfig = DEFAULT_CONFIG) -> bool:
    """Links, timestamps and subscribe/like/comment begging."""
    if "http" in line or "www." in line or TIMESTAMP.search(line):
        return True
    return any(phrase in line for phrase in config.promo_phrases)


# ---------------------------------------------------------------------------
# LINE CLASSIFICATION
# ---------------------------------------------------------------------------

def _pick_name(first: str, second: str, config: ExtractorConfig) -> Optional[str]:
    first_is_name = not looks_like_quantity(first, config)
    second_is_name = not looks_like_quantity(second, config)

    if first_is_name and not second_is_name:
        return first
    if second_is_name and not first_is_name:
        return second
    if first_is_name and second_is_name:
        return f"{first} {second}"
    # Two amounts and no name: nothing worth keeping
    return None


def match_line(line: str, config: ExtractorConfig = DEFAULT_CONFIG):
    """
    Return (pattern_name, groups) for the first line pattern that matches,
    or None. Later patterns are never consulted once one matches.
    """
    for name, pattern in config.compiled_patterns:
        match = pattern.match(line)
        if match:
            return name, match.groups()
    return None


def classify_line(line: str, config: ExtractorConfig = DEFAULT_CONFIG) -> Optional[str]:
    """
    Turn one description line into an ingredient candidate, or None.
    """
    line = line.strip()
    if not line or is_noise_line(line, config):
        return None

    matched = match_line(line, config)
    if matched is None:
        return None

    _, groups = matched
    if len(groups) == 1:
        candidate: Optional[str] = groups[0].strip()
    else:
        candidate = _pick_name(groups[0].strip(), groups[1].strip(), config)

    if not candidate or not is_valid_ingredient(candidate, config):
        return None

    if len(candidate) > config.max_length:
        return candidate[: config.max_length] + ELLIPSIS
    return candidate
