from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Tuple

# Heading that opens the materials section of a description
SECTION_KEYWORDS: Tuple[str, ...] = (
    "材料", "食材", "具材", "Ingredients", "ingredients",
    "＜材料＞", "【材料】", "■材料", "★材料", "☆材料",
    "＜食材＞", "【食材】", "■食材", "★食材", "☆食材",
)

# Heading that closes it (cooking steps start here)
END_KEYWORDS: Tuple[str, ...] = (
    "作り方", "手順", "調理法", "Instructions", "Method",
    "＜作り方＞", "【作り方】", "■作り方", "★作り方",
    "＜手順＞", "【手順】", "■手順", "★手順",
)

# Lines containing these are never ingredients (case-sensitive)
PROMO_PHRASES: Tuple[str, ...] = (
    "チャンネル登録", "Subscribe",
    "いいね", "Like",
    "コメント", "Comment",
)

# Candidates containing these are channel chatter, not food
META_WORDS: Tuple[str, ...] = (
    "動画", "チャンネル", "登録", "いいね", "コメント", "概要", "詳細",
)

# Units written before the number: 大さじ1, cup 1/2
PREFIX_UNITS: Tuple[str, ...] = (
    "大さじ", "小さじ", "大匙", "小匙", "カップ", "tbsp", "tsp", "cup",
)

# Units written after the number: 200g, 2個, 1/2カップ
SUFFIX_UNITS: Tuple[str, ...] = (
    "g", "kg", "mg", "ml", "l", "cc", "cm",
    "グラム", "キロ", "ミリリットル",
    "個", "枚", "本", "匙", "杯", "カップ", "片", "かけ", "切れ", "束",
    "袋", "缶", "パック", "房", "株", "玉", "合", "尾", "粒", "丁", "人分",
    "大", "中", "小",
    "pcs", "pieces", "piece", "cups", "cup", "tbsp", "tsp",
)

# Amounts with no number at all
TO_TASTE: Tuple[str, ...] = (
    "少々", "適量", "適宜", "少量", "ひとつまみ", "お好みで", "to taste",
)

MAX_CANDIDATE_LENGTH = 50
ELLIPSIS = "..."
MAX_RESULTS = 15

_BULLET = r"[・•\-*]"

# Tried in this order; the first pattern that matches decides the line.
LINE_PATTERNS: Tuple[Tuple[str, str], ...] = (
    ("bullet_label_value", rf"^{_BULLET}\s*(.+?)\s*[:\s]\s*(.+)$"),
    ("quantity_then_name", r"^([0-9]+\S*|\S+)\s+(.+)$"),
    ("name_then_quantity", r"^(.+?)\s*[:\s]\s*([0-9]+\S*|\S+)$"),
    ("bullet_only", rf"^{_BULLET}\s*(.+)$"),
    ("ascii_parenthesised", r"^(.+?)\s*\((.+?)\)$"),
    ("fullwidth_parenthesised", r"^(.+?)\s*（(.+?)）$"),
)


def _alternation(words: Tuple[str, ...]) -> str:
    # Longest first so "kg" wins over "g" and "cups" over "cup"
    if not words:
        return "(?!)"
    return "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))


@dataclass(frozen=True)
class ExtractorConfig:
    """
    Locale tables driving the ingredient extractor.

    The defaults reproduce the Japanese/English cooking-video vocabulary
    the extractor was tuned on. Pass a custom instance to extract() to try
    another locale without touching the matching logic.
    """
    section_keywords: Tuple[str, ...] = SECTION_KEYWORDS
    end_keywords: Tuple[str, ...] = END_KEYWORDS
    promo_phrases: Tuple[str, ...] = PROMO_PHRASES
    meta_words: Tuple[str, ...] = META_WORDS
    prefix_units: Tuple[str, ...] = PREFIX_UNITS
    suffix_units: Tuple[str, ...] = SUFFIX_UNITS
    to_taste: Tuple[str, ...] = TO_TASTE
    line_patterns: Tuple[Tuple[str, str], ...] = LINE_PATTERNS
    max_length: int = MAX_CANDIDATE_LENGTH
    max_results: int = MAX_RESULTS

    compiled_patterns: Tuple[Tuple[str, re.Pattern], ...] = field(init=False, repr=False, compare=False)
    quantity_pattern: re.Pattern = field(init=False, repr=False, compare=False)
    meta_pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # frozen dataclass: compiled regexes are attached via object.__setattr__
        object.__setattr__(
            self,
            "compiled_patterns",
            tuple((name, re.compile(p)) for name, p in self.line_patterns),
        )

        # Each whitespace run has exactly one place that can consume it,
        # and only when a non-space token follows, so a failed fullmatch
        # stays linear in the token length.
        digit = r"[0-9０-９½⅓⅔¼¾]"
        number = rf"{digit}(?:[0-9０-９½⅓⅔¼¾.,/／～〜\-]|\s+(?={digit}))*"
        taste = _alternation(self.to_taste)
        measured = (
            rf"(?:(?:{_alternation(self.prefix_units)})\s*)?"
            rf"{number}"
            rf"(?:\s*(?:{_alternation(self.suffix_units)}))?"
            rf"(?:\s*(?:{taste}))?"
        )
        object.__setattr__(
            self,
            "quantity_pattern",
            re.compile(rf"(?:{measured}|{taste})", re.IGNORECASE),
        )
        object.__setattr__(
            self,
            "meta_pattern",
            re.compile(_alternation(self.meta_words)),
        )


DEFAULT_CONFIG = ExtractorConfig()
