"""Markup cleanup for expressions, example sentences and related terms."""

import re

SOUND_TAG_RE = re.compile(r"\[sound:.+?\]")

# A run of CJK ideographs followed by its bracketed reading, e.g. 日本語[にほんご]
FURIGANA_RE = re.compile(r"([\u4e00-\u9faf]+)\[(.+?)\]")

RUBY_TAG_RE = re.compile(r"</?ruby.*?>")
RT_ELEMENT_RE = re.compile(r"<rt>.*?</rt>")
ANY_TAG_RE = re.compile(r"<[^>]+>")


def strip_sound_tags(text: str) -> str:
    """Remove every ``[sound:...]`` audio reference."""
    return SOUND_TAG_RE.sub("", text)


def clean_html(text: str) -> str:
    """
    Clean an example or related-term field for rich-text display.

    Audio references are dropped and furigana syntax ``漢字[かんじ]`` is
    rewritten to ``<ruby>漢字<rt>かんじ</rt></ruby>``. Any other markup
    already in the field (``<br>``, ``<b>``) is kept.

    Args:
        text: Raw field value, may be empty.

    Returns:
        Cleaned, stripped string.
    """
    if not text:
        return ""
    text = strip_sound_tags(text)
    text = FURIGANA_RE.sub(r"<ruby>\1<rt>\2</rt></ruby>", text)
    return text.strip()


def clean_expression(text: str) -> str:
    """
    Flatten a headword to plain text.

    Order matters: ruby tags go first, then ``<rt>`` elements with their
    readings, then bracketed furigana collapses to the base ideographs, and
    finally any leftover tag is removed.
    """
    if not text:
        return ""
    text = strip_sound_tags(text)
    text = RUBY_TAG_RE.sub("", text)
    text = RT_ELEMENT_RE.sub("", text)
    text = FURIGANA_RE.sub(r"\1", text)
    text = ANY_TAG_RE.sub("", text)
    return text.strip()
