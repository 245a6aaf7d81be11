"""Unit tests for expression and example text cleanup."""

from tango_viewer.parsing import clean_expression, clean_html, strip_sound_tags


class TestCleanHtml:
    """Tests for clean_html (examples and related entries)."""

    def test_empty_string(self):
        assert clean_html("") == ""

    def test_removes_sound_tags(self):
        assert clean_html("猫です[sound:neko_01.mp3]") == "猫です"

    def test_sound_tag_only_becomes_empty(self):
        assert clean_html("  [sound:a.mp3]  ") == ""

    def test_rewrites_furigana_to_ruby(self):
        assert clean_html("日本語[にほんご]") == "<ruby>日本語<rt>にほんご</rt></ruby>"

    def test_rewrites_every_furigana_occurrence(self):
        text = "毎朝[まいあさ]パンを食[た]べる"
        expected = "<ruby>毎朝<rt>まいあさ</rt></ruby>パンを<ruby>食<rt>た</rt></ruby>べる"
        assert clean_html(text) == expected

    def test_keeps_existing_markup(self):
        """Line breaks and emphasis are rendered downstream."""
        assert clean_html("<b>猫</b>[ねこ]<br>") == "<b>猫</b>[ねこ]<br>"

    def test_brackets_after_kana_are_untouched(self):
        assert clean_html("ねこ[neko]") == "ねこ[neko]"

    def test_strips_surrounding_whitespace(self):
        assert clean_html("  很有趣。 ") == "很有趣。"


class TestCleanExpression:
    """Tests for clean_expression (headwords must be plain text)."""

    def test_empty_string(self):
        assert clean_expression("") == ""

    def test_flattens_furigana(self):
        assert clean_expression("日本語[にほんご]") == "日本語"

    def test_removes_ruby_markup_and_readings(self):
        assert clean_expression("<ruby>日本<rt>にほん</rt></ruby>語") == "日本語"

    def test_removes_arbitrary_tags(self):
        assert clean_expression('<span class="x">猫</span><br>') == "猫"

    def test_removes_sound_tags(self):
        assert clean_expression("[sound:neko.mp3]猫") == "猫"

    def test_mixed_kana_and_furigana(self):
        assert clean_expression(" 食[た]べる ") == "食べる"

    def test_markup_only_becomes_empty(self):
        assert clean_expression("<b></b>[sound:x.mp3]") == ""


def test_strip_sound_tags_is_non_greedy():
    """Text between two sound tags survives."""
    assert strip_sound_tags("[sound:a.mp3]猫[sound:b.mp3]") == "猫"
