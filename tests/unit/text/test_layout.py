import pytest

from thermoprint.text.layout import center, right_align, truncate, two_column


class TestTruncate:
    def test_short_text_unchanged(self) -> None:
        assert truncate("Hello", 10) == "Hello"
        assert truncate("abc", 3) == "abc"

    def test_long_text_gets_ellipsis(self) -> None:
        result = truncate("Hello World", 8)
        assert result == "Hello..."
        assert len(result) == 8

    @pytest.mark.parametrize("max_chars", [3, 4, 10, 46])
    def test_exact_length_when_cut(self, max_chars: int) -> None:
        text = "x" * 100
        assert len(truncate(text, max_chars)) == max_chars

    def test_counts_characters_not_bytes(self) -> None:
        assert truncate("éééééé", 5) == "éé..."

    @pytest.mark.parametrize("max_chars", [0, 1, 2])
    def test_tiny_limit_overflows_with_bare_ellipsis(self, max_chars: int) -> None:
        # The kept prefix saturates at zero characters
        assert truncate("abcdef", max_chars) == "..."


class TestCenter:
    def test_left_padding_only(self) -> None:
        assert center("abc", 10) == "   abc"

    def test_odd_remainder_rounds_down(self) -> None:
        assert center("ab", 5) == " ab"

    def test_no_trailing_spaces(self) -> None:
        assert not center("Merci", 48).endswith(" ")

    def test_text_wider_than_line_unchanged(self) -> None:
        assert center("abcdefghijk", 5) == "abcdefghijk"
        assert center("abcde", 5) == "abcde"


class TestRightAlign:
    def test_pads_to_width(self) -> None:
        assert right_align("abc", 6) == "   abc"
        assert len(right_align("30000 FCFA", 48)) == 48

    def test_long_text_unchanged(self) -> None:
        assert right_align("abcdef", 3) == "abcdef"


class TestTwoColumn:
    def test_fills_width(self) -> None:
        row = two_column("TOTAL", "30000 FCFA", 48)
        assert len(row) == 48
        assert row.startswith("TOTAL ")
        assert row.endswith(" 30000 FCFA")

    @pytest.mark.parametrize("left_len,right_len", [(0, 0), (10, 10), (20, 26), (30, 17)])
    def test_exact_width_when_parts_fit(self, left_len: int, right_len: int) -> None:
        row = two_column("a" * left_len, "b" * right_len, 48)
        assert len(row) == 48

    def test_gap_collapses_to_one_space(self) -> None:
        row = two_column("a" * 40, "b" * 20, 48)
        assert row == "a" * 40 + " " + "b" * 20

    def test_never_zero_gap(self) -> None:
        assert two_column("left", "right", 0) == "left right"

    def test_counts_characters(self) -> None:
        assert len(two_column("Café", "5€", 10)) == 10
