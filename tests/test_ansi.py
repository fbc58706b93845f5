"""Regression tests for ANSI-aware clipping and escape helpers."""

import unittest

from termselect import ansi as ansi_mod


class ClipAnsiLineTests(unittest.TestCase):
    def test_plain_text_is_clipped_to_width(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("abcdef", 3), "abc")

    def test_escape_sequences_do_not_count_and_trailing_reset_survives(self) -> None:
        line = "\x1b[7m> abcdef\x1b[0m"
        self.assertEqual(ansi_mod.clip_ansi_line(line, 4), "\x1b[7m> ab\x1b[0m")

    def test_wide_characters_take_two_columns(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("日本語", 5), "日本")

    def test_tabs_expand_to_spaces(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("a\tb", 20), "a" + " " * 7 + "b")

    def test_non_positive_width_yields_empty(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("abc", 0), "")

    def test_goto_is_one_based_and_clamped(self) -> None:
        self.assertEqual(ansi_mod.goto(3, 5), "\x1b[3;5H")
        self.assertEqual(ansi_mod.goto(0), "\x1b[1;1H")


if __name__ == "__main__":
    unittest.main()
