"""
Tests for the public operations (shinyconsole/painter.py).

Most tests pass a MemoryTerminal explicitly. TestDefaultTerminal patches the
shared terminal instead, and TestRichOutput writes through a real Rich
Console backed by a StringIO to check the ANSI output end to end.
"""

import io
import random
import re
import unittest
from unittest.mock import patch

from rich.console import Console

from shinyconsole import (
    RAINBOW_COLORS,
    ConsoleColor,
    InvalidPaletteError,
    MemoryTerminal,
    RichTerminal,
    Scope,
    UnsupportedScopeError,
    colorize,
    paint,
    rainbow,
    random_colorize,
)
from shinyconsole.palettes import CHRISTMAS, PASTELS

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


class TestRainbow(unittest.TestCase):
    def test_ab_scenario(self):
        terminal = MemoryTerminal(foreground=ConsoleColor.GRAY)
        rainbow("AB", terminal=terminal)
        self.assertEqual(
            terminal.writes,
            [("A", ConsoleColor.RED), ("B", ConsoleColor.DARK_YELLOW)],
        )
        self.assertIs(terminal.foreground, ConsoleColor.GRAY)

    def test_cycles_seven_colors_skipping_whitespace(self):
        terminal = MemoryTerminal()
        rainbow("abcdefg h", terminal=terminal)
        colors = [color for text, color in terminal.writes if not text.isspace()]
        self.assertEqual(colors, list(RAINBOW_COLORS) + [ConsoleColor.RED])
        self.assertEqual(terminal.writes[7], (" ", None))

    def test_rainbow_palette(self):
        self.assertEqual(
            RAINBOW_COLORS,
            (
                ConsoleColor.RED,
                ConsoleColor.DARK_YELLOW,
                ConsoleColor.YELLOW,
                ConsoleColor.GREEN,
                ConsoleColor.BLUE,
                ConsoleColor.DARK_BLUE,
                ConsoleColor.MAGENTA,
            ),
        )


class TestRandomColorize(unittest.TestCase):
    def test_never_black_and_never_repeats(self):
        terminal = MemoryTerminal()
        random_colorize("Random colors! " * 20, terminal=terminal, rng=random.Random(42))
        colors = [color for text, color in terminal.writes if not text.isspace()]
        self.assertNotIn(ConsoleColor.BLACK, colors)
        self.assertTrue(all(a != b for a, b in zip(colors, colors[1:])))
        self.assertEqual(terminal.text, "Random colors! " * 20)

    def test_whitespace_uncolored(self):
        terminal = MemoryTerminal()
        random_colorize("a b", terminal=terminal, rng=random.Random(1))
        self.assertEqual(terminal.writes[1], (" ", None))


class TestColorizeSingle(unittest.TestCase):
    def test_writes_message(self):
        terminal = MemoryTerminal()
        colorize("Test message", ConsoleColor.BLUE, terminal=terminal)
        self.assertEqual(terminal.writes, [("Test message", ConsoleColor.BLUE)])

    def test_invalid_color_writes_uncolored(self):
        terminal = MemoryTerminal()
        colorize("plain", "not-a-color", terminal=terminal)
        self.assertEqual(terminal.writes, [("plain", None)])

    def test_none_text_is_noop(self):
        terminal = MemoryTerminal()
        colorize(None, ConsoleColor.GREEN, terminal=terminal)
        self.assertEqual(terminal.writes, [])


class TestColorizePalette(unittest.TestCase):
    def test_none_raises_before_writing(self):
        terminal = MemoryTerminal()
        with self.assertRaises(InvalidPaletteError):
            colorize("text", None, terminal=terminal)
        self.assertEqual(terminal.writes, [])

    def test_generator_and_set_palettes(self):
        terminal = MemoryTerminal()
        colorize("ab", (c for c in CHRISTMAS), terminal=terminal)
        self.assertEqual(terminal.writes, [("a", ConsoleColor.RED), ("b", ConsoleColor.GREEN)])

        terminal = MemoryTerminal()
        colorize("abc", {ConsoleColor.CYAN}, terminal=terminal)
        self.assertEqual(terminal.writes, [(char, ConsoleColor.CYAN) for char in "abc"])

    def test_empty_generator_raises(self):
        with self.assertRaises(InvalidPaletteError):
            colorize("text", (c for c in ()), terminal=MemoryTerminal())

    def test_color_name_string_is_a_single_color(self):
        terminal = MemoryTerminal()
        colorize("text", "DarkGreen", terminal=terminal)
        self.assertEqual(terminal.writes, [("text", ConsoleColor.DARK_GREEN)])

    def test_empty_palette_raises_before_writing(self):
        terminal = MemoryTerminal(foreground=ConsoleColor.GREEN)
        with self.assertRaises(InvalidPaletteError):
            colorize("text", [], terminal=terminal)
        self.assertEqual(terminal.writes, [])
        self.assertIs(terminal.foreground, ConsoleColor.GREEN)

    def test_empty_text_with_empty_palette_is_noop(self):
        terminal = MemoryTerminal()
        colorize("", [], terminal=terminal)
        self.assertEqual(terminal.writes, [])

    def test_unsupported_scope_raises_before_writing(self):
        terminal = MemoryTerminal()
        with self.assertRaises(UnsupportedScopeError):
            colorize("text", [ConsoleColor.RED], scope="lines", terminal=terminal)
        self.assertEqual(terminal.writes, [])

    def test_single_entry_palette_colors_everything(self):
        terminal = MemoryTerminal()
        colorize("a b c", [ConsoleColor.CYAN], terminal=terminal)
        colors = {color for text, color in terminal.writes if not text.isspace()}
        self.assertEqual(colors, {ConsoleColor.CYAN})

    def test_word_scope(self):
        terminal = MemoryTerminal()
        colorize("Merry Christmas everyone", list(CHRISTMAS), scope=Scope.WORDS, terminal=terminal)
        self.assertEqual(
            terminal.writes,
            [
                ("Merry", ConsoleColor.RED),
                (" ", None),
                ("Christmas", ConsoleColor.GREEN),
                (" ", None),
                ("everyone", ConsoleColor.RED),
            ],
        )

    def test_tuple_palette_and_scope_name(self):
        terminal = MemoryTerminal()
        colorize("One. Two.", CHRISTMAS, scope="sentences", terminal=terminal)
        self.assertEqual(
            terminal.writes,
            [("One.", ConsoleColor.RED), (" Two.", ConsoleColor.GREEN)],
        )

    def test_paragraph_scope_writes_separator_uncolored(self):
        terminal = MemoryTerminal()
        colorize("Para one.\n\nPara two.", CHRISTMAS, scope=Scope.PARAGRAPHS, terminal=terminal)
        self.assertEqual(
            terminal.writes,
            [
                ("Para one.", ConsoleColor.RED),
                ("\n\n", None),
                ("Para two.", ConsoleColor.GREEN),
            ],
        )

    def test_pastels_palette_writes_message(self):
        terminal = MemoryTerminal()
        colorize("Test", list(PASTELS), terminal=terminal)
        self.assertEqual(terminal.text, "Test")

    def test_special_characters_written_unchanged(self):
        message = "tab\there\r\nnew ✓ é שלום \x07"
        for scope in Scope:
            terminal = MemoryTerminal()
            colorize(message, list(PASTELS), scope=scope, terminal=terminal)
            self.assertEqual(terminal.text, message)

    def test_restores_color_for_every_scope_and_order(self):
        for scope in Scope:
            for randomize in (False, True):
                terminal = MemoryTerminal(foreground=ConsoleColor.DARK_GRAY)
                colorize("Hi there. Bye!\n\nNext.", list(PASTELS), randomize, scope, terminal)
                self.assertIs(terminal.foreground, ConsoleColor.DARK_GRAY)


class TestPaint(unittest.TestCase):
    def test_none_palette_raises(self):
        with self.assertRaises(InvalidPaletteError):
            paint("text", None, terminal=MemoryTerminal())

    def test_none_text_is_noop_even_with_bad_palette(self):
        terminal = MemoryTerminal()
        paint(None, None, terminal=terminal)
        self.assertEqual(terminal.writes, [])

    def test_randomize_with_seeded_rng(self):
        first, second = MemoryTerminal(), MemoryTerminal()
        paint("seeded words here", PASTELS, True, Scope.WORDS, first, random.Random(3))
        paint("seeded words here", PASTELS, True, Scope.WORDS, second, random.Random(3))
        self.assertEqual(first.writes, second.writes)


class TestDefaultTerminal(unittest.TestCase):
    """Operations without terminal= go through the shared terminal."""

    def test_uses_shared_terminal(self):
        terminal = MemoryTerminal()
        with patch("shinyconsole.renderer.get_terminal", return_value=terminal):
            rainbow("AB")
            colorize("x", ConsoleColor.RED)
        self.assertEqual(terminal.text, "ABx")

    def test_empty_text_never_fetches_terminal(self):
        with patch("shinyconsole.renderer.get_terminal") as mock_get:
            rainbow("")
            colorize("", ConsoleColor.RED)
            random_colorize(None)
        mock_get.assert_not_called()


class TestRichOutput(unittest.TestCase):
    """End-to-end output through a Rich Console."""

    def make_terminal(self, **kwargs):
        self.buffer = io.StringIO()
        return RichTerminal(Console(file=self.buffer, width=120, **kwargs))

    def test_rainbow_emits_ansi_colors(self):
        terminal = self.make_terminal(force_terminal=True, color_system="standard")
        rainbow("AB", terminal=terminal)
        output = self.buffer.getvalue()
        # bright_red is SGR 91, yellow is SGR 33
        self.assertIn("\x1b[91mA", output)
        self.assertIn("\x1b[33mB", output)
        self.assertEqual(ANSI_RE.sub("", output), "AB")
        self.assertIsNone(terminal.foreground)

    def test_plain_output_without_color_support(self):
        terminal = self.make_terminal(color_system=None)
        colorize("Hello World", list(CHRISTMAS), scope=Scope.WORDS, terminal=terminal)
        self.assertEqual(self.buffer.getvalue(), "Hello World")

    def test_markup_is_not_interpreted(self):
        terminal = self.make_terminal(color_system=None)
        colorize("[bold]not bold[/bold]", ConsoleColor.RED, terminal=terminal)
        self.assertEqual(self.buffer.getvalue(), "[bold]not bold[/bold]")

    def test_control_characters_written_unchanged(self):
        message = "A\r\n\r\nB\tx\x07"
        terminal = self.make_terminal(force_terminal=True, color_system="standard")
        colorize(message, list(CHRISTMAS), scope=Scope.PARAGRAPHS, terminal=terminal)
        self.assertEqual(ANSI_RE.sub("", self.buffer.getvalue()), message)

    def test_control_characters_unchanged_without_color_support(self):
        message = "A\r\n\r\nB\ttab\x07bell" + "x" * 50
        terminal = self.make_terminal(color_system=None)
        colorize(message, CHRISTMAS, scope=Scope.PARAGRAPHS, terminal=terminal)
        self.assertEqual(self.buffer.getvalue(), message)

    def test_writes_bypass_console_print(self):
        terminal = self.make_terminal(force_terminal=True, color_system="truecolor")
        with patch.object(terminal.console, "print") as mock_print:
            rainbow("x" * 1000, terminal=terminal)
        mock_print.assert_not_called()
        self.assertEqual(ANSI_RE.sub("", self.buffer.getvalue()), "x" * 1000)


if __name__ == "__main__":
    unittest.main()
