import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from clarify.matching.normalizer import normalize_text  # noqa: E402


class NormalizerTests(unittest.TestCase):
    def test_lowercases_and_strips_punctuation(self):
        self.assertEqual(normalize_text("Hello, World!"), "hello world")

    def test_keeps_symbols_used_in_technical_terms(self):
        self.assertEqual(normalize_text("C++ & C# / Node.js"), "c++ c# node.js")
        self.assertEqual(normalize_text("Event-Driven (Architecture)"), "event-driven architecture")

    def test_collapses_whitespace_and_trims(self):
        self.assertEqual(normalize_text("  multiple   spaces\n\tand tabs "), "multiple spaces and tabs")

    def test_slash_becomes_a_space(self):
        self.assertEqual(normalize_text("CI/CD"), "ci cd")

    def test_accented_letters_are_kept(self):
        self.assertEqual(normalize_text("Développeur Sénior!"), "développeur sénior")

    def test_empty_and_noise_only_input(self):
        self.assertEqual(normalize_text(""), "")
        self.assertEqual(normalize_text("!!! ??? ***"), "")


if __name__ == "__main__":
    unittest.main()
