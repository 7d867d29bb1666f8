import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from clarify.matching.classifier import (  # noqa: E402
    KeywordAccumulator,
    accumulate_phrases,
    accumulate_tokens,
    tokenize,
)
from clarify.schemas.analysis import KeywordCategory  # noqa: E402
from clarify.vocabulary import Vocabulary  # noqa: E402

VOCABULARY = Vocabulary(
    hard_skills=frozenset({"python", "docker", "sql"}),
    soft_signals=frozenset({"leadership", "communication"}),
    junk_tokens=frozenset({"the", "and", "with", "python"}),
    phrases=("distributed systems",),
    weak_verbs=(("helped", "orchestrated"),),
)


class KeywordClassifierTests(unittest.TestCase):
    def test_tokenize_drops_junk_tokens(self):
        self.assertEqual(tokenize("the docker and  sql ", VOCABULARY.junk_tokens), ["docker", "sql"])

    def test_junk_filter_runs_before_classification(self):
        accumulator = KeywordAccumulator()
        accumulate_tokens(accumulator, tokenize("python docker", VOCABULARY.junk_tokens), "jd", VOCABULARY)
        self.assertIsNone(accumulator.get("python"))
        self.assertIsNotNone(accumulator.get("docker"))

    def test_tokens_are_classified_and_unknown_tokens_ignored(self):
        accumulator = KeywordAccumulator()
        accumulate_tokens(accumulator, ["docker", "leadership", "kitchen"], "jd", VOCABULARY)

        self.assertEqual(len(accumulator), 2)
        self.assertEqual(accumulator.get("docker").category, KeywordCategory.HARD_SKILL)
        self.assertEqual(accumulator.get("leadership").category, KeywordCategory.SOFT_SIGNAL)
        self.assertIsNone(accumulator.get("kitchen"))

    def test_counts_are_kept_per_source_on_one_entry(self):
        accumulator = KeywordAccumulator()
        accumulate_tokens(accumulator, ["sql", "sql"], "jd", VOCABULARY)
        accumulate_tokens(accumulator, ["sql"], "resume", VOCABULARY)

        entry = accumulator.get("SQL")
        self.assertEqual(entry.count_in_jd, 2)
        self.assertEqual(entry.count_in_resume, 1)

    def test_phrases_are_always_tracked_as_phrase(self):
        accumulator = KeywordAccumulator()
        accumulate_phrases(accumulator, ["distributed systems", "docker"], "resume")
        self.assertEqual(accumulator.get("docker").category, KeywordCategory.PHRASE)
        self.assertEqual(accumulator.get("distributed systems").count_in_resume, 1)

    def test_first_written_text_is_retained(self):
        accumulator = KeywordAccumulator()
        accumulator.track("Docker", KeywordCategory.HARD_SKILL, "jd")
        accumulator.track("docker", KeywordCategory.HARD_SKILL, "resume")
        entry = accumulator.get("docker")
        self.assertEqual(entry.text, "Docker")
        self.assertEqual((entry.count_in_jd, entry.count_in_resume), (1, 1))

    def test_jd_entries_drop_resume_only_terms(self):
        accumulator = KeywordAccumulator()
        accumulate_tokens(accumulator, ["docker"], "jd", VOCABULARY)
        accumulate_tokens(accumulator, ["sql", "docker"], "resume", VOCABULARY)
        self.assertEqual([entry.text for entry in accumulator.jd_entries()], ["docker"])


if __name__ == "__main__":
    unittest.main()
