import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from clarify.core.scoring import get_scoring_config, get_scoring_value  # noqa: E402
from clarify.matching import ScoringWeights  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("matching.weights.hard_skills"), 0.70)
        self.assertEqual(get_scoring_value("impact.weak_word_penalty"), 8)
        self.assertEqual(get_scoring_value("matching.missing.key", "fallback"), "fallback")

    def test_weights_from_config_match_defaults(self):
        weights = ScoringWeights.from_config()
        self.assertEqual(weights, ScoringWeights())
        self.assertAlmostEqual(weights.hard_skills + weights.soft_signals + weights.phrases, 1.0)


if __name__ == "__main__":
    unittest.main()
