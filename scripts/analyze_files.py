from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from clarify.matching import InvalidInputError, KeywordMatcher  # noqa: E402
from clarify.vocabulary import LocalVocabulary  # noqa: E402


def _read_text(path: str | None) -> str:
    if not path:
        return ""
    return Path(path).read_text(encoding="utf-8", errors="ignore")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Match a resume against a job description.")
    parser.add_argument("--resume", help="Path to the resume text file")
    parser.add_argument("--jd", help="Path to the job description text file")
    parser.add_argument("--vocabulary", default=None, help="Alternative vocabulary YAML file")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact output)")
    args = parser.parse_args(argv)

    vocabulary = LocalVocabulary(args.vocabulary).get_vocabulary() if args.vocabulary else None
    matcher = KeywordMatcher(vocabulary=vocabulary)
    try:
        summary = matcher.analyze(_read_text(args.resume), _read_text(args.jd))
    except InvalidInputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(summary.model_dump_json(by_alias=True, indent=args.indent or None))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
