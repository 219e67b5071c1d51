#!/usr/bin/env python3
"""Hiragana practice from the terminal.

Usage:
    hirapractice quiz [--source URL_OR_PATH] [--seed N]
    hirapractice romanize きっぷ 漢字【かんじ】
    hirapractice classify あいう あいう123
"""

import argparse
import random
import sys
import time
from typing import Callable, List, Optional

from hirapractice import ADVANCE_DELAY, DATA_URL
from hirapractice.logger import logger
from hirapractice.nlp.japanese import classify, extract_hiragana, transliterate
from hirapractice.pipeline.runner import VocabularyLoader
from hirapractice.quiz import QuizSession
from hirapractice.vocabulary import VocabularyLoadError


def cmd_romanize(args) -> int:
    for text in args.texts:
        print(transliterate(extract_hiragana(text)))
    return 0


def cmd_classify(args) -> int:
    results = [classify(text) for text in args.texts]
    for text, accepted in zip(args.texts, results):
        print(f"{text}\t{'yes' if accepted else 'no'}")
    return 0 if all(results) else 1


def run_quiz(
    session: QuizSession,
    read: Callable[[str], str] = input,
    delay: float = ADVANCE_DELAY,
) -> None:
    """Ask words until the user submits an empty line or closes the input."""
    while True:
        word = session.next_word()
        print(f"\n{word.jp}  ({word.en})")
        while True:
            try:
                answer = read("> ")
            except (EOFError, KeyboardInterrupt):
                return
            if not answer.strip():
                return
            if session.check(answer):
                print("✓ Correct!")
                try:
                    time.sleep(delay)
                except KeyboardInterrupt:
                    return
                break


def cmd_quiz(args) -> int:
    try:
        entries = VocabularyLoader(args.source).load()
    except VocabularyLoadError as e:
        print(f"Error loading data: {e}", file=sys.stderr)
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    session = QuizSession(entries, rng=rng)
    print(f"{len(entries)} words loaded. Type the romaji, or an empty line to stop.")
    run_quiz(session)
    print(f"\nScore: {session.score}")
    logger.info(f"Quiz finished with score {session.score}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hirapractice",
        description="Practice reading hiragana by typing its romaji",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    quiz = subparsers.add_parser("quiz", help="Run the vocabulary quiz")
    quiz.add_argument(
        "--source", "-s",
        default=DATA_URL,
        help="URL or path of the tab-separated word list (columns id, jp, en)",
    )
    quiz.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for word selection",
    )
    quiz.set_defaults(func=cmd_quiz)

    romanize = subparsers.add_parser("romanize", help="Print the romaji of hiragana text")
    romanize.add_argument("texts", nargs="+", help="Hiragana or kanji【hiragana】 text")
    romanize.set_defaults(func=cmd_romanize)

    check = subparsers.add_parser("classify", help="Tell whether text is pure hiragana")
    check.add_argument("texts", nargs="+", help="Text to classify")
    check.set_defaults(func=cmd_classify)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
