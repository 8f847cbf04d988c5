"""Positizer Negative Speech Detector - Entry Point"""

import argparse
import logging
import signal
import sys

from config import Config
from nlp_annotation import AnnotatorUnavailableError
from speech_analyzer import NegativeSpeechDetector, run_inline

logger = logging.getLogger(__name__)


def signal_handler(signum, frame):
    logger.info(f"Received signal {signum}, shutting down...")
    sys.exit(0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Flag self-limiting sentences and suggest self-affirming rewrites.'
    )
    parser.add_argument('text', nargs='*', help='Text to analyze (read from stdin when omitted)')
    parser.add_argument('--log-level', default=None, help='Override LOG_LEVEL')
    return parser


def analyze(detector: NegativeSpeechDetector, text: str) -> list:
    """Return one report line per flagged sentence."""
    lines = []
    for span in detector.find_negative_spans(text):
        sentence = span.text
        lines.append(f"[{span.start}:{span.end}] {sentence}")
        if detector.detect_not_only_but_also(sentence):
            lines.append(f"  not only/but also -> {detector.suggest_improved_sentence(sentence)}")
        if detector.is_injunction(sentence):
            lines.append(f"  injunction -> {detector.suggest_injunction_replacement(sentence)}")
        if detector.has_conjunction(sentence):
            lines.append(f"  conjunction -> {detector.suggest_conjunction_replacement(sentence)}")
        transformed = detector.transform_sentence(sentence)
        if transformed != sentence:
            lines.append(f"  causal complement -> {transformed}")
        if detector.contains_profanity(sentence):
            lines.append("  contains profanity")
    return lines


def main(argv=None):
    args = build_parser().parse_args(argv)
    Config.init_logging(args.log_level)

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    text = ' '.join(args.text) if args.text else sys.stdin.read()
    if not text.strip():
        logger.error("No input text")
        return 1

    try:
        detector = NegativeSpeechDetector(execute=run_inline)
        report = analyze(detector, text)
    except AnnotatorUnavailableError as e:
        logger.error(f"Startup failed: {e}")
        return 1

    if not report:
        print("No self-limiting language found.")
    for line in report:
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
