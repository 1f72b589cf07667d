"""Speak a phrase from the command line.

    pronounce like or dislike --all -o phrase.mp3
"""

import argparse
import logging
import os
import shutil
import sys
import tempfile

from pronounce import config
from pronounce.errors import PronounceError
from pronounce.speak import speak

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pronounce",
        description="Download dictionary pronunciations for words and merge them into one file.",
    )
    parser.add_argument("words", nargs="+", help="Words to pronounce, in order")
    parser.add_argument("--all", dest="speak_all", action="store_true",
                        help="Speak every pronunciation of each word, joined by 'or'")
    parser.add_argument("-o", "--output", default=f"output.{config.AUDIO_FORMAT}",
                        help="Merged audio file (default: %(default)s)")
    parser.add_argument("--clips-dir",
                        help="Keep the downloaded clips in this folder")
    return parser


def _speak_to(text: str, speak_all: bool, workdir: str, output: str) -> None:
    merged = speak(text, speak_all, workdir)
    if os.path.abspath(merged) != os.path.abspath(output):
        shutil.copyfile(merged, output)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s: %(message)s")

    text = " ".join(args.words)
    try:
        if args.clips_dir:
            os.makedirs(args.clips_dir, exist_ok=True)
            _speak_to(text, args.speak_all, args.clips_dir, args.output)
        else:
            with tempfile.TemporaryDirectory(prefix="pronounce-", dir=config.TMP_DIR) as workdir:
                _speak_to(text, args.speak_all, workdir, args.output)
    except PronounceError as e:
        logger.error("%s: %s", e.message, e)
        return 1

    logger.info("saved: %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
