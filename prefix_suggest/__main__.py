"""Command line entry point for interactive prefix suggestions."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from . import logging as suggest_logging
from .config import CONFIG_FILE, ENV_DICT_PATH, load_config
from .dictionary import EXPECTED_FORMAT, LoadError, from_wordfreq, load_dictionary
from .engine import Suggester
from .repl import run_repl

DEFAULT_K = 5

log = logging.getLogger("prefix_suggest.cli")


def parse_k(raw: str | int | None, default: int = DEFAULT_K) -> int:
    """Return ``raw`` as a positive int, falling back to :data:`DEFAULT_K`."""
    if raw is None:
        raw = default
    try:
        k = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_K
    return k if k > 0 else DEFAULT_K


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prefix_suggest",
        description="Suggest the most frequent words for a typed prefix",
    )
    parser.add_argument(
        "words_file",
        nargs="?",
        help=f"Word list, {EXPECTED_FORMAT} (default: ${ENV_DICT_PATH})",
    )
    parser.add_argument(
        "k",
        nargs="?",
        default=None,
        metavar="K",
        help="Number of suggestions to show (default 5)",
    )
    parser.add_argument(
        "--wordfreq",
        action="store_true",
        help="Use the wordfreq word list instead of a file",
    )
    parser.add_argument(
        "--lang",
        help="wordfreq language code (default taken from the settings file)",
    )
    parser.add_argument(
        "--config",
        default=CONFIG_FILE,
        help="Path to the JSON settings file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Minimum severity for log messages",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load a dictionary and run the prompt loop; return an exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    suggest_logging.setup(getattr(logging, args.log_level))

    cfg = load_config(args.config)
    raw_k = args.k
    if args.wordfreq:
        # no file is read, so a single positional is K
        if args.words_file is not None:
            if raw_k is not None:
                parser.error("a words file cannot be combined with --wordfreq")
            raw_k = args.words_file
        words_file = None
    else:
        words_file = args.words_file or os.getenv(ENV_DICT_PATH) or cfg.dictionary_path
        if not words_file:
            parser.print_usage(sys.stderr)
            return 1

    k = parse_k(raw_k, cfg.top_k)

    try:
        if args.wordfreq:
            dictionary = from_wordfreq(args.lang or cfg.wordfreq_lang, cfg.wordfreq_size)
        else:
            dictionary = load_dictionary(words_file)
    except LoadError as exc:
        log.debug("Dictionary load failed", exc_info=True)
        print(exc, file=sys.stderr)
        return 1

    suggester = Suggester(dictionary, cache_size=cfg.cache_size)
    print(f"Loaded {len(suggester)} entries. Top-K = {k}\n")
    run_repl(suggester, k)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())
