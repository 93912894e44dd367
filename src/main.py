"""
Main entry point for the Vaajoor solver.

Usage:
    vaajoor-solver "PersianWordsLineByLine.txt" 5
"""

import argparse
import logging
import os
import sys
from typing import List, NamedTuple, Optional, Union

import config
from data_loader import load_words
from feedback_client import FeedbackClient
from gameplay import SolveResult, SolverSession
from log_provider import setup_logging

logger = logging.getLogger("vaajoor.main")


class ValidArgs(NamedTuple):
    words_file: str
    word_length: int


class InvalidArguments(NamedTuple):
    reason: str


class _ArgumentError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    # argparse exits the process on bad input; report it instead.
    def error(self, message):
        raise _ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="vaajoor-solver", add_help=False,
                             description="Solve today's Vaajoor puzzle")
    parser.add_argument("words_file", help="Text file with one word per line.")
    parser.add_argument("word_length", type=int, help="Length of the word (e.g. 5).")
    return parser


def parse_arguments(argv: List[str]) -> Union[ValidArgs, InvalidArguments]:
    try:
        args = build_parser().parse_args(argv)
    except _ArgumentError as e:
        return InvalidArguments(str(e))

    if args.word_length < 1:
        return InvalidArguments(f"word length must be positive, got {args.word_length}")
    if not os.path.isfile(args.words_file):
        return InvalidArguments(f"words file '{args.words_file}' does not exist")
    return ValidArgs(args.words_file, args.word_length)


def show_help() -> None:
    print("*****************************")
    print(f"Vaajoor Solver v{config.__version__}")
    print('Usage : vaajoor-solver "Persian Words LineByLine" WordCharsCount')
    print('Example : vaajoor-solver "PersianWordsLineByLine.txt" 5')
    print("*****************************")


def run(args: ValidArgs) -> SolveResult:
    words = load_words(args.words_file, args.word_length)
    with FeedbackClient(config.API_URL, word_length=args.word_length) as client:
        session = SolverSession(words, args.word_length, client)
        return session.solve()


def main(argv: Optional[List[str]] = None) -> None:
    show_help()
    setup_logging(config.LOG_FILE)

    parsed = parse_arguments(sys.argv[1:] if argv is None else argv)
    if isinstance(parsed, InvalidArguments):
        logger.info(f"Invalid arguments! {parsed.reason}")
        return

    run(parsed)


if __name__ == "__main__":
    main()
