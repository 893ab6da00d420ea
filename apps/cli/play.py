# apps/cli/play.py
"""
CLI entry point for playing Word Scramble in a terminal.

This script:
  1) Loads the start-word list (bundled by default) and builds the dictionary.
  2) Starts a round on a random root word.
  3) Reads guesses line by line:
       - accepted words are listed most-recent-first with their letter counts
       - rejected words print the error title and message
       - blank lines are ignored
     ":restart" picks a new root word, ":quit", EOF or Ctrl-C exits.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, TextIO

from packages.datasets import load_start_words
from packages.dictionary import create_dictionary, get_dictionary_ids
from packages.dictionary.wordfreq_backend import DEFAULT_MIN_ZIPF
from packages.game import Accepted, GameSession, Rejected

RESTART_COMMANDS = {":restart", ":r"}
QUIT_COMMANDS = {":quit", ":q"}


def _build_dictionary(args: argparse.Namespace):
    if args.dictionary == "wordlist":
        if not args.wordlist:
            raise ValueError("--wordlist is required with --dictionary wordlist")
        if args.min_zipf is not None:
            raise ValueError("--min-zipf only applies to --dictionary wordfreq")
        return create_dictionary("wordlist", path=args.wordlist)
    if args.wordlist:
        raise ValueError("--wordlist only applies to --dictionary wordlist")
    if args.min_zipf is None:
        return create_dictionary("wordfreq")
    return create_dictionary("wordfreq", min_zipf=args.min_zipf)


def _print_round(session: GameSession, out: TextIO) -> None:
    print(f"\n== {session.root_word} ==", file=out)


def _print_words(session: GameSession, out: TextIO) -> None:
    for word, letters in session.state.letter_counts():
        print(f"  {word:<20} ({letters})", file=out)
    print(f"Score: {session.score}", file=out)


def play(session: GameSession, *, read: Callable[[], str], out: TextIO = sys.stdout) -> int:
    """
    Run the interactive loop until quit/EOF. Returns the final score.

    `read` returns the next input line and raises EOFError when input ends
    (the builtin `input` does exactly that). Ctrl-C ends the game the same way.
    """
    _print_round(session, out)
    while True:
        try:
            line = read()
        except (EOFError, KeyboardInterrupt):
            print(file=out)
            break

        cmd = line.strip().lower()
        if cmd in QUIT_COMMANDS:
            break
        if cmd in RESTART_COMMANDS:
            session.restart()
            _print_round(session, out)
            continue

        outcome = session.submit(line)
        if isinstance(outcome, Rejected):
            print(f"{outcome.title}: {outcome.message}", file=out)
        elif isinstance(outcome, Accepted):
            _print_words(session, out)
        # Empty: nothing to report

    return session.score


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, load resources, and run the game loop.
    """
    ap = argparse.ArgumentParser(description="Word Scramble: make words from the root word's letters")
    ap.add_argument("--start-words", default=None,
                    help="path to root-word list (default: bundled start.txt)")
    ap.add_argument("--dictionary", default="wordfreq", choices=get_dictionary_ids(),
                    help="dictionary backend used for the real-word check")
    ap.add_argument("--wordlist", default=None,
                    help="word file for --dictionary wordlist (one word per line)")
    ap.add_argument("--min-zipf", type=float, default=None,
                    help=f"wordfreq backend: minimum Zipf frequency for a real word (default: {DEFAULT_MIN_ZIPF})")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed for root-word picks")
    args = ap.parse_args(argv)

    # Without a start-word list no round can be played: fail loudly.
    try:
        words = load_start_words(args.start_words)
    except (OSError, UnicodeDecodeError) as e:
        sys.stderr.write(f"fatal: could not load start words ({e})\n")
        return 1

    try:
        dictionary = _build_dictionary(args)
    except (OSError, ValueError) as e:
        sys.stderr.write(f"fatal: could not set up dictionary ({e})\n")
        return 1

    sys.stderr.write(f"Loaded {len(words)} start words | dictionary={dictionary.id}\n")
    session = GameSession(words, dictionary, seed=args.seed)
    print("Type a word and press Enter. ':restart' for a new word, ':quit' to exit.")
    score = play(session, read=lambda: input("> "))
    print(f"\nFinal score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
