"""Command-line interface for the word codec.

WHY: The codec is mostly used from a terminal: pipe a key or a file in,
get a line of words out, and paste the words back in later to recover
the bytes. The CLI wires the codec to stdin/stdout (or files) behind
three sub-commands.

HOW: Uses argparse with sub-commands. ``encode`` streams raw bytes
through the StreamEncoder and writes the dash-joined words as they are
produced. ``decode`` reads the whole line, strips trailing newlines and
writes raw bytes. ``padding-words`` prints the reserved tokens. Logging
is configured with logging.basicConfig on stderr.

RULES:
- No sub-command means ``encode`` (``wordbytes < key.bin`` and
  ``wordbytes -i key.bin`` both work)
- Encoded output has no trailing newline
- Decode strips trailing \\r and \\n only; other whitespace is an error
- Errors print ``Error: <message>`` to stderr and exit 1; Ctrl-C exits 130
- --dictionary overrides WORDBYTES_DICTIONARY
"""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import ExitStack
from typing import List, Optional

from wordbytes import __version__
from wordbytes.config import WORDBYTES_LOG_LEVEL, chunk_size_setting
from wordbytes.core.codec import Decoder
from wordbytes.core.dictionary import Dictionary, load_dictionary
from wordbytes.core.errors import WordbytesError
from wordbytes.core.stream import iter_encode
from wordbytes.core.wire import MARKER, PADDING_WORDS, SEPARATOR

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, WORDBYTES_LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _run_encode(args: argparse.Namespace, dictionary: Dictionary) -> None:
    """Stream bytes from the input and write the word-sequence.

    RULES:
    - Input defaults to stdin (binary), output to stdout
    - Words are written as soon as each block is encoded
    """
    with ExitStack() as stack:
        source = stack.enter_context(open(args.input, "rb")) if args.input else sys.stdin.buffer
        sink = (
            stack.enter_context(open(args.output, "w", encoding="utf-8"))
            if args.output else sys.stdout
        )

        count = 0
        for word in iter_encode(source, dictionary, chunk_size_setting()):
            if count:
                sink.write(SEPARATOR)
            sink.write(word)
            count += 1
        sink.flush()

    logger.info("Wrote %d words", count)


def _run_decode(args: argparse.Namespace, dictionary: Dictionary) -> None:
    """Read a word-sequence and write the decoded bytes.

    RULES:
    - Input defaults to stdin (text), output to stdout (binary)
    - Only trailing carriage returns and newlines are stripped
    """
    if args.input:
        with open(args.input, encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    data = Decoder(dictionary).decode(text.rstrip("\r\n"))

    if args.output:
        with open(args.output, "wb") as f:
            f.write(data)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()

    logger.info("Wrote %d bytes", len(data))


def _run_padding_words() -> None:
    """Print the marker token and the padding word for each remainder."""
    print("marker: {}".format(MARKER))
    print("remainder  word")
    for remainder, word in enumerate(PADDING_WORDS, start=1):
        print("{:>9}  {}".format(remainder, word))


def _add_io_arguments(parser: argparse.ArgumentParser, default: object) -> None:
    """Add -i/--input and -o/--output to ``parser``.

    RULES:
    - The top-level parser uses default None
    - Sub-parsers use argparse.SUPPRESS so an option given before the
      sub-command is not reset by the sub-parser's defaults
    """
    parser.add_argument(
        "-i", "--input",
        default=default,
        help="Read from this file instead of stdin.",
    )
    parser.add_argument(
        "-o", "--output",
        default=default,
        help="Write to this file instead of stdout.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without touching stdin.

    RULES:
    - Sub-commands: encode (default), decode, padding-words
    - -i/--input and -o/--output are accepted with or without a sub-command
    - Global: --dictionary, -v/--verbose, --version
    """
    parser = argparse.ArgumentParser(
        prog="wordbytes",
        description="Encode bytes as a dash-separated sequence of dictionary "
                    "words (11 bits per word) and decode them back.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )
    parser.add_argument(
        "--dictionary",
        default=None,
        help="Path to a 2048-word list (default: WORDBYTES_DICTIONARY or the bundled list).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    _add_io_arguments(parser, None)

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    encode = commands.add_parser(
        "encode",
        help="Encode raw bytes as words (default).",
    )
    _add_io_arguments(encode, argparse.SUPPRESS)
    decode = commands.add_parser(
        "decode",
        help="Decode words back into raw bytes.",
    )
    _add_io_arguments(decode, argparse.SUPPRESS)
    commands.add_parser(
        "padding-words",
        help="List the marker token and the reserved padding words.",
    )
    parser.set_defaults(command="encode")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command == "padding-words":
            _run_padding_words()
            return

        dictionary = load_dictionary(args.dictionary)
        if args.command == "decode":
            _run_decode(args, dictionary)
        else:
            _run_encode(args, dictionary)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except (WordbytesError, OSError, ValueError) as e:
        _status("Error: {}".format(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
