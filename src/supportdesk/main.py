"""DodgySoft Technical Support System - dialog driver.

Reads entries with an InputReader, answers them with a Responder, and
keeps going until the input ends or the user says 'bye'.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from supportdesk.core import SupportConfig, DEFAULT_CONFIG
from supportdesk.generation import Responder
from supportdesk.parsing import InputReader

logger = logging.getLogger(__name__)


WELCOME_LINES = (
    "Welcome to the DodgySoft Technical Support System.",
    "",
    "Please tell us about your problem.",
    "We will assist you with any problem you might have.",
    "Please type 'bye' to exit our system.",
)

GOODBYE_LINE = "Nice talking to you. Bye..."


class SupportSystem:
    """Technical support dialog.

    Example:
        >>> system = SupportSystem(InputReader(sys.stdin), Responder.from_config())
        >>> system.start()
    """

    def __init__(
        self,
        reader: InputReader,
        responder: Responder,
        exit_word: str = DEFAULT_CONFIG.exit_word,
    ) -> None:
        self.reader = reader
        self.responder = responder
        self.exit_word = exit_word

    def start(self) -> int:
        """Print the welcome, run the dialog, print the goodbye.

        Returns:
            Number of responses given
        """
        self.print_welcome()

        answered = 0
        while True:
            words = self.reader.next_record()
            if words is None:
                logger.debug("End of input")
                break
            if self.exit_word in words:
                break
            print(self.responder.generate_response(words))
            answered += 1

        self.print_goodbye()
        return answered

    def print_welcome(self) -> None:
        for line in WELCOME_LINES:
            print(line)

    def print_goodbye(self) -> None:
        print(GOODBYE_LINE)


def build_config(args: argparse.Namespace) -> SupportConfig:
    """Apply command line overrides to the default config."""
    overrides = {}
    if args.responses:
        overrides['response_map_path'] = args.responses
    if args.defaults:
        overrides['default_responses_path'] = args.defaults
    if args.seed is not None:
        overrides['seed'] = args.seed
    return dataclasses.replace(DEFAULT_CONFIG, **overrides)


def main(argv: list[str] | None = None) -> int:
    """Run the support system."""
    parser = argparse.ArgumentParser(description="DodgySoft Technical Support System")
    parser.add_argument(
        '--responses',
        type=str,
        default=None,
        metavar='PATH',
        help=f'Keyword response map (default: {DEFAULT_CONFIG.response_map_path})',
    )
    parser.add_argument(
        '--defaults',
        type=str,
        default=None,
        metavar='PATH',
        help=f'Default responses, one per line (default: {DEFAULT_CONFIG.default_responses_path})',
    )
    parser.add_argument(
        '--input',
        type=str,
        default=None,
        metavar='PATH',
        help='Read the dialog from PATH instead of standard input',
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for default responses',
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show debug logging',
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    config = build_config(args)

    try:
        responder = Responder.from_config(config)
    except OSError as e:
        print(f"Unable to start: {e}", file=sys.stderr)
        return 1

    if args.input is None:
        system = SupportSystem(InputReader(sys.stdin), responder, config.exit_word)
        system.start()
        return 0

    try:
        f = open(args.input, encoding=config.encoding)
    except OSError as e:
        print(f"Unable to open {args.input}: {e}", file=sys.stderr)
        return 1

    with f:
        system = SupportSystem(InputReader(f), responder, config.exit_word)
        system.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
