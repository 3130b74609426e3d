"""
commit-msg hook entry point for fast-cc-hooks.

Git calls the hook with the path of the commit message file:

    fastcc-validate .git/COMMIT_EDITMSG
    fastcc-validate --message "feat(api): add endpoint"

Exit codes: 0 when the message is valid, 1 when it breaks a rule, 2 when the
configuration or the message file cannot be used.
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .commit import Validator
from .config import load_config
from .errors import CommitValidationError, FastCCError, format_error_for_user
from .logging_config import configure_logging

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fastcc-validate",
        description="Validate a commit message against conventional commit rules."
    )
    parser.add_argument(
        "commit_msg_file",
        nargs="?",
        help="Path to the commit message file (as passed by git to commit-msg hooks)"
    )
    parser.add_argument(
        "-m", "--message",
        help="Validate this message instead of reading a file"
    )
    parser.add_argument(
        "-c", "--config",
        help="Configuration file (default: $FASTCC_CONFIG or .fast-cc-hooks.yaml)"
    )
    return parser


def run_hook(
    commit_msg_file: Optional[str] = None,
    message: Optional[str] = None,
    config_path: Optional[str] = None
) -> int:
    """
    Validate a commit message and print the report.

    Args:
        commit_msg_file: Message file to validate
        message: Message text, used instead of the file when given
        config_path: Configuration file override

    Returns:
        Process exit code
    """
    try:
        config = load_config(config_path)
        validator = Validator(config)

        if message is not None:
            result = validator.validate(message)
        else:
            result = validator.validate_file(commit_msg_file)
    except CommitValidationError as e:
        print(format_error_for_user(e))
        return EXIT_INVALID
    except FastCCError as e:
        logger.debug(f"Hook failed: {e!r}")
        print(format_error_for_user(e), file=sys.stderr)
        return EXIT_ERROR

    print(result.format_report())
    if not result.valid:
        print("\nCommit aborted. Please fix your commit message and try again.")
        return EXIT_INVALID

    return EXIT_VALID


def main(argv: Optional[List[str]] = None) -> int:
    """Run the commit-msg hook."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.message is None and not args.commit_msg_file:
        parser.error("either a commit message file or --message is required")

    load_dotenv(find_dotenv(usecwd=True))
    configure_logging()

    return run_hook(
        commit_msg_file=args.commit_msg_file,
        message=args.message,
        config_path=args.config
    )


if __name__ == "__main__":
    sys.exit(main())
