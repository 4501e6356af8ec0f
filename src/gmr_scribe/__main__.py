"""Entry point for ``python -m gmr_scribe`` and the ``gmr-scribe`` script.

Provides a CLI with two independent subcommands.  Uses stdlib
:mod:`argparse` for argument parsing.

Subcommands:
    transcribe -- Run the speech-to-text engine on a file in ``audio/``.
    format     -- Render an annotated transcript from ``transcripts/``
                  as a GMR ``.docx`` in ``formatted/``.

Exit codes:
    0 -- Command completed successfully.
    1 -- Missing argument, file not found, configuration error, or a
         transcription/rendering failure.
"""

from __future__ import annotations

import argparse
import logging
import sys

from gmr_scribe.config import ConfigError, Settings, load_settings
from gmr_scribe.exceptions import (
    GmrScribeError,
    InputNotFoundError,
    StrictModeError,
    UsageError,
)
from gmr_scribe.log import resolve_level, setup_logging
from gmr_scribe.models.style import DEFAULT_STYLE, StyleError, load_style
from gmr_scribe.output import (
    format_not_found,
    format_strict_failure,
    print_error,
    print_format_result,
    print_transcribe_result,
)
from gmr_scribe.pipeline import parse_duration, run_format, run_transcribe

logger = logging.getLogger(__name__)

_TRANSCRIBE_EXAMPLE = "Example: gmr-scribe transcribe my-audio.mp3"
_FORMAT_EXAMPLE = 'Example: gmr-scribe format "Stuff You Should Know Podcast - notes.txt" 10'


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser with subcommands.

    Positional arguments are optional at the argparse level so that a
    missing argument is reported by the command itself with exit code 1.
    """
    parser = argparse.ArgumentParser(
        prog="gmr-scribe",
        description="Transcribe audio and format annotated transcripts to GMR style.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- "transcribe" subcommand --------------------------------------
    transcribe_parser = subparsers.add_parser(
        "transcribe",
        help="Transcribe an audio file from the audio/ folder.",
        epilog=_TRANSCRIBE_EXAMPLE,
    )
    transcribe_parser.add_argument(
        "audio_file",
        nargs="?",
        default=None,
        help="Name of the audio file inside audio/.",
    )
    _add_verbose(transcribe_parser)

    # --- "format" subcommand ------------------------------------------
    format_parser = subparsers.add_parser(
        "format",
        help="Render an annotated transcript as a GMR document.",
        epilog=_FORMAT_EXAMPLE,
    )
    format_parser.add_argument(
        "notes_file",
        nargs="?",
        default=None,
        help="Name of the annotated transcript inside transcripts/.",
    )
    format_parser.add_argument(
        "duration",
        nargs="?",
        default=None,
        help="Audio duration in minutes.",
    )
    format_parser.add_argument(
        "--style",
        type=str,
        default=None,
        help="JSON file overriding document style settings.",
    )
    format_parser.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Fail instead of silently dropping text with no speaker label.",
    )
    format_parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Print the parsed segments without writing a document.",
    )
    _add_verbose(format_parser)

    return parser


def _add_verbose(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )


def _handle_transcribe(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the ``transcribe`` subcommand."""
    if not args.audio_file:
        print_error("Error: Please provide an audio file name")
        print_error("Usage: gmr-scribe transcribe <audio-filename>")
        print_error(_TRANSCRIBE_EXAMPLE)
        print_error(f"Place your audio files in {settings.audio_dir}")
        return 1

    result = run_transcribe(args.audio_file, settings)

    transcription = result.transcription
    if transcription.stderr:
        print_error(transcription.stderr.rstrip())
    if transcription.stdout:
        sys.stdout.write(transcription.stdout)

    print_transcribe_result(result)
    return 0


def _handle_format(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the ``format`` subcommand."""
    if not args.notes_file or not args.duration:
        print_error("Usage: gmr-scribe format <notes-file.txt> <duration-in-minutes>")
        print_error(_FORMAT_EXAMPLE)
        return 1

    duration = parse_duration(args.duration)

    style = DEFAULT_STYLE
    if args.style:
        style = load_style(args.style)

    result = run_format(
        args.notes_file,
        duration,
        settings,
        style=style,
        strict=args.strict,
        dry_run=args.dry_run,
    )
    print_format_result(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the gmr-scribe CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    if args.command is None:
        parser.print_usage(sys.stderr)
        return 1

    try:
        settings = load_settings()
    except ConfigError as exc:
        print_error(f"Error: {exc}")
        return 1

    # --- Configure logging --------------------------------------------
    setup_logging(resolve_level(args.verbose, settings.log_level))

    # --- Dispatch to subcommand handler -------------------------------
    try:
        if args.command == "transcribe":
            return _handle_transcribe(args, settings)
        return _handle_format(args, settings)
    except InputNotFoundError as exc:
        print_error(format_not_found(exc))
    except StrictModeError as exc:
        print_error(format_strict_failure(exc))
    except UsageError as exc:
        print_error(f"Error: {exc}")
        parser.print_usage(sys.stderr)
    except (GmrScribeError, StyleError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print_error(f"Error: {exc}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
