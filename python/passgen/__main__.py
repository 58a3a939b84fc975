"""
CLI interface for passgen.
"""

import logging
import sys
from typing import Optional

import click

from .charsets import build_alphabet
from .clipboard import get_clipboard_manager
from .clipboard.manager import DEFAULT_CLEAR_AFTER
from .exceptions import ClipboardError, GenerationError, InvalidOptionError, NoClassSelectedError
from .utils.password_generator import GenerationRequest, PasswordGenerator, build_request
from .utils.strength import MAX_SCORE, check_strength
from .utils.validation import parse_character_classes

DEFAULT_LENGTH = 16
MIN_LENGTH = 4
MAX_LENGTH = 64

logger = logging.getLogger(__name__)


@click.group(context_settings={"auto_envvar_prefix": "PASSGEN"})
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """passgen - Generate secure random passwords."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--length", "-l", default=DEFAULT_LENGTH, show_default=True,
              type=click.IntRange(MIN_LENGTH, MAX_LENGTH),
              help=f"Password length ({MIN_LENGTH}-{MAX_LENGTH})")
@click.option("--no-uppercase", is_flag=True, help="Exclude uppercase letters")
@click.option("--no-lowercase", is_flag=True, help="Exclude lowercase letters")
@click.option("--no-digits", is_flag=True, help="Exclude digits")
@click.option("--no-symbols", is_flag=True, help="Exclude symbols")
@click.option("--classes", "class_names", default=None,
              help="Comma-separated classes to use (upper,lower,digit,symbol); overrides --no-* flags")
@click.option("--exclude-ambiguous", "-a", is_flag=True,
              help="Exclude ambiguous characters (I, l, 1, O, 0)")
@click.option("--count", "-n", default=1, show_default=True, type=click.IntRange(1, 100),
              help="Number of passwords to generate")
@click.option("--copy", "-c", is_flag=True, help="Copy the (last) password to clipboard")
@click.option("--clear-after", default=DEFAULT_CLEAR_AFTER, show_default=True,
              type=click.IntRange(min=0),
              help="Seconds before the clipboard is cleared (0 to keep)")
@click.option("--strength", "-s", "show_strength", is_flag=True, help="Show a strength estimate")
def generate(length: int, no_uppercase: bool, no_lowercase: bool, no_digits: bool,
             no_symbols: bool, class_names: Optional[str], exclude_ambiguous: bool, count: int, copy: bool,
             clear_after: int, show_strength: bool) -> None:
    """Generate one or more passwords."""
    if class_names is not None:
        try:
            classes = parse_character_classes(class_names.split(","))
        except InvalidOptionError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        request = GenerationRequest(length, classes, exclude_ambiguous)
    else:
        request = build_request(
            length=length,
            use_uppercase=not no_uppercase,
            use_lowercase=not no_lowercase,
            use_digits=not no_digits,
            use_symbols=not no_symbols,
            exclude_ambiguous=exclude_ambiguous,
        )
    generator = PasswordGenerator()

    try:
        passwords = [generator.generate(request) for _ in range(count)]
        alphabet_size = len(build_alphabet(request.enabled_classes, request.exclude_ambiguous))
    except NoClassSelectedError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    except GenerationError as e:
        click.echo(f"Error generating password: {e}", err=True)
        sys.exit(1)

    charset_desc = generator.get_charset_info(request)
    logger.debug(f"Generated {count} password(s) of length {length} using: {charset_desc}")

    for password in passwords:
        click.echo(password)

        if show_strength:
            report = check_strength(password, alphabet_size)
            click.echo(
                f"  Strength: {report.label} ({report.score}/{MAX_SCORE}, "
                f"~{report.entropy_bits:.0f} bits)"
            )

    if copy:
        clipboard = get_clipboard_manager(clear_after)
        try:
            clear_thread = clipboard.copy(passwords[-1])
        except ClipboardError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        click.echo("🔐 Password copied to clipboard.", err=True)

        # The clear thread is a daemon, so stay alive until it has run
        if clear_thread is not None:
            click.echo(f"Clearing clipboard in {clear_after}s (Ctrl-C to clear now)", err=True)
            clipboard.wait_for_clear(clear_thread, passwords[-1])


@cli.command()
@click.argument("password", required=False)
@click.option("--stdin", is_flag=True, help="Read password from stdin")
def strength(password: Optional[str], stdin: bool) -> None:
    """Estimate the strength of a password."""
    if stdin and password:
        click.echo("Error: Cannot use --stdin with a provided password", err=True)
        sys.exit(1)

    if stdin:
        password = sys.stdin.read().strip()
    elif not password:
        password = click.prompt("Password", hide_input=True)

    if not password:
        click.echo("Error: Password cannot be empty", err=True)
        sys.exit(1)

    report = check_strength(password)
    click.echo(f"Strength: {report.label} ({report.score}/{MAX_SCORE})")


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
