"""Command line interface for pw-entropy."""

from __future__ import annotations

import getpass
import json
import logging
from importlib.metadata import PackageNotFoundError, version

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from pw_entropy import __version__
from pw_entropy.classes import CLASS_SYMBOLS, MAX_BASE
from pw_entropy.errors import PwEntropyError
from pw_entropy.sequences import COMMON_SEQUENCES
from pw_entropy.strength import PasswordEntropy, feedback_for, score

EXIT_SUCCESS = 0
EXIT_USAGE = 1
EXIT_WEAK = 2

console = Console()


def _package_version() -> str:
    try:
        return version("pw-entropy")
    except PackageNotFoundError:
        return __version__


def _prompt_password(password_opt: str | None) -> str:
    if password_opt is not None:
        return password_opt
    return getpass.getpass("Password: ")


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _level_style(level: str) -> str:
    return {"weak": "red", "fair": "yellow", "good": "cyan", "strong": "green"}[level]


def _result_payload(result: PasswordEntropy) -> dict[str, object]:
    return {
        "base": result.base,
        "effective_length": result.effective_length,
        "entropy_bits": round(result.entropy_bits, 4),
        "level": result.level,
        "classes": sorted(c.value for c in result.classes),
    }


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=False,
)
@click.version_option(version=_package_version(), prog_name="pw-entropy")
@click.option("--debug/--no-debug", default=False, help="Log pipeline details to stderr.")
def cli(debug: bool) -> None:
    """Estimate password entropy in bits."""
    _configure_logging(debug)


@cli.command(
    "score",
    help="Score a password and show its entropy.",
    epilog="Examples:\n  pwentropy score\n  pwentropy score --password 'ThisIsASecret'\n  pwentropy score --min-bits 60 --json",
)
@click.option("--password", "password_opt", help="Password to score (will prompt if omitted).")
@click.option(
    "--secure-erase/--no-secure-erase",
    default=True,
    show_default=True,
    help="Zero the working copy of the password after scoring.",
)
@click.option(
    "--min-bits",
    type=click.FloatRange(min=0),
    default=None,
    help="Exit with status 2 when the entropy is below this many bits.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the result as JSON.")
@click.pass_context
def score_command(
    ctx: click.Context,
    password_opt: str | None,
    secure_erase: bool,
    min_bits: float | None,
    as_json: bool,
) -> None:
    password = _prompt_password(password_opt)
    try:
        result = score(password, secure_erase=secure_erase)
    except PwEntropyError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        ctx.exit(EXIT_USAGE)
        return

    too_weak = min_bits is not None and result.entropy_bits < min_bits

    if as_json:
        payload = _result_payload(result)
        if min_bits is not None:
            payload["min_bits"] = min_bits
            payload["passed"] = not too_weak
        click.echo(json.dumps(payload, sort_keys=True))
    else:
        table = Table(show_header=False, box=None)
        table.add_row("Entropy", f"{result.entropy_bits:.2f} bits")
        table.add_row("Level", f"[{_level_style(result.level)}]{result.level}[/]")
        table.add_row("Base", f"{result.base} / {MAX_BASE}")
        table.add_row("Effective length", str(result.effective_length))
        table.add_row(
            "Classes",
            ", ".join(sorted(c.value for c in result.classes)) if result.classes else "(none)",
        )
        console.print("[bold]Password entropy[/bold]")
        console.print(table)
        if too_weak:
            console.print(f"[red]Below the required {min_bits:.1f} bits.[/red]")
            for hint in feedback_for(result):
                console.print(f"  - {hint}")

    ctx.exit(EXIT_WEAK if too_weak else EXIT_SUCCESS)


@cli.command(help="List the common sequences removed before scoring, in match order.")
def sequences() -> None:
    for index, sequence in enumerate(COMMON_SEQUENCES, start=1):
        click.echo(f"{index:2d}  {sequence}")


@cli.command(help="List the character classes and their sizes.")
def classes() -> None:
    table = Table("Class", "Size", "Symbols")
    for char_class, symbols in CLASS_SYMBOLS.items():
        table.add_row(char_class.value, str(len(symbols)), escape(repr(symbols)))
    console.print(table)


@cli.command("version", help="Show the installed version.")
def version_command() -> None:
    click.echo(f"pw-entropy, version {_package_version()}")


def main(argv: list[str] | None = None) -> int:
    try:
        code = cli.main(args=argv, prog_name="pwentropy", standalone_mode=False)
    except SystemExit as exc:  # noqa: TRY003
        code = exc.code if isinstance(exc.code, int) else EXIT_USAGE
        return code
    except click.ClickException as exc:
        exc.show()
        return EXIT_USAGE
    return code if isinstance(code, int) else EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
