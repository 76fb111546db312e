from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from enigmasim.core.errors import ConfigError, EnigmaError
from enigmasim.session.common import normalize_line
from enigmasim.session.config import MachineConfig, load_config, load_default_config
from enigmasim.session.processor import format_output, process_messages
from enigmasim.session.reset import apply_reset, parse_reset

app = typer.Typer(help="enigmasim: an Enigma-style rotor machine simulator.")

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log machine activity to stderr."),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _fail(e: EnigmaError) -> None:
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


def _config(path: Optional[Path]) -> MachineConfig:
    return load_default_config() if path is None else load_config(path)


@app.command()
def run(
    config: Path = typer.Argument(..., help="Machine configuration file."),
    infile: Optional[Path] = typer.Argument(None, metavar="[INPUT]", help="Messages to process (default: stdin)."),
    outfile: Optional[Path] = typer.Argument(None, metavar="[OUTPUT]", help="Where to write results (default: stdout)."),
):
    """Encrypt/decrypt every message in INPUT with the machine described by CONFIG."""
    try:
        cfg = load_config(config)
        machine = cfg.build_machine()
        lines = sys.stdin.read().splitlines() if infile is None else _read_lines(infile)

        # process everything before writing so an error leaves no partial output file
        results = list(process_messages(cfg, machine, lines))

        text = "\n".join(results) + ("\n" if results else "")
        if outfile is None:
            typer.echo(text, nl=False)
        else:
            _write_text(outfile, text)
    except EnigmaError as e:
        _fail(e)


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        raise ConfigError(f"could not open {path}: {e.strerror}") from e


def _write_text(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"could not open {path}: {e.strerror}") from e


@app.command()
def rotors(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file (default: bundled naval set)."),
):
    """List the rotors a configuration provides."""
    try:
        cfg = _config(config)
    except EnigmaError as e:
        _fail(e)
        return

    typer.echo(f"alphabet: {cfg.alphabet.symbols}  slots={cfg.num_rotors}  pawls={cfg.num_pawls}")
    for r in cfg.rotors:
        typer.echo(f"{r.name:<8} {r.type_token():<6} {r.permutation.cycles()}")


@app.command()
def encode(
    text: str = typer.Argument(..., help="Message to convert."),
    setup: str = typer.Option(
        ..., "--setup", "-s", help="Reset line without the '*', e.g. 'B BETA III IV I AXLE (HQ) (EX)'."
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file (default: bundled naval set)."),
):
    """Convert one message. Encryption and decryption are the same operation."""
    try:
        cfg = _config(config)
        machine = cfg.build_machine()
        apply_reset(machine, parse_reset("* " + setup, cfg.num_rotors))
        result = machine.convert(normalize_line(text))
    except EnigmaError as e:
        _fail(e)
        return

    typer.echo(format_output(result, cfg.upper_case))


def main():
    app()


if __name__ == "__main__":
    main()
