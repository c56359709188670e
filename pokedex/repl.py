"""The interactive prompt of the pokedex."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .client import ApiError, Client
from .commands import CommandError, Config, get_commands


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words on whitespace."""
    return text.lower().split()


def run(cfg: Config, stdin: TextIO | None = None) -> None:
    """Read commands from ``stdin`` and run them until input ends."""
    source = stdin if stdin is not None else sys.stdin
    out = cfg.out if cfg.out is not None else sys.stdout
    commands = get_commands()
    while True:
        print("Pokedex > ", end="", file=out)
        out.flush()
        line = source.readline()
        if not line:
            return
        words = clean_input(line)
        if not words:
            print("No command given", file=out)
            continue
        name, *args = words
        command = commands.get(name)
        if command is None:
            print("Unknown command", file=out)
            continue
        try:
            command.callback(cfg, *args)
        except (CommandError, ApiError) as exc:
            print(exc, file=out)


def main(argv: list[str] | None = None) -> int:
    """Start an interactive pokedex session on standard input."""
    parser = argparse.ArgumentParser(prog="pokedex", description="An interactive Pokedex.")
    parser.parse_args(argv)
    with Client(timeout=5.0, cache_interval=300.0) as client:
        run(Config(api_client=client), sys.stdin)
    return 0