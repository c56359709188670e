"""The pokedex commands and the state they share."""

from __future__ import annotations

import math
import random
import sys
from dataclasses import dataclass, field
from typing import Callable, Protocol, TextIO

from .models import LocationArea, LocationPage, Pokemon


class CommandError(Exception):
    """A command could not be carried out; the message is meant for the user."""


class _Api(Protocol):
    def list_locations(self, page_url: str | None = None) -> LocationPage: ...

    def get_location(self, area: str) -> LocationArea: ...

    def get_pokemon(self, name: str) -> Pokemon: ...


@dataclass
class Config:
    """State shared by the commands of one session."""

    api_client: _Api
    next_page_url: str | None = None
    previous_page_url: str | None = None
    pokedex: dict[str, Pokemon] = field(default_factory=dict)
    out: TextIO | None = None
    rng: random.Random = field(default_factory=random.Random)

    def _say(self, *lines: str) -> None:
        stream = self.out if self.out is not None else sys.stdout
        for line in lines or ("",):
            print(line, file=stream)


@dataclass(frozen=True)
class Command:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def _single_arg(args: tuple[str, ...], message: str) -> str:
    if len(args) != 1:
        raise CommandError(message)
    return args[0]


def _catch_difficulty(base_experience: int) -> float:
    """Chance threshold a throw has to reach; higher experience is harder."""
    if base_experience <= 0:
        return 1.0
    if base_experience == 1:
        return -math.inf
    return 1.0 - 1.0 / math.log10(base_experience)


def command_pokedex(cfg: Config, *args: str) -> None:
    """List every caught Pokémon."""
    if not cfg.pokedex:
        raise CommandError("your pokedex is empty... go catch some pokemon!")
    cfg._say("", "Your Pokedex:")
    for pokemon in cfg.pokedex.values():
        cfg._say(f"  -{pokemon.name} ")
    cfg._say("")


def command_explore(cfg: Config, *args: str) -> None:
    """List the Pokémon that can be met in a location area."""
    area = _single_arg(args, "no location given")
    location = cfg.api_client.get_location(area)
    cfg._say("", "Exploring pastoria-city-area...", "Found Pokemon:")
    for encounter in location.pokemon_encounters:
        cfg._say(" - " + encounter.pokemon.name)
    cfg._say("")


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a Pokeball; on success the Pokémon joins the pokedex."""
    name = _single_arg(args, "no pokemon name given")
    pokemon = cfg.api_client.get_pokemon(name)
    cfg._say("", f"Throwing a Pokeball at {name}...")
    if cfg.rng.random() >= _catch_difficulty(pokemon.base_experience):
        cfg.pokedex[name] = pokemon
        cfg._say(f"{name} was caught!", "You may now inspect it with the inspect command.")
    else:
        cfg._say(f"{name} escaped!")
    cfg._say("")


def command_inspect(cfg: Config, *args: str) -> None:
    """Show the details of a caught Pokémon."""
    name = _single_arg(args, "no pokemon name given")
    pokemon = cfg.pokedex.get(name)
    if pokemon is None:
        raise CommandError("you have not caught that pokemon")
    cfg._say(
        "",
        f"Name: {pokemon.name}",
        f"Height: {pokemon.height}",
        f"Weight: {pokemon.weight}",
        "Stats:",
    )
    for stat in pokemon.stats:
        cfg._say(f"  -{stat.name}: {stat.base_stat}")
    cfg._say("Types:")
    for ptype in pokemon.types:
        cfg._say(f"  - {ptype.name}")
    cfg._say("")


def _show_page(cfg: Config, page_url: str | None) -> None:
    page = cfg.api_client.list_locations(page_url)
    cfg._say("")
    for location in page.results:
        cfg._say(location.name)
    cfg._say("")
    cfg.next_page_url = page.next
    cfg.previous_page_url = page.previous


def command_map(cfg: Config, *args: str) -> None:
    """Show the next page of location areas."""
    if cfg.next_page_url is None and cfg.previous_page_url is not None:
        raise CommandError("you're on the last page")
    _show_page(cfg, cfg.next_page_url)


def command_mapb(cfg: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if cfg.previous_page_url is None:
        raise CommandError("you're on the first page")
    _show_page(cfg, cfg.previous_page_url)


def command_help(cfg: Config, *args: str) -> None:
    """Print the list of commands."""
    cfg._say("", "Welcome to the Pokedex!", "Usage:", "")
    for command in get_commands().values():
        cfg._say(f"{command.name}: {command.description}")
    cfg._say("")


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye and leave the program."""
    cfg._say("", "Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def get_commands() -> dict[str, Command]:
    """Return the commands keyed by the word that starts them."""
    return {
        "pokedex": Command("pokedex", "List caught pokemon", command_pokedex),
        "map": Command("map", "List available locations or navigate to next page", command_map),
        "mapb": Command("mapb", "Navigate to previous page of locations", command_mapb),
        "explore": Command("explore <location_name>", "Explore a location", command_explore),
        "catch": Command("catch <pokemon_name>", "Attempt to catch a Pokemon", command_catch),
        "inspect": Command("inspect <pokemon_name>", "Inspect a caught Pokemon", command_inspect),
        "help": Command("help", "How to use the pokedex", command_help),
        "exit": Command("exit", "Exit the Pokedex", command_exit),
    }