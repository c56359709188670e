import io

import pytest

from pokedex.commands import (
    Command,
    CommandError,
    Config,
    command_catch,
    command_exit,
    command_explore,
    command_help,
    command_inspect,
    command_map,
    command_mapb,
    command_pokedex,
    get_commands,
)
from pokedex.models import LocationArea, LocationPage, Pokemon

PAGE1 = LocationPage.from_dict(
    {
        "count": 3,
        "next": "page2",
        "previous": None,
        "results": [{"name": "canalave-city-area", "url": "u1"}, {"name": "eterna-city-area", "url": "u2"}],
    }
)
PAGE2 = LocationPage.from_dict(
    {
        "count": 3,
        "next": None,
        "previous": "page1",
        "results": [{"name": "pastoria-city-area", "url": "u3"}],
    }
)

PIKACHU = {
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": ""}},
        {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": ""}},
    ],
    "types": [{"slot": 1, "type": {"name": "electric", "url": ""}}],
}


class FakeApi:
    def __init__(self, pokemon=None):
        self.calls = []
        self.pokemon = pokemon or {}

    def list_locations(self, page_url=None):
        self.calls.append(page_url)
        return {None: PAGE1, "page1": PAGE1, "page2": PAGE2}[page_url]

    def get_location(self, area):
        self.calls.append(area)
        return LocationArea.from_dict(
            {
                "name": area,
                "pokemon_encounters": [
                    {"pokemon": {"name": "tentacool", "url": ""}},
                    {"pokemon": {"name": "magikarp", "url": ""}},
                ],
            }
        )

    def get_pokemon(self, name):
        self.calls.append(name)
        return Pokemon.from_dict(self.pokemon[name])


class FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def make_cfg(api=None, rng_value=0.5):
    return Config(api_client=api or FakeApi(), out=io.StringIO(), rng=FixedRng(rng_value))


def lines(cfg):
    return cfg.out.getvalue().splitlines()


def test_pokedex_empty_raises():
    cfg = make_cfg()
    with pytest.raises(CommandError, match="your pokedex is empty"):
        command_pokedex(cfg)


def test_pokedex_lists_caught():
    cfg = make_cfg()
    cfg.pokedex["pikachu"] = Pokemon.from_dict(PIKACHU)
    command_pokedex(cfg)
    assert lines(cfg) == ["", "Your Pokedex:", "  -pikachu ", ""]


def test_explore_requires_one_arg():
    cfg = make_cfg()
    with pytest.raises(CommandError, match="no location given"):
        command_explore(cfg)
    with pytest.raises(CommandError):
        command_explore(cfg, "a", "b")


def test_explore_lists_encounters():
    api = FakeApi()
    cfg = make_cfg(api)
    command_explore(cfg, "pastoria-city-area")
    assert api.calls == ["pastoria-city-area"]
    out = lines(cfg)
    assert " - tentacool" in out
    assert out.index(" - tentacool") < out.index(" - magikarp")
    assert "Found Pokemon:" in out


def test_catch_requires_name():
    with pytest.raises(CommandError, match="no pokemon name given"):
        command_catch(make_cfg())


def test_catch_with_minimal_experience_always_succeeds():
    api = FakeApi({"weakling": {**PIKACHU, "name": "weakling", "base_experience": 1}})
    cfg = make_cfg(api, rng_value=0.0)
    command_catch(cfg, "weakling")
    assert "weakling" in cfg.pokedex
    assert "weakling was caught!" in lines(cfg)


def test_catch_with_zero_experience_always_escapes():
    api = FakeApi({"ghost": {**PIKACHU, "name": "ghost", "base_experience": 0}})
    cfg = make_cfg(api, rng_value=0.999999)
    command_catch(cfg, "ghost")
    assert cfg.pokedex == {}
    assert "ghost escaped!" in lines(cfg)


def test_catch_harder_with_more_experience():
    api = FakeApi(
        {
            "easy": {**PIKACHU, "name": "easy", "base_experience": 50},
            "hard": {**PIKACHU, "name": "hard", "base_experience": 600},
        }
    )
    caught = {}
    for value in (0.0, 0.2, 0.4, 0.6, 0.8, 0.99):
        for name in ("easy", "hard"):
            cfg = make_cfg(api, rng_value=value)
            command_catch(cfg, name)
            caught[(name, value)] = name in cfg.pokedex
    for value in (0.0, 0.2, 0.4, 0.6, 0.8, 0.99):
        assert caught[("easy", value)] >= caught[("hard", value)]
    assert caught[("easy", 0.99)] is True
    assert caught[("hard", 0.0)] is False


def test_inspect_unknown_raises():
    with pytest.raises(CommandError, match="you have not caught that pokemon"):
        command_inspect(make_cfg(), "pikachu")


def test_inspect_prints_details():
    cfg = make_cfg()
    cfg.pokedex["pikachu"] = Pokemon.from_dict(PIKACHU)
    command_inspect(cfg, "pikachu")
    assert lines(cfg) == [
        "",
        "Name: pikachu",
        "Height: 4",
        "Weight: 60",
        "Stats:",
        "  -hp: 35",
        "  -attack: 55",
        "Types:",
        "  - electric",
        "",
    ]


def test_map_pagination():
    api = FakeApi()
    cfg = make_cfg(api)
    command_map(cfg)
    assert cfg.next_page_url == "page2"
    assert cfg.previous_page_url is None
    command_map(cfg)
    assert cfg.next_page_url is None
    assert cfg.previous_page_url == "page1"
    assert api.calls == [None, "page2"]
    assert "pastoria-city-area" in lines(cfg)
    with pytest.raises(CommandError, match="you're on the last page"):
        command_map(cfg)
    command_mapb(cfg)
    assert api.calls[-1] == "page1"
    assert cfg.next_page_url == "page2"


def test_mapb_on_first_page_raises():
    with pytest.raises(CommandError, match="you're on the first page"):
        command_mapb(make_cfg())


def test_help_lists_every_command():
    cfg = make_cfg()
    command_help(cfg)
    out = lines(cfg)
    assert "Welcome to the Pokedex!" in out
    for command in get_commands().values():
        assert f"{command.name}: {command.description}" in out
    assert "explore <location_name>: Explore a location" in out


def test_exit_raises_system_exit():
    cfg = make_cfg()
    with pytest.raises(SystemExit) as info:
        command_exit(cfg)
    assert info.value.code == 0
    assert "Closing the Pokedex... Goodbye!" in lines(cfg)


def test_get_commands_keys_and_callbacks():
    commands = get_commands()
    assert set(commands) == {"pokedex", "map", "mapb", "explore", "catch", "inspect", "help", "exit"}
    assert commands["catch"] == Command("catch <pokemon_name>", "Attempt to catch a Pokemon", command_catch)