"""Typed views of the location and Pokémon documents the API returns."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key!r} must be an integer, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string, got {value!r}")
    return value


def _opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string or null, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{key!r} must be a boolean, got {value!r}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{key!r} must be an array, got {value!r}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the resource it refers to."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "NamedResource":
        data = _mapping(data, "resource")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "LocationPage":
        data = _mapping(data, "location page")
        return cls(
            count=_int(data, "count"),
            next=_opt_str(data, "next"),
            previous=_opt_str(data, "previous"),
            results=[NamedResource.from_dict(r) for r in _list(data, "results")],
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A Pokémon that can be met in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> "PokemonEncounter":
        data = _mapping(data, "encounter")
        return cls(pokemon=NamedResource.from_dict(data.get("pokemon")))


@dataclass(frozen=True)
class LocationArea:
    """A single location area and the Pokémon found there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[PokemonEncounter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "LocationArea":
        data = _mapping(data, "location area")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            game_index=_int(data, "game_index"),
            location=NamedResource.from_dict(data.get("location")),
            pokemon_encounters=[
                PokemonEncounter.from_dict(e) for e in _list(data, "pokemon_encounters")
            ],
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokémon."""

    stat: NamedResource = field(default_factory=NamedResource)
    base_stat: int = 0
    effort: int = 0

    @property
    def name(self) -> str:
        return self.stat.name

    @classmethod
    def from_dict(cls, data: Any) -> "PokemonStat":
        data = _mapping(data, "stat")
        return cls(
            stat=NamedResource.from_dict(data.get("stat")),
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
        )


@dataclass(frozen=True)
class PokemonType:
    """A type slot of a Pokémon."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @property
    def name(self) -> str:
        return self.type.name

    @classmethod
    def from_dict(cls, data: Any) -> "PokemonType":
        data = _mapping(data, "type")
        return cls(slot=_int(data, "slot"), type=NamedResource.from_dict(data.get("type")))


@dataclass(frozen=True)
class Pokemon:
    """The parts of a Pokémon document the pokedex uses."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    is_default: bool = False
    order: int = 0
    species: NamedResource = field(default_factory=NamedResource)
    forms: list[NamedResource] = field(default_factory=list)
    location_area_encounters: str = ""
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Pokemon":
        data = _mapping(data, "pokemon")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            is_default=_bool(data, "is_default"),
            order=_int(data, "order"),
            species=NamedResource.from_dict(data.get("species")),
            forms=[NamedResource.from_dict(f) for f in _list(data, "forms")],
            location_area_encounters=_str(data, "location_area_encounters"),
            stats=[PokemonStat.from_dict(s) for s in _list(data, "stats")],
            types=[PokemonType.from_dict(t) for t in _list(data, "types")],
        )