# pokedex

An interactive Pokedex for the terminal. Browse location areas, explore them to
see which Pokemon live there, try to catch them, and inspect the ones you have
caught. Data comes from the public PokeAPI over HTTP, using only the Python
standard library.

Raw responses are kept in an in-memory cache keyed by URL. A background thread
runs every five minutes and drops every entry that is at least five minutes old.
A page you revisit in the meantime is not fetched again.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
pokedex
```

This starts a prompt that reads commands from standard input:

```
Pokedex > 
```

Input is lower-cased and split on whitespace. The first word is the command and
the rest are its arguments. An empty line prints `No command given`, and an
unrecognised word prints `Unknown command`. When a command fails, for example
because a request to the API failed or an argument is missing, its message is
printed and the prompt comes back. The session ends with `exit` or at the end
of input.

## Commands

| Command                   | What it does                                        |
|---------------------------|-----------------------------------------------------|
| `help`                    | How to use the pokedex                              |
| `map`                     | List available locations or navigate to next page   |
| `mapb`                    | Navigate to previous page of locations              |
| `explore <location_name>` | Explore a location                                  |
| `catch <pokemon_name>`    | Attempt to catch a Pokemon                          |
| `inspect <pokemon_name>`  | Inspect a caught Pokemon                            |
| `pokedex`                 | List caught pokemon                                 |
| `exit`                    | Exit the Pokedex                                    |

The first `map` shows the first 20 location areas. Each further `map` moves
forward a page and `mapb` moves back. `map` on the last page prints
`you're on the last page`. `mapb` on the first page, or before any `map`,
prints `you're on the first page`.

`explore`, `catch` and `inspect` each take exactly one argument.

A catch attempt can fail. Pokemon with more base experience are harder to
catch. Only caught Pokemon can be inspected. Inspecting one shows its name,
height, weight, base stats and types. `pokedex` lists the caught Pokemon, or
says the pokedex is empty.

## Example session

```
Pokedex > map
Pokedex > explore pastoria-city-area
Pokedex > catch tentacool
Pokedex > inspect tentacool
Pokedex > pokedex
Pokedex > exit
```

## Using it as a library

The HTTP client can be used on its own. It is a context manager, and leaving
the block stops the cache's background thread:

```python
from pokedex.client import Client

with Client(timeout=5.0, cache_interval=300.0) as client:
    page = client.list_locations(None)
    for area in page.results:
        print(area.name)
    pokemon = client.get_pokemon("pikachu")
    print(pokemon.name, pokemon.base_experience)
```

- `Client.list_locations(page_url)` returns a `LocationPage` with `count`,
  `next`, `previous` and `results`. With `None` it returns the first page.
- `Client.get_location(area)` returns a `LocationArea` with its
  `pokemon_encounters`.
- `Client.get_pokemon(name)` returns a `Pokemon` with its `height`, `weight`,
  `base_experience`, `stats`, `types` and other fields.
- `Client` also takes a `fetch` callable, `fetch(url, timeout) -> bytes`, which
  replaces the HTTP request, for example in tests.

If a request fails, or its response cannot be decoded, `pokedex.client.ApiError`
is raised. The classes above live in `pokedex.models`. Each of them has a
`from_dict` class method that builds it from a decoded JSON object.

`pokedex.cache.Cache(interval)` is a thread-safe store mapping keys to bytes.
`add(key, val)` stores a value and `get(key)` returns it, or `None` if the key
is absent. A background thread removes entries at least `interval` seconds old
every `interval` seconds. `reap()` does the same at once. `close()` stops the
thread, and the cache is also a context manager.

The session state lives in `pokedex.commands.Config`. The prompt loop is
`pokedex.repl.run(cfg, stdin)`.

## What it does not do

Caught Pokemon are kept in memory only. The pokedex is empty each time the
program starts and is lost when it exits. The cache is not stored on disk
either.