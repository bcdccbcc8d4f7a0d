# aoclient

The client-side workings of an online courtroom drama role-playing game,
as a plain Python package with no third-party dependencies.

## What is in it

- `aoclient.settings.IniSettings`: key/value settings kept in an INI file.
  A key such as `"visuals/playerlist_format"` lives in the `[visuals]`
  section, and a key with no group lives in `[General]`. Every change is
  written to the file at once.
- `aoclient.options.Options`: the user's configuration in `config.ini` and
  the favourite servers in `favorite_servers.ini`, both under the game's
  `base/` folder. Settings are attributes (`theme`, `music_volume`,
  `callwords`, `sub_theme`, ...). It moves older keys and an old
  `callwords.ini` file into the current format. Favourites are handled with
  `favorites()`, `set_favorites()`, `add_favorite()`, `update_favorite()`
  and `remove_favorite()`. It also looks up theme UI files with
  `get_ui_asset()` and stores window positions.
- `aoclient.serverinfo.ServerInfo`: a server entry (name, description,
  address, port, legacy flag).
- `aoclient.inventory`: `EvidenceItem`, `evidence_changed()`, and
  `load_inventory()` / `save_inventory()` for private evidence inventories
  stored as `.ini` files.
- `aoclient.evidence.EvidenceLocker`: the global and private evidence
  lists, switching between them, adding, editing, deleting, transferring,
  presenting and paging. Changes to global evidence go out through a
  callback you pass in as `(header, contents)`, for example
  `("PE", [name, description, image])`; private evidence can be autosaved
  to a file.
- `aoclient.emotes.EmoteSelector`: the selected emote, the shown page and
  the preanimation toggle.
- `aoclient.paging`: `page_layout()`, `grid_size()` and
  `button_positions()` for paged grids of buttons.
- `aoclient.lobby_text`: `format_server_description()` (HTML with line
  breaks and clickable links), `player_count_text()`, `parse_version()`,
  `is_outdated()` and `filter_servers()`.
- `aoclient.moderation`: `moderator_call_title()` and `validate_reason()`,
  which raises `ValueError` for an empty reason or one longer than 255
  characters.
- `aoclient.hardware.get_hdid()`: a best-effort identifier of the machine
  or user.
- `aoclient.file_functions`: `file_exists()`, `dir_exists()`, `exists()`,
  `get_app_path()` and `get_base_path()`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Server entries print the way they are listed:

```python
from aoclient.serverinfo import ServerInfo

server = ServerInfo(name="Test Court", address="127.0.0.1", port=27016)
print(server)  # Test Court (127.0.0.1:27016)
```

Private evidence inventories are ordinary `.ini` files with one numbered
section per piece of evidence:

```python
from aoclient.inventory import EvidenceItem, load_inventory, save_inventory

items = [EvidenceItem(name="Knife", description="Found at the scene.", image="knife.png")]
save_inventory("inventories/case1.ini", items)
assert load_inventory("inventories/case1.ini") == items
```

Paging for the emote and evidence grids:

```python
from aoclient.paging import page_layout

layout = page_layout(total=23, per_page=10, current_page=2)
print(layout.items_on_page, layout.show_left, layout.show_right)  # 3 True False
```

Configuration and favourites:

```python
from aoclient.options import Options
from aoclient.serverinfo import ServerInfo

options = Options(base_path="base/")
options.music_volume = 70
options.add_favorite(ServerInfo(name="Local", address="127.0.0.1", port=27016))
print(options.favorites())
```

## What it does not do

This package is a library only. It has no command to start a client, no
windows or lobby screen, no audio, and no network code: it does not fetch
the server list from a master server, send heartbeats, connect to game
servers or publish chat-app presence. Those parts are left to whatever
program uses these modules.