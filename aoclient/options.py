"""User configuration stored in ``config.ini`` and ``favorite_servers.ini``."""

from __future__ import annotations

import locale
import logging
import os
from typing import Any, Callable, Optional, Union

from aoclient.file_functions import get_base_path
from aoclient.serverinfo import ServerInfo
from aoclient.settings import IniSettings

log = logging.getLogger(__name__)

_CASING_KEYS = (
    "casing_enabled",
    "casing_defence_enabled",
    "casing_prosecution_enabled",
    "casing_judge_enabled",
    "casing_juror_enabled",
    "casing_steno_enabled",
    "casing_cm_enabled",
    "casing_can_host_cases",
)


def _system_locale_name() -> str:
    """Return the system locale name, e.g. ``en_US``."""
    try:
        name = locale.getlocale()[0]
    except ValueError:
        name = None
    return name or "C"


class _Setting:
    """A configuration value exposed as an attribute of :class:`Options`."""

    def __init__(self, key: str, default: Union[Any, Callable[[], Any]]) -> None:
        self.key = key
        self._default = default

    @property
    def default(self) -> Any:
        return self._default() if callable(self._default) else self._default

    def __get__(self, obj: Optional["Options"], objtype=None) -> Any:
        if obj is None:
            return self
        return obj.config.value(self.key, self.default)

    def __set__(self, obj: "Options", value: Any) -> None:
        obj.config.set_value(self.key, value)


class Options:
    """The client's persistent configuration and favourite servers."""

    theme = _Setting("theme", "AceAttorney2x")
    blip_rate = _Setting("blip_rate", 2)
    music_volume = _Setting("default_music", 50)
    sfx_volume = _Setting("default_sfx", 50)
    blip_volume = _Setting("default_blip", 50)
    default_suppress_audio = _Setting("suppress_audio", 50)
    max_log_size = _Setting("log_maximum", 200)
    text_stay_time = _Setting("stay_time", 200)
    text_crawl_speed = _Setting("text_crawl", 40)
    chat_rate_limit = _Setting("chat_ratelimit", 300)
    log_direction_downwards = _Setting("log_goes_downwards", True)
    log_newline = _Setting("log_newline", False)
    log_margin = _Setting("log_margin", 0)
    log_timestamp_enabled = _Setting("log_timestamp", False)
    log_timestamp_format = _Setting("log_timestamp_format", "h:mm:ss AP")
    log_ic_actions = _Setting("log_ic_actions", True)
    custom_showname_enabled = _Setting("show_custom_shownames", True)
    username = _Setting("default_username", "")
    showname_on_join = _Setting("default_showname", "")
    audio_output_device = _Setting("default_audio_device", "default")
    blank_blip = _Setting("blank_blip", False)
    looping_sfx = _Setting("looping_sfx", True)
    objection_stop_music = _Setting("objection_stop_music", False)
    streaming_enabled = _Setting("streaming_enabled", True)
    objection_skip_queue_enabled = _Setting("instant_objection", True)
    desynchronised_logs_enabled = _Setting("desync_logs", False)
    discord_enabled = _Setting("discord", True)
    shake_enabled = _Setting("shake", True)
    effects_enabled = _Setting("effects", True)
    networked_frame_sfx_enabled = _Setting("framenetwork", True)
    slides_enabled = _Setting("slides", True)
    color_log_enabled = _Setting("colorlog", True)
    clear_sounds_dropdown_on_play_enabled = _Setting("stickysounds", True)
    clear_effects_dropdown_on_play_enabled = _Setting("stickyeffects", True)
    clear_pre_on_play_enabled = _Setting("stickypres", True)
    custom_chatbox_enabled = _Setting("customchat", True)
    character_sticker_enabled = _Setting("sticker", True)
    continuous_playback_enabled = _Setting("continuous_playback", True)
    stop_music_on_category_enabled = _Setting("category_stop", True)
    log_to_text_file_enabled = _Setting("automatic_logging_enabled", True)
    log_to_demo_file_enabled = _Setting("demo_logging_enabled", True)
    settings_sub_theme = _Setting("subtheme", "server")
    animated_theme_enabled = _Setting("animated_theme", False)
    mount_paths = _Setting("mount_paths", [])
    player_count_optout = _Setting("player_count_optout", False)
    play_selected_sfx_on_idle = _Setting("sfx_on_idle", False)
    evidence_double_click_edit = _Setting("evidence_double_click", True)
    alternative_masterserver = _Setting("master", "")
    language = _Setting("language", _system_locale_name)
    playerlist_format_string = _Setting(
        "visuals/playerlist_format", "[{id}] {character} {displayname} {username}"
    )
    restore_window_position_enabled = _Setting("windows/restore", True)

    def __init__(self, base_path: Optional[str] = None, resource_root: Optional[str] = None) -> None:
        self.base_path = base_path if base_path is not None else get_base_path()
        if resource_root is None:
            resource_root = os.path.dirname(os.path.normpath(self.base_path))
        self.resource_root = resource_root
        self.server_sub_theme = ""
        self.config = IniSettings(os.path.join(self.base_path, "config.ini"))
        self.favorite = IniSettings(os.path.join(self.base_path, "favorite_servers.ini"))
        self.migrate()

    def _migrate_callwords(self) -> None:
        path = os.path.join(self.base_path, "callwords.ini")
        try:
            with open(path, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError:
            log.warning("Unable to migrate callwords : File not open.")
            return
        os.remove(path)
        self.callwords = lines

    def migrate(self) -> None:
        """Bring old configuration keys and files up to the current format."""
        if os.path.exists(os.path.join(self.base_path, "callwords.ini")):
            self._migrate_callwords()
        if self.config.contains("ooc_name"):
            if not self.username:
                self.config.set_value("default_username", self.config.value("ooc_name", ""))
            self.config.remove("ooc_name")
        if self.config.contains("casing_enabled"):
            for key in _CASING_KEYS:
                self.config.remove(key)

    @property
    def sub_theme(self) -> str:
        """The active sub-theme; a server-chosen one wins when set to ``server``."""
        configured = self.settings_sub_theme
        if configured == "server" and self.server_sub_theme:
            return self.server_sub_theme
        return configured

    @property
    def theme_scaling_factor(self) -> int:
        value = self.config.value("theme_scaling_factor", 1)
        return value if value > 0 else 1

    @theme_scaling_factor.setter
    def theme_scaling_factor(self, value: int) -> None:
        self.config.set_value("theme_scaling_factor", value)

    @property
    def callwords(self) -> list[str]:
        words = self.config.value("callwords", [])
        if len(words) == 1 and not words[0]:
            return []
        return words

    @callwords.setter
    def callwords(self, value: list[str]) -> None:
        self.config.set_value("callwords", list(value))

    def clear_config(self) -> None:
        """Forget every configuration value, restoring the defaults."""
        self.config.clear()

    def _favorite_groups(self) -> list[str]:
        groups = []
        for name in self.favorite.child_groups():
            try:
                number = int(name)
            except ValueError:
                continue
            if number >= 0:
                groups.append((number, name))
        return [name for _, name in sorted(groups)]

    def favorites(self) -> list[ServerInfo]:
        """Return the favourite servers in their stored order."""
        servers = []
        for name in self._favorite_groups():
            group = self.favorite.group(name)
            if group.contains("protocol"):
                legacy = group.value("protocol", "") == "tcp"
            else:
                legacy = group.value("legacy", False)
            servers.append(
                ServerInfo(
                    name=group.value("name", "Missing Name"),
                    description=group.value("desc", "No description"),
                    address=group.value("address", "127.0.0.1"),
                    port=group.value("port", 27016),
                    legacy=legacy,
                )
            )
        return servers

    def _write_favorite(self, index: int, server: ServerInfo) -> None:
        group = self.favorite.group(str(index))
        group.set_value("name", server.name)
        group.set_value("address", server.address)
        group.set_value("port", server.port)
        group.set_value("desc", server.description)
        group.set_value("legacy", server.legacy)

    def set_favorites(self, servers: list[ServerInfo]) -> None:
        """Replace every favourite with ``servers``."""
        self.favorite.clear()
        for index, server in enumerate(servers):
            self._write_favorite(index, server)
        self.favorite.sync()

    def remove_favorite(self, index: int) -> None:
        servers = self.favorites()
        if not 0 <= index < len(servers):
            raise IndexError(f"no favourite server at index {index}")
        del servers[index]
        self.set_favorites(servers)

    def add_favorite(self, server: ServerInfo) -> None:
        self._write_favorite(len(self.favorites()), server)
        self.favorite.sync()

    def update_favorite(self, server: ServerInfo, index: int) -> None:
        self._write_favorite(index, server)
        self.favorite.sync()

    def get_ui_asset(self, asset_name: str) -> str:
        """Return the path of a theme UI file, falling back to the built-in one."""
        themes = os.path.join(self.resource_root, "base", "themes", self.theme)
        candidates = [os.path.join(themes, asset_name)]
        sub_theme = self.sub_theme
        if sub_theme == "server":
            if not self.server_sub_theme:
                candidates.insert(0, os.path.join(themes, self.server_sub_theme, asset_name))
        else:
            candidates.insert(0, os.path.join(themes, sub_theme, asset_name))

        for path in candidates:
            if os.path.exists(path):
                return path
        log.warning(
            "Unable to locate ui-asset %s in theme %s Defaulting to embedded asset.",
            asset_name,
            self.theme,
        )
        return os.path.join(self.resource_root, "data", "ui", asset_name)

    def set_window_position(self, widget: str, position: tuple[int, int]) -> None:
        x, y = position
        self.config.set_value("windows/position_" + widget, (int(x), int(y)))

    def window_position(self, widget: str) -> Optional[tuple[int, int]]:
        """Return the saved position of ``widget``, or None if there is none."""
        point = self.config.value("windows/position_" + widget, (0, 0))
        if point == (0, 0):
            return None
        return point