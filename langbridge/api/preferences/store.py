"""Per-user UI theme preference with pluggable persistence.

``ThemeStore`` validates and namespaces; a backend only needs ``get`` and
``set`` on string keys. ``InMemoryThemeBackend`` keeps values for the life of
the process, ``RedisThemeBackend`` persists them in Redis.
"""

from typing import Dict, Optional

from langbridge.core.exceptions import InvalidArgumentError

THEMES = (
    "light",
    "dark",
    "cupcake",
    "bumblebee",
    "emerald",
    "corporate",
    "synthwave",
    "retro",
    "cyberpunk",
    "valentine",
    "halloween",
    "garden",
    "forest",
    "aqua",
    "lofi",
    "pastel",
    "fantasy",
    "wireframe",
    "black",
    "luxury",
    "dracula",
    "cmyk",
    "autumn",
    "business",
    "acid",
    "lemonade",
    "night",
    "coffee",
    "winter",
    "dim",
    "nord",
    "sunset",
)


class InMemoryThemeBackend:
    def __init__(self):
        self._values: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class RedisThemeBackend:
    def __init__(self, client):
        self._client = client

    def get(self, key: str) -> Optional[str]:
        value = self._client.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        self._client.set(key, value)


class ThemeStore:
    def __init__(self, backend=None, default_theme: str = "forest", prefix: str = "ChatApp"):
        if default_theme not in THEMES:
            raise ValueError(f"Unknown default theme {default_theme!r}")
        self._backend = backend if backend is not None else InMemoryThemeBackend()
        self.default_theme = default_theme
        self._prefix = prefix

    def _key(self, owner: str) -> str:
        return f"{self._prefix}:{owner}"

    def get_theme(self, owner: str) -> str:
        """Return the stored theme, or the default when none was set."""
        return self._backend.get(self._key(owner)) or self.default_theme

    def set_theme(self, owner: str, theme: str) -> str:
        if theme not in THEMES:
            raise InvalidArgumentError("Invalid theme")
        self._backend.set(self._key(owner), theme)
        return theme
