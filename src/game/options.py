# src/game/options.py
"""
Per-session game options and their query-string form.

A GameConfig is picked once before Start and is read-only afterwards. The
query form uses the keys of a shareable link: sprite, bg, pattern, speed.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Mapping
from urllib.parse import parse_qsl, urlencode

from .config import SPEED_UNITS


class Sprite(str, Enum):
    SPACESHIP = "spaceship"   # triangle
    BIRD = "bird"             # circle
    ROBOT = "robot"           # filled square


class Background(str, Enum):
    STARS = "stars"
    CITY = "city"
    GRID = "grid"


class Pattern(str, Enum):
    ASTEROIDS = "asteroids"
    WALLS = "walls"
    BLOCKS = "blocks"


class Speed(str, Enum):
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"

    @property
    def units(self) -> int:
        return SPEED_UNITS[self.value]


# query key -> dataclass field
QUERY_KEYS = {
    "sprite": "sprite",
    "bg": "background",
    "pattern": "pattern",
    "speed": "speed",
}

_FIELD_TYPES = {
    "sprite": Sprite,
    "background": Background,
    "pattern": Pattern,
    "speed": Speed,
}


def _coerce(field: str, value) -> Enum:
    enum_cls = _FIELD_TYPES[field]
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"Invalid {field} {value!r} (expected one of: {allowed})") from None


@dataclass(frozen=True)
class GameConfig:
    sprite: Sprite = Sprite.SPACESHIP
    background: Background = Background.STARS
    pattern: Pattern = Pattern.ASTEROIDS
    speed: Speed = Speed.MEDIUM

    def __post_init__(self):
        # accept plain strings, store enums
        for name in _FIELD_TYPES:
            object.__setattr__(self, name, _coerce(name, getattr(self, name)))

    @property
    def speed_units(self) -> int:
        return self.speed.units

    def with_updates(self, **fields) -> "GameConfig":
        """Copy with the given fields replaced; None values keep the current one."""
        changes = {k: v for k, v in fields.items() if v is not None and v != ""}
        return replace(self, **changes)

    def cycled(self, field: str) -> "GameConfig":
        """Copy with `field` advanced to its next enumerated value (wraps around)."""
        members = list(_FIELD_TYPES[field])
        current = getattr(self, field)
        nxt = members[(members.index(current) + 1) % len(members)]
        return replace(self, **{field: nxt})

    # ---- shareable-link form ----

    @classmethod
    def from_query(cls, query: str | Mapping[str, str], previous: "GameConfig | None" = None) -> "GameConfig":
        """
        Parse `sprite`, `bg`, `pattern`, `speed` from a query string or mapping.
        Unset fields keep the value from `previous` (or the defaults).
        """
        base = previous if previous is not None else cls()
        if isinstance(query, str):
            pairs = dict(parse_qsl(query.lstrip("?"), keep_blank_values=True))
        else:
            pairs = dict(query)
        fields = {QUERY_KEYS[k]: v for k, v in pairs.items() if k in QUERY_KEYS}
        return base.with_updates(**fields)

    def to_query(self) -> str:
        return urlencode({key: getattr(self, field).value for key, field in QUERY_KEYS.items()})
