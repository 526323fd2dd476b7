"""Default pen and drawing settings for turtles.

Settings can be kept in a small YAML document::

    pen_width: 2.0
    pen_height: 2.0
    pen_color: [255, 128, 0]     # or a packed 0xAARRGGBB integer
    pen_line: box                # or "line"
    pen_down: true
    dot_scale: 1.5
    mark_weight: 2.0
    circle_segments: 32
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping

from turtle3d.colors import WHITE, color, iscolor
from turtle3d.errors import check_pen_size
from turtle3d.geom import isfinitenum


class PenLine(Enum):
    """Shape used to render a forward step."""

    LINE = "line"
    BOX = "box"

    @classmethod
    def coerce(cls, value) -> "PenLine":
        if isinstance(value, PenLine):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ValueError(f"bad pen line mode: {value!r}")


@dataclass(frozen=True)
class TurtleConfig:
    """Defaults applied to newly created turtles."""

    pen_width: float = 1.0
    pen_height: float = 1.0
    pen_color: int = WHITE
    pen_line: PenLine = PenLine.BOX
    pen_down: bool = True
    dot_scale: float = 1.5
    mark_weight: float = 2.0
    circle_segments: int = 32

    def __post_init__(self) -> None:
        check_pen_size(self.pen_width)
        check_pen_size(self.pen_height)
        if not iscolor(self.pen_color):
            raise ValueError(f"bad pen color: {self.pen_color!r}")
        if not isinstance(self.pen_line, PenLine):
            object.__setattr__(self, "pen_line", PenLine.coerce(self.pen_line))
        if not isinstance(self.pen_down, bool):
            raise ValueError(f"pen_down must be a boolean, got {self.pen_down!r}")
        for name in ("dot_scale", "mark_weight"):
            value = getattr(self, name)
            if not isfinitenum(value) or value <= 0:
                raise ValueError(f"{name} must be a positive number, got {value!r}")
        if isinstance(self.circle_segments, bool) or not isinstance(self.circle_segments, int) \
                or self.circle_segments < 3:
            raise ValueError(f"circle_segments must be an integer >= 3, got {self.circle_segments!r}")

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["pen_line"] = self.pen_line.value
        return data

    def updated(self, **changes: Any) -> "TurtleConfig":
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "TurtleConfig":
        known = {f.name for f in fields(cls)}
        unknown = [key for key in raw if key not in known]
        if unknown:
            raise ValueError(f"unknown turtle settings: {', '.join(sorted(unknown))}")
        data = dict(raw)
        if "pen_color" in data and isinstance(data["pen_color"], (list, tuple)):
            data["pen_color"] = color(*data["pen_color"])
        return cls(**data)


DEFAULT_CONFIG = TurtleConfig()


def load_config(path: Path | str) -> TurtleConfig:
    """Load turtle defaults from a YAML file."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"turtle config not found: {config_path}")
    import yaml

    with config_path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"turtle config must be a mapping, got {type(data)!r}")
    return TurtleConfig.from_dict(data)


def save_config(config: TurtleConfig, path: Path | str) -> None:
    import yaml

    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as fp:
        yaml.safe_dump(config.to_dict(), fp, sort_keys=False)
