"""
Configuration schema for the wipe view.

This module defines the visual style of the wipe (handle, icon, divider,
initial progress) and the inputs of a comparison (image paths, output
resolution). Both are immutable and validated at construction.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Tuple
import supervision as sv
import yaml

from slidewipe_view.geometry.engine import clamp_progress


def parse_color(value: str, name: str) -> sv.Color:
    """
    Parse a hex color string ("#RRGGBB", "RRGGBB" or "#RGB").

    Raises:
        ValueError: If the string is not a valid hex color
    """
    try:
        return sv.Color.from_hex(value)
    except (AttributeError, TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a hex color, got {value!r}") from e


@dataclass(frozen=True)
class WipeStyle:
    """
    Visual options of the wipe view.

    Defaults match the stock look: white handle of 44 px with a gray icon of
    22 px, white 2 px divider, progress starting at the middle.

    initial_progress is clamped to [0, 1], not rejected.
    """

    indicator_image: Optional[Path] = None  # None = built-in diagonal arrows
    indicator_image_width: int = 22
    indicator_image_color: str = "#808080"
    indicator_color: str = "#FFFFFF"
    indicator_width: int = 44
    divider_color: str = "#FFFFFF"
    divider_width: int = 2
    initial_progress: float = 0.5

    def __post_init__(self):
        """Validate style configuration."""
        object.__setattr__(self, 'initial_progress', clamp_progress(self.initial_progress))

        if self.indicator_image is not None and not isinstance(self.indicator_image, Path):
            object.__setattr__(self, 'indicator_image', Path(self.indicator_image))

        for name in ("indicator_image_width", "indicator_width", "divider_width"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

        if self.indicator_image_width > self.indicator_width > 0:
            raise ValueError(
                f"indicator_image_width ({self.indicator_image_width}) must not exceed "
                f"indicator_width ({self.indicator_width})"
            )

        for name in ("indicator_image_color", "indicator_color", "divider_color"):
            parse_color(getattr(self, name), name)

    @property
    def indicator_image_sv_color(self) -> sv.Color:
        return parse_color(self.indicator_image_color, "indicator_image_color")

    @property
    def indicator_sv_color(self) -> sv.Color:
        return parse_color(self.indicator_color, "indicator_color")

    @property
    def divider_sv_color(self) -> sv.Color:
        return parse_color(self.divider_color, "divider_color")

    def replace(self, **changes) -> "WipeStyle":
        """Copy with some fields changed (validated again)."""
        return replace(self, **changes)


@dataclass(frozen=True)
class WipeConfig:
    """
    Inputs of one comparison.

    lhs_path is the masked image (revealed below the cut line), rhs_path the
    base image. frame_resolution_wh overrides the output size; by default the
    lhs image size is used.
    """

    lhs_path: Path
    rhs_path: Path
    frame_resolution_wh: Optional[Tuple[int, int]] = None
    style: WipeStyle = field(default_factory=WipeStyle)

    def __post_init__(self):
        """Validate comparison configuration."""
        for name in ("lhs_path", "rhs_path"):
            path = Path(getattr(self, name))
            object.__setattr__(self, name, path)
            if not path.exists():
                raise FileNotFoundError(f"{name} not found: {path}")

        if self.frame_resolution_wh is not None:
            width, height = self.frame_resolution_wh
            if width <= 0 or height <= 0:
                raise ValueError(
                    f"frame_resolution_wh must have positive dimensions, got {self.frame_resolution_wh}"
                )
            object.__setattr__(self, 'frame_resolution_wh', (int(width), int(height)))

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "WipeConfig":
        """
        Load configuration from YAML file.

        Relative image paths are resolved against the YAML file's directory.

        Example YAML:
            lhs_path: "images/before.jpg"
            rhs_path: "images/after.jpg"
            frame_resolution_wh: [1280, 720]  # optional

            style:
              indicator_color: "#FFFFFF"
              indicator_image_color: "#000000"
              divider_color: "#FFFFFF"
              divider_width: 2
              initial_progress: 0.3

        Raises:
            FileNotFoundError: If the YAML or an image file is missing
            ValueError: If the YAML is invalid or a value fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        base_dir = path.parent

        def resolve(value: Optional[str]) -> Optional[Path]:
            if value is None:
                return None
            candidate = Path(value)
            return candidate if candidate.is_absolute() else base_dir / candidate

        style_data = dict(data.get("style") or {})
        if style_data.get("indicator_image") is not None:
            style_data["indicator_image"] = resolve(style_data["indicator_image"])
        try:
            style = WipeStyle(**style_data)
        except TypeError as e:
            raise ValueError(f"Invalid style section in {path}: {e}")

        try:
            lhs_path = resolve(data["lhs_path"])
            rhs_path = resolve(data["rhs_path"])
        except KeyError as e:
            raise ValueError(f"Missing required config field: {e}")

        frame_resolution_data = data.get("frame_resolution_wh")
        frame_resolution_wh = tuple(frame_resolution_data) if frame_resolution_data else None

        return cls(
            lhs_path=lhs_path,
            rhs_path=rhs_path,
            frame_resolution_wh=frame_resolution_wh,
            style=style,
        )
