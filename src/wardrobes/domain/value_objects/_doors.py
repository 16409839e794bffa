"""Door style variants.

A door style is one of four closed variants. Leaf and handle counts are
derived from the variant itself, so every consumer handles all of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DOOR_OPTIONS: tuple[str, ...] = (
    "none",
    "left",
    "right",
    "double",
    "leftMirror",
    "rightMirror",
    "doubleMirror",
    "drawerStyle",
)


@dataclass(frozen=True)
class NoDoor:
    """Open compartment."""


@dataclass(frozen=True)
class SingleDoor:
    """One hinged leaf.

    Attributes:
        side: Hinge side.
        mirror: Mirrored front.
    """

    side: Literal["left", "right"]
    mirror: bool = False


@dataclass(frozen=True)
class DoubleDoor:
    """Two hinged leaves meeting in the middle."""

    mirror: bool = False


@dataclass(frozen=True)
class DrawerStyleDoor:
    """A single push-open leaf styled as a drawer front. Carries no handle."""


DoorStyle = NoDoor | SingleDoor | DoubleDoor | DrawerStyleDoor


def parse_door_style(option: str) -> DoorStyle:
    """Parse a door option string.

    Args:
        option: One of the values in DOOR_OPTIONS.

    Returns:
        The matching door style variant.

    Raises:
        ValueError: If the option is not recognized.
    """
    match option:
        case "none":
            return NoDoor()
        case "left" | "right":
            return SingleDoor(side=option)
        case "leftMirror":
            return SingleDoor(side="left", mirror=True)
        case "rightMirror":
            return SingleDoor(side="right", mirror=True)
        case "double":
            return DoubleDoor()
        case "doubleMirror":
            return DoubleDoor(mirror=True)
        case "drawerStyle":
            return DrawerStyleDoor()
    raise ValueError(
        f"Unknown door option '{option}'. Valid options: {', '.join(DOOR_OPTIONS)}"
    )


def door_option(style: DoorStyle) -> str:
    """Format a door style back to its option string."""
    match style:
        case NoDoor():
            return "none"
        case SingleDoor(side=side, mirror=mirror):
            return f"{side}Mirror" if mirror else side
        case DoubleDoor(mirror=mirror):
            return "doubleMirror" if mirror else "double"
        case DrawerStyleDoor():
            return "drawerStyle"
    raise TypeError(f"Not a door style: {style!r}")


def leaf_count(style: DoorStyle) -> int:
    """Number of door leaves cut for the style."""
    match style:
        case NoDoor():
            return 0
        case SingleDoor() | DrawerStyleDoor():
            return 1
        case DoubleDoor():
            return 2
    raise TypeError(f"Not a door style: {style!r}")


def handle_count(style: DoorStyle) -> int:
    """Number of handles fitted for the style. Drawer-style fronts are push-open."""
    match style:
        case NoDoor() | DrawerStyleDoor():
            return 0
        case SingleDoor():
            return 1
        case DoubleDoor():
            return 2
    raise TypeError(f"Not a door style: {style!r}")
