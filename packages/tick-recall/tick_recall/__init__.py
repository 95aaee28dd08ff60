"""tick-recall - Memory-sequence game core: phase machine and scramble layout."""
from __future__ import annotations

from tick_recall.clock import Clock
from tick_recall.config import RecallConfig
from tick_recall.controller import GameController
from tick_recall.layout import LayoutEngine, flow_positions, random_position
from tick_recall.parsing import parse_count
from tick_recall.scheduler import TaskHandle, TaskScheduler
from tick_recall.signals import Channel, SignalBus
from tick_recall.surface import StaticSurface
from tick_recall.tile import Tile, create_tiles, random_color
from tick_recall.types import (
    Bounds,
    Footprint,
    InvalidCountError,
    Phase,
    Position,
    RenderSurface,
    Status,
)

__all__ = [
    "Bounds",
    "Channel",
    "Clock",
    "Footprint",
    "GameController",
    "InvalidCountError",
    "LayoutEngine",
    "Phase",
    "Position",
    "RecallConfig",
    "RenderSurface",
    "SignalBus",
    "StaticSurface",
    "Status",
    "TaskHandle",
    "TaskScheduler",
    "Tile",
    "create_tiles",
    "flow_positions",
    "parse_count",
    "random_color",
    "random_position",
]
