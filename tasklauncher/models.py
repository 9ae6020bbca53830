#===============================================================================
#  TaskLauncher | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Shared data models: the fully-defaulted configuration and the widget
#  descriptors produced by the layout engine. All of them are immutable.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .constants import (
    APP_TITLE,
    AUTO_STACK_Y,
    DEFAULT_BUTTON_HEIGHT,
    DEFAULT_BUTTON_TEXT,
    DEFAULT_BUTTON_WIDTH,
    DEFAULT_BUTTON_X,
    DEFAULT_HEADER_LEFT,
    DEFAULT_HEADER_MARGIN_X,
    DEFAULT_HEADER_RIGHT,
    DEFAULT_HEADER_Y,
    DEFAULT_ICON_SIZE,
    DEFAULT_ICON_TEXT_GAP,
    DEFAULT_LEFT_FONT_SIZE,
    DEFAULT_RIGHT_FONT_SIZE,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HeaderSpec:
    """Banner row: optional app icon, big left text, small right text."""
    left_text: str = DEFAULT_HEADER_LEFT
    right_text: str = DEFAULT_HEADER_RIGHT
    show: bool = True
    left_bold: bool = True
    y: int = DEFAULT_HEADER_Y                 # top of the header row
    margin_x: int = DEFAULT_HEADER_MARGIN_X   # padding from left/right edges
    left_font_size: float = DEFAULT_LEFT_FONT_SIZE
    right_font_size: float = DEFAULT_RIGHT_FONT_SIZE
    icon_size: int = DEFAULT_ICON_SIZE
    icon_text_gap: int = DEFAULT_ICON_TEXT_GAP


@dataclass(frozen=True)
class ActionSpec:
    """One launchable button."""
    target_path: str = ""
    label: str = DEFAULT_BUTTON_TEXT
    args_text: Optional[str] = None
    args_list: Optional[Tuple[str, ...]] = None
    require_elevation: bool = False
    x: int = DEFAULT_BUTTON_X   # ignored, buttons are always centered
    y: int = AUTO_STACK_Y       # -1 = auto stack
    width: int = DEFAULT_BUTTON_WIDTH
    height: int = DEFAULT_BUTTON_HEIGHT
    working_directory: Optional[str] = None

    @property
    def auto_stacked(self) -> bool:
        return self.y < 0


@dataclass(frozen=True)
class WindowSpec:
    title: str = APP_TITLE
    width: int = DEFAULT_WINDOW_WIDTH
    height: int = DEFAULT_WINDOW_HEIGHT
    fit_to_content: bool = False


@dataclass(frozen=True)
class Configuration:
    actions: Tuple[ActionSpec, ...]
    header: Optional[HeaderSpec] = field(default_factory=HeaderSpec)
    window: WindowSpec = field(default_factory=WindowSpec)

    @property
    def header_visible(self) -> bool:
        return self.header is not None and self.header.show


# ---------------------------------------------------------------------------
# Layout descriptors
# ---------------------------------------------------------------------------

def half_toward_zero(n: int) -> int:
    # truncate toward zero, same as integer division in the native toolkit
    return int(n / 2)


def centered_left(viewport_width: int, width: int) -> int:
    return half_toward_zero(viewport_width - width)


def right_aligned_left(viewport_width: int, width: int, margin_x: int) -> int:
    return viewport_width - width - margin_x


@dataclass(frozen=True)
class FontSpec:
    size: float
    bold: bool = False


@dataclass(frozen=True)
class Rect:
    left: int
    top: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def right(self) -> int:
        return self.left + self.width

    def moved_to(self, left: int) -> "Rect":
        return replace(self, left=left)


@dataclass(frozen=True)
class LabelDescriptor:
    text: str
    font: FontSpec
    rect: Rect


@dataclass(frozen=True)
class HeaderGroup:
    icon: Optional[Rect]
    left_label: LabelDescriptor
    right_label: LabelDescriptor
    margin_x: int

    @property
    def bottom(self) -> int:
        icon_bottom = self.icon.bottom if self.icon is not None else 0
        labels_bottom = max(self.left_label.rect.bottom, self.right_label.rect.bottom)
        return max(icon_bottom, labels_bottom)


@dataclass(frozen=True)
class ButtonDescriptor:
    button_id: str     # stable key into the dispatch table
    text: str
    rect: Rect


@dataclass(frozen=True)
class LayoutResult:
    viewport_width: int
    header: Optional[HeaderGroup]
    buttons: Tuple[ButtonDescriptor, ...]

    @property
    def content_bottom(self) -> int:
        bottoms = [b.rect.bottom for b in self.buttons]
        if self.header is not None:
            bottoms.append(self.header.bottom)
        return max(bottoms) if bottoms else 0

    def recentered(self, viewport_width: int) -> "LayoutResult":
        """Horizontal positions for a new viewport width. Tops never move."""
        header = self.header
        if header is not None:
            rr = header.right_label.rect
            header = replace(
                header,
                right_label=replace(
                    header.right_label,
                    rect=rr.moved_to(right_aligned_left(viewport_width, rr.width, header.margin_x)),
                ),
            )

        buttons = tuple(
            replace(b, rect=b.rect.moved_to(centered_left(viewport_width, b.rect.width)))
            for b in self.buttons
        )
        return LayoutResult(viewport_width=viewport_width, header=header, buttons=buttons)
