#===============================================================================
#  TaskLauncher | layout.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Turns a Configuration into concrete geometry:
#    - header row: icon + left label + right label pinned to the right edge
#    - buttons: centered horizontally, stacked vertically under the header
#  Text sizes come from a TextMeasurer so this module never touches Qt.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Dict, List, Protocol, Tuple

from .constants import (
    BUTTON_FONT_SIZE,
    BUTTON_STACK_GAP,
    BUTTON_TEXT_PAD_X,
    BUTTON_TEXT_PAD_Y,
    DEFAULT_BUTTON_HEIGHT,
    DEFAULT_BUTTON_WIDTH,
    HEADER_BUTTON_GAP,
    HEADERLESS_START_Y,
)
from .models import (
    ActionSpec,
    ButtonDescriptor,
    Configuration,
    FontSpec,
    HeaderGroup,
    HeaderSpec,
    LabelDescriptor,
    LayoutResult,
    Rect,
    centered_left,
    half_toward_zero,
    right_aligned_left,
)

BUTTON_FONT = FontSpec(BUTTON_FONT_SIZE)


class TextMeasurer(Protocol):
    def measure(self, text: str, font: FontSpec) -> Tuple[int, int]:
        """Rendered (width, height) of `text` in `font`."""


def button_id(index: int) -> str:
    return f"button-{index}"


def dispatch_table(config: Configuration) -> Dict[str, ActionSpec]:
    """Button id -> the action it launches."""
    return {button_id(i): spec for i, spec in enumerate(config.actions)}


def header_fonts(header: HeaderSpec) -> Tuple[FontSpec, FontSpec]:
    return (
        FontSpec(header.left_font_size, bold=header.left_bold),
        FontSpec(header.right_font_size),
    )


def layout_header(header: HeaderSpec, viewport_width: int, measurer: TextMeasurer,
                  has_icon: bool = True) -> HeaderGroup:
    margin_x = header.margin_x
    row_top = header.y
    left_font, right_font = header_fonts(header)

    left_w, left_h = measurer.measure(header.left_text, left_font)
    right_w, right_h = measurer.measure(header.right_text, right_font)

    icon_size = header.icon_size
    row_height = max(icon_size, left_h, right_h)

    icon = None
    left_x = margin_x
    if has_icon and icon_size > 0:
        icon = Rect(margin_x, row_top, icon_size, icon_size)
        left_x = margin_x + icon_size + header.icon_text_gap

    left = LabelDescriptor(
        text=header.left_text,
        font=left_font,
        rect=Rect(left_x, row_top + half_toward_zero(row_height - left_h), left_w, left_h),
    )
    right = LabelDescriptor(
        text=header.right_text,
        font=right_font,
        rect=Rect(
            right_aligned_left(viewport_width, right_w, margin_x),
            row_top + half_toward_zero(row_height - right_h),
            right_w,
            right_h,
        ),
    )
    return HeaderGroup(icon=icon, left_label=left, right_label=right, margin_x=margin_x)


def button_size(spec: ActionSpec, measurer: TextMeasurer) -> Tuple[int, int]:
    """Configured size; a non-positive width or height grows to fit the label."""
    if spec.width > 0 and spec.height > 0:
        return spec.width, spec.height
    text_w, text_h = measurer.measure(spec.label, BUTTON_FONT)
    width = spec.width if spec.width > 0 else DEFAULT_BUTTON_WIDTH
    height = spec.height if spec.height > 0 else DEFAULT_BUTTON_HEIGHT
    return max(width, text_w + 2 * BUTTON_TEXT_PAD_X), max(height, text_h + 2 * BUTTON_TEXT_PAD_Y)


def layout_buttons(actions, start_y: int, viewport_width: int,
                   measurer: TextMeasurer) -> List[ButtonDescriptor]:
    buttons: List[ButtonDescriptor] = []
    auto_y = start_y
    for idx, spec in enumerate(actions):
        width, height = button_size(spec, measurer)
        top = auto_y if spec.auto_stacked else spec.y
        buttons.append(ButtonDescriptor(
            button_id=button_id(idx),
            text=spec.label,
            rect=Rect(centered_left(viewport_width, width), top, width, height),
        ))
        # Explicitly placed buttons still advance the auto cursor.
        auto_y += height + BUTTON_STACK_GAP
    return buttons


def compute_layout(config: Configuration, viewport_width: int, measurer: TextMeasurer,
                   has_icon: bool = True) -> LayoutResult:
    header = None
    header_bottom = 0
    if config.header_visible:
        header = layout_header(config.header, viewport_width, measurer, has_icon=has_icon)
        header_bottom = header.bottom

    start_y = header_bottom + HEADER_BUTTON_GAP if header_bottom > 0 else HEADERLESS_START_Y
    buttons = layout_buttons(config.actions, start_y, viewport_width, measurer)
    return LayoutResult(viewport_width=viewport_width, header=header, buttons=tuple(buttons))
