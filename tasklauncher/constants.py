#===============================================================================
#  TaskLauncher | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Central place for file naming, layout spacing and every configuration
#  default. Nothing else in the package hardcodes a default value.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "Task Launcher"
CONFIG_FILE_NAME = "config.json"
LOG_DIR_NAME = ".tasklauncher"
LOG_FILE_NAME = "launcher.log"

# --- Header defaults ---
DEFAULT_HEADER_LEFT = "My Bold Title"
DEFAULT_HEADER_RIGHT = "small note"
DEFAULT_HEADER_Y = 30
DEFAULT_HEADER_MARGIN_X = 20
DEFAULT_LEFT_FONT_SIZE = 16.0
DEFAULT_RIGHT_FONT_SIZE = 9.0
DEFAULT_ICON_SIZE = 124
DEFAULT_ICON_TEXT_GAP = 10

# --- Button defaults ---
DEFAULT_BUTTON_TEXT = "Launch"
DEFAULT_BUTTON_X = 30
AUTO_STACK_Y = -1
DEFAULT_BUTTON_WIDTH = 180
DEFAULT_BUTTON_HEIGHT = 35

# Padding added around a measured label when a button auto-sizes
BUTTON_TEXT_PAD_X = 12
BUTTON_TEXT_PAD_Y = 8
BUTTON_FONT_SIZE = 9.0

# --- Layout spacing ---
HEADER_BUTTON_GAP = 15       # header bottom -> first auto-stacked button
BUTTON_STACK_GAP = 12        # between auto-stacked buttons
HEADERLESS_START_Y = 90      # first button top when the header is hidden
FIT_BOTTOM_PADDING = 30      # extra client height when fitting to content

# --- Window defaults ---
DEFAULT_WINDOW_WIDTH = 500
DEFAULT_WINDOW_HEIGHT = 400

# Win32 ERROR_CANCELLED: the user dismissed the elevation (UAC) prompt
ERROR_CANCELLED = 1223
