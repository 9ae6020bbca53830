#===============================================================================
#  TaskLauncher | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Error types raised by the config loader and the launch controller. Each
#  carries a dialog title and message so the window can report it as-is.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path


class LauncherError(Exception):
    """Base class for every error the window knows how to report."""

    title = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigParseError(LauncherError):
    """The configuration document is not well-formed (or has a mistyped field)."""

    title = "JSON Error"

    def __init__(self, path: Path, diagnostic: str):
        super().__init__(f"Invalid JSON in {Path(path).name}:\n\n{diagnostic}")
        self.path = Path(path)
        self.diagnostic = diagnostic


class EmptyActionsError(LauncherError):
    """The document parsed fine but lists no buttons."""

    title = "No buttons"

    def __init__(self, path: Path):
        super().__init__(f"{Path(path).name} has no buttons. Add at least one button entry.")
        self.path = Path(path)


class TargetNotFoundError(LauncherError):
    title = "Launch Error"

    def __init__(self, target: str):
        super().__init__(f"File not found:\n{target}")
        self.target = target


class SpawnFailure(LauncherError):
    title = "Launch Error"

    def __init__(self, target: str, diagnostic: str):
        super().__init__(f"Failed to launch:\n{target}\n\n{diagnostic}")
        self.target = target
        self.diagnostic = diagnostic


class ElevationCancelled(LauncherError):
    """User dismissed the elevation prompt. Never shown to the user."""

    title = "Cancelled"

    def __init__(self, target: str):
        super().__init__(f"Elevation cancelled for {target}")
        self.target = target
