#===============================================================================
#  TaskLauncher | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Launches the target of a button through the OS shell (so the "runas"
#  verb can request elevation) and reports how it went:
#    Idle -> Validating -> Spawning -> Succeeded | Failed | ElevationCancelled
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Protocol

from .arguments import build_arguments
from .constants import ERROR_CANCELLED
from .errors import ElevationCancelled, LauncherError, SpawnFailure, TargetNotFoundError
from .models import ActionSpec

log = logging.getLogger(__name__)


class LaunchState(Enum):
    IDLE = auto()
    VALIDATING = auto()
    SPAWNING = auto()
    SUCCEEDED = auto()
    FAILED = auto()
    ELEVATION_CANCELLED = auto()


@dataclass(frozen=True)
class Invocation:
    target: str
    arguments: str
    working_directory: str
    elevate: bool = False


@dataclass(frozen=True)
class LaunchOutcome:
    state: LaunchState
    invocation: Optional[Invocation] = None
    error: Optional[LauncherError] = None

    @property
    def close_window(self) -> bool:
        """One successful launch ends the launcher session."""
        return self.state is LaunchState.SUCCEEDED

    @property
    def show_error(self) -> bool:
        return self.state is LaunchState.FAILED


class Spawner(Protocol):
    def spawn(self, invocation: Invocation) -> None:
        """Start the process and return without waiting for it.

        Raises ElevationCancelled when the user dismisses the elevation
        prompt; any other failure surfaces as OSError or SpawnFailure.
        """


def is_cancelled(err: OSError) -> bool:
    return getattr(err, "winerror", None) == ERROR_CANCELLED


class WindowsShellSpawner:
    """ShellExecute via os.startfile; 'runas' asks for UAC elevation."""

    def spawn(self, invocation: Invocation) -> None:
        verb = "runas" if invocation.elevate else "open"
        try:
            os.startfile(  # type: ignore[attr-defined]
                invocation.target, verb, invocation.arguments, invocation.working_directory
            )
        except OSError as e:
            if is_cancelled(e):
                raise ElevationCancelled(invocation.target) from e
            raise


class PosixSpawner:
    """Fallback for non-Windows hosts: exec the target, pkexec for elevation."""

    def spawn(self, invocation: Invocation) -> None:
        argv = [invocation.target] + shlex.split(invocation.arguments)
        if invocation.elevate:
            pkexec = shutil.which("pkexec")
            if pkexec:
                argv = [pkexec] + argv
            else:
                log.warning("Elevation requested for %s but pkexec is not available", invocation.target)
        subprocess.Popen(argv, cwd=invocation.working_directory, start_new_session=True)


def default_spawner() -> Spawner:
    if sys.platform.startswith("win"):
        return WindowsShellSpawner()
    return PosixSpawner()


class LaunchController:
    def __init__(self, spawner: Optional[Spawner] = None):
        self.spawner = spawner or default_spawner()
        self.state = LaunchState.IDLE

    def _enter(self, state: LaunchState) -> None:
        log.debug("Launch state: %s -> %s", self.state.name, state.name)
        self.state = state

    def _finish(self, state: LaunchState, invocation: Optional[Invocation] = None,
                error: Optional[LauncherError] = None) -> LaunchOutcome:
        self._enter(state)
        return LaunchOutcome(state=state, invocation=invocation, error=error)

    @staticmethod
    def build_invocation(spec: ActionSpec) -> Invocation:
        working_dir = (
            spec.working_directory
            or os.path.dirname(spec.target_path)
            or os.getcwd()
        )
        return Invocation(
            target=spec.target_path,
            arguments=build_arguments(spec),
            working_directory=working_dir,
            elevate=spec.require_elevation,
        )

    def launch(self, spec: ActionSpec) -> LaunchOutcome:
        self._enter(LaunchState.VALIDATING)
        target = spec.target_path
        if not target.strip() or not os.path.isfile(target):
            log.warning("Launch target not found: %r", target)
            return self._finish(LaunchState.FAILED, error=TargetNotFoundError(target))

        invocation = self.build_invocation(spec)
        self._enter(LaunchState.SPAWNING)
        try:
            self.spawner.spawn(invocation)
        except ElevationCancelled:
            log.info("Elevation prompt dismissed for %s", target)
            return self._finish(LaunchState.ELEVATION_CANCELLED, invocation)
        except SpawnFailure as e:
            log.error("Failed to launch %s: %s", target, e.diagnostic)
            return self._finish(LaunchState.FAILED, invocation, e)
        except (OSError, ValueError) as e:
            # ValueError: unbalanced quotes in a pre-formed argument string
            log.error("Failed to launch %s: %s", target, e)
            return self._finish(LaunchState.FAILED, invocation, SpawnFailure(target, str(e)))

        log.info("Launched %s %s", target, invocation.arguments)
        return self._finish(LaunchState.SUCCEEDED, invocation)

    def reset(self) -> None:
        """Back to Idle so the next click starts a fresh activation."""
        self._enter(LaunchState.IDLE)
