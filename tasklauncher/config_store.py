#===============================================================================
#  TaskLauncher | config_store.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Load config.json (or create a starter copy next to the program).
#  The document is JSON with two relaxations: // and /* */ comments and
#  trailing commas. Property names match case-insensitively. Every default
#  is applied here, once, producing an immutable Configuration.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
import math
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .constants import CONFIG_FILE_NAME
from .errors import ConfigParseError, EmptyActionsError
from .models import ActionSpec, Configuration, HeaderSpec, WindowSpec

log = logging.getLogger(__name__)


STARTER_CONFIG = r'''{
  // Edit this file without recompiling. Restart the app to see changes.
  // Property names are case-insensitive; comments and trailing commas are fine.
  "window": {
    "title": "Task Launcher",
    "width": 500,
    "height": 400,
    "fitToContent": false
  },
  "header": {
    "show": true,
    "left": "My Bold Title",
    "right": "small note",
    "leftBold": true,
    "leftFontSize": 16,
    "rightFontSize": 9,
    "y": 30,
    "marginX": 20,
    "iconSize": 124,
    "iconTextGap": 10
  },
  "buttons": [
    // y = -1 stacks the button under the previous one; x is ignored (centered)
    {
      "text": "App 1 (no args)",
      "exePath": "C:\\Path\\To\\App1\\app1.exe",
      "y": -1, "width": 220, "height": 40
    },
    {
      "text": "App 2 (string args)",
      "exePath": "C:\\Path\\To\\App2\\app2.exe",
      "args": "--flag1 value --toggle",
      "y": -1, "width": 220, "height": 40
    },
    {
      "text": "App 3 (args list)",
      "exePath": "C:\\Path\\To\\App3\\app3.exe",
      "argsList": ["--port", "8080", "--mode", "safe value with spaces"],
      "runAsAdmin": false,
      "y": -1, "width": 220, "height": 40
    }
  ]
}
'''


@dataclass(frozen=True)
class ConfigLoaded:
    path: Path
    config: Configuration


@dataclass(frozen=True)
class StarterCreated:
    """No document existed; a starter was written. The session should end."""
    path: Path


LoadResult = Union[ConfigLoaded, StarterCreated]


def program_dir() -> Path:
    """Folder of the running program (the frozen EXE, or the main script)."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    main = getattr(sys.modules.get("__main__"), "__file__", None)
    if main:
        return Path(main).resolve().parent
    return Path.cwd()


def default_config_path() -> Path:
    return program_dir() / CONFIG_FILE_NAME


# ---------------------------------------------------------------------------
# Relaxed JSON
# ---------------------------------------------------------------------------

def strip_json_extensions(text: str) -> str:
    """Remove comments and trailing commas outside of string literals.

    Line breaks inside removed comments are kept so parse errors still
    report the right line numbers.
    """
    out: List[str] = []
    i, n = 0, len(text)
    in_string = False
    pending_comma: Optional[int] = None   # index in `out` of a comma not yet confirmed
    last_token = ""                       # last non-space character outside strings

    while i < n:
        ch = text[i]

        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue

        if ch == "/" and i + 1 < n and text[i + 1] == "/":
            while i < n and text[i] != "\n":
                i += 1
            continue

        if ch == "/" and i + 1 < n and text[i + 1] == "*":
            end = text.find("*/", i + 2)
            stop = n if end < 0 else end + 2
            out.append("\n" * text.count("\n", i, stop))
            i = stop
            continue

        if ch in "}]" and pending_comma is not None:
            out[pending_comma] = ""
        if ch == ",":
            # a comma right after { [ or , is not trailing; leave it for json to reject
            pending_comma = len(out) if last_token not in ("{", "[", ",", "") else None
        elif not ch.isspace():
            pending_comma = None
        if not ch.isspace():
            last_token = ch
        if ch == '"':
            in_string = True

        out.append(ch)
        i += 1

    return "".join(out)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_document(text: str, path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(strip_json_extensions(text), parse_constant=_reject_constant)
    except ValueError as e:  # JSONDecodeError or a rejected NaN/Infinity
        raise ConfigParseError(path, str(e)) from e
    if not isinstance(data, dict):
        raise ConfigParseError(path, f"The JSON root must be an object, not {type(data).__name__}.")
    return data


# ---------------------------------------------------------------------------
# Defaulting pass
# ---------------------------------------------------------------------------

class _Section:
    """Case-insensitive, typed view over one JSON object."""

    def __init__(self, data: Dict[str, Any], where: str, path: Path):
        self._data = {str(k).lower(): v for k, v in data.items()}
        self._where = where
        self._path = path

    def _fail(self, key: str, expected: str):
        raise ConfigParseError(self._path, f"{self._where}.{key}: expected {expected}.")

    def raw(self, key: str) -> Any:
        return self._data.get(key.lower())

    def string(self, key: str, default: Optional[str]) -> Optional[str]:
        v = self.raw(key)
        if v is None:
            return default
        if not isinstance(v, str):
            self._fail(key, "a string")
        return v

    def boolean(self, key: str, default: bool) -> bool:
        v = self.raw(key)
        if v is None:
            return default
        if not isinstance(v, bool):
            self._fail(key, "true or false")
        return v

    def integer(self, key: str, default: int) -> int:
        v = self.raw(key)
        if v is None:
            return default
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            self._fail(key, "an integer")
        if isinstance(v, float) and not math.isfinite(v):
            self._fail(key, "a finite integer")
        return int(v)

    def number(self, key: str, default: float) -> float:
        v = self.raw(key)
        if v is None:
            return default
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            self._fail(key, "a number")
        try:
            f = float(v)
        except OverflowError:
            f = math.inf
        if not math.isfinite(f):
            self._fail(key, "a finite number")
        return f

    def section(self, key: str) -> Optional["_Section"]:
        v = self.raw(key)
        if v is None:
            return None
        if not isinstance(v, dict):
            self._fail(key, "an object")
        return _Section(v, f"{self._where}.{key}", self._path)

    def string_list(self, key: str) -> Optional[List[str]]:
        v = self.raw(key)
        if v is None:
            return None
        if not isinstance(v, list) or not all(isinstance(t, str) for t in v):
            self._fail(key, "an array of strings")
        return v

    def items(self, key: str) -> List["_Section"]:
        v = self.raw(key)
        if v is None:
            return []
        if not isinstance(v, list):
            self._fail(key, "an array")
        out = []
        for idx, item in enumerate(v):
            if not isinstance(item, dict):
                raise ConfigParseError(self._path, f"{self._where}.{key}[{idx}]: expected an object.")
            out.append(_Section(item, f"{self._where}.{key}[{idx}]", self._path))
        return out


_HEADER_DEFAULTS = {f.name: f.default for f in fields(HeaderSpec)}
_ACTION_DEFAULTS = {f.name: f.default for f in fields(ActionSpec)}
_WINDOW_DEFAULTS = {f.name: f.default for f in fields(WindowSpec)}


def _header_from(sec: Optional[_Section]) -> HeaderSpec:
    if sec is None:
        return HeaderSpec()
    d = _HEADER_DEFAULTS
    left_size = sec.number("leftFontSize", d["left_font_size"])
    right_size = sec.number("rightFontSize", d["right_font_size"])
    return HeaderSpec(
        left_text=sec.string("left", None) or d["left_text"],
        right_text=sec.string("right", None) or d["right_text"],
        show=sec.boolean("show", d["show"]),
        left_bold=sec.boolean("leftBold", d["left_bold"]),
        y=max(0, sec.integer("y", d["y"])),
        margin_x=max(0, sec.integer("marginX", d["margin_x"])),
        left_font_size=left_size if left_size > 0 else d["left_font_size"],
        right_font_size=right_size if right_size > 0 else d["right_font_size"],
        icon_size=max(0, sec.integer("iconSize", d["icon_size"])),
        icon_text_gap=max(0, sec.integer("iconTextGap", d["icon_text_gap"])),
    )


def _action_from(sec: _Section) -> ActionSpec:
    d = _ACTION_DEFAULTS
    label = sec.string("text", None)
    args_list = sec.string_list("argsList")
    working_dir = sec.string("workingDirectory", None)
    return ActionSpec(
        label=label if label and label.strip() else d["label"],
        target_path=sec.string("exePath", "") or "",
        args_text=sec.string("args", None),
        args_list=tuple(args_list) if args_list is not None else None,
        require_elevation=sec.boolean("runAsAdmin", d["require_elevation"]),
        x=sec.integer("x", d["x"]),
        y=sec.integer("y", d["y"]),
        width=sec.integer("width", d["width"]),
        height=sec.integer("height", d["height"]),
        working_directory=working_dir if working_dir and working_dir.strip() else None,
    )


def _window_from(sec: Optional[_Section]) -> WindowSpec:
    if sec is None:
        return WindowSpec()
    d = _WINDOW_DEFAULTS
    width = sec.integer("width", d["width"])
    height = sec.integer("height", d["height"])
    return WindowSpec(
        title=sec.string("title", None) or d["title"],
        width=width if width > 0 else d["width"],
        height=height if height > 0 else d["height"],
        fit_to_content=sec.boolean("fitToContent", d["fit_to_content"]),
    )


def build_configuration(data: Dict[str, Any], path: Path) -> Configuration:
    """Defaulting/validation pass over a parsed document."""
    root = _Section(data, "$", path)
    actions = tuple(_action_from(s) for s in root.items("buttons"))
    if not actions:
        raise EmptyActionsError(path)
    return Configuration(
        actions=actions,
        header=_header_from(root.section("header")),
        window=_window_from(root.section("window")),
    )


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

def write_starter(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(STARTER_CONFIG, encoding="utf-8")


def load_config(path: Path) -> LoadResult:
    """Load the configuration at `path`, or seed a starter document there.

    Raises ConfigParseError for malformed documents and EmptyActionsError
    when the document lists no buttons (no starter is written in that case).
    """
    path = Path(path)
    if not path.exists():
        write_starter(path)
        log.info("No configuration at %s; starter document created", path)
        return StarterCreated(path=path)

    text = path.read_text(encoding="utf-8-sig")
    config = build_configuration(parse_document(text, path), path)
    log.info("Loaded %d action(s) from %s", len(config.actions), path)
    return ConfigLoaded(path=path, config=config)
