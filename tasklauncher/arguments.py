#===============================================================================
#  TaskLauncher | arguments.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Builds the single command-line argument string handed to the OS shell.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from .models import ActionSpec


def quote_token(token: str) -> str:
    """Quote one token only when it needs it.

    - empty token          -> ""
    - whitespace or quote  -> "tok\\"en" (embedded quotes backslash-escaped)
    - anything else        -> unchanged
    """
    if not token:
        return '""'
    if not any(ch.isspace() or ch == '"' for ch in token):
        return token
    escaped = token.replace('"', '\\"')
    return f'"{escaped}"'


def build_arguments(spec: ActionSpec) -> str:
    """Final argument string: argsList wins over args; neither -> ''."""
    if spec.args_list:
        return " ".join(quote_token(t) for t in spec.args_list)
    return (spec.args_text or "").strip()
