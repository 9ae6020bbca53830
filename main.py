#===============================================================================
#  TaskLauncher  |  Configuration-driven Application Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  A small launcher window whose whole layout comes from config.json:
#    - one header row (app icon + big left title + small right note)
#    - a centered vertical stack of buttons, each starting one program
#    - "runAsAdmin" buttons request elevation (UAC); cancelling is silent
#    - a successful launch closes the launcher
#
#  Folder Conventions
#  ------------------
#    ./config.json        -> created with three examples on first start
#    ./app.ico | app.png  -> optional icon for the window and header
#    ./.tasklauncher/logs -> launcher.log
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project uses PySide6, which is licensed separately by its authors.
#  Ensure compliance with its license terms when distributing this software.
#===============================================================================

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMessageBox

from tasklauncher.config_store import StarterCreated, default_config_path, load_config, program_dir
from tasklauncher.constants import CONFIG_FILE_NAME
from tasklauncher.errors import ConfigParseError, EmptyActionsError
from tasklauncher.launcher import LaunchController
from tasklauncher.logging_setup import configure_logging
from tasklauncher.main_window import LauncherWindow, load_app_icon

log = logging.getLogger("tasklauncher")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Configuration-driven application launcher.")
    parser.add_argument("--config", type=Path, default=None,
                        help=f"path to the config file (default: ./{CONFIG_FILE_NAME} next to the program)")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ...")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    base_dir = program_dir()
    configure_logging(base_dir, args.log_level)

    app = QApplication(sys.argv[:1])
    icon = load_app_icon(base_dir)
    if icon is not None:
        app.setWindowIcon(icon)

    cfg_path = args.config or default_config_path()
    config = None
    try:
        result = load_config(cfg_path)
        if isinstance(result, StarterCreated):
            QMessageBox.information(
                None,
                "Starter config created",
                f"No {result.path.name} found. A starter file was created next to the program.\n"
                "Edit it and restart the app.",
            )
            return 0
        config = result.config
    except ConfigParseError as e:
        log.error("Config parse error in %s: %s", e.path, e.diagnostic)
        QMessageBox.critical(None, e.title, e.message)
    except EmptyActionsError as e:
        log.warning("No buttons in %s", e.path)
        QMessageBox.warning(None, e.title, e.message)
    except Exception as e:
        log.exception("Failed to load configuration from %s", cfg_path)
        QMessageBox.critical(None, "Error", f"Failed to load configuration:\n\n{e}")

    w = LauncherWindow(config, LaunchController(), icon)
    w.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
