"""
Application Initialization
==========================
Constructs the Model, the Controllers and the Main Window, then starts the
Qt Event Loop.

Run with: pythagorastree [--debug] [--log-file PATH]
      or: python -m pythagorastree ...
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from pythagorastree.app import APP_VERSION, create_app
from pythagorastree.config import load_config
from pythagorastree.controller.store import FractalStore
from pythagorastree.logging_config import release_qt_messages, setup_logging
from pythagorastree.model.state import FractalState
from pythagorastree.view.main_window import MainWindow


@click.command()
@click.version_option(version=APP_VERSION, prog_name="pythagorastree")
@click.option("--debug", is_flag=True, help="Log every rebuild and tick.")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Also write the log to this file.")
def main(debug: bool, log_file: Optional[str]) -> None:
    """Animated, pointer-driven Pythagoras tree."""
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if debug else logging.INFO, log_file=log_file)

    # 2. Create the Qt Application (also sets up QSettings)
    app = create_app()

    # 3. Initialize the Data Model
    store = FractalStore(FractalState(config=load_config()))

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(store)
    window.show()
    window.start_growth()

    # 5. Start Event Loop
    exit_code = app.exec()
    release_qt_messages()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
