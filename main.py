"""
Profile Showcase - Entry Point for the Declarative UI with Hooks

Two standalone screens built with Flet's declarative approach:
- profile: header, three editable fields and two stub buttons
- greeting: a single welcome line

Pick one with ``--screen profile|greeting`` (defaults to profile).
"""
import flet as ft

from gui.v1.app import run_screen
from gui.v1.config import parse_args
from gui.v1.logging_config import setup_logging


# This is the entry point that `flet run` will execute
def main(page: ft.Page):
    config = parse_args()
    setup_logging(config.log_level)
    run_screen(page, config)


# This block allows you to still run the app with `python main.py`
if __name__ == "__main__":
    ft.run(main, assets_dir=str(parse_args().assets_dir))
