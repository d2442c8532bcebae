import logging
from typing import Optional

import flet as ft

from .config import SCREEN_GREETING, AppConfig
from .pages.greeting_page import GreetingPage
from .pages.profile_page import ProfilePage
from .theme import Colors

logger = logging.getLogger(__name__)


def _prepare_page(page: ft.Page, config: AppConfig):
    page.title = config.window_title
    page.padding = 0.0
    page.bgcolor = Colors.BG_PAGE


def main(page: ft.Page, config: Optional[AppConfig] = None):
    """Profile screen activation"""
    config = config or AppConfig()
    _prepare_page(page, config)

    # The image control falls back to a placeholder; just make it visible in the log
    if not config.avatar_path.is_file():
        logger.warning("Avatar asset not found: %s", config.avatar_path)

    @ft.component
    def ProfileScreen():
        return ProfilePage(avatar_src=config.avatar_asset)

    logger.info("Showing profile screen")
    page.render(ProfileScreen)


def greeting_main(page: ft.Page, config: Optional[AppConfig] = None):
    """Welcome screen activation"""
    config = config or AppConfig()
    _prepare_page(page, config)

    @ft.component
    def GreetingScreen():
        return GreetingPage(name=config.greeting_name)

    logger.info("Showing welcome screen for %s", config.greeting_name)
    page.render(GreetingScreen)


def run_screen(page: ft.Page, config: AppConfig):
    if config.screen == SCREEN_GREETING:
        greeting_main(page, config)
    else:
        main(page, config)
