"""
Runtime configuration for the showcase entry point
"""
import argparse
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]

SCREEN_PROFILE = "profile"
SCREEN_GREETING = "greeting"
SCREENS = (SCREEN_PROFILE, SCREEN_GREETING)

AVATAR_ASSET = "avatar.png"


@dataclass
class AppConfig:
    window_title: str = "Profile Showcase"
    greeting_name: str = "Space International"
    assets_dir: Path = PROJECT_ROOT / "assets"
    avatar_asset: str = AVATAR_ASSET
    screen: str = SCREEN_PROFILE
    log_level: str = "INFO"

    @property
    def avatar_path(self) -> Path:
        return Path(self.assets_dir) / self.avatar_asset


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Profile page and welcome screen showcase")
    parser.add_argument("--screen", choices=SCREENS, default=SCREEN_PROFILE,
                        help="Which standalone screen to show")
    parser.add_argument("--name", dest="greeting_name", default=AppConfig.greeting_name,
                        help="Name shown on the welcome screen")
    parser.add_argument("--assets-dir", type=Path, default=AppConfig.assets_dir)
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    return parser


def parse_args(argv=None) -> AppConfig:
    # flet run may forward its own flags, those are ignored here
    args, unknown = build_parser().parse_known_args(argv)
    if unknown:
        logger.debug("Ignoring unknown arguments: %s", unknown)
    return AppConfig(
        greeting_name=args.greeting_name,
        assets_dir=args.assets_dir,
        screen=args.screen,
        log_level=args.log_level,
    )
