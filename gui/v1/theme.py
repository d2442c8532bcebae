"""
Theme and styling constants for the profile showcase UI
"""
import flet as ft

# Color Palette
class Colors:
    """Light color scheme for the profile screens"""

    # Backgrounds
    BG_PAGE = "#f5f7fa"  # Page background
    BG_FIELD = "#ffffff"  # Text box fill

    # Primary & Accents
    PRIMARY = "#3b5bdb"
    PRIMARY_DARK = "#2f4ac0"
    DANGER = "#e03131"  # Sign out

    # Text Colors
    TEXT_PRIMARY = "#1a1f2e"
    TEXT_SECONDARY = "#5c6475"
    TEXT_ON_PRIMARY = "#ffffff"

    # Border & Divider
    BORDER = "#d0d5dd"
    DIVIDER = "#e4e7ec"


class Spacing:
    """Spacing constants"""
    XS = 4
    SM = 8
    MD = 12
    LG = 16
    XL = 20
    XXL = 24


class Typography:
    """Typography constants"""

    # Font Sizes
    SIZE_SM = 12
    SIZE_MD = 14
    SIZE_LG = 16
    SIZE_TITLE = 24


class Layout:
    """Layout constants"""
    PAGE_MARGIN = Spacing.LG
    FIELD_LABEL_WIDTH = 100
    AVATAR_SIZE = 120
    DIVIDER_THICKNESS = 1
    BUTTON_HEIGHT = 44
    BUTTON_RADIUS = 6


def create_button_style(bgcolor=None, color=None):
    """Create a consistent button style"""
    return ft.ButtonStyle(
        bgcolor={
            ft.ControlState.DEFAULT: bgcolor or Colors.PRIMARY,
            ft.ControlState.HOVERED: Colors.PRIMARY_DARK,
        },
        color={
            ft.ControlState.DEFAULT: color or Colors.TEXT_ON_PRIMARY,
        },
        shape=ft.RoundedRectangleBorder(radius=Layout.BUTTON_RADIUS),
        padding=ft.Padding.symmetric(horizontal=Spacing.LG, vertical=Spacing.MD),
    )
