"""
Profile Page - Declarative with hooks
"""
import flet as ft

from ..components.button_group import ButtonGroup, button_group
from ..components.field_group import FieldGroup, field_group
from ..components.profile_header import ProfileHeader, profile_header
from ..state import PROFILE_TITLE, noop
from ..theme import Colors, Layout, Spacing


def profile_layout(header, fields, buttons):
    """
    Header, spacer, fields, spacer, buttons stacked over the whole screen.
    Holds no state of its own.
    """
    return ft.Container(
        content=ft.Column(
            controls=[
                header,
                ft.Container(height=Spacing.XXL),
                fields,
                ft.Container(height=Spacing.XXL),
                buttons
            ],
            spacing=0,
            scroll=ft.ScrollMode.AUTO,
            expand=True
        ),
        bgcolor=Colors.BG_PAGE,
        padding=Layout.PAGE_MARGIN,
        expand=True
    )


def build_profile_page(states, avatar_src: str, title=PROFILE_TITLE, on_done=noop, on_action=noop):
    """
    Profile page for explicit field state cells.
    Passing the same cells again keeps every edit; new cells reset the rows.
    """
    return profile_layout(
        profile_header(title, avatar_src),
        field_group(states, on_done=on_done),
        button_group(on_action=on_action)
    )


@ft.component
def ProfilePage(avatar_src: str, title=PROFILE_TITLE, on_done=noop, on_action=noop):
    return profile_layout(
        ProfileHeader(title=title, avatar_src=avatar_src),
        FieldGroup(on_done=on_done),
        ButtonGroup(on_action=on_action)
    )
