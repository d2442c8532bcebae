"""
Profile Header Component - Declarative with hooks
"""
import flet as ft

from ..theme import Colors, Layout, Spacing, Typography


def profile_header(title: str, avatar_src: str):
    """
    Title above a circular avatar, centered across the full width.
    A missing avatar file is shown as flet's broken-image placeholder.
    """
    return ft.Container(
        content=ft.Column(
            controls=[
                ft.Text(
                    title,
                    size=Typography.SIZE_TITLE,
                    color=Colors.TEXT_PRIMARY,
                    weight=ft.FontWeight.BOLD
                ),
                ft.Container(height=Spacing.LG),
                # Circular crop
                ft.Container(
                    content=ft.Image(
                        src=avatar_src,
                        width=Layout.AVATAR_SIZE,
                        height=Layout.AVATAR_SIZE
                    ),
                    width=Layout.AVATAR_SIZE,
                    height=Layout.AVATAR_SIZE,
                    shape=ft.BoxShape.CIRCLE,
                    clip_behavior=ft.ClipBehavior.ANTI_ALIAS,
                    border=ft.Border.all(2, Colors.BORDER)
                )
            ],
            spacing=0,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER
        ),
        alignment=ft.Alignment.CENTER
    )


@ft.component
def ProfileHeader(title: str, avatar_src: str):
    return profile_header(title, avatar_src)
