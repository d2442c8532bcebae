"""
Action Button Component - Declarative with hooks
"""
import flet as ft

from ..state import ButtonDescriptor, noop
from ..theme import Colors, Layout, create_button_style


def action_button(descriptor: ButtonDescriptor, on_click=noop):
    """Full-width button, ``on_click`` receives the descriptor"""
    return ft.Row(
        controls=[
            ft.Button(
                descriptor.label,
                style=create_button_style(
                    bgcolor=Colors.DANGER if descriptor.destructive else None
                ),
                height=Layout.BUTTON_HEIGHT,
                on_click=lambda _: on_click(descriptor),
                expand=True
            )
        ],
        data=descriptor
    )


@ft.component
def ActionButton(descriptor: ButtonDescriptor, on_click=noop):
    return action_button(descriptor, on_click=on_click)
