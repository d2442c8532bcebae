"""
Button Group Component - Declarative with hooks
"""
import flet as ft

from ..state import PROFILE_ACTIONS, noop
from ..theme import Spacing
from .action_button import ActionButton, action_button


def button_group_column(buttons):
    return ft.Column(controls=list(buttons), spacing=Spacing.MD)


def button_group(on_action=noop, actions=PROFILE_ACTIONS):
    return button_group_column(action_button(action, on_click=on_action) for action in actions)


@ft.component
def ButtonGroup(on_action=noop):
    return button_group_column(
        ActionButton(descriptor=action, on_click=on_action) for action in PROFILE_ACTIONS
    )
