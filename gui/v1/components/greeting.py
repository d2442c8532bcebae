"""
Greeting Component - Declarative with hooks
"""
import flet as ft

from ..theme import Colors, Typography


def greeting_text(name: str) -> str:
    return f"Welcome, {name}!"


@ft.component
def Greeting(name: str):
    """Single static welcome line"""
    return ft.Text(
        greeting_text(name),
        size=Typography.SIZE_LG,
        color=Colors.TEXT_PRIMARY
    )
