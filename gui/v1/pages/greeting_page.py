import flet as ft

from ..components.greeting import Greeting
from ..theme import Colors, Layout


@ft.component
def GreetingPage(name: str):
    return ft.Container(
        content=Greeting(name=name),
        bgcolor=Colors.BG_PAGE,
        padding=Layout.PAGE_MARGIN,
        expand=True
    )
