"""
Field Row Component - Declarative with hooks
"""
import flet as ft

from ..state import FieldDescriptor, FieldState, noop
from ..theme import Colors, Layout, Spacing, Typography


def field_row(state: FieldState, on_done=noop):
    """
    Fixed-width label and an editable text box, then a thin divider.
    UI = f(state): every keystroke is written straight into ``state``,
    keyboard "done" calls ``on_done`` with the row state.
    """

    def handle_change(e):
        state.edit(e.control.value)

    def handle_submit(e):
        on_done(state)

    return ft.Column(
        controls=[
            ft.Row(
                controls=[
                    ft.Container(
                        width=Layout.FIELD_LABEL_WIDTH,
                        content=ft.Text(
                            state.label,
                            size=Typography.SIZE_MD,
                            color=Colors.TEXT_SECONDARY,
                            weight=ft.FontWeight.W_500
                        )
                    ),
                    ft.TextField(
                        value=state.value,
                        on_change=handle_change,
                        on_submit=handle_submit,
                        border_color=Colors.BORDER,
                        bgcolor=Colors.BG_FIELD,
                        color=Colors.TEXT_PRIMARY,
                        text_size=Typography.SIZE_MD,
                        expand=True
                    )
                ],
                spacing=Spacing.MD,
                vertical_alignment=ft.CrossAxisAlignment.CENTER
            ),
            ft.Divider(
                height=Spacing.LG,
                thickness=Layout.DIVIDER_THICKNESS,
                color=Colors.DIVIDER
            )
        ],
        spacing=Spacing.SM,
        data=state
    )


@ft.component
def FieldRow(descriptor: FieldDescriptor, on_done=noop):
    # Kept for as long as this row stays mounted under the same key
    state, _ = ft.use_state(lambda: FieldState.from_descriptor(descriptor))
    return field_row(state, on_done=on_done)
