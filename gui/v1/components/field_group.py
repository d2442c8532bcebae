"""
Field Group Component - Declarative with hooks
"""
import flet as ft

from ..state import PROFILE_FIELDS, noop
from ..theme import Spacing
from .field_row import FieldRow, field_row


def field_group_column(rows):
    return ft.Column(controls=list(rows), spacing=Spacing.SM)


def field_group(states, on_done=noop):
    """Rows for explicit state cells, in the order given"""
    return field_group_column(field_row(state, on_done=on_done) for state in states)


@ft.component
def FieldGroup(on_done=noop):
    # Keyed by label so each row keeps its own state across parent re-renders
    return field_group_column(
        FieldRow(descriptor=field, on_done=on_done, key=field.label)
        for field in PROFILE_FIELDS
    )
