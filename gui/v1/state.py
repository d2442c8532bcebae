"""
Profile screen data: immutable descriptors and per-row edit state
"""
import logging
from dataclasses import dataclass

import flet as ft

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    label: str
    default_value: str


@dataclass(frozen=True)
class ButtonDescriptor:
    label: str
    destructive: bool = False


@dataclass
class FieldState(ft.Observable):
    """
    Editable value of one field row.
    Owned by a single row; assigning ``value`` re-renders that row only.
    """
    label: str
    value: str

    @classmethod
    def from_descriptor(cls, descriptor: FieldDescriptor) -> "FieldState":
        return cls(label=descriptor.label, value=descriptor.default_value)

    def edit(self, value):
        # None never reaches the row, an empty box is ""
        self.value = "" if value is None else str(value)
        logger.debug("%s edited (%d chars)", self.label, len(self.value))


PROFILE_TITLE = "Profile"

PROFILE_FIELDS = (
    FieldDescriptor(label="Full Name", default_value="John Doe"),
    FieldDescriptor(label="Email", default_value="johndoe@email.com"),
    FieldDescriptor(label="Age", default_value="30"),
)

PROFILE_ACTIONS = (
    ButtonDescriptor(label="Change Password"),
    ButtonDescriptor(label="Sign Out", destructive=True),
)


def initial_field_states(fields=PROFILE_FIELDS):
    """Fresh state cells for a newly mounted field group, one per descriptor"""
    return [FieldState.from_descriptor(field) for field in fields]


def noop(*_args, **_kwargs):
    """Placeholder for click and keyboard-done hooks that are not wired yet"""
    logger.debug("Unwired UI hook invoked")
