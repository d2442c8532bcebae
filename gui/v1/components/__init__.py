"""
Declarative UI components using hooks
"""
from .greeting import Greeting, greeting_text
from .profile_header import ProfileHeader, profile_header
from .field_row import FieldRow, field_row
from .action_button import ActionButton, action_button
from .field_group import FieldGroup, field_group
from .button_group import ButtonGroup, button_group

__all__ = [
    'Greeting', 'greeting_text',
    'ProfileHeader', 'profile_header',
    'FieldRow', 'field_row',
    'ActionButton', 'action_button',
    'FieldGroup', 'field_group',
    'ButtonGroup', 'button_group',
]
