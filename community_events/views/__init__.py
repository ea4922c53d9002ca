"""View projection package initialization."""

from .projection import (
    ButtonState,
    RegistrationState,
    list_by_filter,
    category_label,
    category_color,
    filter_options,
    registration_button_state,
    format_event_date,
    spots_text,
    project_event,
    project_page,
)

__all__ = [
    'ButtonState',
    'RegistrationState',
    'list_by_filter',
    'category_label',
    'category_color',
    'filter_options',
    'registration_button_state',
    'format_event_date',
    'spots_text',
    'project_event',
    'project_page',
]
