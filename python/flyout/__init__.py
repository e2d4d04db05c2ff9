"""Flyout - hierarchical drop-down menus bound to form fields.

Public API exports:
- assemble / Dropdown: full menu markup (from flyout.dropdown)
- build: nested <ul> markup only (from flyout.content)
- Menu entries and identifiers (from flyout.entries, flyout.ids)
- HTML helpers (from flyout.html)
"""

import logging

# Menu rendering
from flyout.dropdown import Dropdown, assemble
from flyout.content import build, is_passthrough
from flyout.script import render_script

# Data model
from flyout.entries import Leaf, Pair, Node, MenuEntry, entry, entries, text_and_value
from flyout.ids import MenuIds, resolve_ids, sanitize
from flyout.options import DropdownOptions, MenuDocument, WidgetConfig, WIDGET_CONFIG

# Components
from flyout.decorators import component

# HTML helpers
from flyout.html import Markup, safe, escape_html

# Errors
from flyout.errors import MenuError, MenuContentError, OptionsError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Rendering
    'assemble',
    'Dropdown',
    'build',
    'is_passthrough',
    'render_script',
    # Entries
    'Leaf',
    'Pair',
    'Node',
    'MenuEntry',
    'entry',
    'entries',
    'text_and_value',
    # Identifiers
    'MenuIds',
    'resolve_ids',
    'sanitize',
    # Options
    'DropdownOptions',
    'MenuDocument',
    'WidgetConfig',
    'WIDGET_CONFIG',
    # Components
    'component',
    # Escaping
    'Markup',
    'safe',
    'escape_html',
    # Errors
    'MenuError',
    'MenuContentError',
    'OptionsError',
]
