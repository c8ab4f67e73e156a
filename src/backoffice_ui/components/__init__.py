"""
Reusable Reflex UI components for the back-office lists.

This package provides:
- search_panel: Entity picker, status tabs, search input and column manager
- list_table: Record table with sort headers, row actions and pagination
"""

from backoffice_ui.components.list_table import list_table
from backoffice_ui.components.search_panel import search_panel

__all__ = ["list_table", "search_panel"]
