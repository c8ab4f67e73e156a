"""
Search panel component for the back-office lists.

Provides the entity picker, status tabs, search input and the toolbar
buttons (refresh, reset, manage columns).
"""

import reflex as rx

from backoffice_ui.state import ListState


def search_panel() -> rx.Component:
    """
    Build the search panel with entity picker, tabs and search input.

    Returns:
        The search panel component.
    """
    return rx.box(
        rx.hstack(
            rx.select(
                ListState.entity_options,
                value=ListState.entity_name,
                on_change=ListState.select_entity,
            ),
            rx.box(
                rx.icon("search", class_name="input-icon"),
                rx.input(
                    placeholder="Search by number, name, phone or notes...",
                    value=ListState.search_term,
                    on_change=ListState.search,
                    class_name="search-input",
                    debounce_timeout=300,
                ),
                rx.cond(
                    ListState.search_term != "",
                    rx.icon_button(
                        rx.icon("x"),
                        on_click=ListState.clear_search,
                        variant="ghost",
                        title="Clear search",
                    ),
                ),
                class_name="input-with-icon",
            ),
            rx.icon_button(rx.icon("refresh-cw"), on_click=ListState.refresh, title="Refresh"),
            rx.button("Reset", on_click=ListState.reset_filters, variant="soft"),
            rx.button(
                rx.icon("columns-3"),
                "Columns",
                on_click=ListState.open_manage_columns,
                variant="soft",
            ),
            spacing="3",
            align="center",
        ),
        rx.tabs.root(
            rx.tabs.list(
                rx.foreach(
                    ListState.statuses,
                    lambda status: rx.tabs.trigger(status, value=status),
                ),
            ),
            value=ListState.entity_filter,
            on_change=ListState.change_tab,
        ),
        manage_columns_dialog(),
        class_name="card search-card",
    )


def manage_columns_dialog() -> rx.Component:
    """Build the dialog that toggles column visibility."""
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title("Manage columns"),
            rx.vstack(
                rx.foreach(
                    ListState.columns,
                    lambda column: rx.checkbox(
                        column["label"],
                        checked=column["visible"].to(bool),
                        on_change=lambda _: ListState.toggle_column(column["key"]),
                    ),
                ),
                spacing="2",
            ),
            rx.hstack(
                rx.button("Cancel", on_click=ListState.close_manage_columns, variant="soft"),
                rx.button("Save", on_click=ListState.save_columns),
                justify="end",
                spacing="3",
                margin_top="1em",
            ),
        ),
        open=ListState.manage_columns_open,
    )
