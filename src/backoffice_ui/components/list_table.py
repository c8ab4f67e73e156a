"""
Record table component for the back-office lists.

Handles the table of records with sortable headers, row actions,
pagination controls, empty state and the confirmation dialog.
"""

import reflex as rx

from backoffice_ui.state import ListState


def list_table() -> rx.Component:
    """
    Build the results container.

    Displays the empty state or the record table based on current state.

    Returns:
        The results container component.
    """
    return rx.box(
        rx.box(
            rx.text(ListState.result_summary, class_name="muted"),
            class_name="results-summary",
        ),
        rx.cond(ListState.is_empty, _empty(), _table()),
        _pagination(),
        _confirm_dialog(),
        id="results-container",
    )


def _header_cell(column: rx.Var) -> rx.Component:
    return rx.table.column_header_cell(
        rx.hstack(
            rx.text(column["label"]),
            rx.cond(
                ListState.sort_by == column["key"],
                rx.cond(
                    ListState.sort_direction == "asc",
                    rx.icon("arrow-up", size=14),
                    rx.icon("arrow-down", size=14),
                ),
            ),
            spacing="1",
            align="center",
        ),
        on_click=ListState.sort(column["key"]),
        cursor="pointer",
    )


def _row(row: rx.Var) -> rx.Component:
    record_id = row[0]
    return rx.table.row(
        rx.foreach(row[1:], lambda value: rx.table.cell(value)),
        rx.table.cell(
            rx.hstack(
                rx.cond(
                    ListState.can_clone,
                    rx.icon_button(
                        rx.icon("copy", size=14),
                        on_click=ListState.clone(record_id),
                        variant="ghost",
                        title="Clone",
                    ),
                ),
                rx.cond(
                    ListState.can_convert,
                    rx.icon_button(
                        rx.icon("repeat", size=14),
                        on_click=ListState.open_convert(record_id),
                        variant="ghost",
                        title="Convert",
                    ),
                ),
                rx.cond(
                    ListState.can_print,
                    rx.icon_button(
                        rx.icon("printer", size=14),
                        on_click=ListState.print_or_download(record_id),
                        variant="ghost",
                        title="Print",
                    ),
                ),
                rx.icon_button(
                    rx.icon("trash-2", size=14),
                    on_click=ListState.open_delete(record_id),
                    variant="ghost",
                    color_scheme="red",
                    title="Delete",
                ),
                spacing="1",
            ),
        ),
    )


def _table() -> rx.Component:
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                rx.foreach(ListState.visible_columns, _header_cell),
                rx.table.column_header_cell(""),
            ),
        ),
        rx.table.body(rx.foreach(ListState.rows, _row)),
        variant="surface",
        width="100%",
    )


def _pagination() -> rx.Component:
    return rx.hstack(
        rx.icon_button(
            rx.icon("chevron-left"),
            on_click=ListState.prev_page,
            disabled=ListState.current <= 1,
            variant="soft",
        ),
        rx.text(
            "Page ",
            ListState.current,
            " of ",
            ListState.page_count,
            class_name="muted",
        ),
        rx.icon_button(
            rx.icon("chevron-right"),
            on_click=ListState.next_page,
            disabled=ListState.current >= ListState.page_count,
            variant="soft",
        ),
        rx.select(
            ListState.page_size_options,
            value=ListState.page_size.to_string(),
            on_change=ListState.change_page_size,
        ),
        rx.cond(ListState.is_loading, rx.spinner()),
        spacing="3",
        align="center",
        justify="end",
        margin_top="1em",
    )


def _empty() -> rx.Component:
    """Build the empty state when no records are found."""
    return rx.box(
        rx.icon("file-x", class_name="empty-icon", size=60),
        rx.heading("No records found", size="3", as_="h3"),
        rx.cond(
            ListState.search_term != "",
            rx.text(
                rx.text.span('No results match "'),
                rx.text.span(ListState.search_term),
                rx.text.span('". Try a different search term.'),
                class_name="muted",
            ),
            rx.text("Nothing to show for this tab.", class_name="muted"),
        ),
        class_name="card empty-state",
    )


def _confirm_dialog() -> rx.Component:
    return rx.alert_dialog.root(
        rx.alert_dialog.content(
            rx.alert_dialog.title(
                rx.cond(
                    ListState.dialog_action == "delete",
                    "Delete " + ListState.entity_label + "?",
                    "Convert " + ListState.entity_label + "?",
                )
            ),
            rx.alert_dialog.description(
                rx.cond(
                    ListState.dialog_action == "delete",
                    "This action cannot be undone.",
                    "A new document will be created from this record.",
                )
            ),
            rx.hstack(
                rx.button("Cancel", on_click=ListState.close_dialog, variant="soft"),
                rx.button(
                    "Confirm",
                    on_click=ListState.confirm_dialog,
                    color_scheme=rx.cond(ListState.dialog_action == "delete", "red", "blue"),
                ),
                justify="end",
                spacing="3",
                margin_top="1em",
            ),
        ),
        open=ListState.dialog_action != "",
    )
