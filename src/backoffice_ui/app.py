"""
Reflex application entry point for the back-office list UI.

This module initializes the Reflex app and defines the main page layout.
"""

import os

import reflex as rx

from backoffice_ui.components.list_table import list_table
from backoffice_ui.components.search_panel import search_panel
from backoffice_ui.lib import logs
from backoffice_ui.state import APP_TITLE, ListState

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("BACKOFFICE_UI_APP_PORT", "8000"))
LOG.info("BACKOFFICE_UI_SERVICE: %s", os.getenv("BACKOFFICE_UI_SERVICE", "demo"))


def page_header() -> rx.Component:
    """Build the title area at the top of the page."""
    return rx.box(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        rx.heading(ListState.entity_title, size="4", as_="h2"),
        class_name="page-header",
    )


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The complete page component with header, search, and results.
    """
    return rx.box(
        rx.box(
            page_header(),
            search_panel(),
            list_table(),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
)

# Add the index page
app.add_page(
    index,
    title=APP_TITLE,
    on_load=ListState.on_load,
)


def main() -> None:
    """Entrypoint used by the `backoffice-ui` console script."""
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--port", str(APP_PORT)])


if __name__ == "__main__":
    main()
