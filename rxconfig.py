"""Reflex configuration for the back-office list UI."""

import os

import reflex as rx

# Get port from environment
APP_PORT = int(os.getenv("BACKOFFICE_UI_APP_PORT", "8000"))

config = rx.Config(
    app_name="backoffice_ui",
    # Use the src directory structure
    app_module_import="backoffice_ui.app",
    backend_port=APP_PORT,
)
