"""
Local library modules shared across the back-office list UI.

Modules:
    logs: Logging utilities
    objects: JSON serialization for log output
    paths: Path utilities
    clients: Authenticated HTTP client for the REST backend
    caches: Disk-based caching with TTL support
"""

from backoffice_ui.lib import caches, clients, logs, objects, paths

__all__ = ["caches", "clients", "logs", "objects", "paths"]
