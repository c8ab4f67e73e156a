"""
Back-office List UI: A Reflex application for browsing business records.

This package provides paged, sortable, searchable lists of purchase
orders, purchases, expenses, delivery challans, quotations, invoices,
sales returns and debit notes over a REST backend, all driven by one
generic list data controller.

Subpackages:
- components: Reusable Reflex UI components
- lib: Logging, HTTP client, disk cache and path helpers
- models: State models and the entity registry
- services: Data access layer (demo and REST implementations)
- utils: Record field access, matching and sorting helpers
- data: Demo fixtures

Main entry points:
- controller.ListDataController: The list controller
- app.main(): Start the development server
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
