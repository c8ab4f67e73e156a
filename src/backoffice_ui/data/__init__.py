"""
Static and demo data for the back-office list UI.

This package contains fixture data used by DemoListService for
development, testing, and demonstrations without a backend.

Modules:
- demo_records: Pre-populated records for every registered entity
"""
