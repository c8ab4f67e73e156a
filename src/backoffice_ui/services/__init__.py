"""
Service factory for the back-office list UI.

This module provides the get_list_service() factory function that returns
the appropriate ListService implementation for an entity based on
configuration.

Available Implementations:
- demo: In-memory service with demo records (no backend required)
- impl: REST-backed service (requires BACKOFFICE_API_URL)

Services are cached per entity and kind, so the same instance is reused
across all requests. Configure via BACKOFFICE_UI_SERVICE environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from backoffice_ui.lib import logs
from backoffice_ui.models.entities import EntityConfig, get_entity
from backoffice_ui.services.list_service import ListService
from backoffice_ui.services.list_service_demo import DemoListService
from backoffice_ui.services.list_service_impl import ListServiceImpl

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[EntityConfig], ListService]] = {
    "demo": lambda entity: DemoListService(entity),
    "impl": lambda entity: ListServiceImpl(entity),
}


@cache
def get_list_service(entity_name: str, kind: str | None = None) -> ListService:
    """Return the configured list service implementation for an entity."""
    entity = get_entity(entity_name)
    resolved_kind = (kind or os.getenv("BACKOFFICE_UI_SERVICE", "demo")).lower()
    LOG.info(
        "get_list_service - entity:%s kind:%s resolved_kind:%s",
        entity_name,
        kind,
        resolved_kind,
    )
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown list service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory(entity)


__all__ = ["DemoListService", "ListService", "ListServiceImpl", "get_list_service"]
