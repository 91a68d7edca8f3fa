"""Photography service catalog with pricing and durations."""

import logging
from typing import Iterable, Optional

from booking_intake.schemas.service_schema import Service
from booking_intake.utils import format_price

logger = logging.getLogger(__name__)

SERVICE_CATALOG: list[Service] = [
    Service(
        id="6886297912080466b8ca9b67",
        name="Wedding Photography",
        price=50000,
        duration_minutes=480,
        duration_label="8 Hours",
    ),
    Service(
        id="6886298c12080466b8ca9b68",
        name="Portrait Session",
        price=15000,
        duration_minutes=120,
        duration_label="2 Hours",
    ),
    Service(
        id="6886299a12080466b8ca9b69",
        name="Event Coverage",
        price=30000,
        duration_minutes=240,
        duration_label="4 Hours",
    ),
    Service(
        id="688629a912080466b8ca9b6a",
        name="Commercial Shoot",
        price=75000,
        duration_minutes=480,
        duration_label="Full Day",
    ),
]


def get_all_services() -> list[Service]:
    """Return every catalog service in display order."""
    return list(SERVICE_CATALOG)


def find_service(service_id: str, catalog: Optional[Iterable[Service]] = None) -> Optional[Service]:
    """Look up a service by its exact identifier. Returns None if absent."""
    for service in SERVICE_CATALOG if catalog is None else catalog:
        if service.id == service_id:
            return service
    logger.debug("Service '%s' not in catalog", service_id)
    return None


def describe_service(service: Service) -> str:
    """Option text for a service picker, e.g. ``Portrait Session (₹15,000)``."""
    return f"{service.name} ({format_price(service.price)})"
