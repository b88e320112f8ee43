"""hotel-gate: entitlement-gated hotel and room read API."""

from hotel_gate.common.exceptions import EntitlementError, NotFoundError, UnauthorizedError
from hotel_gate.hotels.entitlements import EntitlementPolicy, is_hotel_entitled
from hotel_gate.hotels.service import HotelsService

__all__ = [
    "EntitlementError",
    "EntitlementPolicy",
    "HotelsService",
    "NotFoundError",
    "UnauthorizedError",
    "is_hotel_entitled",
]
__version__ = "0.1.0"
