"""Hotels API router — requires a signed-in user with a hotel ticket."""

from fastapi import APIRouter, Depends, HTTPException

from hotel_gate.common.exceptions import NotFoundError, UnauthorizedError
from hotel_gate.common.logging import get_logger
from hotel_gate.common.security import require_user
from hotel_gate.hotels.schemas import HotelResponse, HotelWithRoomsResponse

router = APIRouter(prefix="/hotels", tags=["hotels"])

logger = get_logger("hotels.router")


def _get_service():
    from hotel_gate.deps import get_hotels_service
    return get_hotels_service()


def _get_db():
    from hotel_gate.deps import get_db
    return get_db()


def _parse_hotel_id(raw: str) -> int | None:
    """Positive integer id, or None for anything else."""
    if not (raw.isascii() and raw.isdigit()):
        return None
    value = int(raw)
    return value if value > 0 else None


@router.get("", response_model=list[HotelResponse])
async def list_hotels(user_id: int = Depends(require_user)):
    svc = _get_service()
    db = _get_db()
    try:
        async with db.get_session() as session:
            hotels = await svc.list_hotels(session, user_id)
            return [HotelResponse.model_validate(h) for h in hotels]
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except UnauthorizedError as e:
        raise HTTPException(status_code=401, detail=e.message)
    except Exception:
        logger.exception("Unmapped error listing hotels")
        raise


@router.get("/{hotel_id}", response_model=HotelWithRoomsResponse)
async def get_hotel_rooms(hotel_id: str, user_id: int = Depends(require_user)):
    svc = _get_service()
    db = _get_db()
    try:
        async with db.get_session() as session:
            hotel = await svc.get_hotel_rooms(session, _parse_hotel_id(hotel_id), user_id)
            return HotelWithRoomsResponse.model_validate(hotel)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except UnauthorizedError as e:
        raise HTTPException(status_code=401, detail=e.message)
    except Exception:
        logger.exception("Unmapped error reading rooms of hotel %s", hotel_id)
        raise
