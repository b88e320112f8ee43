"""User and session service."""

import hashlib
import secrets

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_gate.common.config import HotelGateSettings
from hotel_gate.users.models import SessionModel, UserModel


def _hash_password(raw_password: str) -> str:
    """SHA-256 hash of a raw password for storage."""
    return hashlib.sha256(raw_password.encode()).hexdigest()


class UserService:
    """Users, their sessions and the bearer tokens bound to them."""

    def __init__(self, settings: HotelGateSettings):
        self.settings = settings

    def _serializer(self) -> URLSafeTimedSerializer:
        return URLSafeTimedSerializer(self.settings.secret_key, salt="session-token")

    def sign_token(self, user_id: int) -> str:
        return self._serializer().dumps(
            {"user_id": user_id, "nonce": secrets.token_hex(8)}
        )

    def read_token(self, token: str) -> int | None:
        """Return the user id signed into ``token``, or None if invalid/expired."""
        try:
            payload = self._serializer().loads(token, max_age=self.settings.token_max_age)
        except (BadSignature, SignatureExpired):
            return None
        user_id = payload.get("user_id") if isinstance(payload, dict) else None
        return user_id if isinstance(user_id, int) else None

    async def create_user(
        self, session: AsyncSession, email: str, password: str
    ) -> UserModel:
        user = UserModel(email=email, password_hash=_hash_password(password))
        session.add(user)
        await session.flush()
        return user

    async def get_by_id(self, session: AsyncSession, user_id: int) -> UserModel | None:
        return await session.get(UserModel, user_id)

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        result = await session.execute(select(UserModel).where(UserModel.email == email))
        return result.scalar_one_or_none()

    async def create_session(self, session: AsyncSession, user_id: int) -> str:
        """Store a new session for the user and return its bearer token."""
        token = self.sign_token(user_id)
        session.add(SessionModel(user_id=user_id, token=token))
        await session.flush()
        return token

    async def find_session_by_token(
        self, session: AsyncSession, token: str
    ) -> SessionModel | None:
        result = await session.execute(
            select(SessionModel).where(SessionModel.token == token)
        )
        return result.scalar_one_or_none()
