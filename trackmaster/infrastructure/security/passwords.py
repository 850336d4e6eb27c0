"""bcrypt-backed password hashing."""

import asyncio

import bcrypt

from trackmaster.application.interfaces import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt hashes; the work runs in a thread to keep the event loop free."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify(self, password: str, hashed: str) -> bool:
        return await asyncio.to_thread(self._verify_sync, password, hashed)

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def _verify_sync(password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False
