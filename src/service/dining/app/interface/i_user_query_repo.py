from abc import ABC, abstractmethod


class IUserQueryRepo(ABC):
    """Read side of the identity store owned by the auth service"""

    @abstractmethod
    async def exists(self, *, user_id: str) -> bool:
        pass
