from abc import ABC, abstractmethod

class IAuthService(ABC):
    @abstractmethod
    async def login(self, username: str, password: str, storage) -> dict:
        pass

    @abstractmethod
    async def logout(self, token: str, storage) -> dict:
        pass
