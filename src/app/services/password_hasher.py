from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Password hashing capability - application layer"""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plain text password"""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plain text password against a stored hash"""
        pass
