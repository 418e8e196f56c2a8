"""Key management utilities."""
from typing import Callable, TypeVar, Union

from ..keys import KeyUsage

K = TypeVar('K')


class KeyManager:
    """Normalizes key arguments given as live handles or encoded strings."""

    @staticmethod
    def prepare(key: Union[str, K], importer: Callable[[str], K]) -> K:
        """Prepares a key, importing it with ``importer`` if it is an encoded string."""
        if isinstance(key, str):
            return importer(key)
        return key

    @staticmethod
    def require(key, usage: KeyUsage, error: type, algorithm: str) -> None:
        """
        Checks that ``key`` is a handle for ``algorithm`` permitted for ``usage``.

        Raises:
            error: A ``CryptoError`` subclass raised on any mismatch
        """
        if key is None:
            raise error(f"No key supplied for {usage.value}")
        if getattr(key, 'algorithm', None) != algorithm or not hasattr(key, 'can'):
            raise error(f"Expected an {algorithm} key, got {type(key).__name__}")
        if not key.can(usage):
            raise error(f"{type(key).__name__} does not permit {usage.value}")
