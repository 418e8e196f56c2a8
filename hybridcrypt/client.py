"""
CryptoClient - async surface over the crypto services.

Example:
    >>> async with CryptoClient() as crypto:
    ...     pair = await crypto.generate_rsa_key_pair()
    ...     public_key = await crypto.export_pub_key(pair.public_key)
    ...     sealed = await crypto.rsa_encrypt("aGVsbG8=", public_key)
    ...     await crypto.rsa_decrypt(sealed, pair.private_key)
    'aGVsbG8='
"""
import asyncio
import functools
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional, Union

from .core.config import ClientConfig
from .core.crypto import (
    AESService,
    HybridService,
    KeyPair,
    PrivateKey,
    PublicKey,
    RSAService,
    SealedMessage,
    SymmetricKey,
)
from .core.logging import get_logger, setup_logging

logger = get_logger(__name__)


class CryptoClient:
    """
    Runs every provider call in an executor so it never blocks the event loop.

    Operations share no mutable state and may run concurrently. A started
    operation always runs to completion; cancelling the awaiting task only
    stops the wait.

    With ``max_workers`` set the client owns a thread pool, so it must be
    used as ``async with CryptoClient(...)`` or closed with ``close()``;
    otherwise the pool threads outlive the client.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        rsa_service: RSAService = None,
        aes_service: AESService = None
    ):
        self._config = config or ClientConfig()
        self._rsa = rsa_service or RSAService()
        self._aes = aes_service or AESService()
        self._hybrid = HybridService(self._rsa, self._aes)
        self._executor: Optional[ThreadPoolExecutor] = None
        if self._config.max_workers is not None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._config.max_workers,
                thread_name_prefix='hybridcrypt'
            )
        if self._config.log_level is not None:
            setup_logging(self._config.log_level)

    async def _run(self, func: Callable[..., Any], *args) -> Any:
        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(self._executor, functools.partial(func, *args))
        return await asyncio.shield(future)

    # RSA

    async def generate_rsa_key_pair(self) -> KeyPair:
        """Generates a 2048-bit RSA-OAEP/SHA-256 key pair."""
        return await self._run(self._rsa.generate_key_pair)

    async def export_pub_key(self, key: PublicKey) -> str:
        """Exports a public key as base64 SPKI."""
        return await self._run(self._rsa.export_public_key, key)

    async def export_prv_key(self, key: Optional[PrivateKey]) -> Optional[str]:
        """Exports a private key as base64 PKCS8; None in, None out."""
        if key is None:
            return None
        return await self._run(self._rsa.export_private_key, key)

    async def import_pub_key(self, encoded: str) -> PublicKey:
        """Imports an encrypt-only public key."""
        return await self._run(self._rsa.import_public_key, encoded)

    async def import_prv_key(self, encoded: str) -> PrivateKey:
        """Imports a decrypt-only private key."""
        return await self._run(self._rsa.import_private_key, encoded)

    async def rsa_encrypt(self, data: str, public_key: Union[str, PublicKey]) -> str:
        """RSA-OAEP encrypts base64 data."""
        return await self._run(self._rsa.encrypt, data, public_key)

    async def rsa_decrypt(self, data: str, private_key: Union[str, PrivateKey]) -> str:
        """RSA-OAEP decrypts to base64 data."""
        return await self._run(self._rsa.decrypt, data, private_key)

    # AES

    async def create_random_symmetric_key(self) -> SymmetricKey:
        """Generates a 256-bit AES key."""
        return await self._run(self._aes.generate_key)

    async def export_sym_key(self, key: SymmetricKey) -> str:
        """Exports an AES key as base64 raw bytes."""
        return await self._run(self._aes.export_key, key)

    async def import_sym_key(self, encoded: str) -> SymmetricKey:
        """Imports a raw AES key."""
        return await self._run(self._aes.import_key, encoded)

    async def sym_encrypt(self, key: Union[str, SymmetricKey], data: str) -> str:
        """AES-CBC encrypts text to base64 IV || ciphertext."""
        return await self._run(self._aes.encrypt, key, data)

    async def sym_decrypt(self, key: Union[str, SymmetricKey], data: str) -> str:
        """AES-CBC decrypts base64 IV || ciphertext to text."""
        return await self._run(self._aes.decrypt, key, data)

    # Session keys

    async def wrap_symmetric_key(self, key: SymmetricKey, public_key: Union[str, PublicKey]) -> str:
        """RSA-encrypts an AES key for transport."""
        return await self._run(self._hybrid.wrap_key, key, public_key)

    async def unwrap_symmetric_key(
        self,
        wrapped_key: str,
        private_key: Union[str, PrivateKey]
    ) -> SymmetricKey:
        """Recovers an AES key produced by ``wrap_symmetric_key``."""
        return await self._run(self._hybrid.unwrap_key, wrapped_key, private_key)

    async def seal(self, data: str, public_key: Union[str, PublicKey]) -> SealedMessage:
        """Encrypts text under a one-time AES key wrapped for ``public_key``."""
        return await self._run(self._hybrid.seal, data, public_key)

    async def open(self, message: SealedMessage, private_key: Union[str, PrivateKey]) -> str:
        """Decrypts a ``SealedMessage``."""
        return await self._run(self._hybrid.open, message, private_key)

    async def __aenter__(self) -> 'CryptoClient':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context - cleanup."""
        await self.close()

    async def close(self):
        """Shut down the private executor, if any."""
        if self._executor:
            executor, self._executor = self._executor, None
            await asyncio.get_running_loop().run_in_executor(
                None, functools.partial(executor.shutdown, wait=True)
            )
            logger.debug("Executor shut down")


# Module-level coroutines bound to a default client on the loop's default executor
_default_client = CryptoClient()

generate_rsa_key_pair = _default_client.generate_rsa_key_pair
export_pub_key = _default_client.export_pub_key
export_prv_key = _default_client.export_prv_key
import_pub_key = _default_client.import_pub_key
import_prv_key = _default_client.import_prv_key
rsa_encrypt = _default_client.rsa_encrypt
rsa_decrypt = _default_client.rsa_decrypt
create_random_symmetric_key = _default_client.create_random_symmetric_key
export_sym_key = _default_client.export_sym_key
import_sym_key = _default_client.import_sym_key
sym_encrypt = _default_client.sym_encrypt
sym_decrypt = _default_client.sym_decrypt
wrap_symmetric_key = _default_client.wrap_symmetric_key
unwrap_symmetric_key = _default_client.unwrap_symmetric_key
