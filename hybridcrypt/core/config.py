"""
Configuration module.

Algorithm parameters are fixed constants; ``ClientConfig`` only tunes how
the async client schedules work.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class RSAParameters:
    """RSA-OAEP parameters."""
    name: str = 'RSA-OAEP'
    key_size: int = 2048
    public_exponent: int = 65537
    hash_name: str = 'SHA-256'


@dataclass(frozen=True)
class AESParameters:
    """AES-CBC parameters."""
    name: str = 'AES-CBC'
    key_size: int = 32  # bytes, generation default
    valid_key_sizes: Tuple[int, ...] = (16, 24, 32)
    block_size: int = 16
    iv_size: int = 16


RSA_PARAMS = RSAParameters()
AES_PARAMS = AESParameters()


@dataclass
class ClientConfig:
    """
    Async client configuration.

    Attributes:
        max_workers: Size of a private thread pool for provider calls.
            None runs them on the event loop's default executor.
        log_level: Level applied to the hybridcrypt loggers by the client.
            None leaves logging untouched.
    """
    max_workers: Optional[int] = None
    log_level: Optional[Union[int, str]] = None

    def __post_init__(self):
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be a positive integer")
