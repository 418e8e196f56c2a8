"""Logging utilities for hybridcrypt modules.

Nothing logged here carries key material, plaintext or ciphertext bytes;
records only name the operation, the algorithm and sizes.
"""

import logging
from typing import Union

PACKAGE_LOGGER = 'hybridcrypt'

# Modules that log; kept explicit so levels apply even before they are imported.
PACKAGE_LOGGERS = (
    PACKAGE_LOGGER,
    'hybridcrypt.client',
    'hybridcrypt.core.crypto.rsa.rsa_service',
    'hybridcrypt.core.crypto.rsa.rsa_key_codec',
    'hybridcrypt.core.crypto.aes.aes_service',
)


def get_logger(name: str) -> logging.Logger:
    """Returns a propagating logger for a hybridcrypt module.

    Until the host application configures the root logger, the logger is
    held at WARNING so debug records about key handling stay silent.
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    if not logging.getLogger().handlers and logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)

    return logger


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure logging for hybridcrypt modules.

    Args:
        level: Logging level, as a number or a name such as ``"DEBUG"``
    """
    for logger_name in PACKAGE_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True
