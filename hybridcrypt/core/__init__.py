"""Core building blocks: configuration, errors, logging and crypto services."""
