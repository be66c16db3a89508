"""Typed client for the Fuel GraphQL API."""

from .client import FuelClient, GetBlockOption, GetChainOption, GetTransactionOption
from .config import ClientConfig

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "FuelClient",
    "GetBlockOption",
    "GetChainOption",
    "GetTransactionOption",
]
