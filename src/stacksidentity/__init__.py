"""stacksidentity package for contract names and principal identities."""

import logging

from .address import AddressVersion, StacksAddress
from .principal import (
    ContractName,
    ContractNameError,
    ContractPrincipal,
    PrincipalData,
    StandardPrincipal,
    StandardPrincipalData,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AddressVersion",
    "StacksAddress",
    "ContractName",
    "ContractNameError",
    "StandardPrincipalData",
    "StandardPrincipal",
    "ContractPrincipal",
    "PrincipalData",
]
