"""Contract names and principal identities.

A contract name is validated once, when a ``ContractName`` is created, and
can be trusted from then on. Principals compose already valid parts and
never fail to build.
"""

from .contract_name import ContractName, is_valid_contract_name, validate_contract_name
from .exceptions import ContractNameError, InvalidFormatError, InvalidLengthError
from .principal_data import (
    ContractPrincipal,
    PrincipalData,
    StandardPrincipal,
    StandardPrincipalData,
    contract_name_of,
    issuer_of,
    principal_adapter,
)
from .valid_items import (
    CONTRACT_MAX_NAME_LENGTH,
    CONTRACT_MIN_NAME_LENGTH,
    CONTRACT_NAME_REGEX_STRING,
    TRANSIENT_CONTRACT_NAME,
    contract_name_regex,
)

__all__ = [
    "ContractName",
    "validate_contract_name",
    "is_valid_contract_name",
    "ContractNameError",
    "InvalidLengthError",
    "InvalidFormatError",
    "StandardPrincipalData",
    "StandardPrincipal",
    "ContractPrincipal",
    "PrincipalData",
    "principal_adapter",
    "issuer_of",
    "contract_name_of",
    "CONTRACT_MIN_NAME_LENGTH",
    "CONTRACT_MAX_NAME_LENGTH",
    "CONTRACT_NAME_REGEX_STRING",
    "TRANSIENT_CONTRACT_NAME",
    "contract_name_regex",
]
