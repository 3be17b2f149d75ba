from typing import Any, Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .exceptions import ContractNameError, InvalidFormatError, InvalidLengthError
from .valid_items import (
    CONTRACT_MAX_NAME_LENGTH,
    CONTRACT_MIN_NAME_LENGTH,
    TRANSIENT_CONTRACT_NAME,
    contract_name_regex,
)


class ContractName(str):
    """
    A validated contract name.

    Instances only exist for strings that satisfy the naming grammar: a
    letter followed by up to 39 letters, digits, hyphens or underscores, or
    the reserved literal ``__transient``. Being a ``str``, a ContractName
    compares and hashes like its text, so it can be used wherever the plain
    name is expected.

    Raises:
        InvalidLengthError: If the name is empty or longer than 40 characters.
        InvalidFormatError: If the characters do not follow the grammar.

    Example:
        ```python
        name = ContractName("token-v2")
        assert name == "token-v2"
        ```
    """

    __slots__ = ()

    def __new__(cls, raw: str) -> Self:
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise TypeError(
                f"Contract name must be a string, got {type(raw).__name__}."
            )
        if raw != TRANSIENT_CONTRACT_NAME and (
            len(raw) < CONTRACT_MIN_NAME_LENGTH or len(raw) > CONTRACT_MAX_NAME_LENGTH
        ):
            raise InvalidLengthError(raw)
        if contract_name_regex().fullmatch(raw) is None:
            raise InvalidFormatError(raw)
        return super().__new__(cls, raw)

    @classmethod
    def new(cls, raw: str) -> Self:
        """Validate ``raw`` and return it as a ContractName."""
        return cls(raw)

    @property
    def is_transient(self) -> bool:
        return self == TRANSIENT_CONTRACT_NAME

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Lets pydantic models declare fields of type ContractName."""
        from_str = core_schema.no_info_after_validator_function(
            cls, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            # already validated instances pass through untouched
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str],
                mode="left_to_right",
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="always"
            ),
        )


def validate_contract_name(raw: str) -> ContractName:
    """Validate a raw string and wrap it as a ContractName.

    Args:
        raw (str): The candidate name.

    Returns:
        ContractName: The validated name.

    Raises:
        InvalidLengthError: If the name is empty or longer than 40 characters.
        InvalidFormatError: If the characters do not follow the grammar.
    """
    return ContractName(raw)


def is_valid_contract_name(raw: str) -> bool:
    """Check whether ``raw`` would be accepted as a contract name."""
    try:
        ContractName(raw)
    except ContractNameError:
        return False
    return True
