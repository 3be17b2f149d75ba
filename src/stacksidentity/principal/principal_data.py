"""Principals are the identities that can own assets or deploy contracts.

A principal is either a standard account (``StandardPrincipal``) or a
contract deployed by such an account (``ContractPrincipal``). Both variants
carry a literal ``kind`` tag so that ``PrincipalData`` can be validated as a
discriminated union and dispatched on with ``match``.
"""

from typing import Annotated, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ..address import AddressVersion, StacksAddress
from .contract_name import ContractName


class StandardPrincipalData(BaseModel):
    """
    An account identity: an address version paired with a raw address.

    Attributes:
        version (AddressVersion): The network and signature kind.
        address (StacksAddress): The address hash.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: AddressVersion = Field(
        description="The network and signature kind of the address.",
    )
    address: StacksAddress = Field(
        description="The raw address identifying the account.",
    )

    @classmethod
    def new(cls, version: AddressVersion, address: StacksAddress) -> Self:
        return cls(version=version, address=address)


class StandardPrincipal(BaseModel):
    """A user or account principal."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["standard"] = "standard"
    principal: StandardPrincipalData

    @classmethod
    def new(cls, principal: StandardPrincipalData) -> Self:
        return cls(principal=principal)


class ContractPrincipal(BaseModel):
    """
    A deployed smart contract, scoped to the account that deployed it.

    Attributes:
        issuer (StandardPrincipalData): The deploying account.
        name (ContractName): Tells apart the contracts deployed by the issuer.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["contract"] = "contract"
    issuer: StandardPrincipalData
    name: ContractName

    @classmethod
    def new(cls, issuer: StandardPrincipalData, name: ContractName) -> Self:
        """Combine an issuer with an already validated contract name.

        Raises:
            TypeError: If ``name`` was not obtained from the validator.
        """
        if not isinstance(name, ContractName):
            raise TypeError(
                "Contract principals need a validated ContractName, "
                f"got {type(name).__name__}."
            )
        return cls(issuer=issuer, name=name)


PrincipalData = Annotated[
    StandardPrincipal | ContractPrincipal, Field(discriminator="kind")
]

principal_adapter: TypeAdapter[PrincipalData] = TypeAdapter(PrincipalData)


def issuer_of(principal: PrincipalData) -> StandardPrincipalData:
    """Returns the account a principal belongs to.

    For a contract principal this is the deploying account.
    """
    match principal:
        case StandardPrincipal(principal=standard):
            return standard
        case ContractPrincipal(issuer=issuer):
            return issuer
        case _:
            raise TypeError(f"Not a principal: {principal!r}")


def contract_name_of(principal: PrincipalData) -> ContractName | None:
    match principal:
        case StandardPrincipal():
            return None
        case ContractPrincipal(name=name):
            return name
        case _:
            raise TypeError(f"Not a principal: {principal!r}")
