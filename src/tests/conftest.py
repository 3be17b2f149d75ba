import os

import pytest
from polyfactory.factories.pydantic_factory import ModelFactory

from stacksidentity.address import HASH_LENGTH, StacksAddress
from stacksidentity.principal import StandardPrincipalData


class StacksAddressFactory(ModelFactory[StacksAddress]):
    __model__ = StacksAddress

    @classmethod
    def hash_bytes(cls) -> bytes:
        return os.urandom(HASH_LENGTH)


class StandardPrincipalDataFactory(ModelFactory[StandardPrincipalData]):
    __model__ = StandardPrincipalData

    @classmethod
    def address(cls) -> StacksAddress:
        return StacksAddressFactory.build()


@pytest.fixture(scope="session")
def address_factory() -> type[StacksAddressFactory]:
    return StacksAddressFactory


@pytest.fixture(scope="session")
def standard_factory() -> type[StandardPrincipalDataFactory]:
    """Factory for account principals with random address hashes."""
    return StandardPrincipalDataFactory


@pytest.fixture
def issuer(standard_factory) -> StandardPrincipalData:
    return standard_factory.build()
