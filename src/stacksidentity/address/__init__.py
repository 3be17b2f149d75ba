from .address import HASH_LENGTH, AddressVersion, StacksAddress

__all__ = ["AddressVersion", "StacksAddress", "HASH_LENGTH"]
