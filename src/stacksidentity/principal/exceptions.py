from .valid_items import CONTRACT_MAX_NAME_LENGTH, CONTRACT_MIN_NAME_LENGTH


class ContractNameError(ValueError):
    """Base class for all contract name validation errors."""

    _default_message: str = "The contract name is invalid."

    def __init__(self, value: str, message: str | None = None):
        self.value = value
        self.message = message or self._default_message
        super().__init__(self.message)


class InvalidLengthError(ContractNameError):
    _default_message: str = (
        f"Length should be between {CONTRACT_MIN_NAME_LENGTH} "
        f"and {CONTRACT_MAX_NAME_LENGTH}."
    )


class InvalidFormatError(ContractNameError):
    _default_message: str = (
        "Format should follow the contract name specification: a letter "
        "followed by letters, digits, '-' or '_'."
    )
