"""This module contains the naming rules used across the principal models."""

import logging
import re
import threading

logger = logging.getLogger(__name__)

CONTRACT_MIN_NAME_LENGTH = 1
CONTRACT_MAX_NAME_LENGTH = 40
TRANSIENT_CONTRACT_NAME = "__transient"

CONTRACT_NAME_REGEX_STRING = (
    f"[a-zA-Z](([a-zA-Z0-9]|[-_])){{{CONTRACT_MIN_NAME_LENGTH - 1},"
    f"{CONTRACT_MAX_NAME_LENGTH - 1}}}"
)

_regex_lock = threading.Lock()
_regex: re.Pattern[str] | None = None


def contract_name_regex() -> re.Pattern[str]:
    """Returns the compiled contract name grammar.

    The pattern is compiled once, on first use, under a lock and shared
    afterwards. It must be applied with ``fullmatch`` so the whole string
    is checked.
    """
    global _regex
    if _regex is None:
        with _regex_lock:
            if _regex is None:
                _regex = re.compile(
                    f"(?:{CONTRACT_NAME_REGEX_STRING})"
                    f"|{re.escape(TRANSIENT_CONTRACT_NAME)}"
                )
                logger.debug("Compiled contract name grammar %r", _regex.pattern)
    return _regex
