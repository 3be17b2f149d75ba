import logging
import threading

from stacksidentity.principal import valid_items
from stacksidentity.principal.valid_items import (
    CONTRACT_NAME_REGEX_STRING,
    contract_name_regex,
)


class TestContractNameRegex:
    def test_regex_string(self):
        assert CONTRACT_NAME_REGEX_STRING == "[a-zA-Z](([a-zA-Z0-9]|[-_])){0,39}"

    def test_compiled_once(self):
        assert contract_name_regex() is contract_name_regex()

    def test_full_match_only(self):
        regex = contract_name_regex()
        assert regex.fullmatch("abc") is not None
        assert regex.fullmatch("__transient") is not None
        assert regex.fullmatch("abc ") is None
        assert regex.fullmatch("abc\n") is None
        assert regex.fullmatch("x__transient") is not None
        assert regex.fullmatch("__transient_") is None

    def test_debug_log_on_compile(self, caplog, monkeypatch):
        monkeypatch.setattr(valid_items, "_regex", None)
        with caplog.at_level(logging.DEBUG, logger=valid_items.__name__):
            contract_name_regex()
            contract_name_regex()
        records = [r for r in caplog.records if r.name == valid_items.__name__]
        assert len(records) == 1
        assert "grammar" in records[0].getMessage()

    def test_racing_first_calls_compile_once(self, caplog, monkeypatch):
        monkeypatch.setattr(valid_items, "_regex", None)
        barrier = threading.Barrier(8)
        patterns = []

        def first_call():
            barrier.wait()
            patterns.append(contract_name_regex())

        with caplog.at_level(logging.DEBUG, logger=valid_items.__name__):
            threads = [threading.Thread(target=first_call) for _ in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        records = [r for r in caplog.records if r.name == valid_items.__name__]
        assert len(records) == 1
        assert len(patterns) == 8
        assert all(pattern is patterns[0] for pattern in patterns)
