"""
Unit tests for the JSON logging setup.
"""

import json

from shop_service.app.utils.logging import setup_shop_logging


class TestShopLogging:
    def test_child_record_written_once(self, capsys):
        setup_shop_logging("shop_logging_test", log_level="INFO")
        child = setup_shop_logging("shop_logging_test.members", log_level="INFO")

        child.info("member joined", extra={"member_id": 7})

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        entry = json.loads(lines[0])
        assert entry["logger"] == "shop_logging_test.members"
        assert entry["message"] == "member joined"
        assert entry["member_id"] == 7
        assert entry["level"] == "INFO"
        assert "msg" not in entry
        assert "args" not in entry

    def test_repeated_setup_does_not_stack_handlers(self, capsys):
        setup_shop_logging("shop_logging_test.orders", log_level="INFO")
        logger = setup_shop_logging("shop_logging_test.orders", log_level="INFO")

        logger.info("order placed")

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        assert len(logger.handlers) == 1

    def test_level_filters_records(self, capsys):
        logger = setup_shop_logging("shop_logging_test.items", log_level="WARNING")

        logger.info("hidden")
        logger.warning("shown")

        lines = capsys.readouterr().out.strip().splitlines()
        assert [json.loads(line)["message"] for line in lines] == ["shown"]

    def test_excluded_fields_are_dropped(self, capsys):
        logger = setup_shop_logging(
            "shop_logging_test.queries", log_level="INFO", exclude_fields=["secret"]
        )

        logger.info("query", extra={"secret": "x", "rows": 3})

        entry = json.loads(capsys.readouterr().out.strip())
        assert "secret" not in entry
        assert entry["rows"] == 3
