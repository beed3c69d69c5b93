import logging

from research_portal.logging.logger import Log


class TestConfigure:
    def test_sets_level_and_single_handler(self) -> None:
        Log.configure("info")
        Log.configure("INFO")
        logger = logging.getLogger("research_portal")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_quiets_third_party_loggers(self) -> None:
        Log.configure("INFO")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("pdfminer").level == logging.WARNING

    def test_debug_lets_third_party_loggers_through(self) -> None:
        Log.configure("DEBUG")
        try:
            assert logging.getLogger("openai").level == logging.DEBUG
        finally:
            Log.configure("INFO")
