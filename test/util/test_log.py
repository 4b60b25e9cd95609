import unittest
from unittest.mock import patch

from tebex_headless.model.message import Message
from tebex_headless.util import log
from tebex_headless.util.config import config


class LogTest(unittest.TestCase):
    original_level: str

    def setUp(self):
        self.original_level = config.log_level
        config.log_level = "info"

    def tearDown(self):
        config.log_level = self.original_level

    def test_single_message(self):
        self.assertEqual(log.i("hello"), "hello")

    def test_message_tree(self):
        result = log.i("first", "second", "third")

        self.assertEqual(result, "first\n ├─ second\n └─ third")

    def test_message_tree_with_exception_stays_open(self):
        result = log.i("failed", ValueError("boom"))

        self.assertEqual(result, "failed\n ├─ ! ValueError (see below)")

    def test_models_are_dumped(self):
        result = log.i(Message(success = True, message = "ok"))

        self.assertEqual(result, "Message: {'success': True, 'message': 'ok'}")

    def test_empty_message(self):
        self.assertEqual(log.w(), "")

    @patch("tebex_headless.util.log.logger")
    def test_level_threshold(self, mock_logger):
        log.t("trace")
        log.d("debug")
        mock_logger.debug.assert_not_called()

        log.i("info")
        log.w("warning")
        log.e("error")
        mock_logger.info.assert_called_once_with("info")
        mock_logger.warning.assert_called_once_with("warning")
        mock_logger.error.assert_called_once_with("error")

    @patch("tebex_headless.util.log.logger")
    def test_trace_level_logs_everything(self, mock_logger):
        config.log_level = "trace"

        log.t("trace")

        mock_logger.debug.assert_called_once_with("trace")

    @patch("tebex_headless.util.log.logger")
    def test_exceptions_always_logged(self, mock_logger):
        config.log_level = "error"

        log.d("debug", RuntimeError("boom"))

        mock_logger.debug.assert_not_called()
        mock_logger.error.assert_any_call("Message: boom")

    @patch("builtins.print")
    @patch("tebex_headless.util.log.logger")
    def test_local_level_prints(self, mock_logger, mock_print):
        config.log_level = "local"

        log.t("trace")

        mock_print.assert_called_once_with("[T] trace")
        mock_logger.debug.assert_not_called()

    @patch("tebex_headless.util.log.logger")
    def test_warning_level_keeps_warnings(self, mock_logger):
        config.log_level = "warning"

        log.i("info")
        log.w("careful")

        mock_logger.info.assert_not_called()
        mock_logger.warning.assert_called_once_with("careful")

    @patch("tebex_headless.util.log.logger")
    def test_warn_is_an_alias_of_warning(self, mock_logger):
        config.log_level = "warn"

        log.i("info")
        log.w("careful")

        mock_logger.info.assert_not_called()
        mock_logger.warning.assert_called_once_with("careful")

    @patch("tebex_headless.util.log.logger")
    def test_error_level_drops_warnings(self, mock_logger):
        config.log_level = "error"

        log.w("careful")
        log.e("failed")

        mock_logger.warning.assert_not_called()
        mock_logger.error.assert_called_once_with("failed")
