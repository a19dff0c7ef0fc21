"""Tests logging functions in multi_image_grid."""
import logging

import multi_image_grid.logging_utils as mig_logging_utils


class TestLoggingUtils:
    def test_logger_singleton_behavior(self) -> None:
        """Test that logger instances are singleton per name."""
        logger1 = mig_logging_utils.setup_logger("test_logger")
        logger2 = mig_logging_utils.setup_logger("test_logger")
        assert logger1 is logger2
        assert len(logger1.handlers) == 1

    def test_logger_custom_formatter_and_handler(self) -> None:
        """Test custom formatter and handler are applied."""
        formatter = logging.Formatter("[CUSTOM] %(message)s")
        handler = logging.StreamHandler()
        logger = mig_logging_utils.setup_logger(
            "custom_logger",
            formatter=formatter,
            handler=handler,
        )
        assert logger.name == "custom_logger"
        assert len(logger.handlers) == 1
        assert logger.handlers[0].formatter._fmt.startswith("[CUSTOM]")

    def test_shared_logger_name(self) -> None:
        assert mig_logging_utils.logger.name == "multi_image_grid"

    def test_set_verbosity_toggles_debug(self) -> None:
        logger = mig_logging_utils.setup_logger("verbosity_logger")
        mig_logging_utils.set_verbosity(verbose=True, logger_instance=logger)
        assert logger.level == logging.DEBUG
        mig_logging_utils.set_verbosity(verbose=False, logger_instance=logger)
        assert logger.level == logging.INFO
