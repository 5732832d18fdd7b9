#===========================================================================
#
# Tests for: insteon_powerline/log.py
#
#===========================================================================
import logging
import logging.handlers
import pytest
import insteon_powerline as IP


@pytest.fixture
def logger():
    log_obj = IP.log.get_logger()
    save = (log_obj.level, list(log_obj.handlers))
    yield log_obj

    # Restore the package logger.
    for handler in log_obj.handlers:
        if handler not in save[1]:
            handler.close()
    log_obj.setLevel(save[0])
    log_obj.handlers = save[1]


class Test_log:
    def test_name(self):
        assert IP.log.get_logger().name == "insteon_powerline"
        assert IP.log.get_logger("other").name == "other"

    #-----------------------------------------------------------------------
    def test_screen(self, logger):
        num = len(logger.handlers)
        IP.log.initialize(level=logging.DEBUG)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == num + 1
        assert isinstance(logger.handlers[-1], logging.StreamHandler)

    #-----------------------------------------------------------------------
    def test_config(self, logger, tmpdir):
        path = str(tmpdir.join("insteon.log"))
        config = {"logging": {"level": 30, "screen": False, "file": path}}
        num = len(logger.handlers)

        IP.log.initialize(config=config)
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == num + 1

        handler = logger.handlers[-1]
        assert isinstance(handler, logging.handlers.WatchedFileHandler)

        logger.warning("Modem test message")
        handler.flush()
        with open(path) as f:
            text = f.read()
        assert "WARNING test_log: Modem test message" in text

    #-----------------------------------------------------------------------
    def test_args_override_config(self, logger):
        config = {"logging": {"level": 30, "screen": False}}
        IP.log.initialize(level=logging.ERROR, config=config)
        assert logger.level == logging.ERROR

#===========================================================================
