#===========================================================================
#
# Package logging
#
#===========================================================================
import logging
import logging.handlers

# Every module logs through this logger so applications can control the
# package output in one place.
NAME = "insteon_powerline"

FORMAT = '%(asctime)s %(levelname)s %(module)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


#===========================================================================
def get_logger(name=NAME):
    return logging.getLogger(name)


#===========================================================================
def initialize(level=None, screen=None, file=None, config=None):
    """Set up the package logger.

    Inputs that are None are read from the 'logging' section of the config
    dictionary if there is one.  Defaults are level INFO with screen output
    and no log file.

    Args:
      level (int):  The logging level.
      screen (bool):  True to log to stderr.
      file (str):  File to log to.  A WatchedFileHandler is used so system
           log rotation works.
      config (dict):  Configuration dictionary.

    Returns:
      Returns the package logger.
    """
    settings = dict(config.get("logging", None) or {}) if config else {}
    inputs = {"level": level, "screen": screen, "file": file}
    settings.update({k: v for k, v in inputs.items() if v is not None})

    logger = get_logger()
    logger.setLevel(settings.get("level", logging.INFO))

    handlers = []
    if settings.get("screen", True):
        handlers.append(logging.StreamHandler())
    if settings.get("file"):
        handlers.append(logging.handlers.WatchedFileHandler(settings["file"]))

    formatter = logging.Formatter(FORMAT, DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
