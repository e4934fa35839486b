import logging
from enum import Enum
import os

import inspect

LOGGER_NAME = "pfafft"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

class LogLevel(Enum):
    """
    An enumeration which represents the log levels.

    Attributes:
        VERBOSE (`int`): All possible logs are printed, including per-node planning details.
        INFO (`int`): Planning decisions and plan construction are printed.
        WARNING (`int`): Only warnings and errors are printed. Default log level.
        ERROR (`int`): Only errors are printed. Useful for muting annoying warnings that you *know* are harmless.
    """
    VERBOSE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

# mapping from our log levels onto the standard library ones
log_level_to_logging_dict = {
    LogLevel.VERBOSE: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}

__initilized_instance: bool = False

def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)

def is_initialized() -> bool:
    """
    A function which checks if the pfafft logging has been initialized.

    Returns:
        `bool`: A flag indicating whether the library has been initialized.
    """

    global __initilized_instance

    return __initilized_instance

def initialize(log_level: LogLevel = LogLevel.WARNING, stream=None):
    """
    A function which initializes the pfafft logger. Calling it more than once is a no-op,
    use `set_log_level` to change the level afterwards.

    Args:
        log_level (`LogLevel`): The log level, which is one of the following:
            LogLevel.VERBOSE
            LogLevel.INFO
            LogLevel.WARNING
            LogLevel.ERROR
        stream: The stream the handler writes to. Defaults to stderr.
    """

    global __initilized_instance

    if __initilized_instance:
        return

    logger = get_logger()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(log_level_to_logging_dict[log_level])
    logger.propagate = False

    __initilized_instance = True

def set_log_level(log_level: LogLevel):
    """
    A function which sets the log level of the pfafft logger.

    Args:
        log_level (`LogLevel`): The new log level.
    """

    initialize(log_level)
    get_logger().setLevel(log_level_to_logging_dict[log_level])

def log(text: str, end: str = '\n', level: LogLevel = LogLevel.ERROR, stack_offset: int = 1):
    """
    A function which logs a message at the specified log level.

    Args:
        text (`str`): The message to log.
        end (`str`): Appended to the message, trailing newlines are dropped.
        level (`LogLevel`): The log level.
        stack_offset (`int`): How many frames up the reported caller is.
    """

    initialize()

    logger = get_logger()
    logging_level = log_level_to_logging_dict[level]

    if not logger.isEnabledFor(logging_level):
        return

    frame = inspect.stack()[stack_offset]

    logger.log(
        logging_level,
        "[%s:%d] %s",
        os.path.relpath(frame.filename, os.getcwd()),
        frame.lineno,
        (text + end).rstrip('\n')
    )

def log_error(text: str, end: str = '\n'):
    """
    A function which logs an error message.

    Args:
        text (`str`): The message to log.
    """

    log(text, end, LogLevel.ERROR, 2)

def log_warning(text: str, end: str = '\n'):
    """
    A function which logs a warning message.

    Args:
        text (`str`): The message to log.
    """

    log(text, end, LogLevel.WARNING, 2)

def log_info(text: str, end: str = '\n'):
    """
    A function which logs an info message.

    Args:
        text (`str`): The message to log.
    """

    log(text, end, LogLevel.INFO, 2)

def log_verbose(text: str, end: str = '\n'):
    """
    A function which logs a verbose message.

    Args:
        text (`str`): The message to log.
    """

    log(text, end, LogLevel.VERBOSE, 2)
