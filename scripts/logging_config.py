"""
Logging for the visualiser modules.

Each module logs under its own bare module name (the modules are not in a
package), so the handlers are attached to those loggers one by one instead of
to the root logger, leaving pygame's and other libraries' logging untouched.
"""
import logging
import sys
from typing import Optional

MODULE_LOGGERS = ("display", "render_loop", "visualiser")

LOG_FORMAT = '%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  show_fps: bool = False) -> None:
    """
    Routes the visualiser's module loggers to stdout.

    Args:
        level: Logging level for the lifecycle messages.
        log_file: Optional path to also save logs to.
        show_fps: Log the once-a-second frame rate from the render thread,
            which is logged at DEBUG.
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setFormatter(formatter)

    for name in MODULE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Replace rather than stack handlers when called again
        logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False

    if show_fps:
        logging.getLogger("render_loop").setLevel(logging.DEBUG)

    logging.getLogger("visualiser").info("Logging initialized.")
