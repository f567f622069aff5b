"""Logging setup for the SDK.

Modules log through ``logging.getLogger(__name__)``. The package logger gets a
``NullHandler`` so nothing is printed unless the application configures
logging or calls ``enable_debug_logging``.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

package_logger = logging.getLogger("recosdk")
package_logger.addHandler(logging.NullHandler())


def enable_debug_logging(level: int = logging.DEBUG) -> logging.Handler:
    """Attach a stream handler to the ``recosdk`` logger and return it."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler
