#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import threading


class OBBLogger:
    """
    Per-class logger registry.
    Every logger lives below the common "OBB" namespace.
    """

    _loggers = {}
    _lock = threading.RLock()

    @staticmethod
    def getLogger(class_name):
        """Get a logger instance for the given class name."""
        with OBBLogger._lock:
            if class_name not in OBBLogger._loggers:
                OBBLogger._loggers[class_name] = logging.getLogger(f"OBB.{class_name}")
            return OBBLogger._loggers[class_name]


# Decorator to add a logger to classes
def OBB_LOGGER(cls):
    """Decorator to add logger functionality to a class."""
    cls.logger = OBBLogger.getLogger(cls.__name__)

    cls.debug = lambda self, msg, *args, **kwargs: cls.logger.debug(
        msg, *args, **kwargs
    )
    cls.info = lambda self, msg, *args, **kwargs: cls.logger.info(msg, *args, **kwargs)
    cls.warning = lambda self, msg, *args, **kwargs: cls.logger.warning(
        msg, *args, **kwargs
    )
    cls.error = lambda self, msg, *args, **kwargs: cls.logger.error(
        msg, *args, **kwargs
    )

    return cls
