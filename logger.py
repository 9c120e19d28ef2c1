""" LOGGING
"""
import logging

from config import CFG

#
# CONFIG
#
FORMAT = '%(asctime)-15s %(name)s %(levelname)s %(message)s'
logging.basicConfig(format=FORMAT)

_loggers: dict[str, logging.Logger] = {}


#
# PUBLIC
#
def get_logger(name: str) -> logging.Logger:
    if name not in _loggers:
        logger = logging.getLogger(name)
        logger.setLevel(CFG.get('logging', 'level', 'WARNING'))
        _loggers[name] = logger
    return _loggers[name]


def set_level(level: str):
    for logger in _loggers.values():
        logger.setLevel(level)
