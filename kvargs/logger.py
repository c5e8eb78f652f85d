# kvargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""logger.py"""
import logging

logger = logging.getLogger("kvargs")
# Without this, records reach logging.lastResort and land on stderr.
logger.addHandler(logging.NullHandler())
