"""
secret_server package initializer.
"""

from . import config

__all__ = ["config"]
