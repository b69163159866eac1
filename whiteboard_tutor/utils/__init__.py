"""
Utility modules for Whiteboard Tutor
"""

from .logging_config import LoggingConfig

__all__ = ['LoggingConfig']
