"""
Configuration management module for hand tracking system.
"""

from .settings import Settings, HandConfig, BodyConfig

__all__ = ['Settings', 'HandConfig', 'BodyConfig']
