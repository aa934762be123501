"""
Configuration module for interpretation and fetching.
"""
from .settings import Settings, get_settings

__all__ = [
    'Settings',
    'get_settings',
]
