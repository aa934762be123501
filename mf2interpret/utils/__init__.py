"""
Utility functions
"""
from .datetime_utils import DateFormatError, normalize_dt
from .text_utils import get_plain_text, is_name_a_title
from .url_utils import convert_relative_paths_to_absolute, is_uri, url_equal

__all__ = [
    'DateFormatError',
    'normalize_dt',
    'get_plain_text',
    'is_name_a_title',
    'convert_relative_paths_to_absolute',
    'is_uri',
    'url_equal',
]
