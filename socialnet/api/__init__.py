# socialnet/api/__init__.py
# This file makes the api directory a Python package.

from . import messages
from . import notification

__all__ = [
    "messages",
    "notification",
]
