"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)
    }


def parse_key_event(data: Optional[Dict[str, Any]]):
    """
    Build a KeyEvent from a JSON payload.

    Returns:
        KeyEvent or None if the payload carries no usable key
    """
    from ..services.input_router import KeyEvent

    if not data or not isinstance(data.get('key'), str) or not data['key']:
        return None

    key_code = data.get('key_code')
    if key_code is not None:
        try:
            key_code = int(key_code)
        except (TypeError, ValueError):
            return None

    return KeyEvent(key=data['key'], key_code=key_code)
