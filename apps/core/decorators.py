from functools import wraps

from .http import json_error


def login_required_json(view_func):
    """Like login_required, but answers 401 JSON instead of redirecting"""

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return json_error('Not authorized', status=401)
        return view_func(request, *args, **kwargs)

    return _wrapped
