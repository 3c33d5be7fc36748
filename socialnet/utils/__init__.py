__all__ = [
    "create_access_token",
    "get_current_user",
    "oauth2_scheme",
    "canonical_pair",
    "utcnow",
]


def __getattr__(name):
    if name in {
        "create_access_token",
        "get_current_user",
        "oauth2_scheme",
    }:
        from . import security as _security
        return getattr(_security, name)
    if name == "canonical_pair":
        from .conversation import canonical_pair
        return canonical_pair
    if name == "utcnow":
        from .clock import utcnow
        return utcnow
    raise AttributeError(f"module 'socialnet.utils' has no attribute '{name}'")
