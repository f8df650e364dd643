from services.auth.tokens import (
    InvalidTokenError,
    create_access_token,
    decode_access_token,
    get_current_user_id,
)

__all__ = [
    "InvalidTokenError",
    "create_access_token",
    "decode_access_token",
    "get_current_user_id",
]
