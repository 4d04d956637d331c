ERROR_MESSAGES = {
    "auth": {
        "invalid_credentials": "Invalid email/username or password.",
        "invalid_token": "Invalid token. Please sign in again.",
        "missing_token": "Authorization token is missing.",
        "token_expired": "Token has expired. Please sign in again.",
        "token_revoked": "Token has been revoked. Please sign in again.",
    },
    "validation": {
        "request_body_empty": "Request body cannot be empty.",
        "invalid_data": "Invalid data provided.",
        "missing_credentials": "Both a login identifier and a password are required.",
    },
    "not_found": {
        "user": "User not found.",
    },
    "profile": {
        "not_editing": "Profile is in view mode. Start editing before changing fields.",
    },
    "server_error": {
        "fetch_user": "An error occurred while fetching the user.",
        "refresh_token": "Failed to refresh token.",
    },
}
