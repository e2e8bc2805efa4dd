"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    HASHED_PASSWORD = "hashed_password"
    CREATED_AT = "created_at"

    # JWT standard claim carrying the user ID
    TOKEN_SUBJECT = "sub"
