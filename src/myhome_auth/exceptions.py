"""Authentication exceptions.

These exceptions are raised by the myhome_auth package and should be
caught and handled by the application layer (AuthenticationService,
UserService) or the request middleware.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a bearer token is invalid or malformed."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    """Raised when a bearer token carries an expiration in the past."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class WeakSecretError(AuthError, ValueError):
    """Raised when the signing secret is too short for the signing algorithm."""

    def __init__(self, message: str = "Signing secret is too weak"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login.

    The two concrete causes below share this message so that callers
    outside the service cannot tell an unknown email from a bad password.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class UserNotFoundError(InvalidCredentialsError):
    """Raised when no user is registered under the login email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__()


class CredentialsIncorrectError(InvalidCredentialsError):
    """Raised when the supplied password does not match the stored hash."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__()


class SecurityTokenError(AuthError):
    """Base exception for single-use security token failures."""

    def __init__(self, message: str = "Security token error"):
        super().__init__(message)


class SecurityTokenNotFoundError(SecurityTokenError):
    """Raised when no valid token matches the candidate value."""

    def __init__(self, message: str = "No valid security token found"):
        super().__init__(message)


class SecurityTokenAlreadyUsedError(SecurityTokenError):
    """Raised when a token has already been consumed."""

    def __init__(self, token: str):
        self.token = token
        super().__init__("Security token has already been used")
