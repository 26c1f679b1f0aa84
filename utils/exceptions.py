"""Error taxonomy shared by the services and the HTTP layer."""


class ExerciseTrackerError(Exception):
    """Base class for application errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ExerciseTrackerError):
    """Malformed or missing input. Surfaced as HTTP 400."""

    status_code = 400


class ConflictError(ExerciseTrackerError):
    """Username uniqueness violation on insert. Never leaves the user service."""

    def __init__(self, username: str):
        super().__init__(f"username '{username}' already exists")
        self.username = username


class ServerError(ExerciseTrackerError):
    """Unexpected store or runtime failure. Surfaced as a generic HTTP 500."""

    def __init__(self, message: str = "server error"):
        super().__init__(message)
