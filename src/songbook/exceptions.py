class SongbookError(Exception):
    """Base exception for songbook."""


class ValidationError(SongbookError):
    """A candidate value broke one of the song rules.

    ``field`` names the rule that failed: ``"title"``, ``"artist"``,
    ``"duration"``, ``"rating"`` or ``"tag"``.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


class EmptyFieldError(ValidationError):
    """Raised when a title or artist is empty after trimming."""

    def __init__(self, field: str):
        super().__init__(field, "must not be empty")


class InvalidDurationError(ValidationError):
    def __init__(self, value: int):
        self.value = value
        super().__init__("duration", f"must be a positive number of seconds, got {value}")


class InvalidRatingError(ValidationError):
    def __init__(self, value: int):
        self.value = value
        super().__init__("rating", f"must be between 1 and 5, got {value}")


class EmptyTagError(ValidationError):
    def __init__(self):
        super().__init__("tag", "must not be empty")


class DuplicateTagError(ValidationError):
    """Raised when a tag equals an existing one, ignoring case."""

    def __init__(self, tag: str, existing: str):
        self.tag = tag
        self.existing = existing
        super().__init__("tag", f"{tag!r} already present as {existing!r}")


class TagNotFoundError(ValidationError):
    def __init__(self, tag: str):
        self.tag = tag
        super().__init__("tag", f"{tag!r} not found")


class SongSpecError(SongbookError):
    """Raised when a command-line song description cannot be parsed."""

    def __init__(self, spec: str, reason: str):
        self.spec = spec
        self.reason = reason
        super().__init__(f"Bad song {spec!r}: {reason}")


class InvalidConfigError(SongbookError):
    """Raised when an environment setting has an unusable value."""

    def __init__(self, variable_name: str, value: str):
        self.variable_name = variable_name
        self.value = value
        super().__init__(f"Invalid value {value!r} for {variable_name}")
