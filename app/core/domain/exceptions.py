# app/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Contract Violations ---
# These subclass ValueError too, so pydantic validators surface them as
# ordinary validation errors.

class InvalidPersonError(DomainError, ValueError):
    """Raised when a grammatical person is not 1, 2 or 3."""
    def __init__(self, person: object):
        self.person = person
        super().__init__(f"Grammatical person must be 1, 2 or 3; got {person!r}.")

class InvalidGenderError(DomainError, ValueError):
    """Raised when a gender label cannot be mapped onto a Gender category."""
    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown gender '{label}'.")

class InvalidMarkerError(DomainError, ValueError):
    """Raised when a token marker is not a single non-word character."""
    def __init__(self, marker: str):
        self.marker = marker
        super().__init__(f"Token marker must be a single non-word character; got {marker!r}.")
