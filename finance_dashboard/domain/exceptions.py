"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class UnknownPageError(Exception):
    """Raised when a resource page name is not registered."""

    def __init__(self, page: str):
        self.page = page
        super().__init__(f"Unknown resource page '{page}'")


class CollaboratorError(Exception):
    """Raised when the collaborator API call fails.

    Covers transport errors (status_code 0), non-2xx responses and
    payloads that do not match the resource schema.
    """

    def __init__(self, resource: str, status_code: int, message: str):
        self.resource = resource
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{resource}] {status_code}: {message}")


class FetchFailedError(Exception):
    """Raised when a collection could not be loaded.

    ``message`` is the static text shown to the user.
    """

    def __init__(self, resource: str, message: str):
        self.resource = resource
        self.message = message
        super().__init__(message)


class MutationFailedError(Exception):
    """Raised when a create/update/delete/action call is rejected."""

    def __init__(self, resource: str, operation: str, message: str):
        self.resource = resource
        self.operation = operation
        self.message = message
        super().__init__(message)


class DraftValidationError(Exception):
    """Raised when a draft record fails client-side validation."""

    def __init__(self, missing: list[str], errors: list[str] | None = None):
        self.missing = missing
        self.errors = errors or []
        parts = []
        if missing:
            parts.append(f"missing required fields: {', '.join(missing)}")
        parts.extend(self.errors)
        super().__init__("; ".join(parts) or "invalid draft")


class AuthenticationError(Exception):
    """Raised when sign-in or sign-up is refused by the collaborator."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotAuthenticatedError(Exception):
    """Raised when a dashboard operation runs without a signed-in user."""

    def __init__(self) -> None:
        super().__init__("Not signed in")
