"""Domain errors raised by the core. All are recoverable; callers surface `message` to the user."""


class CommoditiesError(Exception):
    """Base class for errors raised by the session, access and catalog layers."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class AuthError(CommoditiesError):
    """Raised by login when no credential matches the given username and password."""

    INVALID_CREDENTIALS = "invalid_credentials"

    def __init__(self, reason: str = INVALID_CREDENTIALS) -> None:
        self.reason = reason
        super().__init__("Invalid username or password")


class ValidationError(CommoditiesError):
    """Raised when product fields fail validation. `field` names the first failing field."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(reason)


class NotFound(CommoditiesError):
    """Raised when an operation targets a product id that is not in the catalog."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Product {product_id!r} not found")


class NotAuthenticated(CommoditiesError):
    """Raised when a gated operation runs without a signed-in session."""

    def __init__(self) -> None:
        super().__init__("Not authenticated")


class PermissionDenied(CommoditiesError):
    """Raised when the current role lacks the capability an operation requires."""

    def __init__(self, role: str, capability: str) -> None:
        self.role = role
        self.capability = capability
        super().__init__(f"Role {role!r} is not allowed to {capability.replace('_', ' ')}")
