"""
Error taxonomy shared by the authorization/moderation core and the views.

Views translate a ``CatalogError`` into a JSON error response with its
``status``. Anything that is not a ``CatalogError`` (database outages and the
like) is left to propagate and ends up as a generic 500.
"""


class CatalogError(Exception):
    status = 400
    default_message = "Request failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(CatalogError):
    status = 400
    default_message = "Invalid request."


class Forbidden(CatalogError):
    status = 403
    default_message = "Forbidden."


class NotFound(CatalogError):
    status = 404
    default_message = "Not found."


class Conflict(CatalogError):
    status = 409
    default_message = "Conflict."
