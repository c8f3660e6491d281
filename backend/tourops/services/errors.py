"""Planner errors and the HTTP status each one maps to."""


class PlannerError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PlannerError):
    """Missing/invalid field or a broken cross-field rule."""
    status_code = 400


class NotFoundError(PlannerError):
    """The id does not exist, or exists under a different parent."""
    status_code = 404


class ConflictError(PlannerError):
    """A many-to-many pair that is already linked."""
    status_code = 409
