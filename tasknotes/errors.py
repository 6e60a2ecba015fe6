"""Domain errors raised by the task and note services.

Each carries the HTTP status the API answers with; ``tasknotes.main`` maps
them to ``{"detail": ...}`` JSON responses.
"""


class TaskNotesError(Exception):
    status_code = 400
    default_detail = "Bad request"

    def __init__(self, detail=None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class Unauthenticated(TaskNotesError):
    status_code = 401
    default_detail = "Not authenticated"


class NotFound(TaskNotesError):
    status_code = 404
    default_detail = "Not found"


class Forbidden(TaskNotesError):
    status_code = 403
    default_detail = "Not authorized"


class InvalidUpdate(TaskNotesError):
    status_code = 422
    default_detail = "Invalid update"
