"""
Business failures raised by the service layer.

Every class carries the HTTP status the API layer answers with, so routers
never translate errors by hand. Anything that is not a ``DomainError``
(database unreachable, programming errors) propagates untouched.
"""


class DomainError(Exception):
    status_code = 500
    default_message = "internal error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# 400
class InvalidInputError(DomainError):
    status_code = 400
    default_message = "invalid input"


class InvalidDateError(InvalidInputError):
    default_message = "invalid date format"


class EmptySetsError(InvalidInputError):
    default_message = "at least one set is required"


# 404
class NotFoundError(DomainError):
    status_code = 404
    default_message = "not found"


class UserNotFoundError(NotFoundError):
    default_message = "user not found"


class WorkoutNotFoundError(NotFoundError):
    default_message = "workout not found"


class MenuNotFoundError(NotFoundError):
    default_message = "menu not found"


class ExerciseNotFoundError(NotFoundError):
    default_message = "exercise not found"


class BodyWeightNotFoundError(NotFoundError):
    default_message = "body weight record not found"


# 403
class UnauthorizedError(DomainError):
    status_code = 403
    default_message = "unauthorized"


class NotCustomOrNotOwnerError(UnauthorizedError):
    default_message = "cannot modify preset exercise"


# 409
class ConflictError(DomainError):
    status_code = 409
    default_message = "conflict"


class ExerciseInUseError(ConflictError):
    default_message = "exercise is in use"


class EmailAlreadyExistsError(ConflictError):
    default_message = "email already exists"


class WorkoutAlreadyExistsError(ConflictError):
    default_message = "a workout already exists for this date"


class BodyWeightConflictError(ConflictError):
    default_message = "body weight record for this date was written concurrently"


# 401
class InvalidCredentialError(DomainError):
    status_code = 401
    default_message = "invalid email or password"


# 502
class ExternalServiceError(DomainError):
    status_code = 502
    default_message = "external service failure"


class GenerationUnavailableError(ExternalServiceError):
    default_message = "menu generation service is unavailable"


class MalformedResponseError(DomainError):
    status_code = 502
    default_message = "failed to parse generated menu"


# 422
class UnprocessableError(DomainError):
    status_code = 422
    default_message = "unprocessable"


class NoValidItemsError(UnprocessableError):
    default_message = "no valid exercises were generated"
