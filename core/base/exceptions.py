"""
Domain error taxonomy.

Services raise these; the DRF exception handler in
staffing_project.exception_handler turns them into JSON responses.

    ValidationError            -> 400
    NotFoundError              -> 404
    ConflictError              -> 409 (uniqueness violation on natural key/code)
    ReferentialIntegrityError  -> 409 (delete blocked by dependent rows)
    PersistenceError           -> 500
    UploadError                -> 500
"""

UNIQUE_VIOLATION = '23505'


class DomainError(Exception):
    status_code = 500
    default_message = 'Internal error'

    def __init__(self, message=None, fields=None):
        self.message = message or self.default_message
        self.fields = fields or {}
        super().__init__(self.message)


class ValidationError(DomainError):
    status_code = 400
    default_message = 'Invalid input'


class NotFoundError(DomainError):
    status_code = 404
    default_message = 'Not found'


class ConflictError(DomainError):
    status_code = 409
    default_message = 'Record already exists'


class ReferentialIntegrityError(DomainError):
    status_code = 409
    default_message = 'Record is referenced by other records'


class PersistenceError(DomainError):
    status_code = 500
    default_message = 'Database error'


class UploadError(DomainError):
    status_code = 500
    default_message = 'Document upload failed'


def is_unique_violation(exc):
    """
    Tell whether a database error is a unique-constraint violation.

    PostgreSQL drivers expose the SQLSTATE (psycopg2: pgcode, psycopg 3:
    sqlstate) on the wrapped driver error; SQLite only reports it in the
    message.
    """
    cause = exc.__cause__
    code = getattr(cause, 'pgcode', None) or getattr(cause, 'sqlstate', None)
    if code:
        return code == UNIQUE_VIOLATION
    return 'UNIQUE constraint failed' in str(exc)
