"""
Exception handler for standardized API error responses.

Every error leaves the API as:
{
    "error": "Error message",
    "fields": {"field": ["error1", "error2"]}    # only for field errors
}

Domain errors (core.base.exceptions) carry their own status code. Errors
coming straight from Django or the database are translated first:

    django ValidationError          -> 400
    Http404 / ObjectDoesNotExist    -> 404
    ProtectedError/RestrictedError  -> 409 (ReferentialIntegrityError)
    IntegrityError (unique)         -> 409 (ConflictError)
    other DatabaseError             -> 500 (PersistenceError)
"""
import logging

from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, IntegrityError
from django.db.models import ProtectedError, RestrictedError
from django.http import Http404
from rest_framework import status as http_status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.base import exceptions

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Format DRF, Django, database and domain errors consistently.

    Unknown exceptions still return None so Django's 500 handling applies.
    """
    exc = translate_exception(exc)

    if isinstance(exc, exceptions.DomainError):
        if exc.status_code >= 500:
            logger.error("%s failed: %s", _view_name(context), exc.message,
                         exc_info=exc.__cause__ or exc)
        return Response(error_body(exc.message, exc.fields), status=exc.status_code)

    # Call DRF's default exception handler for its own exceptions
    response = exception_handler(exc, context)
    if response is not None:
        response.data = format_error_response(response.data)
    return response


def translate_exception(exc):
    """Map Django/database exceptions onto the domain taxonomy."""
    if isinstance(exc, exceptions.DomainError):
        return exc
    if isinstance(exc, DjangoValidationError):
        fields = exc.message_dict if hasattr(exc, 'error_dict') else {}
        message = format_field_errors(fields) if fields else '; '.join(exc.messages)
        return exceptions.ValidationError(message, fields)
    if isinstance(exc, (ObjectDoesNotExist, Http404)):
        return exceptions.NotFoundError()
    if isinstance(exc, (ProtectedError, RestrictedError)):
        return exceptions.ReferentialIntegrityError()
    if isinstance(exc, IntegrityError):
        if exceptions.is_unique_violation(exc):
            return exceptions.ConflictError()
        return exceptions.PersistenceError()
    if isinstance(exc, DatabaseError):
        return exceptions.PersistenceError()
    return exc


def error_body(message, fields=None):
    body = {'error': message}
    if fields:
        body['fields'] = fields
    return body


def format_error_response(errors):
    """
    Format DRF error payloads.

    Handles various error formats:
    - {"field": ["error1", "error2"]} -> "field: error1, error2"
    - {"detail": "message"} -> "message"
    - ["error1", "error2"] -> "error1, error2"
    """
    if isinstance(errors, dict):
        if set(errors) == {'detail'}:
            return error_body(str(errors['detail']))
        return error_body(format_field_errors(errors), errors)
    if isinstance(errors, list):
        return error_body(", ".join(str(e) for e in errors))
    return error_body(str(errors))


def format_field_errors(errors_dict):
    """Format (possibly nested) field error dictionaries into one message."""
    messages = []
    for key, value in errors_dict.items():
        if isinstance(value, list):
            messages.append(f"{key}: {', '.join(str(v) for v in value)}")
        elif isinstance(value, dict):
            messages.append(f"{key}: {format_field_errors(value)}")
        else:
            messages.append(f"{key}: {value}")
    return "; ".join(messages)


def _view_name(context):
    request = context.get('request') if context else None
    if request is not None:
        return f"{request.method} {request.path}"
    return 'request'


def success_response(data=None, status_code=http_status.HTTP_200_OK):
    """
    Helper for the {"ok": true, ...} acknowledgements returned by write endpoints.

    Usage:
        return success_response({'id': candidate.id}, status_code=status.HTTP_201_CREATED)
    """
    body = {'ok': True}
    if data:
        body.update(data)
    return Response(body, status=status_code)
