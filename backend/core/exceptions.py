# core/exceptions.py
import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, NotAuthenticated
from rest_framework.response import Response
from rest_framework.settings import api_settings

logger = logging.getLogger(__name__)


class Conflict(APIException):
    # Clients treat duplicates as a plain bad request.
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Resource already exists.'
    default_code = 'conflict'


class InvalidCredential(APIException):
    """A bearer token was sent but could not be verified."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Invalid token'
    default_code = 'invalid_token'


def first_error_message(detail, field=None):
    """
    Flatten DRF error details (dicts/lists of ErrorDetail) to one string.

    Messages that don't already name their field (DRF's stock "This field is
    required." and friends) are prefixed with it.
    """
    if isinstance(detail, dict):
        for key, value in detail.items():
            return first_error_message(value, None if key == api_settings.NON_FIELD_ERRORS_KEY else key)
        return ''
    if isinstance(detail, (list, tuple)):
        return first_error_message(detail[0], field) if detail else ''
    message = str(detail)
    if field and field.lower() not in message.lower():
        return f'{field}: {message}'
    return message


def json_exception_handler(exc, context):
    """
    Render every failure as {"error": "<message>"}.

    Known API errors keep their status code; anything else is logged and
    reported as a generic 500.
    """
    # rest_framework.views loads the authentication classes, which import this module
    from rest_framework.views import set_rollback

    view = context.get('view')
    view_name = view.__class__.__name__ if view else 'unknown view'

    if isinstance(exc, Http404):
        message = getattr(view, 'not_found_message', None) or 'Not found.'
        set_rollback()
        return Response({'error': message}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, DjangoPermissionDenied):
        set_rollback()
        return Response({'error': str(exc) or 'Access denied'}, status=status.HTTP_403_FORBIDDEN)

    if isinstance(exc, NotAuthenticated):
        message = getattr(view, 'unauthenticated_message', None) or 'Access token required'
        response = Response({'error': message}, status=status.HTTP_401_UNAUTHORIZED)
        auth_header = getattr(exc, 'auth_header', None)
        if auth_header:
            response['WWW-Authenticate'] = auth_header
        return response

    if isinstance(exc, APIException):
        set_rollback()
        response = Response({'error': first_error_message(exc.detail)}, status=exc.status_code)
        wait = getattr(exc, 'wait', None)
        if wait:
            response['Retry-After'] = '%d' % wait
        return response

    set_rollback()
    logger.exception("Unhandled error in %s", view_name)
    return Response({'error': 'Internal server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
