"""
API error taxonomy and the top-level exception handler.

Services raise the exceptions below; the handler turns every exception raised
inside a DRF view into the house error envelope ``{code, msg, errors}``.
"""
import logging
import traceback

from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = 'Internal server error'


class GymAPIException(APIException):
    """Base class for errors whose message is safe to show to the caller"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Request failed'
    default_code = 'error'

    def __init__(self, message=None, errors=None):
        super().__init__(detail=message or self.default_detail)
        self.message = str(self.detail)
        self.errors = errors


class ValidationError(GymAPIException):
    """Malformed or missing input (400)"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Validation error'
    default_code = 'validation_error'


class AuthenticationError(GymAPIException):
    """Bad credentials, unactivated account, missing or invalid token (401)"""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Authentication required'
    default_code = 'authentication_error'


class NotFoundError(GymAPIException):
    """Unknown resource (404)"""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found'
    default_code = 'not_found'


class InternalError(GymAPIException):
    """Unexpected or storage failure (500)"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = GENERIC_SERVER_ERROR
    default_code = 'internal_error'


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses
    """
    if isinstance(exc, GymAPIException):
        return _domain_error_response(exc, context)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is None:
        return _unexpected_error_response(exc, context)

    logger.warning(f"API Exception: {exc}")

    custom_response_data = {
        'code': response.status_code,
        'msg': 'An error occurred',
        'errors': response.data
    }

    # Handle specific error types
    if response.status_code == status.HTTP_400_BAD_REQUEST:
        custom_response_data['msg'] = 'Validation error'
    elif response.status_code == status.HTTP_401_UNAUTHORIZED:
        custom_response_data['msg'] = 'Authentication required'
    elif response.status_code == status.HTTP_403_FORBIDDEN:
        custom_response_data['msg'] = 'Permission denied'
    elif response.status_code == status.HTTP_404_NOT_FOUND:
        custom_response_data['msg'] = 'Resource not found'
    elif response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        custom_response_data['msg'] = 'Method not allowed'
    elif response.status_code == status.HTTP_429_TOO_MANY_REQUESTS:
        custom_response_data['msg'] = 'Too many requests, please try again later'

    response.data = custom_response_data
    return response


def _domain_error_response(exc, context):
    set_rollback()
    if exc.status_code >= 500:
        logger.error(f"Internal error in {_view_name(context)}: {exc.message}", exc_info=True)
    else:
        logger.info(f"{type(exc).__name__} in {_view_name(context)}: {exc.message}")

    data = {
        'code': exc.status_code,
        'msg': exc.message,
    }
    if exc.errors:
        data['errors'] = exc.errors

    response = Response(data, status=exc.status_code)
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        response['WWW-Authenticate'] = 'Bearer realm="api"'
    return response


def _unexpected_error_response(exc, context):
    """Log the real failure and answer with a generic 500"""
    set_rollback()
    logger.error(f"Unhandled exception in {_view_name(context)}: {exc}", exc_info=exc)

    data = {
        'code': status.HTTP_500_INTERNAL_SERVER_ERROR,
        'msg': GENERIC_SERVER_ERROR,
    }
    if settings.DEBUG:
        data['stack'] = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return Response(data, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _view_name(context):
    view = context.get('view') if context else None
    return type(view).__name__ if view is not None else 'unknown view'
