import logging

from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = 'Please fill in all required fields'


class AlreadyDischarged(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Patient has already been discharged.'
    default_code = 'conflict'


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.error("Unhandled error in %s", getattr(view, '__name__', view), exc_info=exc)
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}}, status=500)
    # normalize response
    if isinstance(exc, ValidationError):
        return Response(
            {'ok': False, 'error': {'code': 'validation_error', 'message': REQUIRED_FIELDS_MESSAGE, 'fields': resp.data}},
            status=resp.status_code,
        )
    if isinstance(exc, NotFound):
        code = 'not_found'
    elif isinstance(exc, AlreadyDischarged):
        code = 'conflict'
    else:
        code = 'api_error'
    detail = None
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = str(resp.data)
    return Response({'ok': False, 'error': {'code': code, 'message': detail}}, status=resp.status_code, headers=_retry_headers(resp))


def _retry_headers(resp):
    # keep Retry-After / WWW-Authenticate that DRF attached
    return {k: v for k, v in resp.items() if k in ('Retry-After', 'WWW-Authenticate')}
