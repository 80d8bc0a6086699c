"""
Common utility functions for API responses
"""
import math

from rest_framework.response import Response
from rest_framework import status

from .exceptions import ValidationError

MAX_PAGE_SIZE = 100


def success_response(data=None, message="Success", status_code=status.HTTP_200_OK):
    """
    Standard success response format
    """
    response_data = {
        "code": 200,
        "msg": message,
        "data": data
    }
    return Response(response_data, status=status_code)


def request_fields(request):
    """request.data as a mapping; JSON lists and scalars count as an empty body"""
    data = request.data
    return data if isinstance(data, dict) else {}


def parse_positive_int(value, name, default):
    """Parse a query parameter that must be a positive integer"""
    if value in (None, ''):
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f'{name} must be a positive integer')
    if parsed < 1:
        raise ValidationError(f'{name} must be a positive integer')
    return parsed


def paginate_queryset(queryset, limit, page, key):
    """
    Slice an ordered queryset into one page.

    Returns the dict the member history endpoints send back:
    ``{key: [...], total, currentPage, totalPages}`` where the list holds
    model instances; callers serialize it.
    """
    limit = min(limit, MAX_PAGE_SIZE)
    total = queryset.count()
    offset = (page - 1) * limit

    return {
        key: list(queryset[offset:offset + limit]),
        'total': total,
        'currentPage': page,
        'totalPages': math.ceil(total / limit),
    }
