# -*- coding: utf-8 -*-
"""
Exceptions
~~~~~~~~~~

Negotiating a request never fails; these are raised when a negotiated
request asks for something that cannot be provided.

"""
from .constants import HTTPStatus
from .resources import Error

__all__ = ('ImmediateHttpResponse', 'HttpError', 'NotAcceptable')


class ImmediateHttpResponse(Exception):
    """
    A response that should be returned immediately.
    """
    def __init__(self, resource, status=HTTPStatus.OK, headers=None):
        self.resource = resource
        self.status = status
        self.headers = headers


class HttpError(ImmediateHttpResponse):
    """
    An error response that should be returned immediately.
    """
    def __init__(self, status, code_index=0, message=None, developer_message=None, meta=None, headers=None):
        super(HttpError, self).__init__(
            Error.from_status(status, code_index, message, developer_message, meta), status, headers
        )


class NotAcceptable(HttpError):
    """
    The response cannot be returned in the format requested.
    """
    def __init__(self, format_, headers=None):
        self.format = format_
        super(NotAcceptable, self).__init__(
            HTTPStatus.NOT_ACCEPTABLE, 0, "Content cannot be returned in the format requested.",
            "No codec is registered for the {!r} format.".format(format_), None, headers
        )
