"""
Helpers
~~~~~~~

Select a codec for a negotiated request and prepare responses with it.

Only the ``json`` and ``xml`` formats have codecs registered by default. The
``html`` and ``txt`` formats (``html`` being what browsers are resolved to)
raise :class:`NotAcceptable` unless a ``codecs`` mapping that covers them is
supplied, eg a template renderer providing ``dumps`` and ``CONTENT_TYPE``.

"""
# Type imports
from typing import Any, Dict, Optional  # noqa

from odin.codecs import json_codec

from .constants import HTTPStatus, JSON, XML
from .data_structures import Response
from .exceptions import NotAcceptable
from .negotiation import RequestContext  # noqa

__all__ = ('CODECS', 'get_response_codec', 'create_response')

CODECS = {JSON: json_codec}

# Attempt to load other codecs that have dependencies
try:
    from odin.codecs import xml_codec
    CODECS[XML] = xml_codec
except ImportError:
    pass


def get_response_codec(context, codecs=None):
    # type: (RequestContext, Dict[str, Any]) -> Any
    """
    Get the codec used to serialise the response to a request.

    :param context: Negotiated request.
    :param codecs: Mapping of format to codec; defaults to :data:`CODECS`.
    :raises NotAcceptable: No codec is available for the requested format.

    """
    codecs = CODECS if codecs is None else codecs
    try:
        return codecs[context.format]
    except KeyError:
        raise NotAcceptable(context.format)


def create_response(context, body=None, status=None, headers=None, codecs=None):
    # type: (RequestContext, Any, Optional[HTTPStatus], Dict[str, str], Dict[str, Any]) -> Response
    """
    Generate a Response.

    :param context: Negotiated request.
    :param body: Body of the response
    :param status: HTTP status code
    :param headers: Any headers.
    :param codecs: Mapping of format to codec.

    """
    if body is None:
        return Response(status or HTTPStatus.NO_CONTENT, headers=headers)
    else:
        codec = get_response_codec(context, codecs)
        response = Response(status or HTTPStatus.OK, headers=headers, body=codec.dumps(body))
        response.set_content_type(codec.CONTENT_TYPE)
        return response
