"""
Conneg
~~~~~~

Content negotiation for web requests: the request content type, response
format and accepted languages.

"""
from .constants import (
    HTTPStatus,
    HTML, XML, TXT, JSON, FORMATS,
)  # noqa
from .content_type_resolvers import (
    parse_content_type,
    resolve_format_value,
    parse_accept_language,
)  # noqa
from .data_structures import (
    AcceptLanguage,
    AcceptLanguages,
    Headers,
    Response,
)  # noqa
from .exceptions import (
    ImmediateHttpResponse,
    HttpError,
    NotAcceptable,
)  # noqa
from .helpers import (
    get_response_codec,
    create_response,
)  # noqa
from .negotiation import (
    Negotiator,
    RequestContext,
)  # noqa
