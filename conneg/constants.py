from http import HTTPStatus

__all__ = (
    'HTTPStatus',
    'HTML', 'XML', 'TXT', 'JSON', 'FORMATS',
    'DEFAULT_CONTENT_TYPE', 'DEFAULT_QUALITY',
)

# Response formats

HTML = 'html'
XML = 'xml'
TXT = 'txt'
JSON = 'json'

FORMATS = (HTML, XML, TXT, JSON)
"""
Closed set of formats a request can be resolved to.
"""

DEFAULT_CONTENT_TYPE = 'text/html'
"""
Content type assumed when a request does not supply one.
"""

DEFAULT_QUALITY = 1.0
"""
Quality assigned to a language range without a (valid) quality value.
"""

QUALITY_SEPARATOR = ';q='

# Negotiation headers

ACCEPT = 'Accept'
ACCEPT_LANGUAGE = 'Accept-Language'
CONTENT_TYPE = 'Content-Type'
