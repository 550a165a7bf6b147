# -*- coding: utf-8 -*-
"""
Content Type Resolvers
~~~~~~~~~~~~~~~~~~~~~~

Collection of methods for resolving the content type, response format and
accepted languages of a request.

Each header is handled by a plain function that accepts the raw header value
along with a factory that returns a resolver for use with a request object.
Resolvers only require the request to provide a ``headers`` mapping with a
case insensitive ``get`` method, so they work with either Flask or Bottle
requests as well as :class:`conneg.testing.MockRequest`.

"""
import logging
import re

# Imports for typing support
from typing import Any, Callable, Optional, Sequence, Tuple  # noqa

from .constants import (
    ACCEPT, ACCEPT_LANGUAGE, CONTENT_TYPE, DEFAULT_CONTENT_TYPE, DEFAULT_QUALITY, QUALITY_SEPARATOR,
    HTML, XML, TXT, JSON
)
from .data_structures import AcceptLanguage, AcceptLanguages

__all__ = (
    'FORMAT_RULES',
    'parse_content_type', 'resolve_format_value', 'parse_quality', 'parse_accept_language',
    'content_type_header', 'accept_header', 'accept_language_header', 'specific_default',
)

logger = logging.getLogger(__name__)

FormatRule = Tuple[Callable[[str], bool], str]


def _contains(*values):
    def predicate(header):
        return any(value in header for value in values)
    return predicate


def _starts_with(value):
    def predicate(header):
        return header.startswith(value)
    return predicate


def _is_empty(header):
    return not header


FORMAT_RULES = (
    (_is_empty, HTML),
    (_starts_with('*/*'), HTML),
    (_contains('application/xhtml', 'text/html'), HTML),
    (_contains('application/xml', 'text/xml'), XML),
    (_contains('text/plain'), TXT),
    (_contains('application/json', 'text/javascript'), JSON),
)  # type: Sequence[FormatRule]
"""
Ordered rules used to classify an Accept header, the first matching rule wins.

Rules match against the raw header text, quality values and wildcards are not
interpreted.

"""

QUALITY_RE = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$')


def parse_content_type(value, default=DEFAULT_CONTENT_TYPE):
    # type: (Optional[str], str) -> str
    """
    Parse out the content type from a content type header.

    >>> parse_content_type('Multipart/Form-Data; boundary=--')
    'multipart/form-data'
    >>> parse_content_type('')
    'text/html'

    """
    if not value:
        return default

    return value.split(';', 1)[0].strip().lower()


def resolve_format_value(value, rules=FORMAT_RULES, default=HTML):
    # type: (Optional[str], Sequence[FormatRule], str) -> str
    """
    Classify an Accept header into a response format.

    >>> resolve_format_value('application/xml, text/html;q=0.9')
    'html'
    >>> resolve_format_value('application/xml, application/json')
    'xml'

    """
    value = value or ''
    for predicate, format_ in rules:
        if predicate(value):
            return format_
    return default


def parse_quality(value):
    # type: (str) -> float
    """
    Parse a quality value.

    :raises ValueError: If the value is not a number in the range 0 to 1.

    """
    if not QUALITY_RE.match(value):
        raise ValueError("Invalid quality value: %r" % value)

    quality = float(value)
    if not 0 <= quality <= 1:
        raise ValueError("Quality value out of range: %r" % value)
    return quality


def parse_accept_language(value, log=None):
    # type: (Optional[str], Any) -> AcceptLanguages
    """
    Parse an Accept-Language header.

    The result is sorted using the quality defined for each language range,
    with the most preferred language range first. Language ranges are not
    trimmed, ranges following a comma retain any leading whitespace.

    A malformed quality value is logged as a warning and the language range
    is given a quality of 1.

    :param value: Raw header value.
    :param log: Logger used to report malformed quality values; defaults to
        the module logger.

    """
    if not value:
        return AcceptLanguages()

    accept_languages = []
    log = log or logger
    for language_range in value.split(','):
        qualified_range = language_range.split(QUALITY_SEPARATOR)
        if len(qualified_range) == 2:
            language, quality = qualified_range
            try:
                quality = parse_quality(quality)
            except ValueError:
                log.warning("Detected malformed Accept-Language header quality in '%s', assuming quality is 1",
                            language_range)
                quality = DEFAULT_QUALITY
            accept_languages.append(AcceptLanguage(language, quality))
        else:
            accept_languages.append(AcceptLanguage(language_range, DEFAULT_QUALITY))

    return AcceptLanguages(accept_languages).sort_by_quality()


def content_type_header(default=DEFAULT_CONTENT_TYPE):
    """
    Resolve the normalised content type from the content-type header.
    """
    def resolver(request):
        return parse_content_type(request.headers.get(CONTENT_TYPE), default)
    return resolver


def accept_header(rules=FORMAT_RULES, default=HTML):
    """
    Resolve the response format from the accept header.
    """
    def resolver(request):
        return resolve_format_value(request.headers.get(ACCEPT), rules, default)
    return resolver


def accept_language_header(log=None):
    """
    Resolve accepted languages from the accept-language header.

    :param log: Logger used to report malformed quality values.

    """
    def resolver(request):
        return parse_accept_language(request.headers.get(ACCEPT_LANGUAGE), log)
    return resolver


def specific_default(value):
    """
    Specify a specific default value.

    :param value: The value to use.

    """
    def resolver(_):
        return value
    return resolver
