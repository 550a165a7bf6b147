"""
Data Structures
~~~~~~~~~~~~~~~

Values produced and consumed while negotiating a request.

"""
import itertools
from operator import attrgetter

# Imports for typing support
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple  # noqa

from .constants import HTTPStatus

__all__ = ('AcceptLanguage', 'AcceptLanguages', 'Headers', 'Response')


AcceptLanguage = NamedTuple('AcceptLanguage', [('language', str), ('quality', float)])
AcceptLanguage.__new__.__defaults__ = (1.0,)
AcceptLanguage.__doc__ = """
A single language range from an Accept-Language header.
"""


class AcceptLanguages(tuple):
    """
    Immutable collection of :class:`AcceptLanguage` entries.

    Once resolved the most preferred language range is the first element.

    """
    def __str__(self):
        return ', '.join('%s (%.1f)' % (language, quality) for language, quality in self)

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, list(self))

    def sort_by_quality(self):
        # type: () -> AcceptLanguages
        """
        Copy sorted by quality, highest first.

        The sort is stable, entries with equal quality retain the order they
        were supplied in.

        """
        return self.__class__(sorted(self, key=attrgetter('quality'), reverse=True))

    @property
    def languages(self):
        # type: () -> List[str]
        """
        Language tags in order of preference.
        """
        return [al.language for al in self]


def _header_key(name):
    # type: (str) -> str
    return name.replace('_', '-').lower()


class Headers(dict):
    """
    Case insensitive mapping of HTTP headers.

    A header may be received multiple times, all values are retained and
    :meth:`get` returns the first one received.

    >>> h = Headers({'Accept-Language': 'en-AU'})
    >>> h['accept-language']
    'en-AU'
    >>> h.add('ACCEPT-LANGUAGE', 'fr')
    >>> h.getlist('Accept-Language')
    ['en-AU', 'fr']

    """
    @classmethod
    def from_environ(cls, environ):
        # type: (Dict[str, Any]) -> Headers
        """
        Build from a WSGI environ.
        """
        headers = cls()
        for key, value in environ.items():
            if key.startswith('HTTP_'):
                headers.add(key[5:], value)
            elif key in ('CONTENT_TYPE', 'CONTENT_LENGTH') and value:
                headers.add(key, value)
        return headers

    def __init__(self, mapping=None):
        super(Headers, self).__init__()
        if isinstance(mapping, Headers):
            mapping = mapping.items(multi=True)
        elif isinstance(mapping, dict):
            mapping = mapping.items()
        for key, value in mapping or ():
            if isinstance(value, (tuple, list)):
                for v in value:
                    self.add(key, v)
            else:
                self.add(key, value)

    def __getitem__(self, key):
        # type: (str) -> str
        return dict.__getitem__(self, _header_key(key))[0]

    def __setitem__(self, key, value):
        # type: (str, str) -> None
        dict.__setitem__(self, _header_key(key), [value])

    def __delitem__(self, key):
        dict.__delitem__(self, _header_key(key))

    def __contains__(self, key):
        return dict.__contains__(self, _header_key(key))

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, list(self.items(multi=True)))

    def add(self, key, value):
        # type: (str, str) -> None
        """
        Add a value for a header, keeping any existing values.
        """
        dict.setdefault(self, _header_key(key), []).append(value)

    def get(self, key, default=None):
        # type: (str, Any) -> Optional[str]
        """
        Return the first value of a header, or ``default`` if it was not supplied.
        """
        try:
            return self[key]
        except KeyError:
            return default

    def getlist(self, key):
        # type: (str) -> List[str]
        """
        Return every value supplied for a header.
        """
        return list(dict.get(self, _header_key(key), ()))

    def items(self, multi=False):
        # type: (bool) -> Iterable[Tuple[str, str]]
        if multi:
            for key, values in dict.items(self):
                for value in values:
                    yield key, value
        else:
            for key, values in dict.items(self):
                yield key, values[0]

    def setlist(self, key, values):
        # type: (str, Iterable[str]) -> None
        """
        Replace all values of a header.
        """
        values = list(values)
        if values:
            dict.__setitem__(self, _header_key(key), values)
        else:
            dict.pop(self, _header_key(key), None)

    def setdefault(self, key, default=None):
        # type: (str, str) -> str
        if key not in self:
            self[key] = default
        return self[key]

    def update(self, *args, **kwargs):
        """
        Replace headers with the values of a mapping (or iterable of pairs),
        list values supply every value for a header.
        """
        if len(args) > 1:
            raise TypeError("update expected at most 1 arguments, got %d" % len(args))
        mapping = args[0] if args else ()
        if isinstance(mapping, Headers):
            mapping = dict.items(mapping)
        elif isinstance(mapping, dict):
            mapping = mapping.items()

        updates = Headers()
        for key, value in itertools.chain(mapping, kwargs.items()):
            if isinstance(value, (tuple, list)):
                updates.setlist(key, list(updates.getlist(key)) + list(value))
            else:
                updates.add(key, value)
        for key, values in dict.items(updates):
            self.setlist(key, values)

    def pop(self, key, *default):
        # type: (str, *Any) -> Any
        """
        Remove a header returning its first value.
        """
        try:
            return dict.pop(self, _header_key(key))[0]
        except KeyError:
            if default:
                return default[0]
            raise

    def copy(self):
        # type: () -> Headers
        return self.__class__(self)

    __copy__ = copy


class Response(object):
    """
    Simplified HTTP response.

    Holds the status and content type chosen for a request along with the
    writer the hosting server supplied for the body.

    """
    __slots__ = ('status', 'content_type', 'headers', 'body', 'out')

    @classmethod
    def from_writer(cls, out):
        # type: (Any) -> Response
        return cls(out=out)

    def __init__(self, status=HTTPStatus.OK, content_type=None, headers=None, body=None, out=None):
        # type: (HTTPStatus, str, Dict[str, str], Any, Any) -> None
        if isinstance(status, HTTPStatus):
            status = status.value
        self.status = status
        self.content_type = content_type
        self.headers = headers or {}
        self.body = body
        self.out = out

    def __getitem__(self, item):
        # type: (str) -> str
        return self.headers[item]

    def __setitem__(self, key, value):
        # type: (str, str) -> None
        self.headers[key] = value

    def set_content_type(self, value):
        # type: (str) -> None
        """
        Set Response content type.
        """
        self.content_type = value
        self.headers['Content-Type'] = value
