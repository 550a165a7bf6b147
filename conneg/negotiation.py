"""
Negotiation
~~~~~~~~~~~

Combine the content type resolvers into a snapshot of a request.

"""
import logging

# Imports for typing support
from typing import Any, Callable, Optional  # noqa

from . import content_type_resolvers
from .constants import DEFAULT_CONTENT_TYPE, HTML
from .data_structures import AcceptLanguages
from .resources import AcceptLanguageResource, Negotiation

__all__ = ('Negotiator', 'RequestContext')

logger = logging.getLogger(__name__)


class Negotiator(object):
    """
    Resolves a :class:`RequestContext` from a request.

    Override the class attributes in a sub-class, or supply them as keyword
    arguments, to change how a request is negotiated::

        class JsonNegotiator(Negotiator):
            default_content_type = 'application/json'

    """
    default_content_type = DEFAULT_CONTENT_TYPE
    """
    Content type used when the request does not supply one.
    """

    format_rules = content_type_resolvers.FORMAT_RULES
    """
    Ordered rules used to classify the accept header.
    """

    log = None
    """
    Logger that receives warnings about malformed headers, the resolvers
    module logger is used if not supplied.
    """

    content_type_resolver = None  # type: Callable[[Any], str]
    format_resolver = None  # type: Callable[[Any], str]
    accept_language_resolver = None  # type: Callable[[Any], AcceptLanguages]

    def __init__(self, **options):
        for key, value in options.items():
            if not hasattr(self.__class__, key):
                raise TypeError("{}() got an unexpected keyword argument {!r}".format(
                    self.__class__.__name__, key))
            setattr(self, key, value)

        # Resolvers assigned on a sub-class are plain functions, copy them onto
        # the instance so they are not bound as methods.
        cls = self.__class__
        self.content_type_resolver = options.get('content_type_resolver', cls.content_type_resolver) or \
            content_type_resolvers.content_type_header(self.default_content_type)
        self.format_resolver = options.get('format_resolver', cls.format_resolver) or \
            content_type_resolvers.accept_header(self.format_rules)
        self.accept_language_resolver = options.get('accept_language_resolver', cls.accept_language_resolver) or \
            content_type_resolvers.accept_language_header(self.log)

    def negotiate(self, request):
        # type: (Any) -> RequestContext
        """
        Negotiate a request.
        """
        context = RequestContext(
            self.content_type_resolver(request),
            self.format_resolver(request),
            self.accept_language_resolver(request),
        )
        logger.debug("Negotiated request: %r", context)
        return context

    __call__ = negotiate


default_negotiator = Negotiator()


class RequestContext(object):
    """
    Snapshot of the negotiated values of a request.

    A context is resolved once per request and is read-only, accepted
    languages are held sorted by quality. The locale is selected later from
    the accepted languages, use :meth:`with_locale` to obtain a context that
    includes it.

    """
    __slots__ = ('content_type', 'format', 'accept_languages', 'locale')

    @classmethod
    def from_request(cls, request, negotiator=None):
        # type: (Any, Negotiator) -> RequestContext
        return (negotiator or default_negotiator).negotiate(request)

    def __init__(self, content_type=DEFAULT_CONTENT_TYPE, format_=HTML, accept_languages=None, locale=None):
        # type: (str, str, AcceptLanguages, Optional[str]) -> None
        set_ = super(RequestContext, self).__setattr__
        set_('content_type', content_type)
        set_('format', format_)
        set_('accept_languages', AcceptLanguages(accept_languages or ()).sort_by_quality())
        set_('locale', locale)

    def __setattr__(self, key, value):
        raise AttributeError("{} is read-only".format(self.__class__.__name__))

    def __delattr__(self, key):
        raise AttributeError("{} is read-only".format(self.__class__.__name__))

    def __eq__(self, other):
        if isinstance(other, RequestContext):
            return (
                self.content_type == other.content_type and
                self.format == other.format and
                self.accept_languages == other.accept_languages and
                self.locale == other.locale
            )
        return NotImplemented

    def __hash__(self):
        return hash((self.content_type, self.format, tuple(self.accept_languages), self.locale))

    def __repr__(self):
        return '{}(content_type={!r}, format={!r}, accept_languages={!r}, locale={!r})'.format(
            self.__class__.__name__, self.content_type, self.format, str(self.accept_languages), self.locale)

    def with_locale(self, locale):
        # type: (str) -> RequestContext
        """
        Copy of this context with the selected locale.
        """
        return self.__class__(self.content_type, self.format, self.accept_languages, locale)

    def to_resource(self):
        # type: () -> Negotiation
        """
        Odin resource of this context.
        """
        return Negotiation(
            content_type=self.content_type,
            format=self.format,
            accept_languages=[AcceptLanguageResource(language=l, quality=q) for l, q in self.accept_languages],
            locale=self.locale,
        )
