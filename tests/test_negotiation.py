import json

import pytest

from odin.codecs import json_codec

from conneg import content_type_resolvers
from conneg.data_structures import AcceptLanguage, AcceptLanguages
from conneg.negotiation import Negotiator, RequestContext
from conneg.resources import Negotiation
from conneg.testing import MockRequest, RecordingLogger


class TestRequestContext(object):
    def test_from_request(self):
        http_request = MockRequest(headers={
            'Content-Type': 'Multipart/Form-Data; boundary=--',
            'Accept': 'application/json',
            'Accept-Language': 'en-US;q=0.8,fr;q=0.9,de',
        })

        target = RequestContext.from_request(http_request)

        assert target.content_type == 'multipart/form-data'
        assert target.format == 'json'
        assert target.accept_languages == (
            AcceptLanguage('de', 1.0), AcceptLanguage('fr', 0.9), AcceptLanguage('en-US', 0.8)
        )
        assert target.locale is None

    def test_from_request__no_headers(self):
        target = RequestContext.from_request(MockRequest())

        assert target.content_type == 'text/html'
        assert target.format == 'html'
        assert isinstance(target.accept_languages, AcceptLanguages)
        assert target.accept_languages == ()

    def test_from_request__idempotent(self):
        http_request = MockRequest(headers={'Accept': 'text/plain', 'Accept-Language': 'en;q=0.1, fr'})

        assert RequestContext.from_request(http_request) == RequestContext.from_request(http_request)

    @pytest.mark.parametrize('attr', ('content_type', 'format', 'accept_languages', 'locale', 'other'))
    def test_read_only(self, attr):
        target = RequestContext()

        with pytest.raises(AttributeError):
            setattr(target, attr, 'foo')

        with pytest.raises(AttributeError):
            delattr(target, attr)

    def test_accept_languages_immutable(self):
        target = RequestContext.from_request(MockRequest(headers={'Accept-Language': 'en;q=0.5,de'}))
        expected_hash = hash(target)

        with pytest.raises(AttributeError):
            target.accept_languages.append(AcceptLanguage('xx', 0.9))

        assert hash(target) == expected_hash
        assert str(target.accept_languages) == 'de (1.0), en (0.5)'

    def test_accept_languages_copied(self):
        accept_languages = [AcceptLanguage('de', 1.0)]
        target = RequestContext(accept_languages=accept_languages)

        accept_languages.append(AcceptLanguage('xx', 0.9))

        assert target.accept_languages == (AcceptLanguage('de', 1.0),)

    def test_accept_languages_sorted(self):
        target = RequestContext(accept_languages=[
            AcceptLanguage('en', 0.5), AcceptLanguage('fr', 0.5), AcceptLanguage('de', 1.0)
        ])

        assert target.accept_languages.languages == ['de', 'en', 'fr']
        assert isinstance(target.accept_languages, AcceptLanguages)

    def test_with_locale(self):
        target = RequestContext('application/json', 'json', [AcceptLanguage('fr')])

        actual = target.with_locale('fr')

        assert actual is not target
        assert actual.locale == 'fr'
        assert target.locale is None
        assert actual.content_type == 'application/json'
        assert actual.format == 'json'
        assert actual.accept_languages == (AcceptLanguage('fr'),)

    def test_equality(self):
        assert RequestContext() == RequestContext()
        assert RequestContext() != RequestContext(format_='json')
        assert RequestContext() != RequestContext(locale='en')
        assert hash(RequestContext()) == hash(RequestContext())
        assert RequestContext().__eq__('html') is NotImplemented

    def test_repr(self):
        target = RequestContext('text/html', 'html', [AcceptLanguage('de', 1.0), AcceptLanguage('fr', 0.9)])

        assert repr(target) == (
            "RequestContext(content_type='text/html', format='html', "
            "accept_languages='de (1.0), fr (0.9)', locale=None)"
        )

    def test_to_resource(self):
        target = RequestContext('text/html', 'xml', [AcceptLanguage('de', 1.0), AcceptLanguage('fr', 0.5)], 'de')

        actual = target.to_resource()

        assert isinstance(actual, Negotiation)
        assert actual.content_type == 'text/html'
        assert actual.format == 'xml'
        assert actual.locale == 'de'
        assert [(al.language, al.quality) for al in actual.accept_languages] == [('de', 1.0), ('fr', 0.5)]

    def test_to_resource__encode(self):
        target = RequestContext.from_request(MockRequest(headers={'Accept-Language': 'en;q=0.5,de'}))

        data = json.loads(json_codec.dumps(target.to_resource()))

        assert data['content_type'] == 'text/html'
        assert data['format'] == 'html'
        assert [(al['language'], al['quality']) for al in data['accept_languages']] == [('de', 1.0), ('en', 0.5)]


class TestNegotiator(object):
    def test_defaults(self):
        target = Negotiator()

        actual = target.negotiate(MockRequest(headers={'accept': 'text/xml'}))

        assert actual == RequestContext('text/html', 'xml', [])

    def test_callable(self):
        target = Negotiator()

        assert target(MockRequest()) == RequestContext()

    def test_default_content_type(self):
        target = Negotiator(default_content_type='application/json')

        assert target(MockRequest()).content_type == 'application/json'
        assert target(MockRequest(headers={'Content-Type': 'text/plain'})).content_type == 'text/plain'

    def test_format_rules(self):
        target = Negotiator(format_rules=((lambda header: 'json' in header, 'json'),))

        assert target(MockRequest(headers={'Accept': 'text/html, application/json'})).format == 'json'

    def test_log(self):
        log = RecordingLogger()
        target = Negotiator(log=log)

        actual = target(MockRequest(headers={'Accept-Language': 'en;q=bogus'}))

        assert actual.accept_languages == (AcceptLanguage('en', 1.0),)
        assert len(log.warnings) == 1

    def test_subclass(self):
        class PlainNegotiator(Negotiator):
            default_content_type = 'text/plain'
            format_resolver = content_type_resolvers.specific_default('txt')

        target = PlainNegotiator()

        actual = target(MockRequest(headers={'Accept': 'application/json'}))

        assert actual.content_type == 'text/plain'
        assert actual.format == 'txt'

    def test_resolver_option(self):
        target = Negotiator(accept_language_resolver=content_type_resolvers.specific_default([AcceptLanguage('la')]))

        assert target(MockRequest(headers={'Accept-Language': 'en'})).accept_languages == (AcceptLanguage('la'),)

    def test_unknown_option(self):
        with pytest.raises(TypeError):
            Negotiator(eek='ook')

    def test_from_request__negotiator(self):
        target = RequestContext.from_request(MockRequest(), Negotiator(default_content_type='application/xml'))

        assert target.content_type == 'application/xml'
