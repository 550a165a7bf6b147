# -*- coding: utf-8 -*-
"""
Resources
~~~~~~~~~

Odin resources describing the outcome of negotiating a request, these allow a
negotiated request to be logged or returned using any odin codec.

"""
import odin

from typing import AnyStr  # noqa
from odin.fields import Field

from .constants import HTTPStatus, FORMATS  # noqa


class AnyField(Field):
    """
    Any value.
    """
    def to_python(self, value):
        return value


class AcceptLanguageResource(odin.Resource):
    """
    A language range accepted by the client.
    """
    class Meta:
        name = 'AcceptLanguage'
        namespace = 'conneg'

    language = odin.StringField(
        help_text="Language range as supplied in the Accept-Language header."
    )
    quality = odin.FloatField(
        min_value=0.0, max_value=1.0, default=1.0,
        help_text="Relative preference of the language range."
    )


class Negotiation(odin.Resource):
    """
    Result of negotiating a request.
    """
    class Meta:
        namespace = 'conneg'

    content_type = odin.StringField(
        help_text="Normalised content type of the request body."
    )
    format = odin.StringField(
        choices=tuple((f, f) for f in FORMATS),
        help_text="Format the response should be serialised in."
    )
    accept_languages = odin.ArrayOf(
        AcceptLanguageResource,
        null=True,
        help_text="Accepted languages, most preferred first."
    )
    locale = odin.StringField(
        null=True,
        help_text="Locale selected for the response."
    )


class Error(odin.Resource):
    """
    Response returned for errors.

    The *meta* field should be utilised to provide additional information that
    is specific to the error.

    """
    class Meta:
        namespace = None

    @classmethod
    def from_status(cls, http_status, code_index=0, message=None, developer_message=None, meta=None):
        # type: (HTTPStatus, int, AnyStr, AnyStr, dict) -> Error
        """
        Automatically build an error from an HTTP Status code.

        :param http_status: HTTP status of the error.
        :param code_index: Index of the error within the status.
        :param message: Message suitable for an end user.
        :param developer_message: Message suitable for a developer.
        :param meta: Additional error information.

        """
        return cls(http_status.value,
                   (http_status.value * 100) + code_index,
                   message or http_status.description,
                   developer_message or http_status.description,
                   meta)

    status = odin.IntegerField(
        help_text="HTTP status code of the response."
    )
    code = odin.IntegerField(
        help_text="Custom application specific error code that references into "
                  "the application."
    )
    message = odin.StringField(
        help_text="A message that can be displayed to an end user"
    )
    developer_message = odin.StringField(
        null=True,
        help_text="An error message suitable for the application developer"
    )
    meta = AnyField(
        null=True,
        help_text="Additional meta information that can help solve errors."
    )
