"""
Testing Helpers
~~~~~~~~~~~~~~~

Mocks for testing code that negotiates requests.

"""
from .data_structures import Headers


class MockRequest(object):
    """
    Mocked Request object.

    Only the headers used during negotiation are provided, they are case
    insensitive.

    """
    def __init__(self, headers=None):
        # type: (dict) -> None
        self.headers = Headers(headers)


class RecordingLogger(object):
    """
    Logger that records warnings rather than emitting them.
    """
    def __init__(self):
        self.warnings = []

    def warning(self, msg, *args, **kwargs):
        self.warnings.append(msg % args if args else msg)
