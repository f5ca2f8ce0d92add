import logging

import requests
from rfc3987 import resolve

from halclient import signals
from halclient.schema import validate_links

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    'Accept': 'application/hal+json,application/json',
    'Content-Type': 'application/hal+json'
}


class Response(object):
    """
    The outcome of a request.

    .. attribute:: body

        The parsed JSON body, or ``None`` if the body is empty or not JSON.

    .. attribute:: success

        ``True`` for a 2xx status code.

    .. attribute:: raw

        The underlying :class:`requests.Response`.
    """

    def __init__(self, response):
        self.raw = response
        self.status = response.status_code
        self.headers = response.headers
        self.success = 200 <= response.status_code < 300
        self.body = self._parse_body(response)

    @staticmethod
    def _parse_body(response):
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def __repr__(self):
        return '<Response [{}]>'.format(self.status)


class Connection(object):
    """
    Performs HTTP requests relative to the URL of an API.

    :param str url: base URL; paths given to the request methods are resolved against it
    :param dict headers: headers to send in addition to (or in place of) :data:`DEFAULT_HEADERS`
    :param timeout: timeout passed to :mod:`requests`
    :param requests.Session session: an optional session to send requests with
    :param bool validate: whether to validate the ``_links`` section of successful responses
    """

    def __init__(self, url, headers=None, timeout=None, session=None, validate=False):
        self.url = url
        self.timeout = timeout
        self.validate = validate
        self.session = session or requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
        self.session.headers.update(headers or {})

    @property
    def headers(self):
        return self.session.headers

    def run_request(self, method, path, body=None, headers=None):
        method = method.upper()
        url = resolve(self.url, path)

        signals.before_request.send(self, method=method, url=url, body=body)
        logger.debug('%s %s', method, url)

        kwargs = {}
        if body is not None:
            kwargs['json'] = body

        response = Response(self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs))
        logger.debug('%s %s returned %s', method, url, response.status)

        if self.validate and response.success and isinstance(response.body, dict):
            validate_links(response.body.get('_links', {}))

        signals.after_request.send(self, method=method, url=url, response=response)
        return response

    def get(self, path):
        return self.run_request('get', path)

    def head(self, path):
        return self.run_request('head', path)

    def delete(self, path):
        return self.run_request('delete', path)

    def post(self, path, body):
        return self.run_request('post', path, body)

    def put(self, path, body):
        return self.run_request('put', path, body)

    def patch(self, path, body):
        return self.run_request('patch', path, body)

    def __repr__(self):
        return '<Connection {!r}>'.format(self.url)
