import os

from flask import Config
from werkzeug.utils import cached_property

from halclient.connection import Connection
from halclient.link import Link


class EntryPoint(Link):
    """
    The root of an API. An :class:`EntryPoint` is a :class:`Link` to the API URL that owns the
    :class:`Connection` used by every link reached from it::

        api = EntryPoint('http://api.example.org/')
        api.orders._embedded.orders[0].id

    Configuration is read from :attr:`config` when the connection is first used:

    ``HALCLIENT_HEADERS``
        extra headers sent with each request; defaults to ``{}``
    ``HALCLIENT_TIMEOUT``
        request timeout in seconds; defaults to ``None``
    ``HALCLIENT_VALIDATE``
        whether to validate the ``_links`` section of responses; defaults to ``False``

    :param str url: URL of the API root
    :param dict headers: extra headers; take precedence over ``HALCLIENT_HEADERS``
    :param requests.Session session: an optional session to send requests with
    :param dict config: configuration values
    """

    def __init__(self, url, headers=None, session=None, config=None):
        super(EntryPoint, self).__init__('self', {'href': url}, self)
        self._headers = headers
        self._session = session

        self.config = Config(os.getcwd())
        self.config.setdefault('HALCLIENT_HEADERS', {})
        self.config.setdefault('HALCLIENT_TIMEOUT', None)
        self.config.setdefault('HALCLIENT_VALIDATE', False)
        self.config.update(config or {})

    @cached_property
    def connection(self):
        headers = dict(self.config['HALCLIENT_HEADERS'], **(self._headers or {}))
        return Connection(self._url,
                          headers=headers,
                          timeout=self.config['HALCLIENT_TIMEOUT'],
                          session=self._session,
                          validate=self.config['HALCLIENT_VALIDATE'])

    @property
    def headers(self):
        return self.connection.headers
