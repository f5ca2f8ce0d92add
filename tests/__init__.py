from unittest import TestCase
from urllib.parse import urlsplit

import requests
from flask import Flask, json
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from halclient import EntryPoint


class FlaskAdapter(BaseAdapter):
    """
    Transport adapter for :mod:`requests` that answers requests with a Flask application's test client.
    Every request sent is kept in :attr:`requests`.
    """

    def __init__(self, app):
        super(FlaskAdapter, self).__init__()
        self.app = app
        self.requests = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        url = urlsplit(request.url)

        result = self.app.test_client().open(url.path,
                                             base_url='{}://{}'.format(url.scheme, url.netloc),
                                             query_string=url.query,
                                             method=request.method,
                                             headers=dict(request.headers),
                                             data=request.body)

        response = requests.Response()
        response.status_code = result.status_code
        response.reason = result.status.split(' ', 1)[-1]
        response.headers = CaseInsensitiveDict(result.headers)
        response._content = result.get_data()
        response.encoding = 'utf-8'
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


class BaseTestCase(TestCase):
    url = 'http://api.example.org/'

    def setUp(self):
        super(BaseTestCase, self).setUp()
        self.app = self.create_app()
        self.adapter = FlaskAdapter(self.app)
        self.session = requests.Session()
        self.session.mount(self.url, self.adapter)
        self.entry_point = EntryPoint(self.url, session=self.session)

    def create_app(self):
        app = Flask(__name__)
        app.debug = True
        return app

    def hal(self, rule, representation, methods=('GET',), status=200):
        """
        Serve ``representation`` at ``rule``. ``representation`` may be a callable receiving the view arguments.
        """

        def view(**kwargs):
            data = representation(**kwargs) if callable(representation) else representation
            return self.app.response_class(json.dumps(data), status=status, mimetype='application/hal+json')

        self.app.add_url_rule(rule, '{} {}'.format(rule, ','.join(methods)), view, methods=list(methods))

    @property
    def last_request(self):
        return self.adapter.requests[-1]
