from halclient import uri_template
from halclient.exceptions import InvalidArgument, MissingURITemplateVariables
from halclient.resource import Resource


def _property(name):
    def getter(self):
        return self._attributes.get(name)

    getter.__name__ = '_{}'.format(name)
    getter.__doc__ = 'The ``{}`` property of the link, or ``None``.'.format(name)
    return property(getter)


class Link(object):
    """
    A HAL link object. Any attribute the link does not define itself is looked up on the resource
    the link points to, which is fetched for that purpose.

    :param str key: relation the link was found under
    :param dict attributes: the link object, usually containing ``href`` and ``templated``
    :param entry_point: the :class:`EntryPoint` providing the connection
    :param dict uri_variables: values bound to the template variables of ``href``
    """

    def __init__(self, key, attributes, entry_point, uri_variables=None):
        self._key = key
        self._attributes = attributes
        self._entry_point = entry_point
        self._uri_variables = uri_variables or {}

    _type = _property('type')
    _deprecation = _property('deprecation')
    _name = _property('name')
    _profile = _property('profile')
    _title = _property('title')
    _hreflang = _property('hreflang')

    @property
    def _href(self):
        return self._attributes.get('href')

    @property
    def _templated(self):
        return uri_template.is_templated(self._attributes)

    @property
    def _variables(self):
        if not self._templated:
            return []
        return uri_template.variables(self._href)

    def _expand(self, *args, **kwargs):
        """
        Bind template variables and return the bound link; the link itself is left untouched.
        Variables are given as a dictionary, as keyword arguments or both::

            link._expand({'id': 1})
            link(id=1)

        :raises InvalidArgument: if no variables are given
        """
        if len(args) > 1:
            raise TypeError('_expand() takes at most one positional argument ({} given)'.format(len(args)))
        uri_variables = dict((args[0] if args else None) or {}, **kwargs)
        if not uri_variables:
            raise InvalidArgument('No URI template variables given to expand link {!r}'.format(self._key))
        return self.__class__(self._key, self._attributes, self._entry_point, uri_variables)

    __call__ = _expand

    @property
    def _url(self):
        if not self._templated:
            return self._href

        missing = [name for name in self._variables if name not in self._uri_variables]
        if missing:
            raise MissingURITemplateVariables(self, self._variables, missing)
        return uri_template.expand(self._href, self._uri_variables)

    @property
    def _connection(self):
        return self._entry_point.connection

    def _resource(self):
        response = self._get()
        if response.success:
            return Resource(response.body, self._entry_point, response)
        return Resource(None, self._entry_point, response)

    def _get(self):
        return self._connection.get(self._url)

    def _options(self):
        return self._connection.run_request('options', self._url, None, None)

    def _head(self):
        return self._connection.head(self._url)

    def _delete(self):
        return self._connection.delete(self._url)

    def _post(self, params=None):
        return self._connection.post(self._url, params or {})

    def _put(self, params=None):
        return self._connection.put(self._url, params or {})

    def _patch(self, params=None):
        return self._connection.patch(self._url, params or {})

    def __getattr__(self, name):
        # protocol hooks (__iter__, __len__, __deepcopy__, ...) must not fetch the resource
        if name.startswith('__') and name.endswith('__'):
            raise AttributeError(name)

        # an AttributeError raised inside one of the link's own properties lands here too
        if hasattr(type(self), name) or '_attributes' not in self.__dict__:
            raise AttributeError(name)

        resource = self._resource()

        # a link to a collection stands in for the embedded items of the same relation
        embedded = resource._embedded.get(self._key)
        if embedded is not None and hasattr(embedded, name):
            return getattr(embedded, name)

        try:
            return getattr(resource, name)
        except AttributeError:
            raise AttributeError("{!r} has no attribute '{}', nor has the resource it links to".format(self, name))

    def __str__(self):
        return self._url

    def __repr__(self):
        return '<{} {!r} {!r}>'.format(self.__class__.__name__, self._key, self._attributes)
