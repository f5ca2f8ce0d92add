from collections.abc import Mapping

from halclient.collection import Attributes, EmbeddedCollection, LinkCollection
from halclient.exceptions import InvalidDocument


class Resource(object):
    """
    A HAL representation. Attribute access is resolved against, in order, the links, the embedded resources
    and the plain attributes of the representation::

        resource.orders        # Link if 'orders' is in _links
        resource.customer      # Resource if 'customer' is in _embedded
        resource.total         # value of the 'total' property

    :param dict representation: parsed response body; ``None`` for an empty representation
    :param entry_point: the :class:`EntryPoint` links in this representation are bound to
    :param response: the :class:`connection.Response` the representation was read from, if any
    """

    def __init__(self, representation, entry_point, response=None):
        representation = representation or {}
        if not isinstance(representation, Mapping):
            raise InvalidDocument('A HAL representation must be a JSON object, got {!r}'.format(representation))
        links = representation.get('_links') or {}
        if not isinstance(links, Mapping):
            raise InvalidDocument('_links must be a JSON object, got {!r}'.format(links))

        self._entry_point = entry_point
        self._response = response
        self._links = LinkCollection(links, links.get('curies'), entry_point)
        self._embedded = EmbeddedCollection(representation.get('_embedded'), entry_point)
        self._attributes = Attributes(representation)

    @property
    def _self_link(self):
        return self._links.get('self')

    @property
    def _success(self):
        if self._response is None:
            return None
        return self._response.success

    @property
    def _status(self):
        if self._response is None:
            return None
        return self._response.status

    def __getitem__(self, name):
        return self._attributes[name]

    def get(self, name, default=None):
        return self._attributes.get(name, default)

    def __getattr__(self, name):
        if name.startswith('__') and name.endswith('__'):
            raise AttributeError(name)

        for collection in (self._links, self._embedded, self._attributes):
            if name in collection:
                return collection[name]

        raise AttributeError("{!r} has no link, embedded resource or attribute named '{}'".format(self, name))

    def __repr__(self):
        return '<{} attributes={!r} links={!r} embedded={!r}>'.format(self.__class__.__name__,
                                                                      self._attributes.to_dict(),
                                                                      list(self._links),
                                                                      list(self._embedded))
