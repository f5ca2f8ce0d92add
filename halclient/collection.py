from collections.abc import Mapping

from halclient.exceptions import InvalidDocument


class Collection(Mapping):
    """
    Read-only view of a JSON object. Keys can be read as items or as attributes.

    Attribute access does not reach keys named like a mapping method (``items``, ``keys``, ``values``,
    ``get``); read those as items, e.g. ``resource._embedded['items']``.
    """

    def __init__(self, collection=None):
        collection = collection or {}
        if not isinstance(collection, Mapping):
            raise InvalidDocument('Invalid section for {}: {!r}'.format(self.__class__.__name__, collection))
        self._collection = dict(collection)

    def __getitem__(self, key):
        return self._collection[key]

    def __iter__(self):
        return iter(self._collection)

    def __len__(self):
        return len(self._collection)

    def __getattr__(self, name):
        if name.startswith('__') and name.endswith('__'):
            raise AttributeError(name)
        try:
            return self._collection[name]
        except KeyError:
            raise AttributeError("{} has no key '{}'".format(self.__class__.__name__, name))

    def to_dict(self):
        return dict(self._collection)

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self._collection)


class Attributes(Collection):
    """
    The properties of a representation, without the ``_links`` and ``_embedded`` sections.
    """

    def __init__(self, representation=None):
        representation = representation or {}
        super(Attributes, self).__init__({key: value
                                          for key, value in representation.items()
                                          if key not in ('_links', '_embedded')})


class LinkCollection(Collection):
    """
    The ``_links`` section of a representation. Every relation maps to a :class:`Link`, or to a list of
    links if the relation holds an array.

    .. attribute:: _curies

        A dictionary of :class:`Curie` objects by name, read from the ``curies`` relation.
    """

    def __init__(self, links=None, curies=None, entry_point=None):
        from halclient.curie import Curie
        from halclient.link import Link

        if curies is not None and not isinstance(curies, list):
            curies = [curies]
        for attributes in curies or ():
            if not isinstance(attributes, Mapping):
                raise InvalidDocument('Curie must be a JSON object, got {!r}'.format(attributes))
        self._curies = {curie.name: curie for curie in (Curie(attributes, entry_point)
                                                        for attributes in curies or ())}

        def build_link(key, attributes):
            if not isinstance(attributes, Mapping):
                raise InvalidDocument('Link {!r} must be a JSON object, got {!r}'.format(key, attributes))
            return Link(key, attributes, entry_point)

        def build(key, link):
            if isinstance(link, list):
                return [build_link(key, item) for item in link]
            return build_link(key, link)

        super(LinkCollection, self).__init__(links)
        self._collection = {key: build(key, link) for key, link in self._collection.items() if link is not None}


class EmbeddedCollection(Collection):
    """
    The ``_embedded`` section of a representation. Every relation maps to a :class:`Resource`, or to a list of
    resources if the relation holds an array.
    """

    def __init__(self, embedded=None, entry_point=None):
        from halclient.resource import Resource

        def build(representation):
            if isinstance(representation, list):
                return [Resource(item, entry_point) for item in representation]
            return Resource(representation, entry_point)

        super(EmbeddedCollection, self).__init__(embedded)
        self._collection = {key: build(value) for key, value in self._collection.items()}
