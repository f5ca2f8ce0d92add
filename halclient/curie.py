from halclient import uri_template


class Curie(object):
    """
    A compact URI from the ``curies`` relation, mapping a prefix such as ``ex`` in ``ex:orders`` to the
    documentation of the relation.
    """

    def __init__(self, attributes, entry_point):
        self._attributes = attributes
        self._entry_point = entry_point

    @property
    def name(self):
        return self._attributes.get('name')

    @property
    def href(self):
        return self._attributes.get('href')

    @property
    def templated(self):
        return uri_template.is_templated(self._attributes)

    def expand(self, rel):
        if not self.templated:
            return self.href
        return uri_template.expand(self.href, {'rel': rel})

    def __repr__(self):
        return '<Curie {!r} {!r}>'.format(self.name, self.href)
