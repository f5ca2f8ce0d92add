from unittest import TestCase

from halclient import uri_template


class UriTemplateTestCase(TestCase):

    def test_is_templated(self):
        self.assertTrue(uri_template.is_templated({'templated': True}))
        self.assertFalse(uri_template.is_templated({'templated': False}))
        self.assertFalse(uri_template.is_templated({}))

    def test_variables(self):
        self.assertEqual(['id', 'owner'], uri_template.variables('/orders{?id,owner}'))
        self.assertEqual(['owner', 'id', 'page'], uri_template.variables('/users/{owner}/orders/{id}{?page}'))

    def test_variables_untemplated(self):
        self.assertEqual([], uri_template.variables('/orders'))
        self.assertEqual([], uri_template.variables(None))

    def test_expand_simple(self):
        self.assertEqual('/orders/42', uri_template.expand('/orders/{id}', {'id': 42}))
        self.assertEqual('/search/tea%20cup', uri_template.expand('/search/{q}', {'q': 'tea cup'}))

    def test_expand_query(self):
        self.assertEqual('/orders?id=1&owner=bob',
                         uri_template.expand('/orders{?id,owner}', {'id': 1, 'owner': 'bob'}))

    def test_expand_omits_unbound_variables(self):
        self.assertEqual('/orders?owner=bob', uri_template.expand('/orders{?id,owner}', {'owner': 'bob'}))
        self.assertEqual('/orders', uri_template.expand('/orders{?id,owner}', {}))

    def test_expand_scalars(self):
        self.assertEqual('/orders?open=true&page=0',
                         uri_template.expand('/orders{?open,page}', {'open': True, 'page': 0}))
