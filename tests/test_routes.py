from unittest import TestCase

from potion_client.exceptions import UnresolvedEndpoint
from potion_client.routes import EndpointTemplate


class EndpointTemplateTestCase(TestCase):

    def test_placeholders(self):
        self.assertEqual(('merchant_id', 'id'), EndpointTemplate('/merchants/:merchant_id/bills/:id').placeholders)
        self.assertEqual((), EndpointTemplate('/bills').placeholders)

    def test_expand(self):
        endpoint = EndpointTemplate('/merchants/:merchant_id/bills/:id')

        self.assertEqual('/merchants/1/bills/2', endpoint.expand(1, 2))
        self.assertEqual('/merchants/1/bills/2', endpoint.expand(2, merchant_id=1))
        self.assertEqual('/merchants/1/bills/2', endpoint.expand(id=2, merchant_id=1))
        self.assertEqual('/bills', EndpointTemplate('/bills').expand())

    def test_expand_missing(self):
        with self.assertRaises(UnresolvedEndpoint) as cx:
            EndpointTemplate('/merchants/:merchant_id/bills/:id').expand(1)

        self.assertEqual('id', cx.exception.placeholder)
        self.assertEqual('/merchants/:merchant_id/bills/:id', cx.exception.template)

    def test_expand_too_many(self):
        with self.assertRaises(UnresolvedEndpoint):
            EndpointTemplate('/test/:id').expand(1, 2)

    def test_resolve(self):
        endpoint = EndpointTemplate('/test/:id')

        self.assertEqual('/test/123', endpoint.resolve({'id': 123, 'name': 'foo'}))

        with self.assertRaises(UnresolvedEndpoint):
            endpoint.resolve({'id': None})

        with self.assertRaises(UnresolvedEndpoint):
            endpoint.resolve({})

    def test_quoting(self):
        self.assertEqual('/files/a%2Fb%20c', EndpointTemplate('/files/:name').expand('a/b c'))

    def test_equality(self):
        self.assertEqual(EndpointTemplate('/test/:id'), EndpointTemplate('/test/:id'))
        self.assertNotEqual(EndpointTemplate('/test/:id'), EndpointTemplate('/test'))
