from unittest import TestCase
from unittest.mock import Mock

from potion_client.resource import ResourceMeta


class BaseTestCase(TestCase):

    def setUp(self):
        super(BaseTestCase, self).setUp()
        self._registry = dict(ResourceMeta.registry)

    def tearDown(self):
        ResourceMeta.registry.clear()
        ResourceMeta.registry.update(self._registry)
        super(BaseTestCase, self).tearDown()

    def mock_client(self, get=None, post=None, put=None):
        """
        A stand-in for the HTTP client returning fixed JSON responses.
        """
        client = Mock(spec=['get', 'post', 'put'])
        client.get.return_value = get
        client.post.return_value = post
        client.put.return_value = put
        return client
