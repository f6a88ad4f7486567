import logging

import requests

from potion_client.utils import to_json

log = logging.getLogger(__name__)


class Client(object):
    """
    A minimal JSON client for a REST API, suitable for use with :meth:`Resource.find` and :meth:`Resource.save`.

    Errors are not translated: any :class:`requests.RequestException` --- including the :class:`requests.HTTPError`
    raised for responses with an error status --- propagates to the caller.

    :param str base_url: URL prepended to every path
    :param auth: optional authentication passed on to :mod:`requests`
    :param dict headers: additional headers to send with every request
    :param timeout: optional timeout in seconds passed on to :mod:`requests`
    :param requests.Session session: optional session to use
    """

    def __init__(self, base_url, auth=None, headers=None, timeout=None, session=None):
        self.base_url = base_url.rstrip('/')
        self.auth = auth
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        })
        self.session.headers.update(headers or {})

    def url(self, path):
        if path.startswith(('http://', 'https://')):
            return path
        return '{}/{}'.format(self.base_url, path.lstrip('/'))

    def request(self, method, path, body=None):
        url = self.url(path)
        data = None
        if body is not None:
            data = to_json(body)

        log.debug('%s %s', method, url)
        response = self.session.request(method, url, data=data, auth=self.auth, timeout=self.timeout)

        if not response.ok:
            log.warning('%s %s failed with status %s', method, url, response.status_code)
        response.raise_for_status()

        if not response.content:
            return None
        return response.json()

    def get(self, path):
        return self.request('GET', path)

    def post(self, path, body):
        return self.request('POST', path, body)

    def put(self, path, body):
        return self.request('PUT', path, body)
