import logging

import requests

from .config import settings
from .exceptions import RequestException


logger = logging.getLogger(__name__)

error_logs_prefix = 'Dwolla client error in:'


class DwollaClient:
    """
    Thin wrapper around requests for the Dwolla REST endpoints.

    Every call is authenticated with an ``oauth_token`` query parameter
    (or the application key/secret for public lookups) and every answer is
    an envelope of the form::

        {"Success": true, "Message": "Success", "Response": ...}

    ``Response`` is returned on success. A ``Success`` of false becomes a
    RequestException carrying ``Message``, and so does a JSON body with no
    ``Success`` flag at all. Network failures, timeouts and
    undecodable bodies are left as requests exceptions.
    """

    def __init__(self, config=None):
        self.config = config if config is not None else settings

    @property
    def headers(self):
        return {
            "accept": "application/json",
            "content-type": "application/json",
            "user-agent": self.config.user_agent,
        }

    def url(self, path: str) -> str:
        return f"{self.config.base_url}/{path.lstrip('/')}"

    def get(self, path: str, oauth_token: str = None, params=None):
        query = self._query(params, oauth_token)
        logger.debug('GET %s', path)
        response = requests.get(
            self.url(path),
            params=query,
            headers=self.headers,
            timeout=self.config.timeout,
        )
        return self._unwrap(response, 'GET', path)

    def post(self, path: str, payload: dict, oauth_token: str = None, params=None):
        query = self._query(params, oauth_token)
        logger.debug('POST %s', path)
        response = requests.post(
            self.url(path),
            params=query,
            json=payload,
            headers=self.headers,
            timeout=self.config.timeout,
        )
        return self._unwrap(response, 'POST', path)

    @staticmethod
    def _query(params, oauth_token):
        # requests keeps list order, the token always goes last
        query = [(key, value) for key, value in (params or []) if value is not None]
        if oauth_token is not None:
            query.append(('oauth_token', oauth_token))
        return query

    @classmethod
    def _unwrap(cls, response, method, path):
        json_response = response.json()
        if not isinstance(json_response, dict) or 'Success' not in json_response:
            response.raise_for_status()
            logger.warning(
                f'{error_logs_prefix} {cls._unwrap.__qualname__} '
                f'{method} {path}: response is not an API envelope'
            )
            raise RequestException(
                'Unexpected response from the API: missing Success flag.',
                response=json_response,
            )
        if not json_response['Success']:
            message = json_response.get('Message')
            logger.warning(
                f'{error_logs_prefix} {cls._unwrap.__qualname__} '
                f'{method} {path}: {message}'
            )
            raise RequestException(message, response=json_response)
        return json_response.get('Response')
