"""
HTTP client for the member API.
"""
import logging

import requests

logger = logging.getLogger(__name__)

TOKEN_KEY = 'memberToken'
DEFAULT_TIMEOUT = 10


class APIError(Exception):
    """Non-2xx response or transport failure; message is safe to show"""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MemberAPI:
    """Member API client; the bearer token is kept in the local store"""

    def __init__(self, base_url, local_store, session=None, timeout=DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.local_store = local_store
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def token(self):
        return self.local_store.get(TOKEN_KEY)

    def set_token(self, token):
        self.local_store.set(TOKEN_KEY, token)

    def clear_token(self):
        self.local_store.remove(TOKEN_KEY)

    def _request(self, method, path, **kwargs):
        headers = kwargs.pop('headers', {})
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'

        url = f'{self.base_url}{path}'
        try:
            response = self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise APIError('Network error, please check your connection')

        try:
            body = response.json()
        except ValueError:
            body = {}

        if not response.ok:
            raise APIError(body.get('msg') or f'Request failed ({response.status_code})', response.status_code)
        return body

    def login(self, member_id, password):
        return self._request('POST', '/api/member/login/', json={'memberId': member_id, 'password': password})

    def get_profile(self):
        return self._request('GET', '/api/member/me/')

    def update_profile(self, **fields):
        return self._request('PUT', '/api/member/profile/', json=fields)

    def change_password(self, current_password, new_password):
        return self._request('PUT', '/api/member/change-password/', json={
            'currentPassword': current_password,
            'newPassword': new_password,
        })

    def get_attendance(self, limit=30, page=1):
        return self._request('GET', '/api/member/attendance/', params={'limit': limit, 'page': page})

    def get_payments(self, limit=10, page=1):
        return self._request('GET', '/api/member/payments/', params={'limit': limit, 'page': page})

    def get_active_announcements(self):
        return self._request('GET', '/api/announcements/active/')
