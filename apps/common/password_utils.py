"""
Member password hashing capability.

The member auth flow only ever calls ``hash`` and ``verify`` on the object
returned by ``get_password_hasher()``; the algorithm is chosen by the
``MEMBER_PASSWORD_HASHER`` setting and can be swapped without touching the
login or password-change logic.
"""
import logging

import bcrypt
from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from django.utils.module_loading import import_string

logger = logging.getLogger('security')

BCRYPT_PREFIXES = ('$2a$', '$2b$', '$2x$', '$2y$')

# bcrypt only reads the first 72 bytes of a password; bcryptjs truncated silently
BCRYPT_MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Interface: hash(plaintext) -> digest, verify(plaintext, digest) -> bool"""

    def hash(self, plaintext):
        raise NotImplementedError

    def verify(self, plaintext, digest):
        raise NotImplementedError


class BCryptPasswordHasher(PasswordHasher):
    """
    Bare bcrypt digests ($2b$...), compatible with hashes written by
    Node.js bcrypt / bcryptjs.
    """

    def __init__(self, rounds=None):
        if rounds is None:
            rounds = settings.PASSWORD_SECURITY_CONFIG.get('BCRYPT_ROUNDS', 10)
        self.rounds = rounds

    def hash(self, plaintext):
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_bcrypt_input(plaintext), salt).decode('ascii')

    def verify(self, plaintext, digest):
        if not plaintext or not is_bcrypt_hash(digest):
            return False
        try:
            return bcrypt.checkpw(_bcrypt_input(plaintext), digest.encode('ascii'))
        except (ValueError, TypeError):
            logger.warning("Corrupted bcrypt digest encountered during verification")
            return False


class DjangoPasswordHasher(PasswordHasher):
    """Delegates to Django's configured PASSWORD_HASHERS"""

    def hash(self, plaintext):
        return make_password(plaintext)

    def verify(self, plaintext, digest):
        if not plaintext or not digest:
            return False
        return check_password(plaintext, digest)


def _bcrypt_input(plaintext):
    return plaintext.encode('utf-8')[:BCRYPT_MAX_PASSWORD_BYTES]


def is_bcrypt_hash(digest):
    """Check if string looks like a bcrypt hash"""
    return isinstance(digest, str) and digest.startswith(BCRYPT_PREFIXES)


def get_password_hasher():
    """Instantiate the hasher named by settings.MEMBER_PASSWORD_HASHER"""
    return import_string(settings.MEMBER_PASSWORD_HASHER)()


def hash_password(plaintext):
    return get_password_hasher().hash(plaintext)


def verify_password(plaintext, digest):
    return get_password_hasher().verify(plaintext, digest)
