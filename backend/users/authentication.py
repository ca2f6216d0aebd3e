# users/authentication.py
import logging
from functools import cached_property

from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.models import TokenUser

from core.exceptions import InvalidCredential
from .models import User

logger = logging.getLogger(__name__)


class RoleTokenUser(TokenUser):
    """
    Identity decoded from a bearer token: ``id`` comes from the ``userId``
    claim and ``role`` from the ``role`` claim. Nothing is read from the DB.
    """

    @cached_property
    def role(self):
        return self.token.get('role') or User.Role.MEMBER


class BearerTokenAuthentication(JWTStatelessUserAuthentication):
    """
    A request without a bearer token stays anonymous, so permission checks
    answer 401. A token that is present but fails verification is a 403.
    """

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except AuthenticationFailed as exc:
            logger.info("Rejected bearer token on %s %s: %s", request.method, request.path, exc.__class__.__name__)
            raise InvalidCredential() from exc
