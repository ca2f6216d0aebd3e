from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken


class RoleAccessToken(AccessToken):
    """
    Access token in the auth service's shape: ``{userId, role, iat, exp}``
    with an integer ``userId``.
    """

    @classmethod
    def for_user(cls, user):
        token = super().for_user(user)
        # with the type and jti claims disabled simplejwt files both under None
        token.payload.pop(None, None)
        token[api_settings.USER_ID_CLAIM] = getattr(user, api_settings.USER_ID_FIELD)
        token['role'] = user.role
        return token


def issue_access_token(user):
    return str(RoleAccessToken.for_user(user))
