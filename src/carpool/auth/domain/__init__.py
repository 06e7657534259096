from .auth_token import AuthToken as AuthToken
