# users/tokens.py

"""
ACCESS TOKEN ISSUANCE

Stateless bearer tokens (djangorestframework-simplejwt):
- HS256 over settings.JWT_SECRET
- lifetime from SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"] (1 hour)
- claims: userId, username, role

Verification is handled by simplejwt's JWTAuthentication
(REST_FRAMEWORK["DEFAULT_AUTHENTICATION_CLASSES"]).
"""

from __future__ import annotations

from rest_framework_simplejwt.tokens import AccessToken


def issue_access_token(user) -> AccessToken:
    token = AccessToken.for_user(user)
    token["username"] = user.username
    token["role"] = user.role
    return token


def issue_access_token_string(user) -> str:
    return str(issue_access_token(user))
