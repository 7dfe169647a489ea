"""
Token authentication for the front desk API.

Clients that cannot hold JWTs (the print windows, the smoke script)
send ``Authorization: Token <key>``.  The class lives apart from the
auth views so that REST framework can import it while loading
settings without pulling in views and models.
"""
from __future__ import annotations

from rest_framework import authentication


class TokenAuthentication(authentication.TokenAuthentication):
    """Token authentication bound to the ``Token`` keyword."""

    keyword = 'Token'
