"""Shared-secret credential check."""

import secrets

from nuggets.core.modules.session.models import Role


def check_secret(secret: str, client_secret: str, admin_secret: str) -> Role:
    """Match a submitted secret against the configured role secrets.

    Comparison is exact and constant-time. Admin is checked first so a
    misconfiguration with equal secrets never downgrades the admin.
    """
    if not secret:
        return Role.NONE
    submitted = secret.encode("utf-8")
    if admin_secret and secrets.compare_digest(submitted, admin_secret.encode("utf-8")):
        return Role.ADMIN
    if client_secret and secrets.compare_digest(submitted, client_secret.encode("utf-8")):
        return Role.CLIENT
    return Role.NONE
