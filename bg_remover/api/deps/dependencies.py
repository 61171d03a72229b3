"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: bg_remover.configs, bg_remover.application, bg_remover.boundary
System role: DI container for service and identity injection
"""

from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bg_remover.application.services import BgRemovalJobService
from bg_remover.boundary.db import get_async_db
from bg_remover.configs import Settings, get_settings
from bg_remover.models.auth import AuthenticatedUser


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_current_user(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),
) -> AuthenticatedUser | None:
    """
    Resolve the caller from the upstream identity provider.

    An authentication middleware may place the user on request.state.user;
    otherwise the gateway-forwarded header named by AUTH_USER_HEADER is used.
    Returns None for anonymous callers; the service decides whether that is
    an error.

    Args:
        request: Incoming request
        settings: Application settings (injected)

    Returns:
        AuthenticatedUser | None: The current user, if any
    """
    state_user = getattr(request.state, "user", None)
    if isinstance(state_user, AuthenticatedUser):
        return state_user
    if state_user is not None and getattr(state_user, "id", None):
        return AuthenticatedUser(id=str(state_user.id))

    user_id = request.headers.get(settings.auth.user_header, "").strip()
    if not user_id:
        return None
    return AuthenticatedUser(id=user_id)


def get_bg_removal_job_service(
    db: AsyncSession = Depends(get_async_db),
) -> BgRemovalJobService:
    """
    Get background removal job service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        BgRemovalJobService: Job service bound to the request's session
    """
    return BgRemovalJobService(db=db)
