"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from portfolio_backend.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/email-requests", dependencies=[Depends(require_admin)])
def list_email_requests(request: Request, limit: int = 20) -> dict[str, object]:
    """Return the newest contact email ledger rows."""
    container: AppContainer = request.app.state.container
    return {"emailRequests": container.email_request_service.list_recent(limit)}


@router.delete("/email-requests", dependencies=[Depends(require_admin)])
def clear_email_requests(request: Request) -> dict[str, int]:
    """Clear the contact email ledger, lifting any active rate limit."""
    container: AppContainer = request.app.state.container
    return {"deleted": container.email_request_service.clear()}
