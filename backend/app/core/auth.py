from uuid import UUID

from fastapi import HTTPException, Request

from app.models.shared import DEFAULT_TENANT_ID


def get_current_tenant(request: Request) -> UUID:
    """Return the tenant the request was authenticated for.

    Authentication happens upstream; by the time a request reaches the
    billing API the gateway has stamped the tenant id into ``X-Tenant-Id``.
    Requests without the header are served for the default tenant.
    """
    tenant_header = request.headers.get("X-Tenant-Id")
    if not tenant_header:
        return DEFAULT_TENANT_ID

    try:
        return UUID(tenant_header)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid X-Tenant-Id header") from None
