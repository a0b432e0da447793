# storefront/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.api.routers import (
    account,
    addresses,
    admin_dashboard,
    admin_orders,
    carts,
    catalog,
    checkout,
    health,
    orders,
    wishlist,
)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def register_routes(app: FastAPI) -> FastAPI:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health.router)
    app.include_router(checkout.router)
    app.include_router(carts.router)
    app.include_router(addresses.router)
    app.include_router(wishlist.router)
    app.include_router(orders.router)
    app.include_router(admin_orders.router)
    app.include_router(admin_dashboard.router)
    app.include_router(account.router)
    app.include_router(catalog.router)
    return app
