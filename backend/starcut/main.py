"""
Main application module for the star-cut backend.

This file sets up the FastAPI application, configures CORS so a
browser front end can make cross-origin requests and exposes a simple
health check endpoint.

Routers for the star, geometry and copy APIs are included under the
`/api` namespace.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes_copies import router as copies_router
from .api.routes_geometry import router as geometry_router
from .api.routes_stars import router as stars_router


def create_app() -> FastAPI:
    """Factory to create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance.
    """
    app = FastAPI(title="starcut")

    # Allow all origins by default.  In production you should restrict
    # this to the domains that are allowed to access your API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint for monitoring and deployment probes.
    @app.get("/api/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(stars_router, prefix="/api", tags=["stars"])
    app.include_router(geometry_router, prefix="/api", tags=["geometry"])
    app.include_router(copies_router, prefix="/api", tags=["copies"])

    return app


# Create the application instance.  Uvicorn will import this when
# running `uvicorn starcut.main:app` from within the backend directory.
app = create_app()
