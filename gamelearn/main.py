"""
Gamelearn API - Main Application
Users, XP/level progression, courses and programming challenges
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from gamelearn.challenges.router import router as challenges_router
from gamelearn.config import APP_ENV, CORS_ORIGINS, PORT
from gamelearn.courses.router import router as courses_router
from gamelearn.database import MongoStore
from gamelearn.errors import StoreUnavailable, register_error_handlers
from gamelearn.logging_config import configure_logging
from gamelearn.progression.router import router as progression_router

logger = logging.getLogger(__name__)


def create_app(store: MongoStore = None) -> FastAPI:
    app = FastAPI(title="Gamelearn API")
    app.state.store = store or MongoStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.on_event("startup")
    async def startup_event():
        try:
            await app.state.store.connect()
        except StoreUnavailable:
            # requests retry the connection through get_store
            logger.error("Database not reachable at startup")

    @app.on_event("shutdown")
    async def shutdown_event():
        await app.state.store.close()

    # ==================== ROUTER REGISTRATION ====================
    app.include_router(progression_router)
    app.include_router(courses_router)
    app.include_router(challenges_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Gamelearn API running"

    return app


configure_logging()
app = create_app()


if __name__ == "__main__":
    # local development only; production runs under an ASGI server
    import uvicorn

    if APP_ENV != "production":
        logger.info("Backend server listening on port %s", PORT)
        uvicorn.run(app, host="0.0.0.0", port=PORT)
