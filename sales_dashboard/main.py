# sales_dashboard/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sales_dashboard import __version__
from sales_dashboard.api import api_router
from sales_dashboard.core.config import settings
from sales_dashboard.core.db import SessionLocal, init_db
from sales_dashboard.core.logger import logger
from sales_dashboard.repositories import RepositoryError, RepositoryFactory
from sales_dashboard.services.seed import SeedFetchError, seed_database


def initialize_database() -> int:
    """
    Create the schema and load the seed dataset before serving requests.
    Returns the number of transactions available once startup is done.
    """
    init_db()
    logger.info("Database initialized")

    with SessionLocal() as db:
        factory = RepositoryFactory(db)
        if settings.SEED_ON_STARTUP:
            try:
                seed_database(factory)
            except (SeedFetchError, RepositoryError) as e:
                logger.error(f"Error during DB initialization: {e}", exc_info=True)
                if settings.SEED_FAIL_FAST:
                    raise

        available = factory.get_transaction_repository().count()
        if available == 0:
            logger.warning("No transactions stored; reports will be empty")
        else:
            logger.info(f"Serving {available} stored transactions")
        return available


@asynccontextmanager
async def lifespan(app: FastAPI):
    initialize_database()
    yield
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    app = FastAPI(lifespan=lifespan, title="Sales Dashboard API", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True
    )

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    async def root():
        return {"message": "Sales Dashboard API is running", "version": __version__}

    return app


app = create_app()


def run():
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
