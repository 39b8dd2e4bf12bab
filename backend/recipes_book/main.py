import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .auth.errors import AuthError
from .auth.maker import PasetoMaker
from .core.database import build_engine, create_db_and_tables
from .core.settings import Settings, settings
from .core.store import ConstraintViolationError, NotFoundError
from .models.Author import Author # Import models to register them with SQLModel
from .models.Recipe import Recipe

from .authors.router import router as authors_router
from .recipes.router import router as recipes_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables(app.state.engine)
    logger.info("Database tables ready")
    yield
    app.state.engine.dispose()


async def auth_error_handler(request: Request, exc: AuthError):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def constraint_violation_handler(request: Request, exc: ConstraintViolationError):
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": str(exc), "constraint": exc.kind.value},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(config: Settings = settings) -> FastAPI:
    """
    Builds the application for the given settings.

    The token maker is created here, so a bad TOKEN_SYMMETRIC_KEY stops the
    process before it serves anything.
    """
    logging.basicConfig(level=config.LOG_LEVEL)

    app = FastAPI(title=config.PROJECT_NAME, lifespan=lifespan)
    app.state.settings = config
    app.state.token_maker = PasetoMaker(config.TOKEN_SYMMETRIC_KEY)
    app.state.engine = build_engine(config.DATABASE_URL)

    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConstraintViolationError, constraint_violation_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(authors_router)
    app.include_router(recipes_router)

    @app.get("/")
    def read_root():
        return {"message": f"Welcome to {config.PROJECT_NAME}"}

    return app


app = create_app()


def run():
    import uvicorn

    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT)
