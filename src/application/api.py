"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, settings
from .controller import BookshelfController
from ..domain.entities import FailResponse, SuccessResponse
from ..domain.exceptions import BookOperation, BookshelfError
from ..domain.interfaces.book_store import BookStore
from ..infrastructure.local_book_store import LocalBookStore

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

router = APIRouter()

# Operation named in the message when a request body cannot be read
_OPERATION_BY_METHOD = {
    "POST": BookOperation.ADD,
    "PUT": BookOperation.UPDATE,
}


def get_controller(request: Request) -> BookshelfController:
    """Dependency returning the controller owned by the running app."""
    return request.app.state.controller


@router.get("/health")
async def health_check(
    request: Request,
    controller: BookshelfController = Depends(get_controller),
):
    """Health check endpoint."""
    app_settings: Settings = request.app.state.settings
    return {
        **controller.get_health_status(),
        "app": app_settings.app_name,
        "version": app_settings.app_version,
    }


@router.post("/books", status_code=status.HTTP_201_CREATED)
async def create_book(
    payload: Dict[str, Any] = Body(...),
    controller: BookshelfController = Depends(get_controller),
):
    """Add a book to the shelf and return its generated id."""
    book = await controller.create_book(payload)
    return SuccessResponse(
        message="Book added successfully",
        data={"bookId": book.id},
    ).to_body()


@router.get("/books")
async def list_books(controller: BookshelfController = Depends(get_controller)):
    """List every book, reduced to id, name and publisher."""
    summaries = await controller.list_book_summaries()
    return SuccessResponse(
        data={"books": [summary.model_dump() for summary in summaries]},
    ).to_body()


@router.get("/books/{book_id}")
async def get_book(book_id: str, controller: BookshelfController = Depends(get_controller)):
    """Get the full record of a single book."""
    book = await controller.get_book(book_id)
    return SuccessResponse(data={"book": book.to_response()}).to_body()


@router.put("/books/{book_id}")
async def update_book(
    book_id: str,
    payload: Dict[str, Any] = Body(...),
    controller: BookshelfController = Depends(get_controller),
):
    """Replace the editable fields of a book."""
    await controller.update_book(book_id, payload)
    return SuccessResponse(message="Book updated successfully").to_body()


@router.delete("/books/{book_id}")
async def delete_book(book_id: str, controller: BookshelfController = Depends(get_controller)):
    """Remove a book from the shelf."""
    await controller.delete_book(book_id)
    return SuccessResponse(message="Book deleted successfully").to_body()


async def handle_bookshelf_error(request: Request, exc: BookshelfError) -> JSONResponse:
    """Turn a client error into a fail envelope with its status code."""
    return JSONResponse(
        status_code=exc.status_code,
        content=FailResponse(message=str(exc)).to_body(),
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report an unreadable request body as a 400 fail envelope."""
    operation = _OPERATION_BY_METHOD.get(request.method, BookOperation.ADD)
    logger.warning(f"Unreadable body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=FailResponse(
            message=f"Failed to {operation.value} book. Request body must be a JSON object",
        ).to_body(),
    )


async def handle_internal_error(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected failure and answer with a 500 fail envelope."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=FailResponse(message="Internal server error").to_body(),
    )


def create_app(
    store: Optional[BookStore] = None,
    app_settings: Optional[Settings] = None,
    controller: Optional[BookshelfController] = None,
) -> FastAPI:
    """
    Build the bookshelf application.

    Args:
        store: Book store to serve; a new empty LocalBookStore by default
        app_settings: Settings to use instead of the module singleton
        controller: Prebuilt controller, e.g. with a fixed clock in tests;
            it already owns a store, so it cannot be combined with ``store``

    Returns:
        Configured FastAPI application

    Raises:
        ValueError: If both ``store`` and ``controller`` are given.
    """
    if store is not None and controller is not None:
        raise ValueError("Pass either a store or a controller, not both")
    app_settings = app_settings if app_settings is not None else settings
    if controller is None:
        controller = BookshelfController(
            store=store if store is not None else LocalBookStore(),
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Server running at http://{app_settings.host}:{app_settings.port}")
        yield
        logger.info("Server stopped")

    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = app_settings
    app.state.controller = controller

    app.add_exception_handler(BookshelfError, handle_bookshelf_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_internal_error)

    app.include_router(router)
    return app


# Create FastAPI app instance
app = create_app()
