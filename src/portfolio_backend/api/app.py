"""FastAPI application factory."""

import logging
from typing import Any

from fastapi import Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portfolio_backend.api.admin import router as admin_router
from portfolio_backend.app_logging import configure_logging
from portfolio_backend.containers import AppContainer
from portfolio_backend.domain.comments import CommentInput
from portfolio_backend.domain.contact import ContactMessage
from portfolio_backend.domain.errors import StoreError
from portfolio_backend.services.submissions import RecordHandler, process_submission


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    settings = container.settings

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.include_router(admin_router)

    @app.exception_handler(StoreError)
    async def store_error_handler(
        request: Request, exc: StoreError
    ) -> JSONResponse:
        logger.error(
            "Store failure while handling request",
            extra={"path": request.url.path, "code": exc.code},
        )
        return JSONResponse(
            status_code=200, content={"error": settings.error_message}
        )

    def listing(handler: RecordHandler) -> object:
        try:
            return handler.list_all()
        except StoreError:
            logger.exception("Failed to list records")
            return {"error": settings.error_message}

    def submit(body: object, handler: RecordHandler) -> object:
        return process_submission(body, handler, settings.invalid_body_message)

    @app.get("/")
    def index() -> dict[str, str]:
        """Return service metadata."""
        return {"app": settings.app_name, "version": settings.app_version}

    @app.get("/health")
    def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/academicRecords")
    def academic_records():
        return listing(container.academic_service)

    @app.get("/workRecords")
    def work_records():
        return listing(container.work_service)

    @app.get("/hobbies")
    def hobbies():
        return listing(container.hobby_service)

    @app.get("/activities")
    def activities():
        return listing(container.activity_service)

    @app.get("/socialItems")
    def social_items():
        return listing(container.social_service)

    @app.get("/comments")
    def comments():
        return listing(container.comment_service)

    @app.post("/academicRecord")
    def submit_academic_record(body: Any = Body(default=None)):
        """Store one academic record or a list of them."""
        return submit(body, container.academic_service)

    @app.post("/workRecord")
    def submit_work_record(body: Any = Body(default=None)):
        """Store one work record or a list of them."""
        return submit(body, container.work_service)

    @app.post("/socialItem")
    def submit_social_item(body: Any = Body(default=None)):
        """Store one social item or a list of them."""
        return submit(body, container.social_service)

    @app.post("/activity")
    def submit_activity(body: Any = Body(default=None)):
        """Store one activity or a list of them."""
        return submit(body, container.activity_service)

    @app.post("/hobby")
    def submit_hobby(body: Any = Body(default=None)):
        """Store one hobby or a list of them."""
        return submit(body, container.hobby_service)

    @app.post("/comment")
    def submit_comment(comment: CommentInput) -> dict[str, Any]:
        """Store a visitor comment, replacing the visitor's earlier one."""
        return container.comment_service.submit(comment).to_dict()

    @app.post("/email")
    def send_email(message: ContactMessage):
        """Relay a contact form message to the portfolio owner."""
        return container.contact_service.relay(message)

    return app
