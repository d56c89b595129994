"""Activity submissions and listing."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from portfolio_backend.domain.errors import StoreError
from portfolio_backend.domain.records import Activity, ActivityInput
from portfolio_backend.domain.submissions import ErrorDetail

logger = logging.getLogger(__name__)


class ActivityRepository(Protocol):
    """Persistence interface for activities."""

    def create_activity(self, payload: ActivityInput) -> None:
        """Insert an activity."""

    def list_activities(self) -> list[Activity]:
        """Return all activities."""


@dataclass
class ActivityService:
    """Handler for the activity resource. Activities carry no image."""

    repository: ActivityRepository

    def insert_one(self, record: object) -> ErrorDetail | None:
        """Validate and store one activity."""
        try:
            payload = ActivityInput.model_validate(record)
            self.repository.create_activity(payload)
        except ValidationError as exc:
            return ErrorDetail.from_validation(exc)
        except StoreError as exc:
            logger.warning(
                "Failed to store activity",
                extra={"title": payload.title, "code": exc.code},
            )
            return ErrorDetail.from_store_error(exc)
        return None

    def list_all(self) -> list[dict[str, object]]:
        """Return every activity in its public shape."""
        return [
            {"title": activity.title, "description": activity.description}
            for activity in self.repository.list_activities()
        ]
