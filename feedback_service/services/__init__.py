"""Business services: the submission write path and the admin read side."""

from feedback_service.services.feedback_query_service import FeedbackQueryService
from feedback_service.services.submission_coordinator import SubmissionCoordinator, parse_submission

__all__ = ["FeedbackQueryService", "SubmissionCoordinator", "parse_submission"]
