"""Allow ``python -m feedback_service`` to start the API server."""

from feedback_service.main import run

run()
