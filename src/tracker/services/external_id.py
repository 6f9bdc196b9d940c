"""Human-readable work item identifiers of the form ``KEY-NNN``."""

from src.tracker.core.exceptions import ConflictError, NotFoundError
from src.tracker.core.logging import get_logger
from src.tracker.storage import Storage

logger = get_logger(__name__)

# Numbers skipped because an explicit ID already took them
MAX_ALLOCATION_ATTEMPTS = 5


def format_external_id(key: str, number: int) -> str:
    """Format ``KEY-NNN``, zero padded to at least three digits."""
    return f"{key}-{number:03d}"


class ExternalIdGenerator:
    """Hands out IDs from the project's own sequence.

    Numbers are never reused, even after deletes, and two concurrent callers
    never receive the same number.
    """

    def __init__(self, storage: Storage):
        self.storage = storage

    async def generate(self, project_id: int) -> str:
        """Return the next free external ID for a project.

        Raises:
            NotFoundError: If the project does not exist.
            ConflictError: If every attempted number is already in use.
        """
        project = await self.storage.get_project(project_id)
        if project is None:
            raise NotFoundError("Project not found")

        for _ in range(MAX_ALLOCATION_ATTEMPTS):
            number = await self.storage.next_work_item_number(project_id)
            if number is None:
                raise NotFoundError("Project not found")
            candidate = format_external_id(project.key, number)
            if await self.storage.get_work_item_by_external_id(candidate) is None:
                return candidate
            logger.info("External ID already taken, skipping", external_id=candidate)

        message = "Could not allocate a unique external ID"
        raise ConflictError(message, errors=[{"path": "external_id", "message": message}])
