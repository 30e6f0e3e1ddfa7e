from admin_console.application.schemas import Review
from admin_console.application.services.resource_store import ResourceStore


class ReviewStore(ResourceStore[Review]):
    """Review moderation cache — plain CRUD; creation is sent as multipart."""
