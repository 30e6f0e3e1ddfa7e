from admin_console.application.schemas import FAQ
from admin_console.application.services.resource_store import ResourceStore


class FAQStore(ResourceStore[FAQ]):
    """FAQ cache — plain CRUD. Delete is a hard delete on the server."""
