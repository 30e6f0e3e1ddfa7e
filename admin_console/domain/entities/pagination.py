"""Page cursor used by list screens."""

from dataclasses import dataclass


@dataclass
class Paginator:
    """Tracks the current page of a paginated list.

    Moves are clamped to ``1..total_pages``; jumping to a page outside that
    range is ignored.
    """

    total_pages: int = 1
    current_page: int = 1

    def __post_init__(self) -> None:
        self.total_pages = max(1, self.total_pages)
        self.current_page = min(max(1, self.current_page), self.total_pages)

    def go_to(self, page: int) -> None:
        if 1 <= page <= self.total_pages:
            self.current_page = page

    def next_page(self) -> None:
        self.current_page = min(self.current_page + 1, self.total_pages)

    def prev_page(self) -> None:
        self.current_page = max(self.current_page - 1, 1)

    def params(self, limit: int = 10) -> dict[str, int]:
        """Query parameters selecting the current page."""
        return {"page": self.current_page, "limit": limit}
