"""Abstract base class for result sources."""

from abc import ABC, abstractmethod

from festival.models import Result


class ResultSource(ABC):
    """Abstract base class for anything that supplies competition results.

    Sources return every known result in any order; the standings code does
    not depend on it. Sources are registered via the @register_source
    decorator in festival/sources/__init__.py.
    """

    kind: str = ""

    @abstractmethod
    def fetch(self) -> list[Result]:
        """Return all known results.

        Raises:
            Exception: Whatever the underlying storage raises; callers wrap it
        """
        pass

    def get(self, result_id: str) -> Result | None:
        """Return the result with the given id, or None.

        Subclasses with an indexed lookup should override this.
        """
        return next((r for r in self.fetch() if r.id == result_id), None)
