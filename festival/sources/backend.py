"""Results read from the hosted backend."""

from festival.backend.services import ResultsService
from festival.models import Result
from festival.sources import register_source
from festival.sources.base import ResultSource


@register_source
class BackendResultSource(ResultSource):
    """Reads the ``results`` table with each result's event embedded."""

    kind = "backend"

    def __init__(self, service: ResultsService):
        self.service = service

    def fetch(self) -> list[Result]:
        return self.service.get_with_events()

    def get(self, result_id: str) -> Result | None:
        return self.service.get_result(result_id)
