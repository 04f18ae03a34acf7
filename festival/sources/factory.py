"""Pick the result source the settings ask for."""

from contextlib import contextmanager
from typing import Iterator

from festival.backend.client import BackendClient
from festival.backend.services import ResultsService
from festival.config import FestivalSettings
from festival.sources import get_source
from festival.sources.base import ResultSource

# Import sources to register them
from festival.sources import backend  # noqa: F401
from festival.sources import json_file  # noqa: F401


@contextmanager
def open_source(settings: FestivalSettings) -> Iterator[ResultSource]:
    """Yield a result source: the JSON results file if configured, else the backend.

    The backend client, if one is opened, is closed on exit.

    Raises:
        BackendError: If neither a results file nor the backend is configured
    """
    if settings.results_file:
        yield get_source("json", settings.results_file)
        return

    with BackendClient.from_settings(settings) as client:
        yield get_source("backend", ResultsService(client))
