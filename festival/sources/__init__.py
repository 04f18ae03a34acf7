"""Sources of competition results."""

from .base import ResultSource

# Source registry - import sources here to register them
_sources: dict[str, type[ResultSource]] = {}


def register_source(source_class: type[ResultSource]) -> type[ResultSource]:
    """Decorator to register a result source class under its kind."""
    _sources[source_class.kind] = source_class
    return source_class


def get_source(kind: str, *args, **kwargs) -> ResultSource:
    """Construct the registered source of the given kind.

    Raises:
        ValueError: If no source of that kind is registered
    """
    try:
        source_class = _sources[kind]
    except KeyError:
        known = ", ".join(sorted(_sources)) or "none"
        raise ValueError(f"Unknown result source {kind!r} (known: {known})") from None
    return source_class(*args, **kwargs)
