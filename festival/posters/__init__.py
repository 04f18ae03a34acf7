"""Poster templates for downloadable result posters."""

from .base import PosterTemplate

# Template registry - import templates here to register them
_templates: dict[str, type[PosterTemplate]] = {}


class UnknownTemplate(LookupError):
    """Raised when a poster template id is not in the template table."""

    def __init__(self, template_id: str):
        super().__init__(f"Poster template not found: {template_id!r}")
        self.template_id = template_id


def register_template(template_class: type[PosterTemplate]) -> type[PosterTemplate]:
    """Decorator to register a poster template class under its template_id."""
    _templates[template_class.template_id] = template_class
    return template_class


def get_template(template_id: str) -> PosterTemplate:
    """Return an instance of the template registered under template_id.

    Raises:
        UnknownTemplate: If no template has that id
    """
    try:
        template_class = _templates[template_id]
    except (KeyError, TypeError):
        raise UnknownTemplate(template_id) from None
    return template_class()


def get_all_templates() -> list[PosterTemplate]:
    """Return instances of all registered templates, in registration order."""
    return [template_class() for template_class in _templates.values()]
