"""The fixed set of poster templates."""

from festival.posters import register_template
from festival.posters.base import FlatTemplate, GradientTemplate


@register_template
class ModernTemplate(GradientTemplate):
    template_id = "modern"
    start_color = "#3b82f6"
    end_color = "#8b5cf6"

    @property
    def name(self) -> str:
        return "Modern Gradient"


@register_template
class ClassicTemplate(GradientTemplate):
    template_id = "classic"
    start_color = "#fbbf24"
    end_color = "#f97316"

    @property
    def name(self) -> str:
        return "Classic Gold"


@register_template
class MinimalTemplate(GradientTemplate):
    """Light background, so the text is dark."""

    template_id = "minimal"
    start_color = "#f3f4f6"
    end_color = "#d1d5db"

    @property
    def name(self) -> str:
        return "Minimal White"

    @property
    def text_color(self) -> str:
        return "#1f2937"


@register_template
class NeonTemplate(GradientTemplate):
    template_id = "neon"
    start_color = "#22d3ee"
    end_color = "#ec4899"

    @property
    def name(self) -> str:
        return "Neon Cyber"


@register_template
class FestivalTemplate(FlatTemplate):
    template_id = "festival"
    fill_color = "#b91c1c"

    @property
    def name(self) -> str:
        return "Festival Red"
