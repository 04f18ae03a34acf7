"""Abstract base class for poster templates."""

from abc import ABC, abstractmethod

from PIL import Image


class PosterTemplate(ABC):
    """Abstract base class for poster templates.

    Each template decides how the poster background is painted and which
    colour the text is drawn in. Templates are registered via the
    @register_template decorator in festival/posters/__init__.py, keyed by
    their ``template_id`` class attribute.
    """

    template_id: str = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this template."""
        pass

    @property
    def text_color(self) -> str:
        return "#ffffff"

    @abstractmethod
    def background(self, size: tuple[int, int]) -> Image.Image:
        """Paint the poster background.

        Args:
            size: (width, height) of the poster in pixels

        Returns:
            A new RGB image of exactly that size
        """
        pass


class GradientTemplate(PosterTemplate):
    """Template with a diagonal gradient from the top-left to the bottom-right."""

    start_color: str = "#000000"
    end_color: str = "#ffffff"

    def background(self, size: tuple[int, int]) -> Image.Image:
        return diagonal_gradient(size, self.start_color, self.end_color)


class FlatTemplate(PosterTemplate):
    """Template with a single flat fill colour."""

    fill_color: str = "#000000"

    def background(self, size: tuple[int, int]) -> Image.Image:
        return Image.new("RGB", size, self.fill_color)


def diagonal_gradient(size: tuple[int, int], start: str, end: str) -> Image.Image:
    """Blend from ``start`` at the top-left corner to ``end`` at the bottom-right.

    Every pixel (x, y) takes its blend weight from x + y, so the mask is
    built from a single ramp of width + height - 1 values, one slice per row.
    """
    width, height = size
    span = width + height - 1
    ramp = Image.new("L", (span, 1))
    ramp.putdata([round(255 * i / max(span - 1, 1)) for i in range(span)])

    mask = Image.new("L", size)
    for y in range(height):
        mask.paste(ramp.crop((y, 0, y + width, 1)), (0, y))

    return Image.composite(
        Image.new("RGB", size, end),
        Image.new("RGB", size, start),
        mask,
    )
