"""URL templates with a single page-number slot."""

from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_PLACEHOLDER
from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class UrlTemplate:
    """A page URL split around its page-number slot.

    The template is stored as the text before and after the slot, so building
    a link never rescans the caller's path for placeholder characters.
    """

    prefix: str
    suffix: str = ""

    @classmethod
    def parse(
        cls, template: str, placeholder: str = DEFAULT_PLACEHOLDER
    ) -> "UrlTemplate":
        """Split ``template`` on its single ``placeholder`` occurrence."""
        occurrences = template.count(placeholder)
        if occurrences != 1:
            raise ConfigurationError(
                f"URI template {template!r} must contain the placeholder "
                f"{placeholder!r} exactly once, found {occurrences}"
            )
        prefix, suffix = template.split(placeholder, 1)
        return cls(prefix, suffix)

    def build(self, page: int) -> str:
        return f"{self.prefix}{int(page)}{self.suffix}"

    def render(self, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
        """Return the template text with ``placeholder`` in the page slot."""
        return f"{self.prefix}{placeholder}{self.suffix}"

    def __str__(self) -> str:
        return self.render()
