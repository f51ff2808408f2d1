"""HTML tags for asset references."""

from collections.abc import Iterable
from typing import Any

from markupsafe import Markup

from ..utils.types import AssetKind, AssetReference
from .freshness import FreshnessGate

SCRIPT_TAG = Markup("<script src='{}' type='text/javascript'></script>")
STYLE_TAG = Markup("<link rel='stylesheet' href='{}' media='screen' />")


def render_tag(reference: AssetReference) -> Markup:
    """Render one reference as a ``<script>`` or ``<link>`` tag."""
    template = SCRIPT_TAG if reference.kind is AssetKind.SCRIPT else STYLE_TAG
    return template.format(reference.url)


def render_tags(references: Iterable[AssetReference]) -> Markup:
    """Render references as tags, one per line."""
    return Markup("\n").join(render_tag(reference) for reference in references)


class AssetHelpers:
    """Template helpers that include an asset set by name.

    Example (Jinja)::

        {{ js_assets('base') }}
        {{ css_assets('screen') }}
    """

    def __init__(self, gate: FreshnessGate) -> None:
        self.gate = gate

    def js_assets(self, set_name: str) -> Markup:
        return render_tags(self.gate.reference(AssetKind.SCRIPT, set_name))

    def css_assets(self, set_name: str) -> Markup:
        return render_tags(self.gate.reference(AssetKind.STYLE, set_name))

    def install(self, env: Any) -> None:
        """Register the helpers as globals of a Jinja-style environment."""
        env.globals["js_assets"] = self.js_assets
        env.globals["css_assets"] = self.css_assets
