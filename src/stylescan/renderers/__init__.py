"""Stylescan renderers.

Renderers turn token sequences, flat or tree form, back into text.

Available Renderers:
- CssRenderer: Formatted or minified stylesheet text

Thread Safety:
Renderers keep no per-call state on the instance. Safe for concurrent use.

"""

from stylescan.renderers.css import CssRenderer, build
from stylescan.renderers.protocol import TokenRenderer

__all__ = ["CssRenderer", "TokenRenderer", "build"]
