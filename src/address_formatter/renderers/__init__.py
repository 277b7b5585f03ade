from address_formatter.renderers.base import BaseTemplateRenderer, FirstNonEmptyHelper
from address_formatter.renderers.factory import RendererFactory
from address_formatter.renderers.pystache_renderer import PystacheRenderer

__all__ = [
    "BaseTemplateRenderer",
    "FirstNonEmptyHelper",
    "PystacheRenderer",
    "RendererFactory",
]
