"""Rich UI components for native_ide_jump."""
from .renderer import RichRenderer, get_renderer

__all__ = ['RichRenderer', 'get_renderer']
