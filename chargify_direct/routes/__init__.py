from .direct import direct_bp
from .main import main_bp

__all__ = ['direct_bp', 'main_bp']
