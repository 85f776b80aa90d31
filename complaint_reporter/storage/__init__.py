# Local storage package
from .local_storage import LocalStorage

__all__ = ["LocalStorage"]
