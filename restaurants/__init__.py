from .models import Restaurant

__all__ = ["Restaurant"]
