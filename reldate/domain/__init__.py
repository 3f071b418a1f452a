"""Domain models."""
from .models import FormatOptions, RelativeToken

__all__ = ["FormatOptions", "RelativeToken"]
