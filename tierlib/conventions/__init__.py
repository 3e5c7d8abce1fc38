# Re-export convention types
from .types import AccrualInterval

__all__ = ["AccrualInterval"]
