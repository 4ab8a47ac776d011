# Dashboard module initialization
from .api import bp_dashboard, REPOSITORY_EXTENSION

__all__ = [
    'bp_dashboard',
    'REPOSITORY_EXTENSION',
]
