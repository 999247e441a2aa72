"""Hash repositories."""

from .hash_repository import HashRepository, SaveStage

__all__ = [
    "HashRepository",
    "SaveStage",
]
