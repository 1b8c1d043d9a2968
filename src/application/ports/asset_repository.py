"""Application port for reading asset rows."""

from typing import Protocol

from src.domain.models import AssetRecord


class AssetRepositoryPort(Protocol):
    """Port exposing read access to a user's asset and liability rows."""

    def fetch_assets(self, user_id: str) -> list[AssetRecord]:
        """Return every row owned by ``user_id``, largest amount first."""


__all__ = ["AssetRepositoryPort"]
