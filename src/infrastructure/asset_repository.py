"""SQLAlchemy-backed repository for asset and liability rows."""

from sqlalchemy import text

from src.application.ports.asset_repository import AssetRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import AssetRecord
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyAssetRepository(AssetRepositoryPort):
    """Read a user's rows from the ``assets`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the asset database engine.
        """
        self._db_port = db_port

    def fetch_assets(self, user_id: str) -> list[AssetRecord]:
        query = text(
            """
            SELECT id, name, symbol, amount, type
            FROM assets
            WHERE user_id = :user_id
            ORDER BY amount DESC
            """
        )
        engine = self._db_port.get_supabase_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"user_id": user_id}).all()
        return [
            AssetRecord(
                id=row.id,
                name=row.name or "",
                symbol=row.symbol or "",
                amount=coerce_decimal(row.amount),
                type=row.type or "",
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyAssetRepository"]
