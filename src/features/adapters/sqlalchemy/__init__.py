"""SQLAlchemy adapter – SqlAlchemyEngine and its table model."""
from features.adapters.sqlalchemy.engine import Base, FeatureFlagRow, SqlAlchemyEngine

__all__ = ["Base", "FeatureFlagRow", "SqlAlchemyEngine"]
