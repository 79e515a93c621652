"""SQLAlchemy adapter – SqlAlchemyEngine."""
from __future__ import annotations

import contextlib
from typing import Any, Iterator

from sqlalchemy import JSON, Boolean, Integer, String, create_engine, delete, select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from features.engine import Engine, FeatureFlag, FeatureFlagKey, User
from features.kernel.errors import AlreadyExistsError, ConnectionError, NotFoundError
from features.observability.logging import get_logger

_log = get_logger(__name__)


class Base(DeclarativeBase):
    pass


class FeatureFlagRow(Base):
    """``feature_flags`` table; ``users`` holds a JSON list of identifiers."""

    __tablename__ = "feature_flags"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    enabled: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    percentage: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    users: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    @classmethod
    def from_flag(cls, flag: FeatureFlag) -> "FeatureFlagRow":
        return cls(
            key=flag.key,
            enabled=flag.enabled,
            percentage=flag.percentage,
            users=[user.id for user in flag.users],
        )

    def to_flag(self) -> FeatureFlag:
        return FeatureFlag(
            key=self.key,
            enabled=self.enabled,
            percentage=self.percentage,
            users=tuple(User(u) for u in self.users or ()),
        )


class SqlAlchemyEngine(Engine):
    """Engine persisting flags in a relational table.

    One session and one transaction per operation; the primary key enforces
    uniqueness for :meth:`save`.
    """

    def __init__(self, engine: Any) -> None:
        self._engine = engine
        self._session_factory = sessionmaker(engine, expire_on_commit=False)

    @classmethod
    def from_url(cls, database_url: str, **engine_kwargs: Any) -> "SqlAlchemyEngine":
        return cls(create_engine(database_url, **engine_kwargs))

    def create_schema(self) -> None:
        """Create the ``feature_flags`` table if it does not exist."""
        with self._translate_errors():
            Base.metadata.create_all(self._engine)

    @contextlib.contextmanager
    def _translate_errors(self) -> Iterator[None]:
        try:
            yield
        except OperationalError as exc:
            raise ConnectionError("database", str(exc.orig), cause=exc) from exc

    @contextlib.contextmanager
    def _session(self) -> Iterator[Session]:
        with self._translate_errors(), self._session_factory() as session:
            yield session

    def save(self, flag: FeatureFlag) -> None:
        with self._session() as session:
            session.add(FeatureFlagRow.from_flag(flag))
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise AlreadyExistsError(flag.key, cause=exc) from exc
        _log.debug("feature_flag.saved", key=flag.key, backend="sqlalchemy")

    def upsert(self, flag: FeatureFlag) -> None:
        with self._session() as session:
            session.merge(FeatureFlagRow.from_flag(flag))
            try:
                session.commit()
            except IntegrityError:
                # Lost an insert race; the row exists now, so merge updates it.
                session.rollback()
                session.merge(FeatureFlagRow.from_flag(flag))
                session.commit()
        _log.debug("feature_flag.upserted", key=flag.key, backend="sqlalchemy")

    def find(self, key: str) -> FeatureFlag:
        with self._session() as session:
            row = session.get(FeatureFlagRow, key)
            if row is None:
                raise NotFoundError("Feature flag", key)
            return row.to_flag()

    def find_all(self) -> list[FeatureFlag]:
        with self._session() as session:
            rows = session.scalars(select(FeatureFlagRow)).all()
            return [row.to_flag() for row in rows]

    def delete(self, key: FeatureFlagKey) -> None:
        with self._session() as session:
            result = session.execute(delete(FeatureFlagRow).where(FeatureFlagRow.key == key.key))
            session.commit()
        if result.rowcount == 0:
            raise NotFoundError("Feature flag", key.key)
        _log.debug("feature_flag.deleted", key=key.key, backend="sqlalchemy")

    def dispose(self) -> None:
        self._engine.dispose()


__all__ = ["Base", "FeatureFlagRow", "SqlAlchemyEngine"]
