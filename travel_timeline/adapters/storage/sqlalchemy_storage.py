"""Database storage adapter using SQLAlchemy.

This is the database counterpart of the local JSON store: same port,
same behaviour, but profile and travels live in two tables. Every
operation runs in its own session that commits on success and rolls
back on failure.

Travels keep the caller's entry id in ``entry_id`` and their input
position in ``position`` so that reads come back sorted by entry date
with ties in the order they were saved.
"""

from __future__ import annotations

import datetime as dt
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Generator, Optional, Sequence

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    create_engine,
    delete,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from ...domain.errors import StorageError
from ...domain.models import ExportBundle, HomeLocation, Theme, TravelEntry, UserProfile
from ...timeline.dates import parse_entry_date
from ._profiles import new_profile

Base = declarative_base()

UTC = dt.timezone.utc


def _as_utc(value: dt.datetime) -> dt.datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _parse_timestamp(value: str) -> dt.datetime:
    if not value:
        return dt.datetime.now(UTC)
    try:
        return _as_utc(dt.datetime.fromisoformat(value))
    except ValueError as e:
        raise StorageError(
            f"Invalid profile timestamp {value!r}", backend="database", cause=e
        )


class UserRow(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    name = Column(String(200), nullable=False, default="")
    email = Column(String(200), nullable=False, default="")
    theme = Column(String(10), nullable=False, default=Theme.LIGHT.value)
    home_country = Column(String(100), nullable=False)
    home_city = Column(String(100), nullable=False)
    home_flag_code = Column(String(10), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def to_domain(self) -> UserProfile:
        return UserProfile(
            id=self.id,
            name=self.name,
            email=self.email,
            theme=Theme(self.theme),
            home_location=HomeLocation(
                country=self.home_country,
                city=self.home_city,
                flag_code=self.home_flag_code,
            ),
            created_at=_as_utc(self.created_at).isoformat(),
            updated_at=_as_utc(self.updated_at).isoformat(),
        )


class TravelRow(Base):
    __tablename__ = "travels"

    row_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    entry_id = Column(String(64), nullable=False)
    position = Column(Integer, nullable=False)
    country = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    entry_date = Column(Date, nullable=False, index=True)
    exit_date = Column(Date, nullable=True)
    is_home = Column(Boolean, nullable=False, default=False)
    flag_code = Column(String(10), nullable=False, default="")

    def to_domain(self) -> TravelEntry:
        return TravelEntry(
            id=self.entry_id,
            country=self.country,
            city=self.city,
            entry_date=self.entry_date.isoformat(),
            exit_date=self.exit_date.isoformat() if self.exit_date else None,
            is_home=self.is_home,
            flag_code=self.flag_code,
        )


def create_database_engine(database_url: str) -> Engine:
    """Create an engine, sharing one connection for in-memory SQLite."""
    kwargs: dict[str, Any] = {"future": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


@dataclass
class SqlAlchemyStorage:
    """Storage adapter persisting to a relational database.

    This adapter implements StoragePort. Tables are created on first use.

    Attributes:
        database_url: SQLAlchemy database URL
    """

    database_url: str

    _engine: Engine = field(init=False, repr=False)
    _session_factory: sessionmaker = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        try:
            self._engine = create_database_engine(self.database_url)
            Base.metadata.create_all(bind=self._engine)
        except SQLAlchemyError as e:
            raise StorageError(
                "Failed to open database", backend="database", cause=e
            )
        self._session_factory = sessionmaker(
            bind=self._engine, autoflush=False, autocommit=False, future=True
        )

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """Provide a session that commits on success and rolls back on error."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(
                "Database operation failed", backend="database", cause=e
            )
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_profile(self) -> Optional[UserProfile]:
        with self.session_scope() as session:
            row = session.execute(
                select(UserRow).order_by(UserRow.created_at).limit(1)
            ).scalar_one_or_none()
            return row.to_domain() if row else None

    def save_profile(self, profile: UserProfile) -> UserProfile:
        with self.session_scope() as session:
            row = session.get(UserRow, profile.id)
            if row is None:
                row = UserRow(id=profile.id, created_at=_parse_timestamp(profile.created_at))
                session.add(row)
            row.name = profile.name
            row.email = profile.email
            row.theme = profile.theme.value
            row.home_country = profile.home_location.country
            row.home_city = profile.home_location.city
            row.home_flag_code = profile.home_location.flag_code
            row.updated_at = dt.datetime.now(UTC)
            session.flush()
            stored = row.to_domain()
        self._logger.debug("Profile saved", extra={"profile_id": profile.id})
        return stored

    def create_profile(
        self,
        name: str = "",
        email: str = "",
        theme: Optional[Theme] = None,
        home_location: Optional[HomeLocation] = None,
    ) -> UserProfile:
        profile = self.save_profile(new_profile(name, email, theme, home_location))
        self._logger.info("Profile created", extra={"profile_id": profile.id})
        return profile

    def get_travels(self, user_id: str) -> list[TravelEntry]:
        with self.session_scope() as session:
            rows = session.execute(
                select(TravelRow)
                .where(TravelRow.user_id == user_id)
                .order_by(TravelRow.entry_date, TravelRow.position)
            ).scalars()
            return [row.to_domain() for row in rows]

    def save_travels(self, user_id: str, travels: Sequence[TravelEntry]) -> None:
        rows = [self._to_row(user_id, position, t) for position, t in enumerate(travels)]
        with self.session_scope() as session:
            session.execute(delete(TravelRow).where(TravelRow.user_id == user_id))
            session.add_all(rows)
        self._logger.debug(
            "Travels saved",
            extra={"user_id": user_id, "entries": len(rows)},
        )

    def export_data(self, user_id: str) -> ExportBundle:
        return ExportBundle(
            profile=self.get_profile(),
            travels=tuple(self.get_travels(user_id)),
        )

    def import_data(self, bundle: ExportBundle) -> None:
        if bundle.profile:
            self.save_profile(bundle.profile)
            if bundle.travels:
                self.save_travels(bundle.profile.id, bundle.travels)

    @staticmethod
    def _to_row(user_id: str, position: int, entry: TravelEntry) -> TravelRow:
        return TravelRow(
            user_id=user_id,
            entry_id=entry.id,
            position=position,
            country=entry.country,
            city=entry.city,
            entry_date=parse_entry_date(entry.entry_date, entry.id),
            exit_date=(
                parse_entry_date(entry.exit_date, entry.id) if entry.exit_date else None
            ),
            is_home=entry.is_home,
            flag_code=entry.flag_code,
        )
