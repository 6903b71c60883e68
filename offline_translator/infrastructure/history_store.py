# offline_translator/infrastructure/history_store.py

import logging
import os
from datetime import datetime
from typing import List

from sqlalchemy import DateTime, Integer, String, Text, create_engine, delete, select
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from offline_translator.domain.interfaces import IHistoryStore
from offline_translator.domain.models import HistoryRecord

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class HistoryEntry(Base):
    """One saved translation."""

    __tablename__ = "history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    source_text: Mapped[str] = mapped_column(Text, nullable=False)
    translated_text: Mapped[str] = mapped_column(Text, nullable=False)
    source_language: Mapped[str] = mapped_column(String(64), nullable=False)
    target_language: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now, index=True)

    def to_record(self) -> HistoryRecord:
        return HistoryRecord(
            id=self.id,
            source_text=self.source_text,
            translated_text=self.translated_text,
            source_language=self.source_language,
            target_language=self.target_language,
            created_at=self.created_at,
        )


def _create_sqlite_engine(database_url: str):
    url = make_url(database_url)
    if not url.database or url.database == ":memory:":
        # A single shared connection, otherwise each thread would get its own empty database
        return create_engine(database_url, connect_args={"check_same_thread": False}, poolclass=StaticPool)

    directory = os.path.dirname(url.database)
    if directory:
        os.makedirs(directory, exist_ok=True)
    return create_engine(database_url, connect_args={"check_same_thread": False})


class SQLAlchemyHistoryStore(IHistoryStore):
    """IHistoryStore persisted in SQLite through SQLAlchemy."""

    def __init__(self, database_url: str = "sqlite://"):
        self._engine = _create_sqlite_engine(database_url)
        Base.metadata.create_all(self._engine)
        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        logger.info("Infrastructure Layer (HistoryStore): using %s", database_url)

    def _session(self) -> Session:
        return self._session_factory()

    def append(self, record: HistoryRecord) -> HistoryRecord:
        entry = HistoryEntry(
            source_text=record.source_text,
            translated_text=record.translated_text,
            source_language=record.source_language,
            target_language=record.target_language,
            created_at=record.created_at,
        )
        with self._session() as session:
            session.add(entry)
            session.commit()
            record.id = entry.id
        logger.info("Infrastructure Layer (HistoryStore): saved record %s", record.id)
        return record

    def delete(self, record_id: int) -> bool:
        with self._session() as session:
            entry = session.get(HistoryEntry, record_id)
            if entry is None:
                return False
            session.delete(entry)
            session.commit()
        logger.info("Infrastructure Layer (HistoryStore): deleted record %s", record_id)
        return True

    def delete_all(self) -> int:
        with self._session() as session:
            deleted = session.execute(delete(HistoryEntry)).rowcount
            session.commit()
        logger.info("Infrastructure Layer (HistoryStore): cleared history (%s records)", deleted)
        return deleted

    def list_all(self) -> List[HistoryRecord]:
        with self._session() as session:
            entries = session.scalars(
                select(HistoryEntry).order_by(HistoryEntry.created_at.desc(), HistoryEntry.id.desc())
            ).all()
            return [entry.to_record() for entry in entries]

    def close(self):
        self._engine.dispose()
