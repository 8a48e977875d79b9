# shop/store.py
"""Entity Store: one table per record type, mapped to plain dataclasses.

Every operation runs in its own short transaction and re-reads from the
database, so nothing is cached between calls.
"""
import uuid
from typing import Any, Generic, TypeVar

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from . import tables
from .errors import AlreadyExists, NotFound
from .models import Customer

T = TypeVar('T')


class EntityStore(Generic[T]):
    hidden_columns: tuple[str, ...] = ()

    def __init__(
        self, sessions: sessionmaker, table: Table, record_type: type[T], kind: str
    ):
        self.sessions = sessions
        self.table = table
        self.record_type = record_type
        self.kind = kind
        self.columns = [
            column for column in table.c if column.name not in self.hidden_columns
        ]

    def conflict_message(self) -> str:
        return f'{self.kind} already exists'

    def _to_record(self, row) -> T:
        return self.record_type(**row._mapping)

    def _fetch(self, session: Session, id: str) -> T:
        row = session.execute(
            select(*self.columns).where(self.table.c.id == id)
        ).first()
        if row is None:
            raise NotFound(self.kind, id)
        return self._to_record(row)

    def create(self, fields: dict[str, Any]) -> T:
        values = {**fields, 'id': str(uuid.uuid4())}
        try:
            with self.sessions.begin() as session:
                session.execute(insert(self.table).values(**values))
                return self._fetch(session, values['id'])
        except IntegrityError as exc:
            raise AlreadyExists(self.conflict_message()) from exc

    def find_all(self) -> list[T]:
        with self.sessions() as session:
            rows = session.execute(select(*self.columns)).all()
        return [self._to_record(row) for row in rows]

    def find_one(self, id: str) -> T:
        with self.sessions() as session:
            return self._fetch(session, id)

    def update(self, id: str, fields: dict[str, Any]) -> T:
        """Shallow merge: only keys present in ``fields`` are written."""
        fields = {key: value for key, value in fields.items() if key != 'id'}
        try:
            with self.sessions.begin() as session:
                self._fetch(session, id)
                if fields:
                    session.execute(
                        update(self.table)
                        .where(self.table.c.id == id)
                        .values(**fields)
                    )
                return self._fetch(session, id)
        except IntegrityError as exc:
            raise AlreadyExists(self.conflict_message()) from exc

    def remove(self, id: str) -> None:
        with self.sessions.begin() as session:
            result = session.execute(
                delete(self.table).where(self.table.c.id == id)
            )
            if result.rowcount == 0:
                raise NotFound(self.kind, id)


class CustomerStore(EntityStore[Customer]):
    hidden_columns = ('password_hash',)

    def __init__(self, sessions: sessionmaker):
        super().__init__(sessions, tables.customers, Customer, 'Customer')

    def conflict_message(self) -> str:
        # email is the only unique column besides the generated id
        return 'Email already registered'

    def find_by_email(self, email: str) -> Customer | None:
        with self.sessions() as session:
            row = session.execute(
                select(*self.columns).where(self.table.c.email == email)
            ).first()
        return self._to_record(row) if row is not None else None

    def find_by_email_with_password(self, email: str) -> Customer | None:
        # The only query that selects password_hash; used by login.
        with self.sessions() as session:
            row = session.execute(
                select(self.table).where(self.table.c.email == email)
            ).first()
        return self._to_record(row) if row is not None else None
