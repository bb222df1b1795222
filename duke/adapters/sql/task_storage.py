from __future__ import annotations
import logging
from pathlib import Path
import sqlalchemy as db
from sqlalchemy.exc import SQLAlchemyError
from duke.domain.task import Task
from duke.domain.task_list import TaskList
from duke.domain.enums import TaskKind
from duke.domain.errors import DomainError, StorageError

logger = logging.getLogger(__name__)


class SqlTaskStorage:
    def __init__(self, url: str | Path) -> None:
        """
        url: np. 'sqlite:///data/tasks.db' lub Path do pliku (zostanie zrobiony URL)
        """
        if isinstance(url, Path):
            url.parent.mkdir(parents=True, exist_ok=True)
            db_url = f"sqlite:///{url}"
        else:
            db_url = url

        self.engine = db.create_engine(db_url, future=True)
        self.meta = db.MetaData()

        self.tasks = db.Table(
            "tasks",
            self.meta,
            db.Column("position", db.Integer, primary_key=True, autoincrement=False),  # 1-based
            db.Column("kind", db.String(1), nullable=False),          # 'T'/'D'/'E'
            db.Column("description", db.String, nullable=False),
            db.Column("is_done", db.Boolean, nullable=False, default=False),
            db.Column("when_text", db.String, nullable=True),         # by/at
        )

        # utwórz tabelę jeśli nie istnieje
        try:
            self.meta.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StorageError(str(e))

    def _to_row(self, position: int, task: Task) -> dict:
        return {
            "position": position,
            "kind": task.kind.value,
            "description": task.description,
            "is_done": task.is_done,
            "when_text": task.when,
        }

    def _from_row(self, row) -> Task:
        try:
            return Task(
                kind=TaskKind(row["kind"]),
                description=row["description"],
                is_done=bool(row["is_done"]),
                when=row["when_text"],
            )
        except (ValueError, DomainError) as e:
            raise StorageError(f"tasks row {row['position']}: {e}")

    def load(self) -> TaskList:
        stmt = db.select(self.tasks).order_by(self.tasks.c.position.asc())
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as e:
            raise StorageError(str(e))
        tasks = TaskList(self._from_row(r) for r in rows)
        logger.debug("Loaded %d tasks from %s", tasks.get_size(), self.engine.url)
        return tasks

    def save(self, tasks: TaskList) -> None:
        # cała lista w jednej transakcji: delete + insert
        rows = [self._to_row(i, t) for i, t in enumerate(tasks, start=1)]
        try:
            with self.engine.begin() as conn:
                conn.execute(db.delete(self.tasks))
                if rows:
                    conn.execute(db.insert(self.tasks), rows)
        except SQLAlchemyError as e:
            raise StorageError(str(e))
        logger.debug("Saved %d tasks to %s", len(rows), self.engine.url)
