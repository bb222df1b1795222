from duke.domain.task import Task
from duke.domain.task_list import TaskList
from duke.domain.enums import TaskKind
from duke.domain.errors import DomainError, StorageError
from pathlib import Path
from typing import Iterable
import logging
import os, json

logger = logging.getLogger(__name__)


def _encode_task(task: Task) -> dict:
    return {
        "kind": task.kind.value,  # enum -> "T"/"D"/"E"
        "description": task.description,
        "is_done": task.is_done,
        "when": task.when,
    }

def _decode_task(row: dict) -> Task:
    if not isinstance(row, dict):
        raise ValueError("record must be a JSON object")
    is_done = row.get("is_done", False)
    if not isinstance(is_done, bool):
        raise ValueError("is_done must be true/false")
    for key in ("description", "when"):
        if row.get(key) is not None and not isinstance(row[key], str):
            raise ValueError(f"{key} must be a string")
    return Task(
        kind=TaskKind(row["kind"]),  # str -> enum, ValueError przy nieznanym
        description=row["description"],
        is_done=is_done,
        when=row.get("when"),
    )


class JsonlTaskStorage:
    def __init__(self, path: Path) -> None:
        """Inicjalizuje storage JSONL (jedno zadanie na linię, kolejność = pozycja).
        Tworzy katalog nadrzędny dla pliku, jeśli nie istnieje."""
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> TaskList:
        """Wczytuje listę z pliku. Brak pliku -> pusta lista.
        Rzuca StorageError przy uszkodzonej linii (z numerem linii)."""
        tasks = TaskList()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                for lineno, line in enumerate(f, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        record = json.loads(line)
                    except json.JSONDecodeError as e:
                        raise StorageError(f"{self.path.name}:{lineno}: invalid JSON: {e}")

                    try:
                        task = _decode_task(record)
                    except (KeyError, ValueError, DomainError) as e:
                        raise StorageError(f"{self.path.name}:{lineno}: {e}")
                    tasks.add_task(task)
        except FileNotFoundError:
            logger.debug("No task file at %s, starting empty", self.path)
            return tasks
        except OSError as e:
            raise StorageError(str(e))
        logger.debug("Loaded %d tasks from %s", tasks.get_size(), self.path)
        return tasks

    def _atomic_dump(self, tasks: Iterable[Task]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".swap")
        try:
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                for t in tasks:
                    f.write(json.dumps(_encode_task(t), ensure_ascii=False))
                    f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp)
            raise StorageError(str(e))

    def save(self, tasks: TaskList) -> None:
        """Zapisuje całą listę w sposób atomowy (plik .swap + os.replace)."""
        self._atomic_dump(tasks)
        logger.debug("Saved %d tasks to %s", tasks.get_size(), self.path)
