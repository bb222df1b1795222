from typing import Iterable, Iterator
from duke.domain.task import Task
from duke.domain.errors import TaskIndexError


class TaskList:
    """
        Uporządkowana lista zadań jednej sesji; pozycje dla użytkownika liczone od 1.
        :param initial: Iterable z obiektami Task do wstępnego załadowania (np. ze storage).
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(initial or [])

    def add_task(self, task: Task) -> None:
        """Dodaje zadanie na koniec listy."""
        self._tasks.append(task)

    def get_task(self, position: int) -> Task:
        """
            Zwraca zadanie z pozycji `position` (1-based).

            :raises TaskIndexError: Gdy `position < 1` lub `position > size`.
        """
        return self._tasks[self._index(position)]

    def remove_task(self, position: int) -> Task:
        """
            Usuwa zadanie z pozycji `position` (1-based) i je zwraca.

            - Kolejne zadania przesuwają się o jedną pozycję w dół.

            :raises TaskIndexError: Gdy `position < 1` lub `position > size`.
        """
        return self._tasks.pop(self._index(position))

    def get_size(self) -> int:
        return len(self._tasks)

    def _index(self, position: int) -> int:
        if position < 1 or position > len(self._tasks):
            raise TaskIndexError(position, len(self._tasks))
        return position - 1

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __str__(self) -> str:
        return "\n".join(f"{i}.{task}" for i, task in enumerate(self._tasks, start=1))
