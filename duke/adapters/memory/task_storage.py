from copy import deepcopy
from duke.domain.task import Task
from duke.domain.task_list import TaskList
from typing import Iterable

### COMMENTS
# ==========================================================
# Adapter pamięciowy dla storage listy zadań (adapters/memory/task_storage.py).
# ==========================================================
# - Służy do testów, trybu demo i pracy bez pliku (`--file` nie podany).
# - Trzyma kopię ostatnio zapisanej listy; brak trwałości między uruchomieniami.
# - Kopia (deepcopy), bo Task jest mutowalny: `done` na liście sesji nie może
#   zmienić tego, co "zapisano".


class InMemoryTaskStorage:
    """
        Inicjalizuje storage z opcjonalną kolekcją startowych zadań.
        :param initial: Iterable z obiektami Task zwracanymi przez pierwsze `load()`.
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._saved: list[Task] = deepcopy(list(initial or []))
        self.saves = 0

    def load(self) -> TaskList:
        """Zwraca nową listę z kopiami zapisanych zadań."""
        return TaskList(deepcopy(self._saved))

    def save(self, tasks: TaskList) -> None:
        """Zapamiętuje kopię listy (w kolejności pozycji)."""
        self._saved = deepcopy(list(tasks))
        self.saves += 1
