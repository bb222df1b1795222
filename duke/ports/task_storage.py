from typing import Protocol
from duke.domain.task_list import TaskList


### COMMENTS
# ==========================================================
# Kontrakt trwałości listy zadań (ports/task_storage.py).
# ==========================================================
# - Niezależny od technologii (pamięć, plik JSONL, baza SQL).
# - Lista zapisywana jest w całości; kolejność pozycji musi się zachować.
# - Adaptery mapują błędy technologiczne na `StorageError`.
# - Storage nie zawiera logiki komend: to robi CommandProcessor.


class TaskStorage(Protocol):
    """Interfejs do odczytu i zapisu całej listy zadań."""

    def load(self) -> TaskList:
        """Zwraca zapisaną listę zadań.

        Zwraca:
            TaskList: Nowa lista; pusta, gdy nic jeszcze nie zapisano.

        Wyjątki:
            StorageError: Gdy dane są nieczytelne lub uszkodzone.
        """

    def save(self, tasks: TaskList) -> None:
        """Zastępuje zapisaną listę podaną listą.

        Wyjątki:
            StorageError: Gdy zapis się nie powiódł.

        Uwagi:
            Operacja powinna być atomowa (spójność po błędzie częściowym).
        """
