import logging
import re
from dataclasses import dataclass, field
from duke.domain.task import Task
from duke.domain.task_list import TaskList
from duke.domain.errors import (
    DukeError,
    TaskIndexError,
    TaskValidationError,
    BadIndexError,
    TodoFormatError,
    DeadlineFormatError,
    EventFormatError,
    KeywordNotRecognizedError,
)


### COMMENTS
# ==========================================================
# Procesor komend (services/command_processor.py), jedna linia = jedna komenda.
# ==========================================================
# Rola:
# - Klasyfikuje linię: list / done / delete / find / todo / deadline / event.
# - Waliduje argumenty, zmienia TaskList albo tylko ją czyta.
# - Zwraca CommandResult: linie do wyświetlenia + ok/error + changed.
#
# Zasady:
# - Brak stanu między komendami; cały stan to TaskList przekazana w __init__.
# - Żaden DukeError nie wychodzi na zewnątrz: zamieniamy go na linię komunikatu.
# - Składnia jest wrażliwa na spacje: dokładnie jedna spacja po słowie kluczowym.
# - Błąd konstrukcji deadline'u: komunikat + linia z licznikiem, zadanie NIE dodane.

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 55

LIST_HEADER = "Here are the tasks in your list:"
FIND_HEADER = "Here are the matching tasks in your list:"
DONE_MESSAGE = "Nice! I've marked this task as done: "
DELETE_MESSAGE = "Okay! I've removed this task: "
ADD_MESSAGE = "Got it, I've added this task to the list: "

_POSITION = re.compile(r"[+-]?[0-9]+")


def count_line(size: int) -> str:
    return f"Now you have {size} tasks in the list."


@dataclass
class CommandResult:
    """Wynik jednej komendy: co wypisać i czy się udała."""
    lines: list[str] = field(default_factory=list)
    ok: bool = True
    error: DukeError | None = None
    changed: bool = False


class CommandProcessor:
    """
    Przetwarza komendy użytkownika na liście zadań.

    :param tasks: Lista zadań sesji (jedyny właściciel stanu).
    """
    def __init__(self, tasks: TaskList) -> None:
        self.tasks = tasks

    def process(self, line: str) -> CommandResult:
        """
            Przetwarza jedną linię wejścia.

            Rozpoznawane komendy:
            - `list`
            - `done <numer>`
            - `delete <numer>`
            - `find <słowo>`
            - `todo <opis>`
            - `deadline <opis> /by <data>`
            - `event <opis> /at <data>`
            Wszystko inne traktowane jest jak próba dodania zadania
            i kończy się `KeywordNotRecognizedError`.

            :param line: Linia wpisana przez użytkownika (bez znaku nowej linii).
            :return: `CommandResult` z liniami do wyświetlenia.
        """
        result = CommandResult()
        try:
            if line == "list":
                self._list(result)
            elif line.startswith("done "):
                self._done(line[len("done "):], result)
            elif line.startswith("delete "):
                self._delete(line[len("delete "):], result)
            elif line.startswith("find "):
                self._find(line[len("find "):], result)
            else:
                self._add(line, result)
        except DukeError as e:
            logger.debug("Command %r rejected: %s", line, e)
            result.lines.append(str(e))
            result.ok = False
            result.error = e
        return result

    def _list(self, result: CommandResult) -> None:
        result.lines += [LIST_HEADER, str(self.tasks), SEPARATOR]

    def _position(self, argument: str) -> int:
        if not _POSITION.fullmatch(argument):
            raise BadIndexError()
        return int(argument)

    def _done(self, argument: str, result: CommandResult) -> None:
        try:
            task = self.tasks.get_task(self._position(argument))
        except TaskIndexError as e:
            raise BadIndexError() from e
        task.mark_as_done()
        result.changed = True
        result.lines += [DONE_MESSAGE, f"  {task}", SEPARATOR]

    def _delete(self, argument: str, result: CommandResult) -> None:
        try:
            task = self.tasks.remove_task(self._position(argument))
        except TaskIndexError as e:
            raise BadIndexError() from e
        result.changed = True
        result.lines += [DELETE_MESSAGE, f"  {task}", count_line(self.tasks.get_size()), SEPARATOR]

    def _find(self, keyword: str, result: CommandResult) -> None:
        matching = TaskList()
        for task in self.tasks:
            if keyword in task.get_description():
                matching.add_task(task)
        logger.debug("find %r matched %d of %d tasks", keyword, matching.get_size(), self.tasks.get_size())
        result.lines += [FIND_HEADER, str(matching), SEPARATOR]

    def _add(self, line: str, result: CommandResult) -> None:
        if line.startswith("todo "):
            description = line[len("todo "):]
            if not description.strip():
                raise TodoFormatError()
            self._append(Task.todo(description), result)
        elif line.startswith("deadline "):
            description, by = _split_once(line[len("deadline "):], "/by ", DeadlineFormatError)
            try:
                self._append(Task.deadline(description, by), result)
            except TaskValidationError as e:
                logger.debug("Deadline not added: %s", e)
                result.lines.append(str(e))
                result.ok = False
                result.error = e
        elif line.startswith("event "):
            description, at = _split_once(line[len("event "):], " /at ", EventFormatError)
            if not description.strip() or not at.strip():
                raise EventFormatError()
            self._append(Task.event(description, at), result)
        else:
            raise KeywordNotRecognizedError()
        result.lines += [count_line(self.tasks.get_size()), SEPARATOR]

    def _append(self, task: Task, result: CommandResult) -> None:
        self.tasks.add_task(task)
        result.changed = True
        result.lines += [ADD_MESSAGE, f"  {task}"]


def _split_once(rest: str, delimiter: str, error: type[DukeError]) -> tuple[str, str]:
    """Dzieli `rest` na (opis, data) przy pierwszym wystąpieniu `delimiter`;
    brak separatora albo pusta część -> `error()`."""
    description, found, when = rest.partition(delimiter)
    if not found or not description or not when:
        raise error()
    return description, when
