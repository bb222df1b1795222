

### COMMENTS
# ============================================
# Konwencja użycia błędów w projekcie
# ============================================
# - Model (Task, TaskList):
#     * pusty opis / pusta data przy konstrukcji → TaskValidationError
#     * pozycja spoza zakresu 1..size → TaskIndexError
#
# - Procesor komend:
#     * zły format argumentów → ArgumentError (kody 1-4)
#     * nieznane słowo kluczowe → KeywordNotRecognizedError
#     * łapie DukeError i zamienia go na linię komunikatu (nic nie wychodzi wyżej)
#
# - Adaptery storage:
#     * mapują błędy techniczne (OSError, JSON, SQLAlchemy) na StorageError
#
# - UI (CLI):
#     * wyświetla komunikat; StorageError kończy proces z kodem != 0


class DukeError(Exception):
    """Bazowa klasa dla wszystkich błędów aplikacji.
    Nie powinna być rzucana bezpośrednio: używaj klas pochodnych.
    """


class DomainError(DukeError):
    """Błędy modelu domenowego (Task, TaskList)."""


class TaskValidationError(DomainError):
    """Rzucany, gdy pole zadania nie spełnia reguł modelu.
    Przykłady:
    - opis jest pusty lub składa się z samych spacji,
    - deadline/event bez daty,
    - todo z datą.
    Zawiera nazwę pola (`field`) oraz czytelny komunikat (`message`).
    """
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(self.__str__())
    def __str__(self):
        return f"OOPS!!! Invalid '{self.field}': {self.message}"


class TaskIndexError(DomainError):
    """Rzucany, gdy pozycja (1-based) wykracza poza listę zadań."""
    def __init__(self, position: int, size: int):
        self.position = position
        self.size = size
        super().__init__(self.__str__())
    def __str__(self):
        return f"OOPS!!! There is no task number {self.position} (the list has {self.size})."


class CommandError(DukeError):
    """Błędy warstwy komend: zła składnia linii wejściowej."""


class ArgumentError(CommandError):
    """Zły argument komendy. `code` wskazuje rodzinę komendy:

    1 - todo, 2 - deadline, 3 - event, 4 - done/delete (zły numer).
    """
    TODO_FORMAT = 1
    DEADLINE_FORMAT = 2
    EVENT_FORMAT = 3
    BAD_INDEX = 4

    MESSAGES = {
        TODO_FORMAT: "The description of a todo cannot be empty. Usage: todo <description>",
        DEADLINE_FORMAT: "A deadline needs a description and a date. Usage: deadline <description> /by <date>",
        EVENT_FORMAT: "An event needs a description and a date. Usage: event <description> /at <date>",
        BAD_INDEX: "Please give the number of an existing task. Usage: done <number> or delete <number>",
    }

    def __init__(self, code: int):
        self.code = code
        super().__init__(self.__str__())
    def __str__(self):
        return f"OOPS!!! {self.MESSAGES.get(self.code, 'Invalid argument.')}"


class TodoFormatError(ArgumentError):
    def __init__(self):
        super().__init__(ArgumentError.TODO_FORMAT)


class DeadlineFormatError(ArgumentError):
    def __init__(self):
        super().__init__(ArgumentError.DEADLINE_FORMAT)


class EventFormatError(ArgumentError):
    def __init__(self):
        super().__init__(ArgumentError.EVENT_FORMAT)


class BadIndexError(ArgumentError):
    def __init__(self):
        super().__init__(ArgumentError.BAD_INDEX)


class KeywordNotRecognizedError(CommandError):
    """Rzucany, gdy linia nie zaczyna się od żadnego znanego słowa kluczowego."""
    def __str__(self):
        return "OOPS!!! I'm sorry, but I don't know what that means :-("


class StorageError(DukeError):
    """Błąd techniczny warstwy trwałości (plik, baza) zmapowany na błąd aplikacji."""
