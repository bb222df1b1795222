from dataclasses import dataclass
from duke.domain.enums import TaskKind
from duke.domain.errors import TaskValidationError


@dataclass
class Task():
    """
    Model domenowy pojedynczego zadania; jedna klasa dla wszystkich wariantów
    (todo / deadline / event) rozróżnianych polem `kind`; `when` to data
    deadline'u (`by`) albo eventu (`at`), dla todo zawsze None.
    Jedyna mutacja po utworzeniu: `mark_as_done()`.
    """
    kind: TaskKind
    description: str
    is_done: bool = False
    when: str | None = None

    def __post_init__(self) -> None:
        self.kind = TaskKind(self.kind)
        self.description = _required("description", self.description)
        if self.kind is TaskKind.TODO:
            if self.when is not None:
                raise TaskValidationError("when", "a todo has no date")
        else:
            self.when = _required("by" if self.kind is TaskKind.DEADLINE else "at", self.when)

    @classmethod
    def todo(cls, description: str, is_done: bool = False) -> "Task":
        return cls(TaskKind.TODO, description, is_done)

    @classmethod
    def deadline(cls, description: str, by: str, is_done: bool = False) -> "Task":
        return cls(TaskKind.DEADLINE, description, is_done, by)

    @classmethod
    def event(cls, description: str, at: str, is_done: bool = False) -> "Task":
        return cls(TaskKind.EVENT, description, is_done, at)

    @property
    def by(self) -> str | None:
        return self.when if self.kind is TaskKind.DEADLINE else None

    @property
    def at(self) -> str | None:
        return self.when if self.kind is TaskKind.EVENT else None

    def mark_as_done(self) -> None:
        """Oznacza zadanie jako wykonane; ponowne wywołanie nic nie zmienia."""
        self.is_done = True

    def get_description(self) -> str:
        """Surowy opis, bez znaczników `[T][ ]` (używany przez `find`)."""
        return self.description

    def __str__(self) -> str:
        marker = "[X]" if self.is_done else "[ ]"
        text = f"{self.kind.tag}{marker} {self.description}"
        match self.kind:
            case TaskKind.DEADLINE:
                return f"{text} (by: {self.when})"
            case TaskKind.EVENT:
                return f"{text} (at: {self.when})"
            case _:
                return text


def _required(field: str, value: str | None) -> str:
    if value is None or not value.strip():
        raise TaskValidationError(field, "cannot be empty")
    return value.strip()


### COMMENTS
# ======================================
# 1️⃣ Jedna klasa zamiast hierarchii
# ======================================
# Todo, Deadline i Event różnią się tylko znacznikiem i jednym polem z datą.
# Zamiast trzech podklas mamy jedno pole `kind` (TaskKind) i jedno pole `when`.
# Renderowanie robi `match self.kind` w `__str__`.
#
#   Task.todo("read book")                  -> [T][ ] read book
#   Task.deadline("return book", "Sunday")  -> [D][ ] return book (by: Sunday)
#   Task.event("party", "Mon 2pm")          -> [E][ ] party (at: Mon 2pm)

# ======================================
# 2️⃣ Bez frozen=True
# ======================================
# Zadanie oznaczone jako wykonane zmienia się "w miejscu": TaskList trzyma
# ten sam obiekt, więc `done 1` widać od razu w `list`.

# ======================================
# 3️⃣ Walidacja w __post_init__
# ======================================
# Opis i data są obcinane ze spacji na brzegach; pusty wynik = TaskValidationError.
# Dzięki temu `deadline  /by Sunday` (opis z samych spacji) nie trafia do listy.
