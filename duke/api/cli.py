from duke.domain.errors import StorageError
from duke.domain.task_list import TaskList
from duke.ports.task_storage import TaskStorage
from duke.adapters.memory.task_storage import InMemoryTaskStorage
from duke.adapters.jsonl.task_storage import JsonlTaskStorage
from duke.adapters.sql.task_storage import SqlTaskStorage
from duke.services.command_processor import CommandProcessor, CommandResult, SEPARATOR
from duke.config import Settings, env_name
from duke.logging_setup import setup_logging
from duke.api.colors import TaskColor
from typer import Argument, Exit, Option, Typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from pathlib import Path
from typing import Optional
import logging


### COMMENTS
# ==========================================================
# CLI (Typer + Rich), interfejs użytkownika dla listy zadań.
# ==========================================================
# Rola:
# - `chat`: pętla czytająca linie aż do `bye` (albo końca wejścia).
# - `run`: jednorazowe wykonanie komend podanych jako argumenty.
# - `demo`: pokazowy przebieg na liście w pamięci.
#
# Zasady:
# - Zero logiki komend: deleguj do CommandProcessor.
# - Jednorazowy bootstrap (settings + logging + storage) w callbacku.
# - Zapis po każdej komendzie, która zmieniła listę (`result.changed`).
# - StorageError → czerwony Panel i kod wyjścia 1.

app = Typer(help="Duke - line-command task tracker")
console = Console(highlight=False, emoji=False)
logger = logging.getLogger(__name__)

settings = Settings()
storage: TaskStorage | None = None  # ustawimy w callbacku

GREETING = "Hello! I'm Duke\nWhat can I do for you?"
FAREWELL = "Bye. Hope to see you again soon!"

DEMO_COMMANDS = [
    "todo read book",
    "deadline return book /by Sunday",
    "event project meeting /at Mon 2-4pm",
    "list",
    "done 1",
    "find book",
    "delete 2",
    "deadline buy milk",
    "list",
]


def build_storage(settings: Settings) -> TaskStorage:
    """Tworzy storage na bazie wybranego adaptera.
    - Brak pliku -> InMemory
    - .db / .sqlite / .sqlite3 -> SQL (SQLAlchemy)
    - Każdy inny plik -> Jsonl
    """
    match settings.storage_kind:
        case "sql":
            return SqlTaskStorage(settings.file)
        case "jsonl":
            return JsonlTaskStorage(settings.file)
        case _:
            return InMemoryTaskStorage()


@app.callback()
def main(
    file: Optional[Path] = Option(
        None,
        "--file",
        "-f",
        envvar=env_name("FILE"),
        help="Plik z listą zadań (.jsonl lub .db); bez pliku lista żyje tylko w pamięci",
    ),
    verbose: bool = Option(
        False,
        "--verbose",
        "-v",
        envvar=env_name("VERBOSE"),
        help="Logi DEBUG na stderr",
    ),
) -> None:
    """Bootstrap zależności na starcie procesu CLI."""
    global settings, storage
    settings = Settings(file=file, verbose=verbose)
    setup_logging(verbose=verbose)
    try:
        storage = build_storage(settings)
    except StorageError as e:
        storage_failed(e)
    logger.debug("Using %s storage", settings.storage_kind)


def storage_failed(e: StorageError) -> None:
    console.print(Panel.fit(
        f"❌ {escape(str(e))}",
        title="Błąd zapisu/odczytu",
        border_style="red",
    ))
    raise Exit(code=1)


def load_tasks() -> TaskList:
    try:
        return storage.load()
    except StorageError as e:
        storage_failed(e)


def save_tasks(tasks: TaskList) -> None:
    try:
        storage.save(tasks)
    except StorageError as e:
        storage_failed(e)


def style_line(line: str, result: CommandResult) -> str:
    """Zwraca linię w Rich-markup: błąd na czerwono, separator przygaszony."""
    text = escape(line)
    if line == SEPARATOR:
        return f"{TaskColor.DIM}{text}{TaskColor.RESET}"
    if result.error is not None and line == str(result.error):
        return f"{TaskColor.RED}{text}{TaskColor.RESET}"
    return text


def render_result(result: CommandResult) -> None:
    for line in result.lines:
        console.print(style_line(line, result), soft_wrap=True)


@app.command("chat")
def chat() -> None:
    """
    Interaktywna sesja: jedna komenda na linię, `bye` kończy.

    Flow:
    - tasks = storage.load()
    - dla każdej linii: processor.process(line) -> render_result
    - result.changed -> storage.save(tasks)
    """
    tasks = load_tasks()
    processor = CommandProcessor(tasks)
    console.print(Panel.fit(GREETING, border_style="cyan"))

    while True:
        try:
            line = console.input()
        except EOFError:
            break
        if line == "bye":
            console.print(FAREWELL)
            break
        result = processor.process(line)
        render_result(result)
        if result.changed:
            save_tasks(tasks)


@app.command("run")
def run(commands: list[str] = Argument(..., help="Komendy, np. 'todo read book' 'list'")) -> None:
    """
    Wykonuje podane komendy po kolei i zapisuje listę, jeśli się zmieniła.

    Kod wyjścia 1, gdy któraś komenda się nie powiodła.
    """
    tasks = load_tasks()
    processor = CommandProcessor(tasks)
    failed = changed = False
    for line in commands:
        result = processor.process(line)
        render_result(result)
        failed = failed or not result.ok
        changed = changed or result.changed
    if changed:
        save_tasks(tasks)
    if failed:
        raise Exit(code=1)


@app.command("demo")
def demo() -> None:
    """
    Pokazowy przebieg działania aplikacji w jednym procesie (InMemory).

    - Dodaje todo, deadline i event.
    - Pokazuje listę, oznacza jedno jako wykonane, szuka, usuwa.
    - Pokazuje błąd formatu i listę po zmianach.
    """
    console.print(Panel.fit("🚀 Start demonstracji", border_style="cyan"))

    processor = CommandProcessor(TaskList())
    for line in DEMO_COMMANDS:
        console.print(f"{TaskColor.CYAN}> {escape(line)}{TaskColor.RESET}")
        render_result(processor.process(line))

    console.print(Panel.fit("🏁 Demo zakończone", border_style="cyan"))


if __name__ == "__main__":
    app()
