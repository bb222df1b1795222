from duke.domain.task import Task
from duke.domain.task_list import TaskList
from duke.domain.errors import (
    ArgumentError,
    BadIndexError,
    TodoFormatError,
    DeadlineFormatError,
    EventFormatError,
    KeywordNotRecognizedError,
    TaskValidationError,
)
from duke.services.command_processor import CommandProcessor, SEPARATOR
import pytest


def make_processor(*commands: str) -> CommandProcessor:
    processor = CommandProcessor(TaskList())
    for line in commands:
        assert processor.process(line).ok, line
    return processor


def test_separator_is_55_dashes():
    assert SEPARATOR == "-" * 55


def test_add_todo_prints_confirmation_and_count():
    # Arrange
    processor = make_processor()

    # Act
    result = processor.process("todo read book")

    # Assert
    assert result.ok and result.changed
    assert result.lines == [
        "Got it, I've added this task to the list: ",
        "  [T][ ] read book",
        "Now you have 1 tasks in the list.",
        SEPARATOR,
    ]
    assert processor.tasks.get_size() == 1


def test_size_equals_number_of_valid_adds():
    processor = make_processor(
        "todo a",
        "deadline b /by Sunday",
        "event c /at Monday",
        "todo d",
    )
    assert processor.tasks.get_size() == 4


def test_list_after_adds():
    processor = make_processor("todo read book", "deadline return book /by Sunday")

    result = processor.process("list")

    assert result.ok and not result.changed
    assert result.lines == [
        "Here are the tasks in your list:",
        "1.[T][ ] read book\n2.[D][ ] return book (by: Sunday)",
        SEPARATOR,
    ]


def test_list_of_empty_list_still_prints_header():
    result = make_processor().process("list")

    assert result.lines == ["Here are the tasks in your list:", "", SEPARATOR]


def test_done_marks_task():
    processor = make_processor("todo read book", "deadline return book /by Sunday")

    result = processor.process("done 1")

    assert result.ok and result.changed
    assert result.lines == [
        "Nice! I've marked this task as done: ",
        "  [T][X] read book",
        SEPARATOR,
    ]
    assert processor.process("list").lines[1].splitlines()[0] == "1.[T][X] read book"


def test_done_twice_keeps_done_marker():
    processor = make_processor("todo read book", "done 1")

    result = processor.process("done 1")

    assert result.ok
    assert result.lines[1] == "  [T][X] read book"


@pytest.mark.parametrize("line", ["done 99", "done 0", "done -1", "done x", "done ", "done 1 ", "done ²"])
def test_done_with_bad_index_fails(line):
    processor = make_processor("todo a", "todo b")

    result = processor.process(line)

    assert not result.ok and not result.changed
    assert isinstance(result.error, BadIndexError)
    assert result.error.code == ArgumentError.BAD_INDEX
    assert result.lines == [str(result.error)]
    assert all(not t.is_done for t in processor.tasks)


def test_delete_prints_removed_task_and_new_count():
    processor = make_processor("todo read book", "deadline return book /by Sunday")

    result = processor.process("delete 1")

    assert result.ok and result.changed
    assert result.lines == [
        "Okay! I've removed this task: ",
        "  [T][ ] read book",
        "Now you have 1 tasks in the list.",
        SEPARATOR,
    ]
    assert str(processor.tasks) == "1.[D][ ] return book (by: Sunday)"


def test_delete_shows_task_as_it_was_before_removal():
    processor = make_processor("todo a", "done 1")

    result = processor.process("delete 1")

    assert result.lines[1] == "  [T][X] a"


def test_delete_then_get_returns_next_task():
    processor = make_processor("todo a", "todo b", "todo c")
    following = processor.tasks.get_task(3)

    processor.process("delete 2")

    assert processor.tasks.get_task(2) is following


def test_delete_with_bad_index_fails():
    processor = make_processor("todo a", "todo b")

    result = processor.process("delete 3")

    assert isinstance(result.error, BadIndexError)
    assert processor.tasks.get_size() == 2


def test_find_matches_substring_in_order():
    processor = make_processor(
        "todo read book",
        "event party /at Friday",
        "deadline return book /by Sunday",
    )

    result = processor.process("find book")

    assert result.ok and not result.changed
    assert result.lines == [
        "Here are the matching tasks in your list:",
        "1.[T][ ] read book\n2.[D][ ] return book (by: Sunday)",
        SEPARATOR,
    ]
    assert processor.tasks.get_size() == 3


def test_find_is_case_sensitive():
    processor = make_processor("todo Read book")

    assert processor.process("find read").lines[1] == ""


def test_find_does_not_match_rendered_markers():
    processor = make_processor("deadline return book /by Sunday")

    assert processor.process("find Sunday").lines[1] == ""
    assert processor.process("find [D]").lines[1] == ""


def test_find_empty_keyword_returns_all():
    processor = make_processor("todo a", "todo b")

    result = processor.process("find ")

    assert result.lines[1] == str(processor.tasks)


def test_find_unmatched_keeps_header():
    result = make_processor("todo a").process("find zzz")

    assert result.lines == ["Here are the matching tasks in your list:", "", SEPARATOR]


@pytest.mark.parametrize("line, expected", [
    ("todo ", TodoFormatError),
    ("todo   ", TodoFormatError),
    ("todo", KeywordNotRecognizedError),
])
def test_todo_without_description(line, expected):
    processor = make_processor()

    result = processor.process(line)

    assert not result.ok
    assert isinstance(result.error, expected)
    assert processor.tasks.get_size() == 0


def test_todo_keeps_text_after_first_keyword():
    processor = make_processor("todo update todo list")

    assert str(processor.tasks.get_task(1)) == "[T][ ] update todo list"


@pytest.mark.parametrize("line", [
    "deadline buy milk",
    "deadline buy milk /by ",
    "deadline /by Sunday",
    "deadline ",
])
def test_deadline_format_errors(line):
    processor = make_processor()

    result = processor.process(line)

    assert isinstance(result.error, DeadlineFormatError)
    assert result.error.code == ArgumentError.DEADLINE_FORMAT
    assert result.lines == [str(result.error)]
    assert processor.tasks.get_size() == 0


@pytest.mark.parametrize("line", [
    "event party",
    "event party /at ",
    "event party/at Friday",
    "event  /at Friday",
])
def test_event_format_errors(line):
    processor = make_processor()

    result = processor.process(line)

    assert isinstance(result.error, EventFormatError)
    assert result.error.code == ArgumentError.EVENT_FORMAT
    assert processor.tasks.get_size() == 0


def test_event_added():
    processor = make_processor()

    result = processor.process("event project meeting /at Mon 2-4pm")

    assert result.lines[1] == "  [E][ ] project meeting (at: Mon 2-4pm)"
    assert result.lines[2] == "Now you have 1 tasks in the list."


def test_deadline_date_may_contain_delimiter_again():
    processor = make_processor("deadline essay /by Friday /by noon")

    assert processor.tasks.get_task(1).by == "Friday /by noon"


def test_deadline_blank_description_prints_error_and_count():
    processor = make_processor("todo a")

    result = processor.process("deadline   /by Sunday")

    assert not result.ok and not result.changed
    assert isinstance(result.error, TaskValidationError)
    assert result.lines == [
        str(result.error),
        "Now you have 1 tasks in the list.",
        SEPARATOR,
    ]
    assert processor.tasks.get_size() == 1


@pytest.mark.parametrize("line", ["event   /at Friday", "event party /at   "])
def test_event_blank_parts_are_format_errors(line):
    processor = make_processor()

    result = processor.process(line)

    assert isinstance(result.error, EventFormatError)
    assert result.lines == [str(result.error)]
    assert processor.tasks.get_size() == 0


@pytest.mark.parametrize("line", ["blah", "", "LIST", "list ", "bye", "done", "mark 1"])
def test_unrecognized_keyword(line):
    processor = make_processor("todo a")

    result = processor.process(line)

    assert isinstance(result.error, KeywordNotRecognizedError)
    assert result.lines == [str(result.error)]
    assert processor.tasks.get_size() == 1


def test_processor_shares_list_with_caller():
    tasks = TaskList([Task.todo("seeded")])
    processor = CommandProcessor(tasks)

    processor.process("done 1")

    assert tasks.get_task(1).is_done


@pytest.mark.parametrize("line, rendered", [
    ("done +1", "  [T][X] a"),
    ("delete +1", "  [T][ ] a"),
])
def test_position_with_plus_sign_is_accepted(line, rendered):
    processor = make_processor("todo a")

    result = processor.process(line)

    assert result.ok and result.changed
    assert result.lines[1] == rendered


def test_position_with_plus_sign_marks_task():
    processor = make_processor("todo a", "todo b")

    processor.process("done +2")

    assert processor.tasks.get_task(2).is_done
    assert not processor.tasks.get_task(1).is_done
