from enum import Enum

class TaskColor(Enum):
    RED = "[red]"
    CYAN = "[cyan]"
    DIM = "[dim]"
    RESET = "[/]"

    def __str__(self):
        return self.value
