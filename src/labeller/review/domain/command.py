"""Review commands dispatched into the Navigator."""

from enum import StrEnum


class Command(StrEnum):
    MOVE_PREVIOUS = "move_previous"
    MOVE_NEXT = "move_next"
    CYCLE_LABEL = "cycle_label"
    JUMP_TO_NEXT_UNLABELLED = "jump_to_next_unlabelled"
    QUIT = "quit"
