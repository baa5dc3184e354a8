"""Review loop — pulls key presses, dispatches commands, and redraws after each one."""

from labeller.review.domain.command import Command
from labeller.review.domain.display import Display
from labeller.review.domain.key_source import KeySource
from labeller.review.domain.navigator import Navigator
from labeller.review.domain.observer import ReviewObserver


def run_review(
    navigator: Navigator,
    display: Display,
    key_source: KeySource,
    observer: ReviewObserver,
) -> None:
    """
    Run the review session until a QUIT command arrives.

    The frame is drawn once before the first key press and again after every
    dispatched command. Unbound keys are ignored without a redraw.

    A KeyboardInterrupt raised outside a key read, such as Ctrl-C while a
    frame is being drawn, ends the session like QUIT so the labels still
    get saved.
    """
    store = navigator.store
    observer.review_started(
        total_examples=len(store),
        labelled_examples=store.labelled_count(),
        labels=list(store.labels),
    )

    try:
        display.draw(navigator.snapshot())
        while True:
            command = key_source.next_command()
            if command is None:
                continue
            if not navigator.dispatch(command):
                break
            display.draw(navigator.snapshot())
    except KeyboardInterrupt:
        navigator.dispatch(Command.QUIT)

    observer.review_finished(
        total_examples=len(store),
        labelled_examples=store.labelled_count(),
    )
