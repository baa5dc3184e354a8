"""Tests for the Navigator review state machine."""

import itertools

import pytest

from labeller.dataset.domain.example import Example, LabelledExample
from labeller.review.domain.command import Command
from labeller.review.domain.navigator import Navigator
from labeller.review.domain.snapshot import (
    GROUND_TRUTH_UNAVAILABLE,
    LABEL_UNSET,
    LEGEND,
)
from tests.review.fake_observer import FakeReviewObserver

VOCAB = ["A", "B", "C"]


def _examples(*labels: str | None) -> list[LabelledExample]:
    return [
        LabelledExample(example=Example(text=f"text {i}"), label=label)
        for i, label in enumerate(labels)
    ]


def _navigator(
    labels: list[str | None],
    vocab: list[str] = VOCAB,
    observer: FakeReviewObserver | None = None,
) -> Navigator:
    navigator = Navigator.create(
        examples=_examples(*labels),
        labels=vocab,
        observer=observer or FakeReviewObserver(),
    )
    assert navigator is not None
    return navigator


def _move_to(navigator: Navigator, index: int) -> None:
    for _ in range(index):
        navigator.dispatch(Command.MOVE_NEXT)
    assert navigator.cursor == index


class TestCreate:
    """Construction succeeds only for non-empty examples and vocabulary."""

    @pytest.mark.parametrize("count", [1, 2, 10])
    def test_non_empty_inputs_succeed(self, count: int) -> None:
        navigator = Navigator.create(
            examples=_examples(*([None] * count)),
            labels=["A"],
            observer=FakeReviewObserver(),
        )

        assert navigator is not None
        assert navigator.cursor == 0

    def test_empty_examples_fail(self) -> None:
        navigator = Navigator.create(
            examples=[], labels=VOCAB, observer=FakeReviewObserver()
        )

        assert navigator is None

    def test_empty_vocabulary_fails(self) -> None:
        navigator = Navigator.create(
            examples=_examples(None), labels=[], observer=FakeReviewObserver()
        )

        assert navigator is None


class TestMovement:
    """MOVE_PREVIOUS and MOVE_NEXT clamp at the ends without wrapping."""

    def test_move_next_advances_cursor(self) -> None:
        navigator = _navigator([None, None, None])

        navigator.dispatch(Command.MOVE_NEXT)

        assert navigator.cursor == 1

    def test_move_previous_retreats_cursor(self) -> None:
        navigator = _navigator([None, None, None])
        _move_to(navigator, 2)

        navigator.dispatch(Command.MOVE_PREVIOUS)

        assert navigator.cursor == 1

    def test_move_previous_at_first_is_noop(self) -> None:
        navigator = _navigator([None, None])

        navigator.dispatch(Command.MOVE_PREVIOUS)

        assert navigator.cursor == 0

    def test_move_next_at_last_is_noop(self) -> None:
        navigator = _navigator([None, None])
        _move_to(navigator, 1)

        navigator.dispatch(Command.MOVE_NEXT)

        assert navigator.cursor == 1

    def test_single_example_never_moves(self) -> None:
        navigator = _navigator([None])

        navigator.dispatch(Command.MOVE_NEXT)
        navigator.dispatch(Command.MOVE_PREVIOUS)

        assert navigator.cursor == 0

    def test_cursor_stays_in_range_for_every_short_command_sequence(self) -> None:
        commands = [
            Command.MOVE_PREVIOUS,
            Command.MOVE_NEXT,
            Command.CYCLE_LABEL,
            Command.JUMP_TO_NEXT_UNLABELLED,
        ]
        for sequence in itertools.product(commands, repeat=4):
            navigator = _navigator([None, "A", None], vocab=["A", "B"])
            for command in sequence:
                navigator.dispatch(command)
                assert 0 <= navigator.cursor <= 2, sequence


class TestCycleLabel:
    """CYCLE_LABEL walks absent → vocab[0] → … → vocab[-1] → absent."""

    def test_absent_becomes_first_label(self) -> None:
        navigator = _navigator([None])

        navigator.dispatch(Command.CYCLE_LABEL)

        assert navigator.store.get(0).label == "A"

    def test_member_advances_to_next_member(self) -> None:
        navigator = _navigator(["B"])

        navigator.dispatch(Command.CYCLE_LABEL)

        assert navigator.store.get(0).label == "C"

    def test_last_member_becomes_absent(self) -> None:
        navigator = _navigator(["C"])

        navigator.dispatch(Command.CYCLE_LABEL)

        assert navigator.store.get(0).label is None

    def test_non_member_restarts_at_first_label(self) -> None:
        navigator = _navigator(["legacy"])

        navigator.dispatch(Command.CYCLE_LABEL)

        assert navigator.store.get(0).label == "A"

    def test_two_label_scenario(self) -> None:
        navigator = _navigator([None], vocab=["A", "B"])
        seen: list[str | None] = []

        for _ in range(4):
            navigator.dispatch(Command.CYCLE_LABEL)
            seen.append(navigator.store.get(0).label)

        assert seen == ["A", "B", None, "A"]

    @pytest.mark.parametrize("start", [None, "A", "B", "C"])
    def test_cycle_closes_after_vocabulary_size_plus_one(
        self, start: str | None
    ) -> None:
        navigator = _navigator([start])

        for _ in range(len(VOCAB) + 1):
            navigator.dispatch(Command.CYCLE_LABEL)

        assert navigator.store.get(0).label == start

    def test_non_member_joins_closed_cycle_after_first_step(self) -> None:
        navigator = _navigator(["legacy"])
        navigator.dispatch(Command.CYCLE_LABEL)
        after_first = navigator.store.get(0).label

        for _ in range(len(VOCAB) + 1):
            navigator.dispatch(Command.CYCLE_LABEL)

        assert navigator.store.get(0).label == after_first

    def test_only_current_entry_changes(self) -> None:
        navigator = _navigator([None, None, None])
        _move_to(navigator, 1)

        navigator.dispatch(Command.CYCLE_LABEL)

        assert [e.label for e in navigator.store.examples] == [None, "A", None]

    def test_cycle_does_not_move_cursor(self) -> None:
        navigator = _navigator([None, None])
        _move_to(navigator, 1)

        navigator.dispatch(Command.CYCLE_LABEL)

        assert navigator.cursor == 1

    def test_label_changed_event_reports_previous_and_current(self) -> None:
        observer = FakeReviewObserver()
        navigator = _navigator([None, "C"], observer=observer)
        _move_to(navigator, 1)

        navigator.dispatch(Command.CYCLE_LABEL)

        assert len(observer.label_changes) == 1
        event = observer.label_changes[0]
        assert event.index == 1
        assert event.previous == "C"
        assert event.current is None


class TestJumpToNextUnlabelled:
    """JUMP_TO_NEXT_UNLABELLED searches from index 0, falling back to the last index."""

    def test_stays_when_current_is_first_unlabelled(self) -> None:
        navigator = _navigator([None, "A", None], vocab=["A", "B"])

        navigator.dispatch(Command.JUMP_TO_NEXT_UNLABELLED)

        assert navigator.cursor == 0

    def test_skips_to_next_after_labelling_current(self) -> None:
        navigator = _navigator([None, "A", None], vocab=["A", "B"])

        navigator.dispatch(Command.CYCLE_LABEL)
        navigator.dispatch(Command.JUMP_TO_NEXT_UNLABELLED)

        assert navigator.cursor == 2

    def test_searches_from_start_not_from_cursor(self) -> None:
        navigator = _navigator([None, "A", "A", None])
        _move_to(navigator, 3)

        navigator.dispatch(Command.JUMP_TO_NEXT_UNLABELLED)

        assert navigator.cursor == 0

    @pytest.mark.parametrize("start", [0, 1, 2])
    def test_all_labelled_lands_on_last_index(self, start: int) -> None:
        navigator = _navigator(["A", "B", "A"], vocab=["A", "B"])
        _move_to(navigator, start)

        navigator.dispatch(Command.JUMP_TO_NEXT_UNLABELLED)

        assert navigator.cursor == 2


class TestQuit:
    def test_quit_ends_session_without_state_change(self) -> None:
        navigator = _navigator([None, None])
        _move_to(navigator, 1)

        keep_going = navigator.dispatch(Command.QUIT)

        assert keep_going is False
        assert navigator.cursor == 1
        assert [e.label for e in navigator.store.examples] == [None, None]

    @pytest.mark.parametrize(
        "command",
        [
            Command.MOVE_PREVIOUS,
            Command.MOVE_NEXT,
            Command.CYCLE_LABEL,
            Command.JUMP_TO_NEXT_UNLABELLED,
        ],
    )
    def test_other_commands_continue_session(self, command: Command) -> None:
        navigator = _navigator([None, None])

        assert navigator.dispatch(command) is True


class TestSnapshot:
    """snapshot() projects the current entry without changing state."""

    def test_position_total_and_progress(self) -> None:
        navigator = _navigator([None, None, None, None])
        _move_to(navigator, 1)

        snapshot = navigator.snapshot()

        assert snapshot.position == 2
        assert snapshot.total == 4
        assert snapshot.progress == pytest.approx(0.5)

    def test_text_and_ground_truth(self) -> None:
        navigator = Navigator.create(
            examples=[
                LabelledExample(example=Example(text="hello", ground_truth="world"))
            ],
            labels=VOCAB,
            observer=FakeReviewObserver(),
        )
        assert navigator is not None

        snapshot = navigator.snapshot()

        assert snapshot.text == "hello"
        assert snapshot.ground_truth == "world"

    def test_missing_ground_truth_uses_marker(self) -> None:
        snapshot = _navigator([None]).snapshot()

        assert snapshot.ground_truth == GROUND_TRUTH_UNAVAILABLE

    def test_unset_label_uses_marker(self) -> None:
        snapshot = _navigator([None]).snapshot()

        assert snapshot.label == LABEL_UNSET
        assert snapshot.is_labelled is False

    def test_present_label_is_shown(self) -> None:
        snapshot = _navigator(["B"]).snapshot()

        assert snapshot.label == "B"
        assert snapshot.is_labelled is True

    def test_legend_is_static(self) -> None:
        snapshot = _navigator([None]).snapshot()

        assert snapshot.legend == LEGEND
        assert [entry.key for entry in snapshot.legend] == [
            "←",
            "→",
            "↑",
            "TAB",
            "Ctrl-C",
        ]

    def test_snapshot_has_no_side_effects(self) -> None:
        navigator = _navigator([None, "A"])

        first = navigator.snapshot()
        second = navigator.snapshot()

        assert first == second
        assert navigator.cursor == 0
