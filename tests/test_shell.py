# tests/test_shell.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from taskmanager.cli.bootstrap import create_initial_state
from taskmanager.cli.shell import TaskShell, read_index
from taskmanager.core.state import AppState, ShellState
from taskmanager.errors import InvalidInputError
from taskmanager.tasks.task_models import Task, TaskStatus

from .fakes import ScriptedLineSource, Transcript

TODAY = date(2030, 4, 1)


def _run(state: AppState, lines: list[str], transcript: Transcript) -> tuple[TaskShell, ScriptedLineSource]:
    source = ScriptedLineSource(lines)
    shell = TaskShell(state, source, transcript, today=lambda: TODAY)
    shell.run()
    return shell, source


def test_add_list_exit_scenario(state: AppState, transcript: Transcript) -> None:
    shell, source = _run(state, ["1", "Buy milk", "2% milk", "2", "2", "5", "2"], transcript)

    assert shell.current is ShellState.EXITING
    assert source.remaining == 0
    assert "Task successfully created!" in transcript.lines
    assert "1. Buy milk - 2% milk - Not Done" in transcript.lines
    assert source.prompts[0] == "Enter your choice (1-6):"


def test_add_with_valid_due_date(state: AppState, transcript: Transcript) -> None:
    _run(state, ["1", "Pay rent", "May", "1", "2030/05/01", "2", "5", "2"], transcript)

    assert state.task_store.snapshot()[0].due_date == date(2030, 5, 1)
    assert "1. Pay rent - May - Not Done - DUE: 2030/05/01" in transcript.lines


def test_add_with_malformed_due_date_keeps_task_without_date(
    state: AppState, transcript: Transcript
) -> None:
    _run(state, ["1", "Pay rent", "May", "1", "2030-05-01", "5", "2"], transcript)

    assert len(state.task_store) == 1
    assert state.task_store.snapshot()[0].due_date is None
    assert any(line.startswith("Invalid date format") for line in transcript.lines)
    assert "Task successfully created!" in transcript.lines


def test_add_with_blank_due_date(state: AppState, transcript: Transcript) -> None:
    _run(state, ["1", "t", "d", "1", "", "5", "2"], transcript)

    assert "Date can not be empty" in transcript.lines
    assert state.task_store.snapshot()[0].due_date is None


def test_invalid_due_date_answer_discards_input(state: AppState, transcript: Transcript) -> None:
    _run(state, ["1", "t", "d", "maybe", "5", "2"], transcript)

    assert "Invalid. Discarding Input..." in transcript.lines
    assert len(state.task_store) == 1


def test_overdue_annotation(state: AppState, transcript: Transcript) -> None:
    state.task_store.add(Task("Old", "late", due_date=date(2030, 3, 31)))
    _run(state, ["2", "5", "2"], transcript)

    assert "1. Old - late - Not Done - OVERDUE: 2030/03/31" in transcript.lines


def test_mark_done_and_delete(state: AppState, transcript: Transcript) -> None:
    state.task_store.add(Task("a", "x"))
    state.task_store.add(Task("b", "y"))

    _run(state, ["3", "2", "4", "1", "2", "5", "2"], transcript)

    assert [(t.title, t.status) for t in state.task_store.snapshot()] == [("b", TaskStatus.DONE)]
    assert "1. b - y - Done" in transcript.lines


def test_mark_done_and_delete_short_circuit_on_empty_store(
    state: AppState, transcript: Transcript
) -> None:
    shell, source = _run(state, ["3", "4", "5"], transcript)

    assert transcript.lines.count("Task list is empty.") == 2
    assert "No tasks to save" in transcript.lines
    assert shell.current is ShellState.EXITING
    assert source.remaining == 0


def test_bad_task_numbers_are_reported_without_mutation(
    state: AppState, transcript: Transcript
) -> None:
    state.task_store.add(Task("a", "x"))

    _run(state, ["3", "", "3", "abc", "4", "0", "4", "2", "5", "2"], transcript)

    assert "Invalid input. Please enter a valid task number." in transcript.lines
    assert transcript.lines.count("Invalid task number. Please enter a valid task number.") == 3
    assert [(t.title, t.status) for t in state.task_store.snapshot()] == [("a", TaskStatus.NOT_DONE)]


def test_unknown_menu_choice_returns_to_menu(state: AppState, transcript: Transcript) -> None:
    shell, _ = _run(state, ["9", "", "5"], transcript)

    assert transcript.lines.count("\nInvalid choice, Please try again.") == 2
    assert shell.current is ShellState.EXITING


def test_exit_saves_after_reprompting_for_a_valid_name(
    state: AppState, transcript: Transcript, tmp_path: Path
) -> None:
    state.task_store.add(Task("a", "x"))

    shell, source = _run(state, ["5", "1", "../etc", "", "good list"], transcript)

    assert transcript.lines.count("Invalid Filename.") == 2
    assert "Task list saved/updated as good list.txt" in transcript.lines
    assert (tmp_path / "good list.txt").read_text("utf-8") == "a|x|Not Done|\n"
    assert not (tmp_path.parent / "etc.txt").exists()
    assert shell.current is ShellState.EXITING
    assert source.remaining == 0


def test_exit_with_invalid_save_choice_discards(state: AppState, transcript: Transcript) -> None:
    state.task_store.add(Task("a", "x"))
    shell, _ = _run(state, ["5", "x"], transcript)

    assert "Invalid. Discarding..." in transcript.lines
    assert shell.current is ShellState.EXITING


def test_failed_save_goes_back_to_save_choice(settings, transcript: Transcript, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")
    settings.data_dir = blocker
    state = create_initial_state(settings=settings)
    state.task_store.add(Task("a", "x"))

    shell, source = _run(state, ["5", "1", "list", "2"], transcript)

    assert any(line.startswith("Save failed:") for line in transcript.lines)
    assert source.prompts.count("Enter 1 to save. 2 to Discard:") == 2
    assert shell.current is ShellState.EXITING


def test_load_replaces_store(state: AppState, transcript: Transcript, tmp_path: Path) -> None:
    (tmp_path / "mylist.txt").write_text("Loaded|task|Done|2030/04/02\n", "utf-8")
    state.task_store.add(Task("old", ""))

    _run(state, ["6", "mylist", "2", "5", "2"], transcript)

    assert "Loaded 1 tasks from mylist.txt" in transcript.lines
    assert "1. Loaded - task - Done - DUE: 2030/04/02" in transcript.lines
    assert [t.title for t in state.task_store.snapshot()] == ["Loaded"]


def test_load_missing_file_keeps_tasks(state: AppState, transcript: Transcript) -> None:
    state.task_store.add(Task("keep", "me"))

    _run(state, ["6", "missing", "5", "2"], transcript)

    assert "File not found: missing.txt" in transcript.lines
    assert [t.title for t in state.task_store.snapshot()] == ["keep"]


def test_end_of_input_exits_without_saving(state: AppState, transcript: Transcript, tmp_path: Path) -> None:
    state.task_store.add(Task("a", "x"))
    shell, _ = _run(state, ["1", "half-typed"], transcript)

    assert shell.current is ShellState.EXITING
    assert list(tmp_path.glob("*.txt")) == []


def test_load_disabled_hides_option_six(settings, transcript: Transcript) -> None:
    settings.load_enabled = False
    state = create_initial_state(settings=settings)

    _, source = _run(state, ["6", "5"], transcript)

    assert source.prompts[0] == "Enter your choice (1-5):"
    assert "6. Load Tasks" not in transcript.text
    assert "\nInvalid choice, Please try again." in transcript.lines


def test_due_dates_disabled_skips_date_prompt(settings, transcript: Transcript, tmp_path: Path) -> None:
    settings.due_dates_enabled = False
    state = create_initial_state(settings=settings)

    _, source = _run(state, ["1", "a", "b", "5", "1", "plain"], transcript)

    assert not any("due date" in p for p in source.prompts)
    assert (tmp_path / "plain.txt").read_text("utf-8") == "a|b|Not Done\n"


def test_handler_crash_is_reported_and_loop_continues(
    state: AppState, transcript: Transcript, monkeypatch: pytest.MonkeyPatch
) -> None:
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(state.task_store, "list_tasks", boom)
    state.task_store.add(Task("a", "x"))

    shell, _ = _run(state, ["2", "5", "2"], transcript)

    assert "Internal error. Returning to the menu." in transcript.lines
    assert shell.current is ShellState.EXITING


def test_read_index_bounds() -> None:
    assert read_index(" 2 ", 3) == 2
    for raw in ["", "0", "4", "-1", "x"]:
        with pytest.raises(InvalidInputError):
            read_index(raw, 3)


def test_saved_name_loads_back_under_the_same_name(settings, transcript: Transcript, tmp_path: Path) -> None:
    state = create_initial_state(settings=settings)
    state.task_store.add(Task("a", "x"))
    _run(state, ["5", "1", "week.txt"], transcript)
    assert (tmp_path / "week.txt.txt").is_file()

    fresh = create_initial_state(settings=settings)
    _run(fresh, ["6", "week.txt", "5", "2"], transcript)

    assert "Loaded 1 tasks from week.txt.txt" in transcript.lines
    assert len(fresh.task_store) == 1


def test_load_failure_is_reported_and_tasks_survive(
    state: AppState, transcript: Transcript, tmp_path: Path
) -> None:
    (tmp_path / "broken.txt").write_bytes(b"\xff\xfe|x|Done|\n")
    state.task_store.add(Task("keep", "me"))

    _run(state, ["6", "broken", "5", "2"], transcript)

    assert any(line.startswith("Load failed:") for line in transcript.lines)
    assert [t.title for t in state.task_store.snapshot()] == ["keep"]
