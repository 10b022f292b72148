from __future__ import annotations

from typing import List

from lined.adapters.textual import TextualEditorAdapter, TextualUIHooks
from lined.buffer import EditorMode
from lined.session import create_default_manager


def make_adapter(
    output: List[str],
    statuses: List[str] | None = None,
    events: List[tuple[str, object | None]] | None = None,
) -> TextualEditorAdapter:
    hooks = TextualUIHooks(
        show_output=output.append,
        update_status=(statuses.append if statuses is not None else lambda _: None),
        handle_event=(
            (lambda name, payload: events.append((name, payload)))
            if events is not None
            else lambda _name, _payload: None
        ),
    )
    return TextualEditorAdapter(create_default_manager(), hooks)


def test_adapter_routes_printed_lines() -> None:
    output: List[str] = []
    adapter = make_adapter(output)

    for line in (".a", "first", "second", ".", ".2p"):
        adapter.submit_line(line)

    assert output == ["second"]


def test_adapter_updates_status_line() -> None:
    output: List[str] = []
    statuses: List[str] = []
    adapter = make_adapter(output, statuses)

    adapter.submit_line(".a")
    adapter.submit_line("text")

    assert statuses[0] == "COMMAND | 0 lines"
    assert statuses[-1] == "APPEND | 1 lines | [+]"


def test_adapter_relays_bus_events() -> None:
    events: List[tuple[str, object | None]] = []
    adapter = make_adapter([], events=events)

    adapter.submit_line(".a")
    adapter.submit_line(".z")

    assert ("command.submit", ".a") in events
    assert ("mode.switch", EditorMode.APPEND) in events
    assert ("command.error", "unknown command") in events


def test_adapter_shows_errors_and_requests_exit() -> None:
    output: List[str] = []
    exits: List[bool] = []
    hooks = TextualUIHooks(show_output=output.append, request_exit=lambda: exits.append(True))
    adapter = TextualEditorAdapter(create_default_manager(), hooks)

    adapter.submit_line(".p")
    adapter.submit_line(".q")

    assert output == ["? buffer empty", "Goodbye!"]
    assert exits == [True]


def test_adapter_close_finishes_session() -> None:
    output: List[str] = []
    adapter = make_adapter(output)
    adapter.submit_line(".a")

    result = adapter.close()

    assert result.status == "quit"
    assert adapter.manager.finished


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(show_output=lambda _: None, log=logs.append)
    adapter = TextualEditorAdapter(create_default_manager(), hooks)

    adapter.submit_line(".a")

    assert any(line.startswith("line ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)


def test_adapter_splits_pasted_carriage_returns() -> None:
    output: List[str] = []
    adapter = make_adapter(output)

    adapter.submit_line(".a")
    adapter.submit_line("one\rtwo")
    adapter.submit_line(".\r.p")

    assert output == ["one", "two"]
