"""Unit tests for StreamingResponseAdapter."""

import json

import pytest

from ragchat.application.streaming.response_adapter import (
    StreamFrame,
    StreamingResponseAdapter,
    encode_frame,
    serialize_frame,
)
from ragchat.domain.exceptions import GenerationFailure, SerializationFailure
from ragchat.domain.value_objects import Complete, Error, Partial, StreamState


async def _collect(adapter: StreamingResponseAdapter) -> list[dict]:
    return [json.loads(f) for f in [frame async for frame in adapter.frames()]]


@pytest.mark.asyncio
async def test_partials_then_complete_emit_three_frames() -> None:
    adapter = StreamingResponseAdapter()
    adapter.on_partial("He")
    adapter.on_partial("llo")
    adapter.on_complete("Hello")

    frames = await _collect(adapter)

    assert frames == [
        {"text": "He", "done": False},
        {"text": "llo", "done": False},
        {"text": "Hello", "done": True},
    ]
    assert adapter.state is StreamState.COMPLETED


@pytest.mark.asyncio
async def test_state_transitions() -> None:
    adapter = StreamingResponseAdapter()
    assert adapter.state is StreamState.IDLE
    adapter.on_partial("a")
    assert adapter.state is StreamState.STREAMING
    adapter.on_error(RuntimeError("boom"))
    assert adapter.state is StreamState.FAILED
    assert adapter.state.is_terminal


@pytest.mark.asyncio
async def test_complete_from_idle() -> None:
    adapter = StreamingResponseAdapter()
    adapter.on_complete("")
    assert await _collect(adapter) == [{"text": "", "done": True}]


@pytest.mark.asyncio
async def test_error_raises_generation_failure_after_partials() -> None:
    adapter = StreamingResponseAdapter()
    adapter.on_partial("par")
    cause = RuntimeError("model crashed")
    adapter.on_error(cause)

    received: list[str] = []
    with pytest.raises(GenerationFailure, match="model crashed") as exc_info:
        async for frame in adapter.frames():
            received.append(frame)

    assert [json.loads(f) for f in received] == [{"text": "par", "done": False}]
    assert exc_info.value.__cause__ is cause


@pytest.mark.asyncio
async def test_callbacks_after_terminal_are_ignored() -> None:
    adapter = StreamingResponseAdapter()
    adapter.on_error(RuntimeError("first"))
    adapter.on_partial("late")
    adapter.on_complete("late")
    adapter.on_error(RuntimeError("second"))

    events = [e async for e in adapter.events()]

    assert len(events) == 1
    assert isinstance(events[0], Error)
    assert str(events[0].cause) == "first"
    assert adapter.state is StreamState.FAILED


@pytest.mark.asyncio
async def test_events_preserve_order() -> None:
    adapter = StreamingResponseAdapter()
    tokens = [str(i) for i in range(50)]
    for t in tokens:
        adapter.on_partial(t)
    adapter.on_complete("".join(tokens))

    events = [e async for e in adapter.events()]

    assert events[:-1] == [Partial(t) for t in tokens]
    assert events[-1] == Complete("".join(tokens))


@pytest.mark.asyncio
async def test_control_characters_do_not_break_framing() -> None:
    adapter = StreamingResponseAdapter()
    adapter.on_partial("line1\n\ndata: fake\r\n\x00 ")
    adapter.on_complete("done")

    raw = [frame async for frame in adapter.frames()]

    assert all("\n" not in f and "\r" not in f for f in raw)
    assert json.loads(raw[0])["text"] == "line1\n\ndata: fake\r\n\x00 "


def test_serialize_frame_non_ascii_kept() -> None:
    assert serialize_frame(StreamFrame(text="Привет", done=False)) == '{"text": "Привет", "done": false}'


def test_encode_frame_degrades_to_empty_payload() -> None:
    bad = StreamFrame(text=object(), done=False)  # type: ignore[arg-type]
    with pytest.raises(SerializationFailure):
        serialize_frame(bad)
    assert encode_frame(bad) == ""
