"""
Tests for the borders command sink
"""

import shutil
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from border_shimmer.errors import SinkInvocationError
from border_shimmer.models.color import Color
from border_shimmer.models.enums import SinkType
from border_shimmer.models.frame import BorderFrame
from border_shimmer.sinks import BordersCommandSink, VirtualSink, create_sink

EXEC = "border_shimmer.sinks.borders_sink.asyncio.create_subprocess_exec"


@pytest.fixture
def frame():
    return BorderFrame(
        active_color=Color.from_hex("#FF0000FF"),
        inactive_color=Color.from_hex("#0000FF80"),
        width=5.0,
        inactive_glow=True,
    )


def fake_process(returncode=0, stderr=b""):
    process = MagicMock()
    process.returncode = returncode
    process.communicate = AsyncMock(return_value=(b"", stderr))
    return process


def test_frame_arguments(frame):
    assert sorted(frame.to_argv()) == [
        "active_color=0xFFFF0000",
        "inactive_color=glow(0x800000FF)",
        "width=5.000000",
    ]


@pytest.mark.asyncio
async def test_render_runs_command_with_named_arguments(frame):
    sink = BordersCommandSink()

    with patch(EXEC, new=AsyncMock(return_value=fake_process())) as exec_mock:
        await sink.render(frame)

    argv = exec_mock.call_args.args
    assert argv[0] == "borders"
    assert set(argv[1:]) == set(frame.to_argv())
    assert sink.invocations == 1


@pytest.mark.asyncio
async def test_nonzero_exit_raises_sink_error(frame):
    sink = BordersCommandSink("borders")

    with patch(EXEC, new=AsyncMock(return_value=fake_process(2, b"unknown option\n"))):
        with pytest.raises(SinkInvocationError) as exc:
            await sink.render(frame)

    assert exc.value.returncode == 2
    assert "unknown option" in exc.value.message


@pytest.mark.asyncio
async def test_missing_executable_raises_sink_error(frame):
    sink = BordersCommandSink("no-such-borders")

    with patch(EXEC, new=AsyncMock(side_effect=FileNotFoundError("no-such-borders"))):
        with pytest.raises(SinkInvocationError) as exc:
            await sink.render(frame)

    assert exc.value.details["command"] == "no-such-borders"
    assert exc.value.returncode is None


@pytest.mark.asyncio
@pytest.mark.skipif(shutil.which("true") is None or shutil.which("false") is None,
                    reason="needs true/false executables")
async def test_real_process_exit_status(frame):
    await BordersCommandSink(shutil.which("true")).render(frame)

    with pytest.raises(SinkInvocationError):
        await BordersCommandSink(shutil.which("false")).render(frame)


@pytest.mark.asyncio
async def test_virtual_sink_keeps_limited_history(frame):
    sink = VirtualSink(history=2)

    for _ in range(5):
        await sink.render(frame)

    assert sink.render_count == 5
    assert len(sink.frames) == 2
    assert sink.last_frame is frame


def test_sink_factory():
    assert isinstance(create_sink(sink_type=SinkType.VIRTUAL), VirtualSink)

    sink = create_sink(sink_type=SinkType.COMMAND, command="/opt/bin/borders")
    assert isinstance(sink, BordersCommandSink)
    assert sink.command == "/opt/bin/borders"
