"""
Tests for CyclicAnimator state machine and frame contents
"""

from itertools import islice

import pytest

from border_shimmer.animations.cyclic import CyclicAnimator
from border_shimmer.errors import TrackLengthMismatchError
from border_shimmer.models.color import Color


def take(animator, count):
    return list(islice(animator.frames(), count))


def test_two_color_track_t_sequence_cycles(make_context, red, blue):
    animator = CyclicAnimator(make_context([red, blue], secs=1, fps=2))

    frames = take(animator, 9)

    assert [f.t for f in frames] == [0.0, 0.5, 1.0] * 3
    assert [f.track_index for f in frames] == [0, 0, 0, 1, 1, 1, 0, 0, 0]
    assert [f.sub_step for f in frames] == [0, 1, 2] * 3


def test_first_active_frames_match_direct_interpolation(make_context, red, blue):
    animator = CyclicAnimator(make_context([red, blue], secs=1, fps=2))

    frames = take(animator, 3)

    assert [f.active_color.to_hex() for f in frames] == [
        "0xFFFF0000",
        red.interpolate(blue, 0.5).to_hex(),
        "0xFF0000FF",
    ]


def test_inactive_track_runs_in_lockstep(make_context, red, blue):
    # derived inactive track is [blue, red]
    animator = CyclicAnimator(make_context([red, blue], secs=1, fps=2))

    frames = take(animator, 6)

    assert [f.inactive_color for f in frames] == [
        blue, blue.interpolate(red, 0.5), red,
        red, red.interpolate(blue, 0.5), blue,
    ]


def test_end_of_transition_frame_repeats_as_next_start(make_context):
    colors = [Color.from_hex(h) for h in ("#FF0000FF", "#00FF00FF", "#0000FFFF")]
    animator = CyclicAnimator(make_context(colors, secs=1, fps=1))

    frames = take(animator, 7)

    assert [(f.track_index, f.sub_step) for f in frames] == [
        (0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1), (0, 0),
    ]
    # last waypoint wraps back to the first color
    assert frames[5].active_color == colors[0]
    assert frames[1].active_color == frames[2].active_color == colors[1]


@pytest.mark.parametrize("secs, fps", [(2, 2), (7, 1), (3, 10)])
def test_single_color_track_is_constant(make_context, secs, fps):
    color = Color.from_hex("#1D1F3AFF")
    animator = CyclicAnimator(make_context([color], secs=secs, fps=fps))

    hexes = {f.active_color.to_hex() for f in take(animator, 3 * (secs * fps + 1))}
    assert hexes == {"0xFF1D1F3A"}


def test_shared_alpha_stays_opaque_through_transition(make_context, red, blue):
    animator = CyclicAnimator(make_context([red, blue], secs=3, fps=10))

    assert {f.active_color.alpha for f in take(animator, 62)} == {255}


def test_frame_carries_width_and_glow(make_context, red, blue):
    context = make_context([red, blue], width=2.5, active_glow=True)
    frame = CyclicAnimator(context).step()

    assert frame.width == 2.5
    assert frame.to_arguments() == {
        "active_color": "glow(0xFFFF0000)",
        "inactive_color": "0xFF0000FF",
        "width": "2.500000",
    }


def test_reset_returns_to_start(make_context, red, blue):
    animator = CyclicAnimator(make_context([red, blue], secs=1, fps=2))
    take(animator, 4)

    assert animator.position == (1, 1)
    animator.reset()
    assert animator.position == (0, 0)


@pytest.mark.asyncio
async def test_run_stops_between_frames(make_context, red, blue):
    animator = CyclicAnimator(make_context([red, blue]))
    seen = []

    async for frame in animator.run():
        seen.append(frame)
        if len(seen) == 3:
            animator.stop()

    assert len(seen) == 3
    assert animator.running is False


def test_context_rejects_mismatched_tracks(make_context, red, blue):
    with pytest.raises(TrackLengthMismatchError):
        make_context([red, blue, red, blue], inactive=[red, blue, red])


def test_context_rejects_empty_track(make_context):
    with pytest.raises(ValueError):
        make_context([])
