"""
Base Animation Class

All animations inherit from BaseAnimation and implement the step() method.
"""

from typing import AsyncIterator, Iterator

from border_shimmer.models.frame import BorderFrame


class BaseAnimation:
    """
    Base class for border animations

    Animations produce one BorderFrame per step(). run() wraps step() in an
    async generator that FrameDriver consumes; frames() is the synchronous
    equivalent for previews and tests.

    Subclasses MUST implement step().
    """

    def __init__(self):
        self.running = False

    # ------------------------------------------------------------
    # Runtime
    # ------------------------------------------------------------

    def step(self) -> BorderFrame:
        raise NotImplementedError

    def stop(self):
        self.running = False

    def frames(self) -> Iterator[BorderFrame]:
        """Endless synchronous frame stream (no timing)"""
        while True:
            yield self.step()

    # ------------------------------------------------------------
    # Main generator loop used by FrameDriver
    # ------------------------------------------------------------
    async def run(self) -> AsyncIterator[BorderFrame]:
        """
        Produces frames indefinitely until stop() is called.

        The running flag is checked before each frame, so stop() takes
        effect between frames, never in the middle of one.
        """
        self.running = True

        while self.running:
            yield self.step()
