"""Per-frame stepping policies for the brush simulation"""

from abc import ABC, abstractmethod

from ..utils.log_utils import log_warning


class IntegrationStrategy(ABC):
    """Decides how the tip is advanced towards the pointer within one frame."""

    @abstractmethod
    def advance(self, tip, path, target, pressure, elapsed_frames):
        """Advance the tip for one animation frame

        Args:
            tip: Active BrushTip
            path: PathSink of the current stroke
            target: Pointer position the tip is pulled towards
            pressure: Latest raw pressure
            elapsed_frames: Nominal frames elapsed since the previous tick

        Returns:
            bool: True if the tip is still moving and should be ticked again
        """


class TimeScaledIntegration(IntegrationStrategy):
    """One step per frame, scaled by the elapsed time.

    Produces smoother curves because the integration step follows wall-clock
    motion, at the price of the tip visibly lagging behind the pointer.
    """

    def advance(self, tip, path, target, pressure, elapsed_frames):
        if tip.apply_force(target, elapsed_frames) > 0:
            tip.draw(path, pressure)
            return True
        return False


class ConvergeToTargetIntegration(IntegrationStrategy):
    """Step with unit frames until the tip catches up with the pointer.

    More responsive (the path always reaches the pointer before it turns),
    but the resulting curves are not as smooth. A segment is drawn whenever
    the accumulated squared distance exceeds the brush size.
    """

    def __init__(self, max_steps=10000):
        self.max_steps = max_steps

    def advance(self, tip, path, target, pressure, elapsed_frames):
        brush_size = tip.profile.size
        traveled = 0
        for _ in range(self.max_steps):
            moved = tip.apply_force(target, 1)
            traveled += moved
            if traveled > brush_size:  # distance traveled is at least sqrt(size)
                tip.draw(path, pressure)
                traveled = 0
            if moved <= 0:
                break
        else:
            log_warning(f"Brush did not settle within {self.max_steps} steps")

        # draw the rest
        if traveled > 0:
            tip.draw(path, pressure)

        return False


def create_integration(slow_simulation):
    """Pick the stepping policy matching the slow simulation flag."""
    if slow_simulation:
        return TimeScaledIntegration()
    return ConvergeToTargetIntegration()
