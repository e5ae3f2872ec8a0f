"""Animation component and run arithmetic."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from rota_easing import Easing, EasingRegistry, EasingSpec

from rota_wheel.angles import (
    CLOCKWISE,
    COUNTERCLOCKWISE,
    FULL_CIRCLE,
    check_direction,
    normalize,
    opposite,
    signed_delta,
)
from rota_wheel.errors import ConfigurationError, WheelError

if TYPE_CHECKING:
    from rota_wheel.wheel import Wheel

IDLE = "idle"
RUNNING = "running"
FINISHED = "finished"

# state -> states it may move to. running -> running is a restart;
# finished -> running lets a finished callback chain the next run.
TRANSITIONS: dict[str, tuple[str, ...]] = {
    IDLE: (RUNNING,),
    RUNNING: (RUNNING, FINISHED),
    FINISHED: (IDLE, RUNNING),
}

SOUND_TRIGGERS = ("segment", "pin")

WheelCallback = Callable[["Wheel"], None]
SoundCallback = Callable[["Wheel", Optional[int]], None]

_CALLBACKS = ("callback_before", "callback_after", "callback_finished", "callback_sound")


@dataclass
class Animation:
    """Spin configuration plus the state of the current run.

    ``duration`` counts frames. ``spins`` of ``None`` means one turn.
    ``repeat`` adds further legs after the first; with ``yoyo`` every
    extra leg runs in the opposite direction.
    """

    type: str = "spinOngoing"
    direction: str = CLOCKWISE
    duration: int = 10
    spins: float | None = None
    stop_angle: float | None = None
    easing: EasingSpec = "Power3.easeOut"
    repeat: int = 0
    yoyo: bool = False
    clear_the_canvas: bool | None = None
    sound_trigger: str = "segment"
    callback_before: WheelCallback | None = None
    callback_after: WheelCallback | None = None
    callback_finished: WheelCallback | None = None
    callback_sound: SoundCallback | None = None

    state: str = field(default=IDLE, init=False)
    current_step: int = field(default=0, init=False)
    start_angle: float = field(default=0.0, init=False)
    total_change_in_angle: float = field(default=0.0, init=False)
    last_indicated: int | None = field(default=None, init=False)
    easing_fn: Easing | None = field(default=None, init=False, repr=False, compare=False)
    legs_remaining: int = field(default=0, init=False)
    leg_direction: str = field(default=CLOCKWISE, init=False)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ConfigurationError for values a run cannot use."""
        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise ConfigurationError(f"duration must be an int, got {self.duration!r}")
        if self.duration <= 0:
            raise ConfigurationError(f"duration must be > 0, got {self.duration}")
        check_direction(self.direction)
        if self.spins is not None:
            if isinstance(self.spins, bool) or not isinstance(self.spins, (int, float)):
                raise ConfigurationError(f"spins must be a number, got {self.spins!r}")
            if self.spins < 0:
                raise ConfigurationError(f"spins must be >= 0, got {self.spins}")
        if self.stop_angle is not None and (
            isinstance(self.stop_angle, bool) or not isinstance(self.stop_angle, (int, float))
        ):
            raise ConfigurationError(f"stop_angle must be a number, got {self.stop_angle!r}")
        if isinstance(self.repeat, bool) or not isinstance(self.repeat, int):
            raise ConfigurationError(f"repeat must be an int, got {self.repeat!r}")
        if self.repeat < 0:
            raise ConfigurationError(f"repeat must be >= 0, got {self.repeat}")
        if self.sound_trigger not in SOUND_TRIGGERS:
            raise ConfigurationError(
                f"sound_trigger must be one of {SOUND_TRIGGERS}, got {self.sound_trigger!r}"
            )
        if not (self.easing is None or isinstance(self.easing, str) or callable(self.easing)):
            raise ConfigurationError(
                f"easing must be a name or a callable, got {type(self.easing).__name__}"
            )
        for name in _CALLBACKS:
            cb = getattr(self, name)
            if cb is not None and not callable(cb):
                raise ConfigurationError(f"{name} must be callable, got {type(cb).__name__}")

    @property
    def is_running(self) -> bool:
        return self.state == RUNNING

    @property
    def progress(self) -> float:
        """Normalized time of the current leg."""
        return self.current_step / self.duration

    def transition(self, target: str) -> None:
        if target not in TRANSITIONS[self.state]:
            raise WheelError(f"animation cannot move from {self.state!r} to {target!r}")
        self.state = target


def total_change(start: float, stop: float | None, spins: float, direction: str) -> float:
    """Unsigned degrees a run travels from ``start``.

    Without a stop angle this is ``spins`` full turns. With one, the run
    lands exactly on ``stop``: clockwise adds the clockwise distance to the
    full turns, counterclockwise takes the clockwise distance off them.
    """
    full = FULL_CIRCLE * spins
    if stop is None:
        return full
    cw_delta = signed_delta(normalize(start), normalize(stop), CLOCKWISE)
    if direction == COUNTERCLOCKWISE:
        return full - cw_delta
    return full + cw_delta


def prepare_run(animation: Animation, rotation: float, easings: EasingRegistry) -> None:
    """Snapshot the start of a run and precompute its total change."""
    animation.validate()
    spins = 1 if animation.spins is None else animation.spins
    animation.current_step = 0
    animation.start_angle = rotation
    animation.leg_direction = animation.direction
    animation.legs_remaining = animation.repeat
    animation.total_change_in_angle = total_change(
        rotation, animation.stop_angle, spins, animation.direction
    )
    animation.easing_fn = easings.resolve(animation.easing)
    if animation.callback_sound is not None:
        animation.last_indicated = None


def rotation_at(animation: Animation) -> float:
    """Rotation for the current step of the current leg."""
    assert animation.easing_fn is not None
    change = animation.total_change_in_angle * animation.easing_fn(animation.progress)
    if animation.leg_direction == COUNTERCLOCKWISE:
        return animation.start_angle - change
    return animation.start_angle + change


def begin_next_leg(animation: Animation, rotation: float) -> None:
    """Restart the step count for the next ``repeat`` leg from ``rotation``."""
    animation.legs_remaining -= 1
    animation.current_step = 0
    animation.start_angle = rotation
    if animation.yoyo:
        # Swing back over the same arc.
        animation.leg_direction = opposite(animation.leg_direction)
        return
    spins = 1 if animation.spins is None else animation.spins
    animation.total_change_in_angle = total_change(
        rotation, animation.stop_angle, spins, animation.leg_direction
    )
