"""
Animation Policy

Maps each transition kind and direction to the marker classes that describe
the incoming page's entry state and the outgoing page's exit state. The
stylesheet animates between these markers and the neutral ``active`` state.
"""

from dataclasses import dataclass

from transitions.models import TransitionKind

ACTIVE_MARKER = "active"


@dataclass(frozen=True)
class TransitionPolicy:
    """Entry and exit markers of one transition kind, per direction."""

    entry_forward: tuple[str, ...]
    entry_backward: tuple[str, ...]
    exit_forward: tuple[str, ...]
    exit_backward: tuple[str, ...]

    def entry_markers(self, forward: bool) -> tuple[str, ...]:
        return self.entry_forward if forward else self.entry_backward

    def exit_markers(self, forward: bool) -> tuple[str, ...]:
        return self.exit_forward if forward else self.exit_backward


POLICIES: dict[TransitionKind, TransitionPolicy] = {
    # Slide enters from below when moving forward, from above when moving back.
    TransitionKind.SLIDE: TransitionPolicy(
        entry_forward=("slide-up",),
        entry_backward=("slide-down",),
        exit_forward=("slide-left",),
        exit_backward=("slide-right",),
    ),
    TransitionKind.FADE: TransitionPolicy(
        entry_forward=("fade-out",),
        entry_backward=("fade-out",),
        exit_forward=("fade-out",),
        exit_backward=("fade-out",),
    ),
    TransitionKind.ZOOM: TransitionPolicy(
        entry_forward=("zoom-in-start",),
        entry_backward=("zoom-in-start",),
        exit_forward=("zoom-out",),
        exit_backward=("zoom-out",),
    ),
    TransitionKind.ROTATE: TransitionPolicy(
        entry_forward=("rotate-out",),
        entry_backward=("rotate-out",),
        exit_forward=("rotate-out",),
        exit_backward=("rotate-out",),
    ),
    TransitionKind.FLIP: TransitionPolicy(
        entry_forward=("flip-out",),
        entry_backward=("flip-out",),
        exit_forward=("flip-out",),
        exit_backward=("flip-out",),
    ),
    TransitionKind.CUBE: TransitionPolicy(
        entry_forward=("cube-right",),
        entry_backward=("cube-left",),
        exit_forward=("cube-left",),
        exit_backward=("cube-right",),
    ),
}

# Every marker any policy can leave on a page.
TRANSITION_MARKERS: frozenset[str] = frozenset(
    marker
    for policy in POLICIES.values()
    for markers in (
        policy.entry_forward,
        policy.entry_backward,
        policy.exit_forward,
        policy.exit_backward,
    )
    for marker in markers
)


def get_policy(kind: TransitionKind) -> TransitionPolicy:
    """Return the policy for ``kind``."""
    return POLICIES[kind]
