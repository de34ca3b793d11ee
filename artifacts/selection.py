"""
Budgeted effect selection.

Two modes:

- select_effects(): repeatedly draws from a good and a bad pool without
  replacement, under a policy whose continuation rule depends on how many
  good/bad effects were already taken and on their accumulated value.
  Used for wielded / carried / activated tool effects and worn armor effects.

- pick_natural_effects(): rejection-samples one effect per enabled slot from a
  property's hint lists until the combined value fits under a threshold that
  grows by one on every attempt. Used for natural artifacts.

Every random decision goes through ArtifactRng.one_in / rng and the boolean
expressions short-circuit in a fixed order, so a seeded rng reproduces the
same picks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, List, Optional, Sequence

from .effects import (
    LAST_ACTIVE,
    LAST_PASSIVE,
    ActiveEffect,
    Effect,
    PassiveEffect,
    effect_cost,
)
from .rng import ArtifactRng, resolve_rng
from .types import PropertyDatum


# ============================================================================
# Pool sampling
# ============================================================================

@dataclass
class SelectionResult:
    effects: List[Effect] = field(default_factory=list)
    num_good: int = 0
    num_bad: int = 0
    value: int = 0


@dataclass(frozen=True)
class SelectionPolicy:
    """
    Stopping and bias rules for one select_effects() call site.

    - gate:        optional coin flipped first on every iteration
    - keep_going:  (num_good, num_bad, value, rng) -> continue?
    - prefer_good: (value, rng) -> draw from the good pool this time?
    """
    name: str
    keep_going: Callable[[int, int, int, ArtifactRng], bool]
    prefer_good: Callable[[int, ArtifactRng], bool]
    gate: Optional[Callable[[ArtifactRng], bool]] = None
    max_good: int = 3
    max_bad: int = 3


def select_effects(
    good_pool: List[Effect],
    bad_pool: List[Effect],
    policy: SelectionPolicy,
    rng: Optional[ArtifactRng] = None,
    on_pick: Optional[Callable[[Effect], None]] = None,
) -> SelectionResult:
    """
    Draw effects from ``good_pool`` / ``bad_pool`` until ``policy`` says stop.

    Both pools are consumed: drawn effects are removed from them.

    Args:
        good_pool: Candidate effects with non-negative cost
        bad_pool: Candidate effects with non-positive cost
        policy: Stopping / bias rules
        rng: Random source (shared instance if None)
        on_pick: Called with each accepted effect, after it is recorded

    Returns:
        SelectionResult with the effects in draw order and final counters
    """
    rng = resolve_rng(rng)
    result = SelectionResult()

    while True:
        if policy.gate is not None and not policy.gate(rng):
            break
        if not good_pool or not bad_pool:
            break
        if result.num_good >= policy.max_good or result.num_bad >= policy.max_bad:
            break
        if not policy.keep_going(result.num_good, result.num_bad, result.value, rng):
            break

        if policy.prefer_good(result.value, rng):
            effect = rng.random_entry_removed(good_pool)
            result.num_good += 1
        else:
            effect = rng.random_entry_removed(bad_pool)
            result.num_bad += 1

        result.value += effect_cost(effect)
        result.effects.append(effect)
        if on_pick is not None:
            on_pick(effect)

    return result


# ----------------- Policies -----------------

def _wielded_keep_going(ng: int, nb: int, value: int, rng: ArtifactRng) -> bool:
    return ng < 1 or nb < 1 or rng.one_in(ng + 1) or rng.one_in(nb + 1) or value > 1


def _carried_keep_going(ng: int, nb: int, value: int, rng: ArtifactRng) -> bool:
    return (ng > 2 and rng.one_in(ng + 1)) or nb < 1 or rng.one_in(nb + 1) or value > 1


def _worn_keep_going(ng: int, nb: int, value: int, rng: ArtifactRng) -> bool:
    return ng < 1 or rng.one_in(ng * 2) or value > 1 or (nb < 3 and rng.one_in(3 - nb))


def _activated_keep_going(ng: int, nb: int, value: int, rng: ArtifactRng) -> bool:
    return (
        value > 3
        or (nb > 0 and ng == 0)
        or not rng.one_in(3 - ng)
        or not rng.one_in(3 - nb)
    )


def _coin_while_in_debt(chance: int) -> Callable[[int, ArtifactRng], bool]:
    def prefer_good(value: int, rng: ArtifactRng) -> bool:
        return value < 1 and rng.one_in(chance)
    return prefer_good


def _activated_prefer_good(value: int, rng: ArtifactRng) -> bool:
    return not rng.one_in(3) and value <= 1


WIELDED_POLICY = SelectionPolicy(
    name="wielded",
    keep_going=_wielded_keep_going,
    prefer_good=_coin_while_in_debt(2),
)

# Carried effects are rarer and lean bad.
CARRIED_POLICY = SelectionPolicy(
    name="carried",
    keep_going=_carried_keep_going,
    prefer_good=_coin_while_in_debt(3),
    gate=lambda rng: rng.one_in(2),
)

WORN_POLICY = SelectionPolicy(
    name="worn",
    keep_going=_worn_keep_going,
    prefer_good=_coin_while_in_debt(2),
)

ACTIVATED_POLICY = SelectionPolicy(
    name="activated",
    keep_going=_activated_keep_going,
    prefer_good=_activated_prefer_good,
)


# ============================================================================
# Natural artifacts: escalating-threshold rejection sampling
# ============================================================================

class NaturalLayout(IntEnum):
    """Which effect slots a natural artifact fills."""
    PASSIVE_PAIR = 1   # good passive + bad passive
    ACTIVE_PAIR = 2    # good active + bad active
    MIXED = 3          # bad passive + good active


@dataclass
class NaturalPick:
    passive_good: PassiveEffect = PassiveEffect.NULL
    passive_bad: PassiveEffect = PassiveEffect.NULL
    active_good: ActiveEffect = ActiveEffect.NULL
    active_bad: ActiveEffect = ActiveEffect.NULL
    value: int = 0
    threshold: int = 0
    attempts: int = 0

    @property
    def passive_effects(self) -> List[PassiveEffect]:
        return [e for e in (self.passive_good, self.passive_bad) if e != PassiveEffect.NULL]

    @property
    def active_effects(self) -> List[ActiveEffect]:
        return [e for e in (self.active_good, self.active_bad) if e != ActiveEffect.NULL]


def _hinted_pick(hints: Sequence[Effect], family, lo: int, hi: int, rng: ArtifactRng) -> Effect:
    pick = hints[rng.rng(0, len(hints) - 1)]
    if pick == family.NULL or rng.one_in(4):
        pick = family(rng.rng(lo, hi))
    return pick


def pick_natural_effects(
    prop: PropertyDatum,
    layout: NaturalLayout,
    rng: Optional[ArtifactRng] = None,
) -> NaturalPick:
    """
    Pick the effects of a natural artifact.

    Re-rolls every enabled slot together until the combined cost is at most
    the threshold. The threshold starts at 1 on the first check and grows by
    one per rejected attempt, so stronger combinations become acceptable the
    longer sampling runs. Costs are bounded, so this always terminates.
    """
    rng = resolve_rng(rng)
    good_passive = layout == NaturalLayout.PASSIVE_PAIR
    bad_passive = layout in (NaturalLayout.PASSIVE_PAIR, NaturalLayout.MIXED)
    good_active = layout in (NaturalLayout.ACTIVE_PAIR, NaturalLayout.MIXED)
    bad_active = layout == NaturalLayout.ACTIVE_PAIR

    pick = NaturalPick()
    while True:
        if good_passive:
            pick.passive_good = _hinted_pick(
                prop.passive_good, PassiveEffect,
                PassiveEffect.NULL + 1, PassiveEffect.SPLIT - 1, rng,
            )
        if bad_passive:
            pick.passive_bad = _hinted_pick(
                prop.passive_bad, PassiveEffect,
                PassiveEffect.SPLIT + 1, LAST_PASSIVE, rng,
            )
        if good_active:
            pick.active_good = _hinted_pick(
                prop.active_good, ActiveEffect,
                ActiveEffect.NULL + 1, ActiveEffect.SPLIT - 1, rng,
            )
        if bad_active:
            pick.active_bad = _hinted_pick(
                prop.active_bad, ActiveEffect,
                ActiveEffect.SPLIT + 1, LAST_ACTIVE, rng,
            )

        pick.value = (
            effect_cost(pick.passive_good) + effect_cost(pick.passive_bad)
            + effect_cost(pick.active_good) + effect_cost(pick.active_bad)
        )
        pick.threshold += 1
        pick.attempts += 1
        if pick.value <= pick.threshold:
            return pick
