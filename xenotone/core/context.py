#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Root evaluation context"""

from typing import List, Optional

from .monzo import TimeMonzo

__all__ = ["RootContext"]


class RootContext(object):
    """State shared by every interval produced during an evaluation.

    Parameters
    ----------
    unison_frequency : TimeMonzo or None
        Frequency of the relative unison, needed to cross between
        relative and absolute values
    up : TimeMonzo
        Size of one up (default 1 cent)
    lift : TimeMonzo
        Size of one lift (default 5 cents)
    C4 : TimeMonzo
        Reference pitch of absolute FJS spellings (default relative unison)

    Notes
    -----
    Intervals whose formatting node counts ups or lifts are registered in
    ``fragiles``. Assigning a new ``up`` or ``lift`` breaks their nodes
    and clears the registry.
    """

    def __init__(
        self,
        unison_frequency: Optional[TimeMonzo] = None,
        up: Optional[TimeMonzo] = None,
        lift: Optional[TimeMonzo] = None,
        C4: Optional[TimeMonzo] = None,
    ):
        self.unison_frequency = unison_frequency
        self.fragiles: List = []
        self._up = up if up is not None else TimeMonzo.from_cents(1)
        self._lift = lift if lift is not None else TimeMonzo.from_cents(5)
        self.C4 = C4 if C4 is not None else TimeMonzo(0, [])

    def break_fragiles(self):
        for fragile in self.fragiles:
            fragile.break_fragile()
        self.fragiles = []

    @property
    def up(self) -> TimeMonzo:
        return self._up

    @up.setter
    def up(self, value: TimeMonzo):
        self.break_fragiles()
        self._up = value

    @property
    def lift(self) -> TimeMonzo:
        return self._lift

    @lift.setter
    def lift(self, value: TimeMonzo):
        self.break_fragiles()
        self._lift = value

    def clone(self) -> "RootContext":
        result = RootContext(self.unison_frequency, self._up, self._lift, self.C4)
        result.fragiles = list(self.fragiles)
        return result
