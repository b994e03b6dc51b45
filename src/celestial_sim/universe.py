# MIT License (see LICENSE)
"""
The universe: the initial configuration a simulation runs on.

A Universe holds the suns, moons and planets in insertion order. That order
is significant: the collision detector walks bodies in it, and snapshots
list body states in it. Ids must be unique within a kind; a sun and a moon
may share an id.

A Timeline runs on a frozen() copy: its body lists are tuples and add()
is rejected, so the body set cannot change in the middle of a run.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .bodies import Body, Moon, Planet, Sun
from .errors import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass
class Universe:
    """
    Container for all celestial bodies of a simulation.

    Attributes:
        suns: Suns in insertion order.
        moons: Moons in insertion order.
        planets: Planets in insertion order.
        locked: Set on frozen() copies; add() is rejected.

    Example:
        universe = Universe()
        universe.add(Sun("sun1", radius=0.01))
        universe.add(Moon("moon1", radius=0.001))
    """
    suns: list[Sun] = field(default_factory=list)
    moons: list[Moon] = field(default_factory=list)
    planets: list[Planet] = field(default_factory=list)
    locked: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Re-add initial bodies so duplicate ids are rejected up front."""
        initial = (self.suns, self.moons, self.planets)
        self.suns, self.moons, self.planets = [], [], []
        for bodies in initial:
            for body in bodies:
                self.add(body)

    def _bucket(self, body: Body) -> list:
        if isinstance(body, Sun):
            return self.suns
        if isinstance(body, Moon):
            return self.moons
        if isinstance(body, Planet):
            return self.planets
        raise InvalidInputError(f"Unknown body type: {type(body).__name__}")

    def add(self, body: Body) -> None:
        """
        Add a body to the universe.

        Args:
            body: A Sun, Moon or Planet.

        Raises:
            InvalidInputError: If a body of the same kind with the same id
                               already exists, the type is unknown, or the
                               universe is locked.
        """
        bucket = self._bucket(body)
        if self.locked:
            raise InvalidInputError(
                f"Cannot add {body.kind.value} '{body.id}', the universe is bound to a timeline."
            )
        if any(b.id == body.id for b in bucket):
            raise InvalidInputError(
                f"Adding duplicates is not allowed. A {body.kind.value} with id "
                f"'{body.id}' already exists."
            )
        bucket.append(body)
        logger.debug("Added %s '%s'", body.kind.value, body.id)

    def frozen(self) -> Universe:
        """
        Return a locked copy of this universe.

        The copy shares the (immutable) body objects but holds them in
        tuples and rejects add(). Freezing a locked universe returns it
        unchanged.
        """
        if self.locked:
            return self
        copy = Universe(list(self.suns), list(self.moons), list(self.planets))
        copy.suns = tuple(copy.suns)
        copy.moons = tuple(copy.moons)
        copy.planets = tuple(copy.planets)
        copy.locked = True
        return copy

    def sun(self, body_id: str) -> Sun:
        """Look up a sun by id."""
        return _find(self.suns, body_id, "sun")

    def moon(self, body_id: str) -> Moon:
        """Look up a moon by id."""
        return _find(self.moons, body_id, "moon")

    def planet(self, body_id: str) -> Planet:
        """Look up a planet by id."""
        return _find(self.planets, body_id, "planet")

    @property
    def sun_ids(self) -> tuple[str, ...]:
        return tuple(s.id for s in self.suns)

    @property
    def moon_ids(self) -> tuple[str, ...]:
        return tuple(m.id for m in self.moons)

    def __len__(self) -> int:
        return len(self.suns) + len(self.moons) + len(self.planets)


def _find(bodies: list, body_id: str, kind: str):
    for b in bodies:
        if b.id == body_id:
            return b
    raise KeyError(f"No {kind} with id '{body_id}'")
