# examples/two_suns_collision.py
from celestial_sim import Collision, Orbit, Polar, Sun, Timeline, Universe, degrees

universe = Universe()
# Quarter turn per second: reaches the second sun after one step.
universe.add(Sun("sun1", orbit=Orbit(Polar(0.1, 0.0, degrees(90)), period_theta=4), radius=0.001))
universe.add(Sun("sun2", orbit=Orbit(Polar(0.1, degrees(90), degrees(90))), radius=0.001))

timeline = Timeline(universe)
try:
    timeline.advance(42)
except Collision as e:
    print("collision:", e)

print("states:", len(timeline), "collided:", timeline.collided)
for snapshot in timeline.snapshots:
    print(snapshot.time, [(s.id, s.position.round(4).tolist()) for s in snapshot.suns])
