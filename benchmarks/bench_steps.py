"""
Microbenchmark: time per step vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from celestial_sim.bodies import Moon, Sun
from celestial_sim.geometry import Orbit, Polar, degrees
from celestial_sim.profiler import Profiler
from celestial_sim.simulation import Timeline
from celestial_sim.universe import Universe

def build(n: int) -> Universe:
    """n bodies on concentric shells, alternating suns and moons; they never touch."""
    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    universe = Universe()
    for k in range(n):
        theta = degrees(float(rng.uniform(0.0, 360.0)))
        orbit = Orbit(Polar(0.05 * (k + 1), theta, degrees(90)), period_theta=60 + k)
        if k % 2 == 0:
            universe.add(Sun(f"sun{k}", orbit=orbit, radius=0.01, energy_output=1.0))
        else:
            universe.add(Moon(f"moon{k}", orbit=orbit, radius=0.005))
    return universe

def run(n: int, steps: int = 100):
    prof = Profiler()
    timeline = Timeline(build(n), profiler=prof)

    # warmup
    timeline.advance(5)

    t0 = time.perf_counter()
    timeline.advance(steps)
    t1 = time.perf_counter()

    total = t1 - t0
    per_step = total / steps
    return per_step, prof.stats.summary(), prof.stats.counters

if __name__ == "__main__":
    for n in [2, 5, 10, 25, 50]:
        per_step, summary, counters = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}  pair_tests={counters.get('pair_tests', 0)}")
        # print top sections
        for k in ["positions", "rasterize", "collisions"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
