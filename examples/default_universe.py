# examples/default_universe.py
from celestial_sim.cli import default_universe
from celestial_sim.io import save_timeline
from celestial_sim.profiler import Profiler
from celestial_sim.simulation import Timeline

prof = Profiler()
timeline = Timeline(default_universe(), profiler=prof)
timeline.advance(64)

last = timeline[-1]
print("t:", last.time)
for state in last.suns + last.moons:
    print(f"  {state.id:12s}", state.position)
print("sections:", prof.stats.summary())
print("counters:", prof.stats.counters)

save_timeline(timeline, "default_run.json")
