"""
Microbenchmark: rasterizer and footprint test cost vs radius.
Run:
  python benchmarks/bench_grid.py
"""
import time
from celestial_sim.grid import GridPoint, intersects, line, sphere

def timed(fn, repeat: int = 5):
    best = float("inf")
    for _ in range(repeat):
        t0 = time.perf_counter()
        out = fn()
        best = min(best, time.perf_counter() - t0)
    return best, out

if __name__ == "__main__":
    for r in [5, 10, 20, 50, 100]:
        dt_sphere, pts = timed(lambda: sphere(r, sorted_output=True))
        other = sphere(r, centre=GridPoint(2 * r + 1, 0, 0), sorted_output=True)
        dt_test, hit = timed(lambda: intersects(pts, other))
        print(f"r={r:4d}  points={len(pts):7d}  sphere={1e3*dt_sphere:8.3f} ms  intersects={1e3*dt_test:8.3f} ms  hit={hit}")

    for n in [100, 1000, 10000]:
        dt, pts = timed(lambda: line((0, 0, 0), (n, n // 3, -n // 7)))
        print(f"line n={n:6d}  points={len(pts):6d}  {1e3*dt:8.3f} ms")
