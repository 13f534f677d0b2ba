"""
Microbenchmark: time per frame vs number of independent arena sessions.
Run:
  python benchmarks/bench_steps.py
"""
import time
from datetime import datetime, timedelta

import numpy as np
from clock_arena import Arena, ArenaConfig, Actor
from clock_arena.core.invariants import state_is_consistent
from clock_arena.profiler import Profiler


def run(n: int, prof: Profiler, frames: int = 600):
    prof.reset()
    cfg = ArenaConfig()
    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    arenas = []
    for _ in range(n):
        r = float(rng.uniform(0.0, cfg.effective_radius))
        a = float(rng.uniform(0.0, 2 * np.pi))
        actor = Actor(position=(r * np.sin(a), r * np.cos(a)))
        arenas.append(Arena(config=cfg, actor=actor, profiler=prof))

    start = datetime(2024, 1, 1, 12, 0, 0)
    dt = 1 / 60

    t0 = time.perf_counter()
    for i in range(frames):
        moment = start + timedelta(seconds=i * dt)
        for arena in arenas:
            jitter = rng.normal(scale=0.05, size=2)
            arena.step(dt=dt, moment=moment, desired=arena.actor.position + jitter)
    t1 = time.perf_counter()

    assert all(state_is_consistent(arena.manager) for arena in arenas)
    per_frame = (t1 - t0) / frames
    return per_frame, t1 - t0


if __name__ == "__main__":
    prof = Profiler()
    for n in [1, 10, 50, 100, 250]:
        per_frame, wall = run(n, prof)
        summary = prof.stats.summary()
        collision_share = prof.stats.total("collision") / wall
        print(f"N={n:4d}  frame={1e3*per_frame:8.3f} ms  frames/s={1/per_frame:8.1f}"
              f"  collision={100*collision_share:5.1f}%")
        for k in ["angles", "boundary", "collision"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
