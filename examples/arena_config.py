import logging
import os
import tempfile

from clock_arena import Arena, ArenaConfig
from clock_arena.io import load_config, save_config, state_to_json

logging.basicConfig(level=logging.DEBUG)

cfg = ArenaConfig(arena_radius=6.0, block_debounce=0.05, hold_duration=5.0)
path = os.path.join(tempfile.gettempdir(), "clock_arena_example.json")
save_config(cfg, path)

arena = Arena(config=load_config(path))
for _ in range(30):
    arena.step(dt=1 / 60, desired=(0.0, 0.0))
print(state_to_json(arena.manager))
