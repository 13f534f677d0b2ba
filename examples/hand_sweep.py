import numpy as np

from clock_arena import ArenaConfig, CollisionStateManager
from clock_arena.collision import check_hand_collision, distance_to_hand

# Sweep the second hand past a standing actor and print the debounced state.
cfg = ArenaConfig(unblock_debounce=0.05)
manager = CollisionStateManager.from_config(cfg)
actor = (1.5, 2.0)
dt = 1 / 60

for angle in np.linspace(0.0, np.pi, 181):
    hit = check_hand_collision(angle, actor, cfg, manager.is_blocked)
    result = manager.tick(hit, angle, dt)
    if result.just_blocked or result.just_unblocked:
        d = distance_to_hand(actor, angle, cfg.hand_start, cfg.hand_end)
        state = "blocked" if result.is_blocked else "unblocked"
        print(f"angle={angle:.3f} distance={d:.3f} -> {state}")
