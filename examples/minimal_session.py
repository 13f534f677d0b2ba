from datetime import datetime, timedelta

from clock_arena import Arena
from clock_arena.core.movement import MoveInput

# One minute of simulated play at 60 fps starting just before noon.
arena = Arena()
start = datetime(2024, 1, 1, 11, 59, 55)
dt = 1 / 60

for i in range(60 * 60):
    moment = start + timedelta(seconds=i * dt)
    # Walk toward the center for the first half second, then stand still.
    keys = MoveInput(forward=i < 30)
    desired = arena.propose_move(keys, dt)
    frame = arena.step(dt=dt, moment=moment, desired=desired)
    if frame.just_blocked:
        print(f"t={frame.time:6.2f}s  blocked the hand at {frame.blocked_at_angle:.3f} rad")
    if frame.just_unblocked or frame.hold_completed:
        print(f"t={frame.time:6.2f}s  released (hold_completed={frame.hold_completed})")

print("final position:", frame.position, "blocked:", frame.is_blocked)
