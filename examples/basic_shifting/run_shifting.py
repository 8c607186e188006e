#!/usr/bin/env python3
"""
Basic Shifting Example

This example demonstrates how to:
1. Create a player with its own transmission
2. Shift up and down
3. Undo shifts in reverse order
4. See that redo is not supported
5. Access player telemetry

Run with: python run_shifting.py
"""

from shiftlab import Player, EmptyStackError, RedoNotImplementedError
from shiftlab.config import ShiftLabConfig, setup_logging
from shiftlab.ml import ObservationSpace


def main():
    setup_logging(ShiftLabConfig(log_level="WARNING"))

    print("=" * 60)
    print("ShiftLab Basic Shifting Example")
    print("=" * 60)

    # Step 1: Create a player
    print("\n1. Creating player...")
    player = Player()
    print(f"   State: {player.shifter.get_transmission_state()}")

    # Step 2: Shift
    print("\n2. Shifting up, then down...")
    player.shift_up()
    print(f"   After shift up:   {player.shifter.get_transmission_state()}")
    player.shift_down()
    print(f"   After shift down: {player.shifter.get_transmission_state()}")

    # Step 3: Undo
    print("\n3. Undoing...")
    for _ in range(3):
        try:
            player.undo()
            print(f"   Undo -> {player.shifter.get_transmission_state()}")
        except EmptyStackError as e:
            print(f"   Undo failed: {e}")

    # Step 4: Redo
    print("\n4. Trying redo...")
    try:
        player.redo()
    except RedoNotImplementedError as e:
        print(f"   Redo failed: {e}")

    # Step 5: Telemetry
    print("\n5. Telemetry snapshot:")
    player.shift_down()
    telemetry = player.get_telemetry()
    print(f"   State: {telemetry['transmission']['state']}")
    print(f"   History depth: {telemetry['transmission']['history_depth']}")
    print(f"   Commands: {telemetry['commands']['commands']}")
    print(f"   Observation: {ObservationSpace().extract(telemetry)}")

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
