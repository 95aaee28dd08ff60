"""Autoplay -- a full round with no window.

Demonstrates:
- Driving GameController with a StaticSurface
- Listening to status signals on the SignalBus
- Advancing the clock tick by tick until recall
- Clicking tiles back in order (or deliberately wrong)

Run: python examples/autoplay.py [count] [--mistake]
"""
import random
import sys

from tick_recall import GameController, Phase, SignalBus, StaticSurface, Status


def print_status(signal: str, data: dict) -> None:
    details = ", ".join(f"{k}={v}" for k, v in data.items())
    print(f"  [{signal}] {details}")


def main() -> None:
    count = sys.argv[1] if len(sys.argv) > 1 else "5"
    mistake = "--mistake" in sys.argv

    bus = SignalBus()
    bus.subscribe_all(Status.ALL, print_status)
    surface = StaticSurface(width=640, height=480, header=60)
    controller = GameController(surface, bus, rng=random.Random(2024))

    print(f"=== Round of {count} ===\n")
    if not controller.start(count):
        return

    seen_step = 0
    while controller.phase is not Phase.RECALL:
        controller.advance()
        if controller.scramble_count != seen_step:
            seen_step = controller.scramble_count
            pos = controller.tiles[0].position
            print(f"    tile 1 now at top={pos.top} left={pos.left}")

    order = [t.order for t in controller.tiles]
    if mistake:
        order[-2], order[-1] = order[-1], order[-2]
    for k in order:
        if controller.phase is not Phase.RECALL:
            break
        controller.click(k)

    labels = " ".join(t.label for t in controller.tiles)
    print(f"\nDone in phase {controller.phase.value}. Tiles: {labels}")


if __name__ == "__main__":
    main()
