import threading

from coldflow import (
    EventEmitter,
    create,
    from_event,
    ignore_even,
    interval,
    multiply,
    of,
)

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Defining an observable")
print("-" * 100)
print()


# An observable is just a subscription procedure: given an observer, call it with values.
def three_numbers(observer):
    observer(1)
    observer(2)
    observer(3)


numbers = create(three_numbers)

# Nothing has happened yet. Subscribing runs the procedure.
numbers.subscribe(lambda n: print(f"Got: {n}"))

# Subscribing again runs it again from scratch.
numbers.subscribe(lambda n: print(f"Again: {n}"))

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Operators")
print("-" * 100)
print()

# Bare operators take an observable and return a new one.
multiply(numbers, 5).subscribe(lambda n: print(f"Times five: {n}"))

# They nest. Order matters: filtering first keeps 1, 3, 5 and then scales them.
multiply(ignore_even(of(1, 2, 3, 4, 5)), 10).subscribe(lambda n: print(f"Nested: {n}"))

# The same program with method chaining.
of(1, 2, 3, 4, 5).ignore_even().multiply(10).subscribe(lambda n: print(f"Chained: {n}"))

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Deferred sources")
print("-" * 100)
print()

# interval() ticks from a timer thread. Each subscription has its own counter.
done = threading.Event()


def on_tick(n):
    print(f"Tick: {n}")
    if n == 30:
        done.set()


interval(0.1, count=4).multiply(10).subscribe(on_tick)
done.wait(timeout=2)

# from_event() binds the observer to an event target.
clicks = EventEmitter()
from_event(clicks, "click").map(lambda pos: pos[0]).subscribe(lambda x: print(f"Clicked at x={x}"))
clicks.emit("click", (10, 20))
clicks.emit("click", (15, 25))
