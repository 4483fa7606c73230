from __future__ import annotations

from nmoney import Money


def print_comparisons(a: Money, b: Money) -> None:
    print(f"{a} >  {b}?  {a > b}")
    print(f"{a} <  {b}?  {a < b}")
    print(f"{a} >= {b}?  {a >= b}")
    print(f"{a} <= {b}?  {a <= b}")
    print(f"{a} == {b}?  {a == b}")


def run() -> None:
    m1 = Money(21, 33)
    m2 = Money(10, 25)
    m3 = m2.copy()

    for a, b in [(m1, m2), (m2, m1), (m2, m3)]:
        print_comparisons(a, b)
        print()


if __name__ == "__main__":
    run()
