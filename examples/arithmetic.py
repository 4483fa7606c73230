from __future__ import annotations

from nmoney import Money


def run() -> None:
    m1 = Money(10, 25)
    m2 = Money(21, 33)

    # `+` and `-` operators
    print(f"Testing '+' operator : {m1} + {m2} = {m1 + m2}")
    print(f"Testing '-' operator : {m1} - {m2} = {m1 - m2}")

    # `+=` and `-=` rebind the name to a new Money
    total = m2
    total += m1
    print(f"Testing '+=' operator: {m2} + {m1} = {total}")

    diff = m2
    diff -= m1
    print(f"Testing '-=' operator: {m2} - {m1} = {diff}")

    # `sum()` works because Money accepts `0 + money`
    print(f"Sum of {m1}, {m2}, {-m1}: {sum([m1, m2, -m1])}")


if __name__ == "__main__":
    run()
