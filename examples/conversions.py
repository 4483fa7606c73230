from __future__ import annotations

import logging

from nmoney import Money, NegativeView, Sign, load_display_options

logger = logging.getLogger(__name__)


def run() -> None:
    # To and from text
    m = Money(12, 99)
    text = str(m)
    print(f"original: {m!r}, as text: {text}")

    modified_text = text.replace("9", "0").replace("$", "#")
    print(f"modified text: {modified_text}, parsed back: {Money.from_str(modified_text)}")
    print()

    # To and from total cents
    m = Money(109, 85, Sign.NEGATIVE)
    cents = m.as_cents()
    print(f"original: {m}, in cents: {cents}")
    print(f"cents + 20000 as Money: {Money.from_cents(cents + 20000)}")
    print()

    # Copy options from one value to another
    m1 = Money(59, 99, Sign.NEGATIVE)
    m1.options.set_symbol("#")
    m1.options.set_negative_view(NegativeView.PAREN)
    m2 = Money(1098, 54, Sign.NEGATIVE)
    print(f"m1: {m1}, m2 before `copy_options`: {m2}")
    Money.copy_options(m2, m1)
    print(f"m2 after `copy_options`: {m2}")
    print()

    # Display options configured through NMONEY_* environment variables or a `.env` file
    configured = Money(7, 5, Sign.NEGATIVE)
    configured.options.update_from(load_display_options())
    logger.info(f"Rendering with configured options: {configured.options!r}")
    print(f"configured: {configured}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
