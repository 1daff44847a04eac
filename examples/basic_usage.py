"""
Basic usage examples for runiter.

This demonstrates run-length encoding from the front, from the back and
from both ends at once.
"""

import itertools

from runiter import into_de_iter, run_length_decode, run_length_encode


def example_forward():
    """Example: Encoding from the front."""
    print("=== Forward Example ===")

    pairs = run_length_encode("122333444455555").collect()
    print(f"Runs: {pairs}")

    longest = run_length_encode("1223336666666666444455555").max(
        key=lambda pair: pair.count
    )
    print(f"Longest run: {longest}")


def example_backward():
    """Example: Encoding from the back."""
    print("\n=== Backward Example ===")

    for count, item in reversed(run_length_encode("aaabccdddd")):
        print(f"{item} x {count}")


def example_both_ends():
    """Example: Alternating between the two ends."""
    print("\n=== Both Ends Example ===")

    rle = run_length_encode("122333444455555")
    forward = True
    while (pair := rle.pull_front() if forward else rle.pull_back()) is not None:
        side = "front" if forward else "back"
        print(f"{side:>5}: {pair}")
        forward = not forward


def example_pipeline():
    """Example: Composing with other adapters."""
    print("\n=== Pipeline Example ===")

    words = ["Apple", "avocado", "banana", "Blueberry", "cherry"]
    initials = into_de_iter(words).map(lambda w: w[0].lower())
    for count, letter in initials.run_length_encode():
        print(f"{count} word(s) starting with {letter!r}")

    # Front-only sources, even infinite ones, work lazily.
    rle = run_length_encode(itertools.cycle("xxy"))
    print(f"First runs of an endless stream: {[next(rle) for _ in range(3)]}")


def example_decode():
    """Example: Expanding runs again."""
    print("\n=== Decode Example ===")

    text = "".join(run_length_decode([(3, "a"), (1, "b"), (2, "c")]))
    print(f"Decoded: {text}")


def main():
    """Run all examples."""
    print("runiter - Double-Ended Run-Length Iterators\n")

    example_forward()
    example_backward()
    example_both_ends()
    example_pipeline()
    example_decode()

    print("\n=== All Examples Complete ===")


if __name__ == "__main__":
    main()
