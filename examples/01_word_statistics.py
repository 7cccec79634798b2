"""
Computes several statistics over a stream of words in a single pass.

The file is read lazily, one line at a time, and never kept in memory.
"""
import sys

from onepass import count, drive, max_, sum_, to_set


def words(path):
    with open(path) as f:
        for line in f:
            yield from line.split()


def main(path):
    stats = count().tee(
        sum_().map_ref(len),
        max_(key=len),
    )
    (total, letters, longest) = drive(words(path), stats, name="word-stats")
    print(f"words: {total}, letters: {letters}, longest: {longest!r}")

    # Distinct words next to the count, with the set keeping its own copies.
    distinct, total = drive(words(path), to_set().tee_funnel(count()))
    print(f"distinct: {len(distinct)} of {total}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else __file__)
