"""
Shows how STOP signals end the consumption of an infinite producer.
"""
import itertools

from onepass import Hooks, drive, find, to_list


def main():
    pulled = []
    hooks = Hooks(before_item=lambda driver, item: pulled.append(item))

    # The first five numbers go into a list, then the search takes over.
    collector = to_list().take(5).chain(find(lambda n: n % 7 == 0))
    head, first_multiple = drive(itertools.count(1), collector, hooks=hooks)

    print(f"head: {head}")
    print(f"first multiple of 7 after the head: {first_multiple}")
    print(f"items pulled from the producer: {len(pulled)}")


if __name__ == "__main__":
    main()
