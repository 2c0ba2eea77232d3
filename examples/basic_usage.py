"""Basic usage example for singlylinked."""

from singlylinked import Comparator, LinkedList


def main() -> None:
    """Demonstrate basic list operations."""
    print("=== Building a list ===\n")
    numbers = LinkedList[int]().from_sequence([1, 2, 3])
    numbers.prepend(0)
    print(f"List: {numbers}")
    print(f"Length: {len(numbers)}\n")

    print("=== Mutating ===\n")
    numbers.delete(2)
    print(f"After delete(2): {numbers.to_sequence()}")
    numbers.reverse()
    print(f"After reverse(): {numbers.to_sequence()}")
    numbers.insert(2, 1)
    print(f"After insert(2, 1): {numbers.to_sequence()}")

    head = numbers.delete_head()
    tail = numbers.delete_tail()
    print(f"Removed head {head!r} and tail {tail!r}, left with {numbers.to_sequence()}\n")

    print("=== Custom comparison ===\n")
    tasks = LinkedList[dict](lambda a, b: 0 if a["id"] == b["id"] else 1)
    tasks.append({"id": "task-1", "action": "send_email"})
    tasks.append({"id": "task-2", "action": "process_data"})
    tasks.append({"id": "task-1", "action": "send_email_again"})

    found = tasks.find({"id": "task-2"})
    print(f"Found: {found.value if found else None}")
    tasks.delete({"id": "task-1"})
    print(f"After deleting every task-1: {tasks.to_display_string()}")

    descending = Comparator[int]().reverse()
    print(f"\nReversed comparator: less_than(2, 1) is {descending.less_than(2, 1)}")


if __name__ == "__main__":
    main()
