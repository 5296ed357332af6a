# dsakit

A small collection of classic data structures and algorithms. It is written in plain Python and needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.search`

- `binary_search(items, key)` searches an ascending sequence. It returns an index of `key`, or `-1` when `key` is absent.

### `dsakit.linked_list`

`Node(value=0, next=None)` is a single node. Nodes compare by identity.

`LinkedList(values=())` is a singly linked list. Its first node is available as `head`.

Inserting:
- `insert_at_head(value)` puts a value at the front.
- `insert_at_tail(value)` puts a value at the end.
- `insert_at(position, value)` makes `value` land at a 1-based position. It raises `IndexError` when the position is out of range.

Deleting:
- `delete_head()` removes the first node and returns its value. It raises `IndexError` on an empty list.
- `delete(value)` removes the first node that holds `value`. It raises `ValueError` when no node holds it.

Reordering:
- `reverse()` reverses the whole list.
- `reverse_in_groups(k)` reverses each run of `k` nodes, including a shorter last run. It raises `ValueError` when `k < 1`.
- `rotate(k)` moves the last `k` nodes, modulo the length, to the front.
- `even_after_odd()` puts the nodes at odd positions before the nodes at even positions.

The list also supports iteration over its values, `len()` and `in`.

Some functions work directly on chains of nodes:
- `length(head)` counts the nodes.
- `has_cycle(head)` finds a cycle using the tortoise-and-hare method.
- `make_cycle(head, position)` links the tail back to the node at a 1-based position. It raises `IndexError` if there is no node at that position.
- `remove_cycle(head)` breaks a cycle if there is one, and returns whether it removed one.
- `intersection_value(first, second)` returns the value of the first node that both chains share, or `None` if they share none.

### `dsakit.multiset`

`Multiset(values=())` is a sorted collection that keeps duplicates.

- `add(value)` inserts a value.
- `count(value)` returns how many copies of `value` it holds.
- `remove_one(value)` removes a single copy. It raises `KeyError` when the value is absent.
- `remove_all(value)` removes every copy and returns how many it removed.
- `lower_bound(value)` returns the smallest element that is not less than `value`, or `None`.
- `upper_bound(value)` returns the smallest element greater than `value`, or `None`.

It also supports ascending iteration, `reversed()`, `len()` and `in`.

### `dsakit.stack`

- `insert_at_bottom(stack, value)` places `value` beneath every item of a list used as a stack, where the top is the last element. It changes the list in place and returns it.

### `dsakit.permutation`

- `next_permutation(items)` returns a new list holding the next lexicographic arrangement. After the last arrangement it returns `None`.
- `sorted_permutations(items)` yields each distinct arrangement as a tuple, in lexicographic order.

### `dsakit.demo`

- `list_demo()`, `queue_demo()` and `priority_queue_demo()` return the output lines of short walkthroughs:
  - a double-ended list
  - a first-in first-out queue
  - a max-priority queue
- `main(argv=None)` prints them.

## Example

```python
from dsakit.linked_list import LinkedList
from dsakit.multiset import Multiset
from dsakit.permutation import sorted_permutations

numbers = LinkedList([1, 2, 3, 4, 5, 6])
numbers.even_after_odd()
print(list(numbers))          # [1, 3, 5, 2, 4, 6]

bag = Multiset([1, 2, 4, 4, 4])
print(bag.lower_bound(3))     # 4
bag.remove_one(4)
print(list(bag))              # [1, 2, 4, 4]

for perm in sorted_permutations([1, 2, 3]):
    print(perm)               # (1, 2, 3), (1, 3, 2), ... (3, 2, 1)
```

## Demo command

```
dsakit-demo            # run all walkthroughs
dsakit-demo list
dsakit-demo queue
dsakit-demo priority
```

## What it does not do

- Nothing in the package reads input interactively. Every function takes its data as arguments.
- The demo command covers only the list, queue and priority-queue walkthroughs.