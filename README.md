# tadkit

Classic abstract data types, a set of exercises solved on top of them, and
two interactive record-keeping tools. Pure Python, no dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `tadkit.element` | `Element`, an integer `key` with an optional `value` |
| `tadkit.linked_list` | `LinkedList`, a bounded list (default capacity 100) with 1-based positions, and `ListFullError` |
| `tadkit.stack` | `Stack`, a bounded stack (default capacity 10), and `StackFullError` |
| `tadkit.avl` | `AVLTree` and `AVLNode`, a height-balanced search tree with unique keys and at most 1000 elements |
| `tadkit.hash_table` | `ChainedHashTable` (a collision list per slot) and `OverflowHashTable` (a shared overflow zone) |
| `tadkit.validation` | input checks `parse_int`, `is_valid_name`, `is_alphanumeric`, `has_decimal_mark`, and the prompting loop `prompt_until` |
| `tadkit.stack_exercises` | `contains_key`, `remove_first`, `duplicate`, `count`, `are_equal`, `reversed_copy`, `common_elements` |
| `tadkit.list_exercises` | `missing_from`, `common_values`, `max_with_position`, `min_with_position`, `multiples`, `fill_random_unique`, `compare_lists`, `polynomial_value`, `is_sublist`, `basic_operations_report` |
| `tadkit.recursion` | `normalise_phrase`, `is_palindrome`, `product`, `fibonacci_term`, `divisible_by_7`, `explosion`, `parse_signed_integer`, `parse_natural` |
| `tadkit.vaccination` | `Vaccinated`, `VaccinationRegistry`, `date_key`, `vaccine_hash` and the `tadkit-vaccination` menu |
| `tadkit.students` | `Student`, `StudentFile`, `folding_hash` and the `tadkit-students` menu |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the structures

```python
from tadkit.element import Element
from tadkit.linked_list import LinkedList
from tadkit.stack import Stack

items = LinkedList(capacity=100)
for key in (3, 1, 4):
    items.append(Element(key))

len(items)          # 3
items.get(1)        # Element(key=3, value=None); None when out of range
items.insert(Element(9), 2)   # True; a position past the end appends and returns False
items.remove_key(1)           # removes every element with key 1
items.render()      # 'Contenido de la lista: 3 9 4 '

stack = Stack(capacity=10)
stack.push(Element(7))
stack.peek()        # Element(key=7, value=None)
stack.pop()         # IndexError on an empty stack
```

Appending to a full list raises `ListFullError`; pushing onto a full stack
raises `StackFullError`. Iterating over a `Stack` goes from top to bottom.

```python
from tadkit.avl import AVLTree
from tadkit.hash_table import ChainedHashTable

tree = AVLTree()
for key in (10, 20, 30):
    tree.insert(Element(key))   # False for a duplicate key or a full tree
tree.search(20)
[e.key for e in tree]           # [10, 20, 30], in ascending order
tree.delete(20)                 # True if the key was present

table = ChainedHashTable(101, lambda key: key % 101)
table.insert(Element(5))        # False if the key is already stored
table.get(5)
table.render(only_occupied=True)
```

A hash function that returns a slot outside `0..capacity-1` makes the table
raise `ValueError`. `OverflowHashTable.insert` returns `False` once its
overflow zone is full.

## Exercises

```python
from tadkit.recursion import (
    normalise_phrase, is_palindrome, product, fibonacci_term,
    divisible_by_7, explosion,
)

is_palindrome(normalise_phrase("Anita lava la tina"))   # True
product(6, -3)          # -18
fibonacci_term(10)      # 89 (the series starts 1, 1, 2, ... at k = 0)
divisible_by_7(343)     # True
explosion(10, 3)        # fragments no larger than 3, at most 100 of them
```

The list and stack exercise functions take `LinkedList` and `Stack` objects.
They leave their arguments as they found them, except `remove_first`, which
removes from the stack it is given, and `fill_random_unique`, which appends to
the list it is given. `max_with_position` and `min_with_position` return a
`(key, position)` pair and raise `ValueError` for an empty list;
`compare_lists` returns `1`, `-1` or `0`.

## Student file

`StudentFile(path)` keeps fixed-size binary records: position 1 is a header
holding the next free position and students are stored from position 2.

```python
from tadkit.students import Student, StudentFile

store = StudentFile("students.dat")
store.create()                                   # returns 2
store.add(Student(123456, "Ana", "Diaz", 100, "0000000000"))  # returns 2
store.read(2)
store.deactivate(2)                              # marks the record as removed
store.listing()                                  # [(position, Student), ...]
store.position_of(123456)                        # 2; KeyError if absent
```

`add` raises `ValueError` for a legajo already in the file, and
`update` does the same for a legajo taken by another record.

## Command-line tools

```
tadkit-vaccination
```

An interactive menu that records vaccinated people (DNI, first and last name)
under the date they were vaccinated and lists everyone vaccinated on a date.

```
tadkit-students [--file PATH]
```

An interactive menu over a student file (default `Alumnos.dat`): create the
file, add, modify, deactivate, list and show records by position, and find a
record's position from its legajo through a hash index.

Both menus read from standard input and exit when `0` is chosen or input ends.

## Limitations

- The vaccination register lives in memory only; nothing is saved when
  `tadkit-vaccination` exits.
- The student file uses this package's own record layout and is not meant to
  be read by other tools.