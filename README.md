# adtkit

A small collection of classic abstract data types, written in plain Python,
together with the command-line tools that exercise them.

## Installing

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Data types

| Module | Type | What it is |
| --- | --- | --- |
| `adtkit.sorted_set` | `SortedSet` | bounded set of strings kept in sorted order, binary search lookups |
| `adtkit.unsorted_set` | `UnsortedSet` | bounded set of strings in insertion order, linear search |
| `adtkit.hash_table` | `HashSet` | fixed-size open-addressing hash set with linear probing and deletion markers |
| `adtkit.chained_set` | `ChainedSet` | hash set whose buckets are `Deque`s; the size sets the number of buckets |
| `adtkit.deque` | `Deque` | double-ended queue with comparator-based `find_item` and `remove_item` |
| `adtkit.chunked_list` | `ChunkedList` | deque with indexing, stored as chunks of up to 10 items |
| `adtkit.pqueue` | `PriorityQueue` | binary min-heap ordered by a compare function |

The sets share one interface: `add`, `remove`, `find`, `elements`, plus
`len()`, `in` and iteration. Removing an absent element does nothing.

```python
from adtkit.sorted_set import SortedSet
from adtkit.hash_table import HashSet, strhash

words = SortedSet(100)
for w in "the cat and the hat".split():
    words.add(w)
print(len(words), words.elements())    # 4 ['and', 'cat', 'hat', 'the']

def compare(a, b):
    return (a > b) - (a < b)

table = HashSet(100, compare, strhash)
table.add("hello")
print("hello" in table, table.find("hello"))
```

Adding a new element to a full `SortedSet`, `UnsortedSet` or `HashSet`
raises `SetFullError` (from `adtkit.hash_table`). `strhash` is the 32-bit
`31 * h + c` string hash used by default.

`Deque` and `ChunkedList` offer `add_first`, `add_last`, `remove_first`,
`remove_last`, `first` and `last`; taking from an empty one raises
`IndexError`. A `ChunkedList` can also be read and written by index.

Priority queues take a three-way compare function:

```python
from adtkit.pqueue import PriorityQueue

pq = PriorityQueue(lambda a, b: (a > b) - (a < b))
for n in (5, 1, 4, 2):
    pq.add(n)
while pq:
    print(pq.remove())
```

## Sorting and words

`adtkit.sorting` has `radix_sort` (non-negative integers, queued by digit),
`quick_sort` (Hoare partitioning over a `ChunkedList`), `heap_sort` (drains a
`PriorityQueue`) and `read_ints`. `adtkit.words` has `read_words` and
`count_words`; `adtkit.wordsets` has `odd_words`, `unique_words`,
`remove_words` and `word_counts`.

## Huffman packing

`adtkit.huffman` counts the bytes of a file with `byte_counts`, builds a
Huffman tree with `build_tree`, reports the cost of each symbol with
`describe`, and writes a compressed file through `adtkit.pack.pack`.
`pack_bytes` does the same work in memory; `code_lengths` gives each leaf's
code length. An empty input, a tree whose size does not match the data, or a
tree deeper than 24 levels raises `PackError`. There is no unpacking tool.

## Commands

Words are whitespace-separated runs of characters.

```
adtkit-count FILE                    # number of words in FILE
adtkit-parity FILE                   # total words, and how many occur an odd number of times
adtkit-unique [-l] FILE1 [FILE2]     # distinct words in FILE1, minus those in FILE2; -l lists them
adtkit-counts FILE                   # how often each word occurs
adtkit-qsort FILE                    # the words of FILE in sorted order
adtkit-radix < numbers.txt           # radix sort of non-negative integers
adtkit-sort < numbers.txt            # heap sort of integers
adtkit-huffman INFILE OUTFILE        # Huffman-compress INFILE into OUTFILE
```

## What is not included

The package has no maze generator or solver and no interactive terminal
display. `Deque` and `ChunkedList` can serve as the stacks such a program
would use, but nothing here draws to the screen.