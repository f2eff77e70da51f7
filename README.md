# dsworkshop

Four small console workshops on classic data structures. Each one lets
you try a structure by hand and compare two ways of building it.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

All timings are differences of `dsworkshop.timing.tick()`. This is a
monotonic nanosecond counter (`time.perf_counter_ns`). The programs call
these values "ticks".

### `dsworkshop-stacks`

This is an interactive menu, driven by command numbers 0–12 on standard
input, for two integer stacks:

- `ArrayStack`, which has a fixed capacity.
- `ListStack`, a linked stack. Every popped node's address is recorded
  in a `FreedAddresses` list.

With the menu you can:

- create either stack with its initial elements;
- push and pop;
- display the contents, with node addresses for the list stack;
- show the freed addresses;
- print the stack's decreasing runs in reverse order (see
  `dsworkshop.stacks.operations.decreasing_runs`), which empties the
  stack;
- show a memory summary.

Command 0 or the end of input exits.

    dsworkshop-stacks --compare CAPACITY REPEATS

This runs no menu. It fills both stacks `REPEATS` times, then prints the
mean time of a pop, a push and printing the decreasing runs for each
stack.

### `dsworkshop-queues [--seed N]`

Simulates one server fed by two queues. Type-1 requests are always
served first. The run stops once `n` type-1 requests are done, or when a
queue reaches 10000 entries.

Arrival and service times are drawn uniformly from four ranges T1–T4.
The defaults are n=1000, with progress shown every 100, T1=1–5, T2=0–3,
T3=0–4 and T4=0–1. All of these can be changed from the menu.

The model runs on either a `RingQueue` or a `LinkedQueue`. It prints:

- intermediate and final counts;
- the server's idle time;
- the expected time and the error against it;
- a memory estimate.

After a linked-queue run you can list the reused addresses and the
still-free addresses. `--seed` makes a run repeatable.

### `dsworkshop-lookup FILE`

Reads whitespace-separated integers from `FILE` and does the following:

- builds a binary search tree from them, prints it sideways, then
  prints a balanced copy;
- builds a `HashTable` whose size is the next prime above the count,
  using `division_hash`. If its longest chain needs more comparisons
  than the number you enter, it rebuilds the table with
  `mid_square_hash`;
- asks for a number and looks it up in the tree, the balanced tree, the
  hash table and the file itself. For each it reports the comparisons,
  the time, the average time over all numbers in the file and the
  memory used.

It exits with a non-zero status if the argument is missing or the file
is empty, unreadable or holds something other than integers.

### `dsworkshop-graphcut [--output PATH]`

Asks for the number of vertices. It then reads edges as `v1 v2` lines,
numbered from 0, until `-1 -1`. Loops and vertices out of range are
rejected. It then finds the smallest set of edges whose removal
disconnects the graph. Subsets are tried by increasing size, so the
search grows combinatorially with the number of edges.

The result is written as Graphviz DOT text to `PATH` (default
`graph.txt`), with the removed edges drawn in green. A graph that is
already disconnected is reported and written unchanged.

## Library use

The structures can be imported directly, for example:

- `dsworkshop.stacks.array_stack.ArrayStack`
- `dsworkshop.stacks.list_stack.ListStack`
- `dsworkshop.queues.ring.RingQueue`
- `dsworkshop.queues.model.simulate`
- `dsworkshop.lookup.bst`
- `dsworkshop.lookup.hashing.HashTable`
- `dsworkshop.graphcut.matrix.AdjacencyMatrix`
- `dsworkshop.graphcut.cut.minimum_cut`

Full stacks and queues raise `StackFullError` and `QueueFullError`.
Empty ones raise `StackEmptyError` and `QueueEmptyError`.

## What it does not do

- Node addresses in the linked stack and the linked queue are simulated
  numbers, not real memory addresses.
- Memory figures are fixed estimates, not measurements.
- Timings come from a wall-clock nanosecond counter, not a CPU cycle
  counter.
- `dsworkshop-graphcut` writes DOT text only. Rendering it to an image
  needs a separate Graphviz installation.