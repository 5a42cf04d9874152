# metaset

This package provides sets of two kinds. An *include* set is a plain
collection of items. An *exclude* set holds every item except a given
collection. The package also provides a small graph of processing nodes.
The nodes combine such sets with AND, OR and NOT, and with filters that you
supply.

## Sets (`metaset.sets`)

`MetaSet` is a frozen dataclass with two fields. `items` is a `frozenset`,
and any other iterable you pass is turned into one. `excluded` is a `bool`.
Build sets with `include()` and `exclude()`:

```python
from metaset.sets import include, exclude

wanted = include({"a", "b", "c"})   # exactly these items
unwanted = exclude({"x"})           # every item except "x"

wanted.is_finite()    # True
unwanted.is_finite()  # False
"a" in wanted         # True
"y" in unwanted       # True
"x" in unwanted       # False
```

## Errors (`metaset.errors`)

When a step fails it raises `ProcessingError`. The error has two
attributes. `error_type` is a `ProcessingErrorType`, one of
`INVALID_CONFIG`, `EXTERNAL_FAILURE`, `TOO_MANY_INPUTS`, `MISSING_INPUTS`,
`INVALID_INPUTS` or `INVALID_INPUT_ID`. `node_id` is an `int` or `None`.
Its string form looks like `node_id: 3, error_type: MissingInputs`. When
there is no node id it reads `node_id: null, ...`.

## Processors (`metaset.processors`)

Every processor has the method `compute_items(node_id, inputs)`. Each entry
in `inputs` is either a `MetaSet` or a `ProcessingError`. When a processor
comes to an input that is an error, it raises that error. Otherwise it
returns a new `MetaSet` or raises `ProcessingError` tagged with `node_id`.

- `Source(items)` takes no inputs and returns `items`.
  - It raises `TOO_MANY_INPUTS` if it is given any input.
  - It raises `EXTERNAL_FAILURE` if `items` is `None`.
- `LogicalAnd()` starts the include part from an empty set and intersects
  it with each include input. Because the start is empty, the include part
  is always empty once any include input is present. It joins the exclude
  inputs. It then returns one of:
  - the include part minus the exclude part, if there was any include input;
  - otherwise an exclude set of the joined items.

  It raises `MISSING_INPUTS` when there are no inputs.
- `LogicalOr()` joins the include inputs. It starts the exclude part from an
  empty set and intersects it with each exclude input, so the exclude part
  is always empty. It then returns one of:
  - the include part minus the exclude part, if there was any include input;
  - otherwise an exclude set of the result.

  It raises `MISSING_INPUTS` when there are no inputs.
- `LogicalNot()` takes exactly one input. It turns an include set into an
  exclude set over the same items, and the reverse.
  - It raises `MISSING_INPUTS` when there is no input.
  - It raises `TOO_MANY_INPUTS` when there is more than one.
- `Filter(filter_criteria)` takes exactly one include input. It passes the
  input's `frozenset` of items to `filter_criteria` and returns the
  `MetaSet` that the function gives back.
  - It raises `INVALID_CONFIG` when `filter_criteria` is `None`.
  - It raises `MISSING_INPUTS` or `TOO_MANY_INPUTS` for a wrong number of
    inputs.
  - It raises `INVALID_INPUTS` when the input is an exclude set.

## Chains (`metaset.chain`)

A `ProcessChain(nodes, root_id)` holds a list of
`ProcessNode(id, processor, dep_ids)`. A node is looked up by its position
in the list. `ProcessChain.resolve()` resolves the root node. It raises
`ProcessingError(MISSING_INPUTS, None)` if `root_id` is not a valid
position.

`ProcessNode.resolve()` works in two steps:

1. It resolves each dependency in turn and collects the results.
   - A failed dependency becomes a `ProcessingError` in the list of inputs
     instead of being raised at once.
   - A dependency id that is not a valid position becomes an
     `INVALID_CONFIG` error tagged with the id of the node that depends on
     it.
2. It runs its processor on the collected inputs.

```python
from metaset.sets import include
from metaset.processors import Source, LogicalOr, LogicalNot
from metaset.chain import ProcessNode, ProcessChain
from metaset.errors import ProcessingError

nodes = [
    ProcessNode(id=0, dep_ids=[1, 2], processor=LogicalOr()),
    ProcessNode(id=1, processor=Source(include({1, 2}))),
    ProcessNode(id=2, processor=Source(include({3}))),
]
ProcessChain(nodes=nodes, root_id=0).resolve()   # include {1, 2, 3}

broken = [ProcessNode(id=0, dep_ids=[], processor=LogicalNot())]
try:
    ProcessChain(nodes=broken, root_id=0).resolve()
except ProcessingError as err:
    print(err)   # node_id: 0, error_type: MissingInputs
```

## What it does not do

- Results are not cached. A node that several others depend on is resolved
  once for each of them.
- Cycles between nodes are not detected. A chain with a cycle recurses
  until Python raises `RecursionError`.
- There is no command-line tool. There is no way to load or save chains.

## Running the tests

```
pip install -e ".[test]"
pytest
```