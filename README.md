# gmodule

Building blocks for graded modules over polynomial rings, in pure Python
with no dependencies outside the standard library.

A graded module carries a degree for every row and every column, and much
of its bookkeeping is done with monomial ideals of leading terms. `gmodule`
provides degree lists, monomial ideals with S-pair bookkeeping, Hilbert
series numerators with codimension, degree and genus, and a reader for
sectioned help text.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `gmodule.dlist` | Degree lists as plain `list[int]`: `filled`, `zeros`, `negated`, `concat`, `composite`, `shifted`, `max_degree`, `min_degree`. Reading integer lists written as ranges (`1..4`), repeats (`0:3`), reserved words and names of other lists with `parse_element`, `consume`, `consume_all` and `select` (which raises `DegreeListError` for an index out of bounds); `ElementKind` and `ListElement` describe a parsed token. Compact display with `format_part` and `format_list`. |
| `gmodule.monideal` | `MonomialIdeal`, a minimal generating set of exponent vectors, each carrying an optional payload: `divides`, `adjoin`, `find_divisor`, `lcm_ideal`, `generators` and `inclusion_exclusion` (the signed terms of the Hilbert series numerator). `PairTable` keeps one monomial ideal per component together with pending pairs sorted by degree: `insert`, `insert_only`, `find_divisor`, `next_pair`, `is_complete`, `pairs_by_degree`. |
| `gmodule.hilbert` | `HilbertFunction` with `add`, `divide`, `divide_all`, `genus` and `format`; `numerator_series`, `hilbert_function` and `describe` for computing and reporting codimension, degree and genus from one monomial ideal per row; `tull_vector`. A series that runs past its size limit raises `DegreeBoundError`. |
| `gmodule.helpfile` | `HelpFile`, a reader for sectioned help text (`@` starts a section, `~` a topic) with `from_text`, `sections`, `topics`, `find_topic` and `topic_text`; `format_command_table` lays out names in columns; `extract_file_help` collects `;;;` help lines. |

## Examples

Degree lists are plain lists of integers:

```python
from gmodule.dlist import concat, max_degree, shifted, zeros

degs = concat(zeros(2), shifted(3, [1, 2]))   # [0, 0, 4, 5]
max_degree(degs)                              # 5
```

Integer lists can be read from tokens the way a user would type them:

```python
from gmodule.dlist import consume, consume_all

consume_all(["1..3", "5:2"])   # [1, 2, 3, 5, 5]
consume(["2", "7"], 4)         # [2, 7, 7, 7]
```

Monomial ideals and Hilbert functions:

```python
from gmodule.hilbert import hilbert_function, numerator_series
from gmodule.monideal import MonomialIdeal

ideal = MonomialIdeal(2, [(1, 0), (0, 1)])   # the ideal (x, y)
numerator_series(ideal)[:3]                  # [1, -2, 1]

hf = hilbert_function([ideal], [0])
hf.divide_all()
hf.codim, hf.degree                          # (2, 1)
```

`describe` returns the same information as a text report, including the
genus.

Help text is parsed from a string and looked up by section and topic:

```python
from gmodule.helpfile import HelpFile

text = "@Matrices\n~add\nAdd two matrices.\n~mult\nMultiply two matrices.\n"
helpfile = HelpFile.from_text(text)
helpfile.sections()          # ['Matrices']
helpfile.find_topic("mult")  # (1, 2)
helpfile.topic_text(1, 2)    # '\nmult\nMultiply two matrices.\n'
```

## What this package does not do

- It has no polynomial or polynomial-vector type and no module matrices:
  there is no matrix arithmetic (addition, multiplication, transposition,
  tensor products and the like), no differentiation of entries, and no
  plain-text rendering of matrices.
- It does not compute standard bases, syzygies, intersections or quotients
  of modules. `PairTable` only keeps the bookkeeping of leading monomials
  and pending pairs; the Hilbert functions are computed from monomial
  ideals that the caller supplies.
- It has no interactive shell and installs no commands; everything is used
  as a library.