# contestkit

Small solvers for classic programming-contest puzzles. Each solver is a plain
function that takes Python values (integers, strings, iterables of tuples)
and returns the answer as a Python value.

## Installation

```
pip install .
```

## Functions

| Module | Function | Returns |
| --- | --- | --- |
| `contestkit.pricing` | `airport_revenue(passengers, seats)` | `Revenue(maximum, minimum)`: the largest and smallest ticket revenue when a seat costs as many units as the plane has empty seats |
| `contestkit.sorting` | `make_good(values)` | The values in non-increasing order |
| `contestkit.counting` | `cupboard_moves(doors)` | Fewest flips so all left doors match and all right doors match; each door pair is `(left, right)` with 0 closed, 1 open |
| | `winning_team(goals)` | The team that scored more of the listed goals |
| | `orange_fraction(percents)` | The mean of the given percentages, as a float |
| `contestkit.parity` | `domino_rotations(pieces)` | 0 or 1 rotations to make both halves' sums even, or `None` if impossible |
| `contestkit.battles` | `can_defeat_all(strength, dragons)` | Whether every `(dragon_strength, bonus)` can be beaten |
| `contestkit.lyrics` | `restore_song(remix)` | The remix with each `WUB` replaced by a space |
| `contestkit.windows` | `min_fence_window(heights, k)` | 1-based start of the first run of `k` planks with the least total height |
| `contestkit.heating` | `min_heating_cost(radiators, sections)` | Least cost when a radiator with `k` sections costs `k * k` |
| `contestkit.geometry` | `edge_sum(ab, bc, ca)` | Total length of a box's twelve edges from three face areas |
| `contestkit.potions` | `min_potion_steps(percent)` | Fewest one-litre pours giving exactly `percent`% essence |
| `contestkit.puzzles` | `min_piece_difference(students, pieces)` | Least gap between the largest and smallest of `students` chosen puzzles |
| `contestkit.sailing` | `earliest_arrival(start, end, winds)` | First second the boat reaches `end` (0 if already there), or `None` |
| `contestkit.sale` | `max_earnings(prices, capacity)` | Most money gained by taking at most `capacity` negatively priced sets |
| `contestkit.limits` | `time_limit(correct, wrong)` | Smallest valid time limit, or `None` if none exists |
| `contestkit.tram` | `tram_capacity(stops)` | Most passengers aboard at once; each stop is `(exiting, entering)` |
| `contestkit.strings` | `is_reversal(word, candidate)` | Whether `candidate` is `word` written backwards |
| | `k_string(k, text)` | The alphabetically smallest rearrangement of `text` into `k` equal blocks, or `None` |

Invalid input, such as an empty list where an answer needs at least one item
or a window larger than the data, raises `ValueError`.

## Example

```python
from contestkit.pricing import airport_revenue
from contestkit.strings import is_reversal, k_string
from contestkit.tram import tram_capacity

airport_revenue(4, [2, 2, 2])                    # Revenue(maximum=7, minimum=6)
is_reversal("code", "edoc")                      # True
k_string(2, "aazz")                              # 'azaz'
tram_capacity([(0, 3), (2, 5), (4, 2), (4, 0)])  # 6
```

## What it does not do

The package is a library only: it has no command-line program and does not
read puzzle input from text or print answers. Parsing input and formatting
output is left to the caller.

## Running the tests

```
pip install .[test]
pytest
```