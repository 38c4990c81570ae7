# contestsolutions

Solutions to a collection of competitive programming problems. Each problem
is available as a plain Python function, and can also be solved from the
judge-style input text, either from Python or from the command line.

Only the standard library is needed.

## Installation

```
pip install .
```

## Using the functions

```python
from contestsolutions.kickstart import increasing_substring_lengths
from contestsolutions.div3_ab import has_odd_divisor

increasing_substring_lengths("ABBC")   # [1, 2, 1, 2]
has_odd_divisor(6)                     # True
```

Functions raise `ValueError` on input they cannot handle (empty sequences,
out-of-range values, rows of different lengths and so on). Problems that may
have no answer return `None` in that case, for example
`div3_ab.unique_bid_winner` or `div3_cd.unique_number`.

## Running judge input

Every problem module has `run(problem, text)`. It takes a problem name and
the whole input text as the judge would supply it, and returns the output
text in the judge's format. An unknown name raises `ValueError`.

```python
from contestsolutions import div3_ab

div3_ab.run("odd-divisor", "3\n2\n3\n6\n")   # "NO\nYES\nYES\n"
```

Kick Start answers are prefixed with `Case #k: `.

The problem names, by module:

- `kickstart`: `increasing-substring`, `k-goodness-string`,
  `l-shaped-plots`, `rabbit-house`, `smaller-strings`
- `hashcode`: `traffic-signals`, `pizza-delivery`
- `div2_a`: `and-then-there-were-k`, `array-rearrangement`,
  `bovine-dilemma`, `contest-start`, `dungeon`, `non-zero`,
  `omkar-and-bad-story`, `pretty-permutations`, `puzzle-from-the-future`,
  `strange-partition`, `string-generation`
- `div2_b`: `different-divisors`, `elimination`, `pawn-game`,
  `last-minute-enhancements`, `love-song`, `maximum-product`,
  `pleasant-pairs`, `prinzessin-der-verurteilung`, `strange-list`
- `div2_c`: `challenging-cliffs`, `web-of-lies`
- `div3_ab`: `cards-for-friends`, `favorite-sequence`, `odd-divisor`,
  `special-permutation`, `stone-game`, `friends-and-candies`,
  `fair-division`, `ordinary-numbers`, `unique-bid-auction`
- `div3_cd`: `ball-in-berland`, `number-of-pairs`, `unique-number`,
  `add-to-neighbour-and-remove`
- `educational`: `find-the-array`, `robot-program`, `strange-functions`,
  `jumps`, `toy-blocks`
- `mashup`: `sasha-and-sticks`, `card-game`, `stairs`

`contestsolutions.cli.list_problems()` returns all of these names, sorted.

### Hash Code

`hashcode` also offers the pieces separately:

- `parse_traffic_problem(text)` reads a `TrafficProblem` (with its `Street`
  records and car routes), `schedule_traffic_signals(problem)` gives the
  green-light seconds per street grouped by intersection, and
  `format_schedule(schedule)` renders the submission.
- `deliver_pizzas(pizza_count, teams_of_two, teams_of_three, teams_of_four)`
  hands out pizzas in order, and `format_deliveries(deliveries)` renders the
  submission.

### Web of Lies

`div2_c.NobleNetwork(n)` keeps the friendships between `n` nobles, with
`add_friendship(u, v)`, `remove_friendship(u, v)` and `count_survivors()`.

## Command line

List the problems that can be run:

```
contestsolutions --list
```

Solve one problem, reading its input from standard input:

```
contestsolutions <problem> < input.txt
```

or from a file, optionally writing the answer to a file:

```
contestsolutions <problem> input.txt -o output.txt
```

An unknown problem name is reported as a usage error. Unreadable input or
input the solver rejects prints a message to standard error and exits with
status 1.

## What it does not do

The Hash Code solutions produce a submission with simple fixed rules; the
package does not simulate the traffic or pizza deliveries and does not
compute a score.

## Running the tests

```
pip install .[test]
pytest
```