# stackwork

A collection of small, dependency-free algorithms built around stacks and
monotonic stacks. It covers bracket matching, expression evaluation, path and
string processing, histogram areas, interval merging and collision
simulations. It is a library only: there is no command-line tool.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install .[test]
pytest
```

## Modules

- `stackwork.parentheses`: `is_valid_parentheses`, `longest_valid_parentheses`,
  `min_add_to_make_valid`, `min_remove_to_make_valid`, `is_valid_abc`
- `stackwork.text`: `simplify_path`, `decode_string`, `backspace_compare`,
  `reverse_string` (reverses a mutable sequence in place and returns it)
- `stackwork.expressions`: `eval_rpn` (division truncates toward zero),
  `calculate` (integers, `+`, `-`, parentheses and spaces)
- `stackwork.sequences`: `validate_stack_sequences`, `build_array`
- `stackwork.histogram`: `largest_rectangle_area`, `maximal_rectangle`,
  `sum_subarray_mins` (result modulo 1e9+7), `daily_temperatures`
- `stackwork.intervals`: `merge_intervals`, `check_valid_cuts`
- `stackwork.collisions`: `asteroid_collision`, `car_fleet`,
  `get_collision_times` (returns `-1.0` for a car that never collides)
- `stackwork.browser`: `BrowserHistory`
- `stackwork.linked_stack`: `LinkedStack`, `StackUnderflowError`

## Examples

```python
from stackwork.parentheses import is_valid_parentheses, longest_valid_parentheses
from stackwork.expressions import eval_rpn, calculate
from stackwork.text import simplify_path, decode_string
from stackwork.histogram import largest_rectangle_area
from stackwork.intervals import merge_intervals

is_valid_parentheses("()[]{}")          # True
longest_valid_parentheses(")()())")     # 4
eval_rpn(["2", "1", "+", "3", "*"])     # 9
calculate("(1+(4+5+2)-3)+(6+8)")        # 23
simplify_path("/a/./b/../../c/")        # "/c"
decode_string("3[a2[c]]")               # "accaccacc"
largest_rectangle_area([2, 1, 5, 6, 2, 3])  # 10
merge_intervals([[1, 3], [2, 6], [8, 10]])  # [[1, 6], [8, 10]]
```

A browser history that keeps back and forward stacks:

```python
from stackwork.browser import BrowserHistory

history = BrowserHistory("home.example.com")
history.visit("a.example.com")
history.visit("b.example.com")
history.back(1)      # "a.example.com"
history.forward(5)   # "b.example.com"
```

`back` and `forward` stop at the ends of the history and raise `ValueError`
for a negative step count.

A linked-list stack that raises on underflow:

```python
from stackwork.linked_stack import LinkedStack, StackUnderflowError

stack = LinkedStack()
stack.push(2)
stack.push(3)
stack.peek()   # 3
len(stack)     # 2
list(stack)    # [3, 2], top to bottom
stack.pop()    # 3
```

`pop` and `peek` on an empty stack raise `StackUnderflowError`, a subclass of
`IndexError`.

## Errors

- `eval_rpn` raises `ValueError` for an operator without two operands, a
  token that is not an integer, or an empty expression, and
  `ZeroDivisionError` on division by zero.
- `calculate` raises `ValueError` on an unexpected character or an unmatched
  `)`.
- `decode_string` raises `ValueError` on a `]` that closes no group.
- `car_fleet` raises `ValueError` when `position` and `speed` differ in
  length.