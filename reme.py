# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.1'
#       jupytext_version: 0.8.3
#   kernelspec:
#     display_name: Python 3
#     language: python
#     name: python3
#   language_info:
#     codemirror_mode:
#       name: ipython
#       version: 3
#     file_extension: .py
#     mimetype: text/x-python
#     name: python
#     nbconvert_exporter: python
#     pygments_lexer: ipython3
#     version: 3.11.4
# ---

# %% [markdown]
# # 1. Lists in Python

# %% [markdown]
# ## 1.1 Just the cons cell
#
# This notebook builds the one data structure every Scheme starts with: the list made of cons cells. There is no reader and no evaluator here. We only want `cons`, `car`, and `cdr`, plus the handful of things you can compute from them: `length`, `append`, `reverse`, and a way to print the result.
#
# The lists are **persistent**. A cell is never changed after it is made. Building a new list out of an old one shares the old cells instead of copying them, so the same tail can sit at the end of many lists at once. Python's garbage collector takes care of the rest.

# %%
import argparse
import collections
import logging

logger = logging.getLogger(__name__)

# %% [markdown]
# There are exactly three kinds of cell:
#
# * `Empty`: the end of a list. There is only ever one of these, `EmptyList`.
# * `Literal`: an opaque leaf that just holds some text. (Numbers, symbols and booleans would go here one day.)
# * `Cons`: a pair of two cells, `car` and `cdr`.
#
# By convention a *list* is a chain of `Cons` cells leaning to the right, with the element in each `car` and the rest of the list in each `cdr`, ending with `EmptyList`. Nothing enforces that: you can put a `Literal` in the `cdr`, or a whole list in the `car` and get a tree. Everything below still has to give a sensible answer for those shapes.

# %%
class Node(object):
    "Base class of the three kinds of cell"
    __slots__ = ()

    def __repr__(self):
        return display(self)

    def __str__(self):
        return display(self)

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return equal_q(self, other)

    def __hash__(self):
        return node_hash(self)

    def __iter__(self):
        current = self
        while not null_q(current):
            yield car(current)
            current = cdr(current)

    ## The same operations as methods, so they can be chained:
    ## lit("1").cons(EmptyList).append(other).reverse()

    def cons(self, tail):
        return cons(self, tail)

    def head(self):
        return car(self)

    def tail(self):
        return cdr(self)

    def is_empty(self):
        return null_q(self)

    def is_pair(self):
        return pair_q(self)

    def length(self):
        return length(self)

    def append(self, other):
        return append(self, other)

    def reverse(self):
        return reverse(self)

class Empty(Node):
    "The list terminator; there is only one"
    __slots__ = ()
    _it = None

    def __new__(cls):
        if cls._it is None:
            cls._it = object.__new__(cls)
        return cls._it

EmptyList = Empty()

class Literal(Node):
    "An opaque leaf holding a piece of text"
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = str(value)

class Cons(Node):
    "A cell/link used to construct linked-lists (and trees)"
    __slots__ = ("car", "cdr")

    def __init__(self, car, cdr):
        if not isinstance(car, Node) or not isinstance(cdr, Node):
            raise TypeError("cons cells hold list cells, got: %s and %s" %
                            (type(car).__name__, type(cdr).__name__))
        self.car = car
        self.cdr = cdr

# %% [markdown]
# Now the basic functions. The important rule is that `car` and `cdr` never fail. Asking for the `car` or `cdr` of something that is not a pair just gives back the empty list. The algorithms in the next sections depend on that: it is what makes them stop on a malformed list instead of crashing.

# %%
def empty():
    return EmptyList

def literal(text):
    return Literal(text)

def cons(item1, item2):
    return Cons(item1, item2)

## We use "_q" in Python to represent "?" in Scheme.

def null_q(lst):
    return isinstance(lst, Empty)

def pair_q(item):
    return isinstance(item, Cons)

def car(exp):
    if pair_q(exp):
        return exp.car
    return EmptyList

def cdr(exp):
    if pair_q(exp):
        return exp.cdr
    return EmptyList

lit = literal
head = car
tail = cdr
is_empty = null_q
is_pair = pair_q

# %% [markdown]
# Writing `cons(lit("a"), cons(lit("b"), EmptyList))` gets old quickly, so here are a few helpers for making lists. `List` takes cells (anything else is turned into a `Literal`), `lit_list` takes bare text, and `sexp` turns nested Python lists into nested lists of cells:

# %%
def _node(item):
    if isinstance(item, Node):
        return item
    return Literal(item)

def List(*args):
    "Create a linked-list of items"
    retval = EmptyList
    for arg in reversed(args):
        retval = cons(_node(arg), retval)
    return retval

def lit_list(*texts):
    "Create a linked-list of literals"
    return List(*map(literal, texts))

def sexp(item):
    """
    Takes a Python list of items and returns a list of cells.
    Uses Python stack for recursion.
    """
    if isinstance(item, (list, tuple)):
        return List(*map(sexp, item)) # recursion!
    else:
        return _node(item)

# %%
lit_list("this", "is", "a", "list")

# %%
sexp(["a", ["b", "c"], "d"])

# %% [markdown]
# Notice that the nested list prints as `('a' 'b' 'c' 'd')`. The printer only puts parentheses around the outside, so a list inside a list looks exactly like more elements of the outer list. That is how these lists have always printed, so we leave it that way, but keep it in mind when reading output.

# %% [markdown]
# ## 1.2 The recursive definitions
#
# Here is everything else, written the obvious way, as structural recursion on the `cdr`:

# %%
def length_rec(lst):
    if null_q(lst):
        return 0
    return 1 + length_rec(cdr(lst))

def append_rec(a, b):
    if null_q(a):
        return b
    return cons(car(a), append_rec(cdr(a), b))

def reverse_rec(a):
    if null_q(a):
        return a
    return append_rec(reverse_rec(cdr(a)), cons(car(a), EmptyList))

def display_rec(lst):
    return "(%s)" % bare_display_rec(lst)

def bare_display_rec(lst):
    if pair_q(lst):
        if null_q(lst.cdr):
            sep = ""
        else:
            sep = " "
        return bare_display_rec(lst.car) + sep + bare_display_rec(lst.cdr)
    elif isinstance(lst, Literal):
        return "'%s'" % lst.value
    return ""

# %% [markdown]
# A few things to notice:
#
# 1. `length` counts any cell that is not `Empty`, so a lone `Literal` has length 1. It stops because the `cdr` of anything that is not a pair is `EmptyList`. It never checks whether it is looking at a pair.
# 1. `append` rebuilds the cells of `a` one by one and puts `b` where the final `EmptyList` was. It never walks `b`, and if `a` is empty the answer is `b` itself, not a copy.
# 1. `reverse` appends a one-element list to the end of the reversed tail at every step. That makes it O(n²).

# %%
display_rec(reverse_rec(lit_list("1", "2", "3")))

# %% [markdown]
# ## 1.3 Getting rid of Python's stack
#
# Unfortunately, all of these use Python's stack, and a long enough list will crash it:
#
# ```python
# lst = EmptyList
# for i in range(100000):
#     lst = cons(lit(i), lst)
# length_rec(lst)  ## RecursionError
# ```
#
# Instead, we keep our own stack of pending work and loop over it. The stack is a `deque` that pushes and pops at the same end:

# %%
class Stack(collections.deque):
    def push(self, x):
        self.appendleft(x)
    def pop(self):
        return self.popleft()

# %% [markdown]
# `length` and `reverse` only need a loop. `reverse` keeps an accumulator, so it is O(n) now, and it gives the same cells in the same order as `reverse_rec`. `append` pushes the heads of `a` on the stack and then conses them back onto `b` as it pops them:

# %%
def length(lst):
    count = 0
    while not null_q(lst):
        count += 1
        lst = cdr(lst)
    return count

def append(a, b):
    heads = Stack()
    while not null_q(a):
        heads.push(car(a))
        a = cdr(a)
    retval = b
    while heads:
        retval = cons(heads.pop(), retval)
    return retval

def reverse(a):
    if null_q(a):
        return a
    retval = EmptyList
    while not null_q(a):
        retval = cons(car(a), retval)
        a = cdr(a)
    return retval

# %% [markdown]
# The printer, equality and hashing all have to look inside the `car` as well, so they keep a stack of cells still to visit. The printer also pushes the separating space as a work item:

# %%
def display(lst):
    "Render a list as ('a' 'b' ...)"
    parts = []
    stack = Stack()
    stack.push(lst)
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif pair_q(item):
            stack.push(item.cdr)
            if not null_q(item.cdr):
                stack.push(" ")
            stack.push(item.car)
        elif isinstance(item, Literal):
            parts.append("'%s'" % item.value)
    return "(%s)" % "".join(parts)

def equal_q(a, b):
    "Structural equality: same shape, same text"
    stack = Stack()
    stack.push((a, b))
    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if pair_q(a) and pair_q(b):
            stack.push((a.cdr, b.cdr))
            stack.push((a.car, b.car))
        elif isinstance(a, Literal) and isinstance(b, Literal):
            if a.value != b.value:
                return False
        elif not (null_q(a) and null_q(b)):
            return False
    return True

def node_hash(lst):
    retval = hash("()")
    stack = Stack()
    stack.push(lst)
    while stack:
        item = stack.pop()
        if pair_q(item):
            retval = hash((retval, "cons"))
            stack.push(item.cdr)
            stack.push(item.car)
        elif isinstance(item, Literal):
            retval = hash((retval, "lit", item.value))
        else:
            retval = hash((retval, "empty"))
    return retval

# %% [markdown]
# Now, we can handle much longer lists than Python's stack would allow:

# %%
lst = EmptyList
for i in range(10000):
    lst = cons(lit(i), lst)
length(reverse(lst))

# %% [markdown]
# ## 1.4 Putting it together

# %%
def main(argv=None):
    parser = argparse.ArgumentParser(description="Build and print a few lists.")
    parser.add_argument("--debug", action="store_true",
                        help="log each list as it is built")
    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    one = cons(lit("1"), EmptyList)
    numbers = lit_list("1", "2", "3")
    sentence = lit("this").cons(lit("is").cons(lit("a").cons(lit("list").cons(EmptyList))))
    examples = [
        one,
        cons(lit("2"), one),
        sentence,
        append(EmptyList, one),
        reverse(numbers),
        cdr(numbers),
    ]
    for lst in examples:
        logger.debug("length %d: %s", length(lst), display(lst))
        print(lst)

if __name__ == "__main__":
    main()
