import itertools


def constant(value):
    return lambda: value


def cycling(values):
    it = itertools.cycle(values)
    return lambda: next(it)


def counting(n):
    "Source returning 0/n, 1/n, ..., (n-1)/n and then starting over."
    return cycling([i / n for i in range(n)])


def flatten(x):
    if isinstance(x, list):
        return [v for e in x for v in flatten(e)]
    return [x]


def depth(x):
    d = 0
    while isinstance(x, list):
        if len(x) == 0:
            return d + 1
        x = x[0]
        d += 1
    return d
