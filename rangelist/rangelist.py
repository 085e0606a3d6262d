from sortedcontainers import SortedDict

from .domain import Domain, IntegerDomain
from .errors import InvalidRangeError
from .key import RangeKey

class RangeList:
    """Non-overlapping closed ranges, each bound to a value.

    Adding a range overwrites whatever it overlaps: ranges it fully covers
    are dropped, ranges it partially covers are trimmed, and a range that
    strictly contains it is split in two around it. Adjacent ranges are
    never merged, even when their values are equal.

    Not thread safe. Wrap add/remove in an external lock if shared.
    """
    def __init__(self, domain: Domain = None, strict_remove=False):
        self.domain = domain if domain is not None else IntegerDomain()
        # Legacy behaviour: remove() leaves a range that exactly matches it
        self.strict_remove = strict_remove
        self._data = SortedDict()

    def _check(self, start, end):
        if end < start:
            raise InvalidRangeError(start, end)

    def _split(self, start, end, inclusive):
        """Return (keys to delete, fragments to insert) to clear [start, end].

        Works on a snapshot of the overlapping keys and does not touch the map, so any
        error from the domain arithmetic leaves the map unchanged.
        """
        target = RangeKey(start, end)
        keys = [k for k in self._data.keys() if k.overlaps(target)]

        # start falls inside k
        start_fits = [k for k in keys if k.start < start and k.end >= start]
        # end falls inside k
        end_fits = [k for k in keys if k.end > end and k.start <= end]

        if inclusive:
            doomed = {k for k in keys if k.start >= start and k.end <= end}
        else:
            doomed = {k for k in keys if k.start > start and k.end < end}

        fragments = []
        for k in start_fits:
            if k.start < start:
                fragments.append((RangeKey(k.start, self.domain.predecessor(start)), self._data[k]))
            doomed.add(k)

        for k in end_fits:
            if k.end > end:
                fragments.append((RangeKey(self.domain.successor(end), k.end), self._data[k]))
            doomed.add(k)

        return doomed, fragments

    def _apply(self, doomed, fragments):
        for k in doomed:
            del self._data[k]
        for k, value in fragments:
            self._data[k] = value

    def add(self, start, end, value):
        """Bind [start, end] to value, overwriting any overlapped coverage"""
        self._check(start, end)
        doomed, fragments = self._split(start, end, inclusive=True)
        self._apply(doomed, fragments)
        self._data[RangeKey(start, end)] = value

    def remove(self, start, end):
        """Clear coverage of [start, end], leaving a gap"""
        self._check(start, end)
        doomed, fragments = self._split(start, end, inclusive=not self.strict_remove)
        self._apply(doomed, fragments)

    def remove_key(self, key: RangeKey):
        self.remove(key.start, key.end)

    def clear(self):
        self._data.clear()

    def find(self, point):
        """Return (start, end, value) of the range covering point, or None"""
        # A range starting at point sorts after (point, point), one starting
        # before it sorts before.
        idx = self._data.bisect_right(RangeKey(point, point))
        for i in (idx, idx - 1):
            if 0 <= i < len(self._data):
                key, value = self._data.peekitem(i)
                if point in key:
                    return (key.start, key.end, value)
        return None

    def __getitem__(self, point):
        found = self.find(point)
        if found is None:
            raise KeyError(point)
        return found[2]

    def __contains__(self, point):
        try:
            self[point]
            return True
        except KeyError:
            return False

    def get(self, point, default=None):
        try:
            return self[point]
        except KeyError:
            return default

    def keys(self):
        return iter(self._data.keys())

    def items(self):
        """(RangeKey, value) pairs in ascending order"""
        for key, value in self._data.items():
            yield key, value

    def __iter__(self):
        for key, value in self._data.items():
            yield (key.start, key.end, value)

    def __len__(self):
        return len(self._data)

    def output(self):
        return "".join(f"[{key},{value}]" for key, value in self._data.items())

    def __str__(self):
        return self.output()

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"
