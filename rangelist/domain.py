from abc import ABC, abstractmethod
from datetime import date, timedelta

from .errors import DomainBoundaryError, NoKeyParserError

class Domain(ABC):
    """Discrete, totally ordered key type.

    A range list only needs to step one unit forward or backward from a
    boundary when it trims an existing range. That only happens when an
    existing range extends past the boundary, so a bounded domain never
    raises from RangeList.add/remove as long as stored ranges are in bounds.
    """
    minimum = None
    maximum = None

    @abstractmethod
    def step_up(self, value):
        pass

    @abstractmethod
    def step_down(self, value):
        pass

    def successor(self, value):
        if self.maximum is not None and value >= self.maximum:
            raise DomainBoundaryError(f"No successor for {value!r} (maximum {self.maximum!r})")
        return self.step_up(value)

    def predecessor(self, value):
        if self.minimum is not None and value <= self.minimum:
            raise DomainBoundaryError(f"No predecessor for {value!r} (minimum {self.minimum!r})")
        return self.step_down(value)

    def parse(self, text: str):
        raise NoKeyParserError(f"{type(self).__name__} cannot parse keys")

    def __repr__(self):
        return f"{type(self).__name__}(minimum={self.minimum!r}, maximum={self.maximum!r})"


class IntegerDomain(Domain):
    def __init__(self, minimum=None, maximum=None):
        self.minimum = minimum
        self.maximum = maximum

    def step_up(self, value):
        return value + 1

    def step_down(self, value):
        return value - 1

    def parse(self, text: str):
        return int(text, 0)


class StepDomain(Domain):
    """Any type supporting + and - with a fixed step, e.g. datetimes with a timedelta tick"""
    def __init__(self, step, minimum=None, maximum=None):
        self.step = step
        self.minimum = minimum
        self.maximum = maximum

    def step_up(self, value):
        return value + self.step

    def step_down(self, value):
        return value - self.step

    def __repr__(self):
        return f"{type(self).__name__}({self.step!r}, minimum={self.minimum!r}, maximum={self.maximum!r})"


class DateDomain(StepDomain):
    def __init__(self):
        super().__init__(timedelta(days=1), date.min, date.max)

    def parse(self, text: str):
        return date.fromisoformat(text)

    def __repr__(self):
        return f"{type(self).__name__}()"


DOMAINS = {
    "int": IntegerDomain,
    "date": DateDomain,
}
