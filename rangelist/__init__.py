from .domain import DOMAINS, DateDomain, Domain, IntegerDomain, StepDomain
from .errors import DomainBoundaryError, InvalidRangeError, NoKeyParserError, RangeListError
from .key import RangeKey
from .rangelist import RangeList
