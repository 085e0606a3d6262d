class RangeListError(Exception):
    pass

class InvalidRangeError(RangeListError, ValueError):
    """start > end"""
    def __init__(self, start, end):
        super().__init__(f"Invalid range: start {start!r} > end {end!r}")
        self.start = start
        self.end = end

class DomainBoundaryError(RangeListError, OverflowError):
    """Stepping past the edge of a bounded domain"""
    pass

class NoKeyParserError(RangeListError, TypeError):
    """Domain has no text representation for its keys"""
    pass
