class TermLessonsError(Exception):
    pass


class IOFailure(TermLessonsError):
    """ The terminal, window or input stream failed to read or write. """
    pass


class OutOfRange(TermLessonsError):
    """ A write targeted a cell outside the surface. """
    def __init__(self, position, size):
        super().__init__(f"{position} is outside surface of size {size[0]}x{size[1]}")
        self.position = position
        self.size = size
