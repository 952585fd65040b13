"""Encapsulates all exceptions raised by the bowling game."""


class ScoringException(Exception):
    """Base class for all scoring exceptions."""


class GameCompleteException(ScoringException):
    def __init__(self):
        super(GameCompleteException, self).__init__('Game complete.')


class InvalidRollException(ScoringException):
    """Raised when the pins knocked down are out of range or more than the
    pins left standing in the frame."""
    def __init__(self, pin_count):
        self.pin_count = pin_count
        super(InvalidRollException, self).__init__(
            'Invalid roll - Pin count: {}'.format(pin_count))


class InvalidSpareStateException(ScoringException):
    """A spare can only be rolled once the first roll of the frame exists."""
    def __init__(self):
        super(InvalidSpareStateException, self).__init__(
            'Invalid spare roll')


class InvalidInputException(ScoringException):
    def __init__(self, token):
        self.token = token
        super(InvalidInputException, self).__init__('Invalid input')
