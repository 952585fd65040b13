"""Module that encapsulates all service functions.

The services sit between the scoring engine and its callers: they translate
input tokens into rolls and report rejected rolls as error records instead of
exceptions.
"""
import logging
import re

from bowling import exceptions
from bowling import models as game_models


ACTION_QUIT = 'quit'
ACTION_RESET = 'reset'
ACTION_STRIKE = 'strike'
ACTION_SPARE = 'spare'
ACTION_ROLL = 'roll'

QUIT_TOKENS = frozenset(['', 'q', 'quit', 'exit', 'stop'])
RESET_TOKENS = frozenset(['r', 'reset', 'restart'])
STRIKE_TOKEN = 'x'
SPARE_TOKEN = '/'

EXAMPLE_GAME = ('8', '/', '5', '4', '9', '0', 'x', 'x', '5', '/', '5', '3',
                '6', '3', '9', '/', '9', '/', 'x')

_PIN_COUNT_PATTERN = re.compile(r'^(\d+)')

_ERROR_CODES = (
    (exceptions.GameCompleteException, 409),
    (exceptions.ScoringException, 400),
)


def new_game():
    """Starts a new game."""
    logging.info('Starting a new game.')
    return game_models.Game()


def parse_token(token):
    """Parses a single input token.

    The acceptable tokens are given below (case-insensitive):

    1. '', q, quit, exit, stop: stop playing

    2. r, reset, restart: start a new game

    3. x: strike

    4. /: spare

    5. anything starting with a digit: the pins knocked down, e.g. '7'

    Returns:
        a tuple of the action and the pin count; the pin count is None for
        every action except a roll

    Raises:
        InvalidInputException if the token maps to no action.
    """
    normalized = (token or '').strip().lower()
    if normalized in QUIT_TOKENS:
        return ACTION_QUIT, None
    if normalized in RESET_TOKENS:
        return ACTION_RESET, None
    if normalized == STRIKE_TOKEN:
        return ACTION_STRIKE, None
    if normalized == SPARE_TOKEN:
        return ACTION_SPARE, None
    match = _PIN_COUNT_PATTERN.match(normalized)
    if match:
        return ACTION_ROLL, int(match.group(1))
    raise exceptions.InvalidInputException(token)


def play(game, action, pin_count=None):
    """Applies a roll action to the game.

    Raises:
        ScoringException if the game rejects the roll.
    """
    if action == ACTION_STRIKE:
        game.roll_strike()
    elif action == ACTION_SPARE:
        game.roll_spare()
    elif action == ACTION_ROLL:
        game.roll(pin_count)
    else:
        raise exceptions.InvalidInputException(action)
    if game.is_game_complete():
        logging.info('Game complete with a score of {}.'.format(
            game.get_score()))


def to_error(exception):
    """Converts a scoring exception into an error record."""
    error_code = next(
        code for exception_class, code in _ERROR_CODES
        if isinstance(exception, exception_class))
    return game_models.Error(
        error_code=error_code, error_message=str(exception))


def play_rolls(tokens, game=None):
    """Plays a sequence of input tokens.

    Rejected tokens are recorded as errors and play carries on with the next
    token. A reset token starts a new game and a quit token stops playing.

    Returns:
        a PlayResult with the final game and the errors, in token order.
    """
    result = game_models.PlayResult(game)
    for token in tokens:
        try:
            action, pin_count = parse_token(token)
            if action == ACTION_QUIT:
                break
            if action == ACTION_RESET:
                result.game = new_game()
                continue
            play(result.game, action, pin_count)
        except exceptions.ScoringException as e:
            logging.error('Rejected token \'{}\' in round {}: {}'.format(
                token, result.game.get_current_round_index() + 1, e))
            result.add_error(to_error(e))
    return result


def run_example_game():
    """Plays the example game: a mix of open frames, spares and strikes."""
    result = play_rolls(EXAMPLE_GAME, game_models.Game())
    if result.errors:
        logging.error('Example game rejected rolls: {}'.format(result.errors))
    return result.game
