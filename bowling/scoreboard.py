"""Renders a game as a console scoreboard."""

from bowling import models as game_models

MARKER_WIDTH = 48


def _format_marks(frame):
    if frame.is_strike:
        return ' X,  _'
    second = (frame.pins_on_second_roll or 0) if not frame.is_spare else '/'
    return '{:>2}, {:>2}'.format(frame.pins_on_first_roll or 0, second)


def _format_bonus_mark(pins):
    pins = pins or 0
    return 'X' if pins == game_models.NUM_PINS else str(pins)


def format_score(game):
    """Formats the ten scoring frames of the game, one line per frame.

    The frame receiving rolls is wrapped in marker lines. The last frame also
    shows the first bonus roll.
    """
    current_index = game.get_current_round_index()
    lines = []
    for index, frame in enumerate(game.scoring_frames()):
        if index == current_index:
            lines.append('v' * MARKER_WIDTH)
        line = 'Round {:>2} - [{}'.format(index + 1, _format_marks(frame))
        if index == game_models.FINAL_FRAME - 1:
            line += ', {}] '.format(_format_bonus_mark(game.bonus_pins()))
        else:
            line += '] ' + ' ' * 3
        line += 'Current: {:>3}, Total: {:>3}'.format(
            frame.current_score, frame.total_score)
        lines.append(line)
        if index == current_index:
            lines.append('^' * MARKER_WIDTH)
    return '\n'.join(lines) + '\n'
