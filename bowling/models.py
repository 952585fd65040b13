"""Scoring engine for a single game of ten-pin bowling."""

from bowling import exceptions
from bowling import validators

import copy


FINAL_FRAME = 10
FIRST_BONUS_FRAME = FINAL_FRAME + 1
SECOND_BONUS_FRAME = FINAL_FRAME + 2
MAX_FRAMES = FINAL_FRAME + 2
NUM_PINS = validators.NUM_PINS

SPARE_BONUS_ROLLS = 1
STRIKE_BONUS_ROLLS = 2


class Frame:
    """Pins and score of a single frame.

    Frames 11 and 12 only hold the bonus rolls earned by a strike or a spare
    in the last frame.

    Attributes:
        pins_on_first_roll: pins knocked down by the first roll, if played
        pins_on_second_roll: pins knocked down by the second roll, if played
        current_score: score of this frame alone, including bonus pins
        total_score: cumulative score up to this frame; 0 until resolved
        is_strike: all pins knocked down on the first roll
        is_spare: all pins knocked down across both rolls
        bonus_rolls: number of future rolls still owed to this frame
    """

    def __init__(self):
        self.pins_on_first_roll = None
        self.pins_on_second_roll = None
        self.current_score = 0
        self.total_score = 0
        self.is_strike = False
        self.is_spare = False
        self.bonus_rolls = 0

    def __eq__(self, other):
        return self.__dict__ == other.__dict__

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class Game:
    """Tracks the frames and the running score of one bowling game."""

    def __init__(self):
        self.current_round = 0
        self.frames = [Frame() for _ in range(MAX_FRAMES)]

    def check_roll(self, pin_count, round_index):
        """Returns whether the roll is possible in the given round."""
        first = self.frames[round_index].pins_on_first_roll
        if first is None:
            return pin_count <= NUM_PINS
        return first + pin_count <= NUM_PINS

    def get_current_round_index(self):
        return self.current_round

    def get_frame(self, index):
        """Returns a copy of the frame at the given index."""
        return copy.copy(self.frames[index])

    def scoring_frames(self):
        """Returns copies of the ten scoring frames."""
        return [self.get_frame(i) for i in range(FINAL_FRAME)]

    def bonus_pins(self):
        """Pins of the first bonus roll after the last frame, if played."""
        return self.frames[FIRST_BONUS_FRAME - 1].pins_on_first_roll

    def get_score(self):
        """Returns the current total score.

        The latest resolved frame holds the running total. Before any frame
        is resolved, the pins of the opening frame are reported instead.
        """
        for frame in reversed(self.frames):
            if frame.total_score > 0:
                return frame.total_score
        return self.frames[0].current_score

    def is_game_complete(self):
        if self.current_round <= FINAL_FRAME - 1:
            return False
        if self.current_round == FIRST_BONUS_FRAME - 1:
            return (not self._is_spare(FINAL_FRAME - 1) and
                    not self._is_strike(FINAL_FRAME - 1))
        if self.current_round == SECOND_BONUS_FRAME - 1:
            return not (self._is_strike(FINAL_FRAME - 1) and
                        self.frames[FINAL_FRAME - 1].bonus_rolls > 0)
        return True

    def roll(self, pin_count):
        """Records the pins knocked down by the latest roll.

        The pins are credited to the current frame and to up to two earlier
        frames still waiting for strike or spare bonus pins. A frame's total
        is resolved once it is owed no more bonus rolls.

        Args:
            pin_count: integer; pins knocked down

        Raises:
            GameCompleteException: the game has already finished
            InvalidRollException: the pin count is out of range or more than
                the pins left standing
        """
        if self.is_game_complete():
            raise exceptions.GameCompleteException()
        validators.validate_pin_count(pin_count)
        if not self.check_roll(pin_count, self.current_round):
            raise exceptions.InvalidRollException(pin_count)

        round_index = self.current_round
        frame = self.frames[round_index]

        if round_index <= FINAL_FRAME - 1:
            frame.current_score += pin_count

        # Bonus pins for the frame two rounds back, e.g. a strike followed by
        # another strike.
        if round_index >= 2 and self.frames[round_index - 2].bonus_rolls > 0:
            prior_to_previous = self.frames[round_index - 2]
            prior_to_previous.current_score += pin_count
            prior_to_previous.bonus_rolls -= 1
            if prior_to_previous.bonus_rolls == 0:
                base = self._total_score_of(round_index - 3)
                prior_to_previous.total_score = (
                    base + prior_to_previous.current_score)

        # Bonus pins for the previous frame.
        if round_index >= 1 and self.frames[round_index - 1].bonus_rolls > 0:
            previous = self.frames[round_index - 1]
            previous.current_score += pin_count
            previous.bonus_rolls -= 1
            if previous.bonus_rolls == 0:
                base = self._total_score_of(round_index - 2)
                previous.total_score = base + previous.current_score

        if frame.pins_on_first_roll is None:
            frame.pins_on_first_roll = pin_count
            if self._is_strike(round_index):
                frame.bonus_rolls = STRIKE_BONUS_ROLLS
                frame.is_strike = True
                self.current_round += 1
                return
            # A strike or a spare in the last frame leaves the first bonus
            # frame with a single roll.
            if (round_index == FIRST_BONUS_FRAME - 1 and
                    self._is_spare(FINAL_FRAME - 1)):
                self.current_round += 1
                return
            # The last bonus roll after two strikes.
            if (round_index == SECOND_BONUS_FRAME - 1 and
                    self._is_strike(FINAL_FRAME - 1) and
                    self._is_strike(FIRST_BONUS_FRAME - 1)):
                self.current_round += 1
        else:
            frame.pins_on_second_roll = pin_count
            if self._is_spare(round_index):
                frame.bonus_rolls = SPARE_BONUS_ROLLS
                frame.is_spare = True
            else:
                base = self._total_score_of(round_index - 1)
                frame.total_score = base + frame.current_score
            self.current_round += 1

    def roll_spare(self):
        """Knocks down the pins left standing after the first roll."""
        if self.is_game_complete():
            raise exceptions.GameCompleteException()
        first = self.frames[self.current_round].pins_on_first_roll
        if first is None:
            raise exceptions.InvalidSpareStateException()
        self.roll(NUM_PINS - first)

    def roll_strike(self):
        self.roll(NUM_PINS)

    def _total_score_of(self, round_index):
        """Cumulative score up to the given round; 0 before the first one."""
        return self.frames[round_index].total_score if round_index >= 0 else 0

    def _is_spare(self, round_index):
        frame = self.frames[round_index]
        return ((frame.pins_on_first_roll or 0) +
                (frame.pins_on_second_roll or 0)) == NUM_PINS

    def _is_strike(self, round_index):
        return self.frames[round_index].pins_on_first_roll == NUM_PINS

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class Error:
    """
    An instance of this class encapsulates the error code and the message to be
    returned.

    Attributes:
        error_code: HTTP-style status code classifying the error
        error_message: error message that represents the error
    """
    def __init__(self, error_code, error_message):
        self.error_code = error_code
        self.error_message = error_message

    def __eq__(self, other):
        return (self.error_code == other.error_code and
                self.error_message == other.error_message)

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class ErrorModel:
    """Mixin for objects that carry a list of errors."""

    def add_error(self, error_object):
        """Appends the error to the list of errors."""
        self.errors.append(error_object)


class PlayResult(ErrorModel):
    """The game after a batch of input tokens, with the rejected tokens."""

    def __init__(self, game=None):
        self.game = game if game is not None else Game()
        self.errors = []

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)
