"""Unit tests for the console scoreboard."""

from django import test

from bowling import models as game_models
from bowling import scoreboard
from bowling import services


class FormatScoreTest(test.SimpleTestCase):

    def test_format_score__new_game(self):
        lines = scoreboard.format_score(game_models.Game()).splitlines()
        assert len(lines) == 12
        assert lines[0] == 'v' * 48
        assert lines[1] == 'Round  1 - [ 0,  0]    Current:   0, Total:   0'
        assert lines[2] == '^' * 48
        assert lines[-1] == 'Round 10 - [ 0,  0, 0] Current:   0, Total:   0'

    def test_format_score__example_game(self):
        expected = '\n'.join([
            'Round  1 - [ 8,  /]    Current:  15, Total:  15',
            'Round  2 - [ 5,  4]    Current:   9, Total:  24',
            'Round  3 - [ 9,  0]    Current:   9, Total:  33',
            'Round  4 - [ X,  _]    Current:  25, Total:  58',
            'Round  5 - [ X,  _]    Current:  20, Total:  78',
            'Round  6 - [ 5,  /]    Current:  15, Total:  93',
            'Round  7 - [ 5,  3]    Current:   8, Total: 101',
            'Round  8 - [ 6,  3]    Current:   9, Total: 110',
            'Round  9 - [ 9,  /]    Current:  19, Total: 129',
            'Round 10 - [ 9,  /, X] Current:  20, Total: 149',
        ]) + '\n'
        assert scoreboard.format_score(services.run_example_game()) == expected

    def test_format_score__marks_active_frame(self):
        game = game_models.Game()
        for pin_count in (10, 7):
            game.roll(pin_count)
        lines = scoreboard.format_score(game).splitlines()
        assert lines[0] == 'Round  1 - [ X,  _]    Current:  17, Total:   0'
        assert lines[1] == 'v' * 48
        assert lines[2] == 'Round  2 - [ 7,  0]    Current:   7, Total:   0'
        assert lines[3] == '^' * 48

    def test_format_score__open_bonus_roll(self):
        game = game_models.Game()
        for pin_count in [0] * 18 + [10, 4, 5]:
            game.roll(pin_count)
        lines = scoreboard.format_score(game).splitlines()
        assert lines[-1] == 'Round 10 - [ X,  _, 4] Current:  19, Total:  19'
