"""Unit tests for the bowl management command."""
import io
import json
from unittest import mock

from django import test
from django.core import management

from bowling import __main__ as bowling_main


def _call_bowl(**options):
    out = io.StringIO()
    management.call_command('bowl', stdout=out, **options)
    return out.getvalue()


class BatchModeTest(test.SimpleTestCase):

    def test_bowl__rolls(self):
        output = _call_bowl(rolls=['8', '/', '5'])
        assert 'Round  1 - [ 8,  /]    Current:  15, Total:  15' in output
        assert output.endswith('Score: 15\n')

    def test_bowl__rolls_with_errors(self):
        output = _call_bowl(rolls=['8', '3', 'abc'])
        assert 'Invalid roll - Pin count: 3\n' in output
        assert 'Invalid input\n' in output
        assert output.endswith('Score: 8\n')

    def test_bowl__rolls_json(self):
        output = _call_bowl(rolls=['x'] * 13, as_json=True)
        data = json.loads(output)
        assert data['game']['score'] == 300
        assert data['game']['is_complete'] is True
        assert data['errors'] == [
            {'error_code': 409, 'error_message': 'Game complete.'}]

    def test_bowl__example(self):
        output = _call_bowl(example=True)
        assert 'Round 10 - [ 9,  /, X] Current:  20, Total: 149' in output
        assert output.endswith('Score: 149\n')

    def test_bowl__example_json(self):
        data = json.loads(_call_bowl(example=True, as_json=True))
        assert data['game']['score'] == 149
        assert 'errors' not in data


class InteractiveModeTest(test.SimpleTestCase):

    def test_bowl__quit(self):
        output = _call_bowl(stdin=io.StringIO('x\n3 4\nq\n5\n'),
                            show_example=False)
        assert '=== Example game ===' not in output
        assert "Type 'q' to quit the game." in output
        assert output.rstrip().endswith(
            'Round 10 - [ 0,  0, 0] Current:   0, Total:   0')
        assert 'Round  2 - [ 3,  4]    Current:   7, Total:  24' in output
        assert 'Round  3 - [ 5,' not in output

    def test_bowl__end_of_input(self):
        output = _call_bowl(stdin=io.StringIO('7'), show_example=False)
        assert output.count('Round  1 - [ 7,  0]') == 2

    def test_bowl__rejected_tokens(self):
        output = _call_bowl(stdin=io.StringIO('/ 7 5 hello\n'),
                            show_example=False)
        assert 'Invalid spare roll\n' in output
        assert 'Invalid roll - Pin count: 5\n' in output
        assert 'Invalid input\n' in output

    def test_bowl__reset(self):
        output = _call_bowl(stdin=io.StringIO('9 r\n'), show_example=False)
        boards = output.split('Round  1 - ')
        assert boards[-1].startswith('[ 0,  0]')

    def test_bowl__game_complete_starts_new_game(self):
        output = _call_bowl(stdin=io.StringIO('x ' * 12), show_example=False)
        assert '=== Game complete. Starting a new one. ===' in output
        assert 'Total: 300' in output

    def test_bowl__show_example(self):
        output = _call_bowl(stdin=io.StringIO(''), show_example=True)
        assert output.startswith('=== Example game ===\n')
        assert 'Total: 149' in output

    @test.override_settings(BOWLING_SHOW_EXAMPLE_GAME=False)
    def test_bowl__example_disabled_by_settings(self):
        output = _call_bowl(stdin=io.StringIO('q'))
        assert output.startswith('=== Main game ===\n')


class MainTest(test.SimpleTestCase):

    def test_main(self):
        with mock.patch(
                'django.core.management.execute_from_command_line') as execute:
            bowling_main.main(['--rolls', 'x', '5'])
        execute.assert_called_once_with(
            ['bowling', 'bowl', '--rolls', 'x', '5'])
