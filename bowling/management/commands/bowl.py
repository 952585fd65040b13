"""Plays a game of ten-pin bowling on the console."""
import logging
import sys

from django.conf import settings
from django.core.management.base import BaseCommand
from rest_framework.renderers import JSONRenderer

from bowling import exceptions
from bowling import scoreboard
from bowling import serializers
from bowling import services
from bowling import models as game_models


INSTRUCTIONS = (
    "Type 'q' to quit the game.\n"
    "Type 'r' to reset the game.\n"
    "Type a number 0-9 to bowl. x for strike, / for spare.")


def _read_tokens(stdin):
    for line in stdin:
        for token in line.split():
            yield token


class Command(BaseCommand):
    help = ('Scores a game of ten-pin bowling. Without options, rolls are '
            'read from standard input one token at a time.')
    requires_system_checks = []
    stealth_options = ('stdin',)

    def add_arguments(self, parser):
        parser.add_argument(
            '--rolls', nargs='+', metavar='TOKEN',
            help='Play the given tokens (0-10, x or /) and print the result.')
        parser.add_argument(
            '--example', action='store_true',
            help='Print the example game and exit.')
        parser.add_argument(
            '--json', action='store_true', dest='as_json',
            help='Print the game as JSON instead of a scoreboard.')
        parser.add_argument(
            '--no-example', action='store_false', dest='show_example',
            default=None,
            help='Do not print the example game before playing.')

    def handle(self, *args, **options):
        if options['example']:
            result = game_models.PlayResult(services.run_example_game())
            self.write_result(result, options['as_json'])
            return
        if options['rolls'] is not None:
            result = services.play_rolls(options['rolls'])
            self.write_result(result, options['as_json'])
            return

        show_example = options['show_example']
        if show_example is None:
            show_example = settings.BOWLING_SHOW_EXAMPLE_GAME
        self.play_interactive(options.get('stdin', sys.stdin), show_example)

    def write_result(self, result, as_json):
        if as_json:
            data = serializers.PlayResultSerializer(result).data
            self.stdout.write(JSONRenderer().render(
                data, renderer_context={'indent': 2}).decode('utf-8'))
            return
        self.stdout.write(scoreboard.format_score(result.game))
        for error in result.errors:
            self.stdout.write(error.error_message)
        self.stdout.write('Score: {}'.format(result.game.get_score()))

    def play_interactive(self, stdin, show_example):
        if show_example:
            self.stdout.write('=== Example game ===')
            self.stdout.write(
                scoreboard.format_score(services.run_example_game()))
        self.stdout.write('=== Main game ===')
        self.stdout.write(INSTRUCTIONS)

        tokens = _read_tokens(stdin)
        game = services.new_game()
        while True:
            self.stdout.write('\n' + scoreboard.format_score(game))
            if game.is_game_complete():
                self.stdout.write(
                    '\n=== Game complete. Starting a new one. ===')
                game = services.new_game()
                continue

            token = next(tokens, None)
            if token is None:
                break
            try:
                action, pin_count = services.parse_token(token)
                if action == services.ACTION_QUIT:
                    break
                if action == services.ACTION_RESET:
                    game = services.new_game()
                    continue
                services.play(game, action, pin_count)
            except exceptions.ScoringException as e:
                logging.info('Rejected token \'{}\': {}'.format(token, e))
                self.stdout.write(str(e))

        self.stdout.write('\n' + scoreboard.format_score(game))
