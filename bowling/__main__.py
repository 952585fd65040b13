"""Runs the bowling scorer: ``python -m bowling [--rolls TOKEN ...]``."""
import os
import sys

from django.core import management


def main(argv=None):
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'bowling.settings')
    argv = sys.argv[1:] if argv is None else argv
    management.execute_from_command_line(['bowling', 'bowl'] + list(argv))


if __name__ == '__main__':
    main()
