#!/usr/bin/env python
"""Script to run the Django development server for the social service."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Run the Django development server.

    Uses the custom 'runlocal' command, which skips migration checks because
    the users and follows tables are owned elsewhere. Set LOCAL_ADDRPORT to
    override the default bind address.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "social_service.settings")
    argv = [sys.argv[0], "runlocal"]
    addrport = os.getenv("LOCAL_ADDRPORT")
    if addrport:
        argv.append(addrport)
    execute_from_command_line(argv)


if __name__ == "__main__":
    main()
