import os
import sys

from . import core


# The Qt view replaces these methods with GUI implementations via install().
class Interaction:
    """Reports errors and messages to the user"""

    VERBOSE = bool(os.getenv('FOLDIFF_VERBOSE'))

    @staticmethod
    def information(title, message=None, details=None, informative_text=None):
        if message is None:
            message = title
        scope = {}
        scope['title'] = title
        scope['title_dashes'] = '-' * len(title)
        scope['message'] = message
        scope['details'] = ('\n' + details) if details else ''
        scope['informative_text'] = (
            ('\n' + informative_text) if informative_text else ''
        )
        sys.stdout.write(
            """
%(title)s
%(title_dashes)s
%(message)s%(informative_text)s%(details)s\n"""
            % scope
        )
        sys.stdout.flush()

    @classmethod
    def critical(cls, title, message=None, details=None):
        """Show a warning with the provided title and message."""
        cls.information(title, message=message, details=details)

    @classmethod
    def log_status(cls, status, out, err=None):
        msg = ((out + '\n') if out else '') + ((err + '\n') if err else '')
        cls.log(msg)
        cls.log('exit status %s' % status)

    @classmethod
    def log(cls, message):
        if cls.VERBOSE:
            core.print_stdout(message)
