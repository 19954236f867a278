#!/usr/bin/env python


class UnknownLibraryError(Exception):
    """
    Raised if a library is registered for a format the engine doesn't know
    """
    def __init__(self, name):
        self.msg = f'No template format named {name}.'
        super().__init__(self.msg)


class InvalidSettingsError(Exception):
    """
    Raised if a settings record breaks one of its invariants
    """
    def __init__(self, msg):
        self.msg = msg
        super().__init__(self.msg)


class UnknownOptionWarning(Warning):
    def __init__(self, option):
        self.message = f'{option} is not a known renderer option'

    def __str__(self):
        return repr(self.message)
