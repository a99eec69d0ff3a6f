"""
Exceptions raised while building a synthetic ULF solar wind file.

Everything derives from ULFError so a driver can catch the whole family,
while the mixins (ValueError, OSError, ...) keep the usual except clauses
working.
"""

class ULFError(Exception):
    """Base class for ulfpy errors"""

class ULFConfigError(ULFError, ValueError):
    """
    A run parameter violates its constraint.
    param holds the offending parameter name.
    """
    def __init__(self, param, msg):
        self.param = param
        ULFError.__init__(self, "Bad value for '%s': %s"%(param,msg))

class ULFNumericalError(ULFError, ArithmeticError):
    """Non-finite values showed up while deriving the plasma state"""

class ULFFormatError(ULFError, ValueError):
    """A value does not fit (or cannot be read back from) its fixed-width column"""

class ULFWriteError(ULFError, OSError):
    """The IMF file could not be created or written"""
