"""
error kinds raised by derived operations.

every error subclasses both EnumerableError and the builtin exception a caller
would naturally catch (ValueError, IndexError, ...), so `except ValueError`
keeps working for code that does not know about eachy.
"""


class EnumerableError(Exception):
    """base class for every error raised by eachy"""
    default_message = "enumerable error"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class EmptyError(EnumerableError, ValueError):
    """the source had no elements and the operation has no sensible result"""
    default_message = "empty enumerable"


class NotFoundError(EnumerableError, LookupError):
    """no element satisfied the condition"""
    default_message = "element not found"


class ArgumentError(EnumerableError, ValueError):
    """invalid call argument, raised before any traversal starts"""
    default_message = "invalid argument"


class ComparisonError(EnumerableError, TypeError):
    """two values could not be ordered"""
    default_message = "comparison failed"


class IdentityError(EnumerableError, TypeError):
    """sum()/product() could not infer a seed for the value type"""
    default_message = "cannot infer identity element"


class ZipIndexError(EnumerableError, IndexError):
    """a secondary source of zip() ran out before the primary"""
    default_message = "zip source exhausted"


class SampleIndexError(EnumerableError, IndexError):
    """sample() was asked for an element of an empty source"""
    default_message = "can't sample empty collection"
