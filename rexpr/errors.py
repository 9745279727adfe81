
class RExprError(Exception):
    """ Base class for all rexpr errors"""
    pass

class RExprInvalidId(RExprError, IndexError):
    """ Raised when an id does not name an earlier node in the sequence"""
    pass

class RExprBuilderConsumed(RExprError):
    """ Raised when a builder is used after it has been built"""

class RExprTypeError(RExprError, TypeError):
    """ Raised when an operator, id or symbol name has the wrong type"""
