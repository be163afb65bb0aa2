__all__ = ["GlickoError", "ConfigurationInvalid", "InvalidArgument", "InvalidState"]


class GlickoError(Exception):
    pass


class ConfigurationInvalid(GlickoError, ValueError):
    '''
    Raised when a GlickoConfig is built from out of range values. No engine
    is created when this is raised.
    '''


class InvalidArgument(GlickoError, ValueError):
    pass


class InvalidState(GlickoError, ValueError):
    '''
    Raised when a rating deviation that is used as a divisor is not strictly
    positive.
    '''
