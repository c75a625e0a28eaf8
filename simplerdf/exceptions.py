''' Put all exceptions here. '''

class SimpleRdfError(RuntimeError):
    '''
    Base class for the errors raised by simplerdf.

    Errors are raised synchronously when a term is constructed and carry the
    offending value.
    '''
    def __init__(self, value, msg=None):
        self.value = value
        self.msg = msg


    def __str__(self):
        return self.msg or 'Invalid value: {!r}'.format(self.value)



class InvalidArgumentError(SimpleRdfError, ValueError):
    '''
    Raised when a term constructor receives a malformed argument.

    This includes empty or disallowed blank node names, malformed language
    tags and datatypes that cannot be used in a literal.
    '''
    def __str__(self):
        return self.msg or 'Invalid argument: {!r}'.format(self.value)



class InvalidTermError(InvalidArgumentError):
    '''
    Raised when an IRI string is not a valid IRI reference.

    Relative IRI references raise this error as well if the factory is
    configured not to accept them. Callers that need to know whether relative
    IRIs are supported can detect it by trying to create one.
    '''
    def __str__(self):
        return self.msg or '{!r} is not a valid IRI.'.format(self.value)
