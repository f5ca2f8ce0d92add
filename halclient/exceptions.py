class HalClientException(Exception):
    pass


class InvalidArgument(HalClientException, ValueError):
    pass


class MissingURITemplateVariables(HalClientException):
    """
    Raised when the URL of a templated :class:`Link` is requested while some of its
    template variables are unbound.
    """

    def __init__(self, link, variables, missing=()):
        self.link = link
        self.variables = list(variables)
        self.missing = list(missing)
        super(MissingURITemplateVariables, self).__init__(
            'Missing URI template variables {} for link {!r}; '
            'expected {}'.format(self.missing, link._key, self.variables))


class InvalidDocument(HalClientException):

    def __init__(self, message, errors=()):
        super(InvalidDocument, self).__init__(message)
        self.errors = list(errors)

    def _format_errors(self):
        for error in self.errors:
            yield {
                'validationOf': {error.validator: error.validator_value},
                'path': list(error.absolute_path),
                'message': error.message
            }

    def as_dict(self):
        return {
            'message': str(self),
            'errors': list(self._format_errors())
        }
