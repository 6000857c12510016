from django.core.exceptions import ImproperlyConfigured


class OaiPmhRepositoryException(Exception):
    pass


class ConfigurationError(OaiPmhRepositoryException, ImproperlyConfigured):
    pass


class UnknownFormat(OaiPmhRepositoryException):
    def __init__(self, prefix):
        super().__init__('Invalid metadataPrefix: {}'.format(prefix))
        self.prefix = prefix


class MalformedFieldError(OaiPmhRepositoryException):
    """An auxiliary field could not be parsed.

    Formats catch this and omit the one affected output field.
    """
    pass
