import copy
import logging

from oaipmh_repository.models import Resource, Value
from oaipmh_repository.signals import values_pre


logger = logging.getLogger(__name__)


class ValueResolver:
    """looks up a resource's values for a term, then lets `values_pre`
    receivers (access control, redaction...) shrink or rewrite them

    lookup and receiver errors are not caught; they abort the current record
    """

    def __init__(self, hide_private: bool = True, prefix: str | None = None):
        self.hide_private = hide_private
        self.prefix = prefix

    def for_prefix(self, prefix: str) -> 'ValueResolver':
        clone = copy.copy(self)
        clone.prefix = prefix
        return clone

    def resolve(self, resource: Resource, term: str, include_all: bool = True) -> list[Value]:
        values = resource.value(term, include_all=True)
        if self.hide_private:
            values = [value for value in values if value.is_public]
        return values if include_all else values[:1]

    def filter(self, resource: Resource, term: str, values: list[Value]) -> list[Value]:
        filtered = list(values)
        responses = values_pre.send(
            sender=type(resource),
            resource=resource,
            term=term,
            prefix=self.prefix,
            values=filtered,
        )
        for receiver, response in responses:
            if response is not None:
                logger.debug('%r replaced values of %s on %r', receiver, term, resource)
                filtered[:] = response
        return filtered

    def resolve_filtered(self, resource: Resource, term: str) -> list[Value]:
        return self.filter(resource, term, self.resolve(resource, term))
