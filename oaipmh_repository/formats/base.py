from __future__ import annotations
import abc
import dataclasses
import logging
from collections.abc import Iterable

from lxml import etree

from oaipmh_repository.conf import RepositorySettings
from oaipmh_repository.identifiers import IdentifierStrategy
from oaipmh_repository.models import Item, Resource
from oaipmh_repository.util import append_element, ns, nsmap
from oaipmh_repository.values import ValueResolver

from .terms import dcterms


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class FormatDescriptor:
    prefix: str
    namespace: str
    schema: str


class MetadataFormat(abc.ABC):
    """builds an XML fragment in one metadata format, meant to be included within
    the <metadata> element of an OAI-PMH `ListRecords` or `GetRecord` response

    holds nothing but its injected collaborators, so one instance may render
    any number of items
    """

    # required on subclasses
    prefix: str
    namespace: str
    schema: str

    def __init__(
        self,
        settings: RepositorySettings,
        resolver: ValueResolver | None = None,
        identifiers: IdentifierStrategy | None = None,
    ):
        self.settings = settings
        self.resolver = (resolver or ValueResolver(hide_private=settings.hide_private_values)).for_prefix(self.prefix)
        self.identifiers = identifiers or IdentifierStrategy(settings)

    @classmethod
    def descriptor(cls) -> FormatDescriptor:
        return FormatDescriptor(prefix=cls.prefix, namespace=cls.namespace, schema=cls.schema)

    @abc.abstractmethod
    def append_metadata(self, container: etree._Element, item: Item) -> etree._Element:
        """append this format's root element (and everything in it) to `container`
        and return the root
        """
        raise NotImplementedError

    def format_record(self, item: Item) -> str:
        # detached, un-namespaced container so the serialized root carries only its own declarations
        container = etree.Element('metadata')
        root = self.append_metadata(container, item)
        return etree.tostring(root, encoding='unicode')

    ###
    # helpers for subclasses

    def append_root(self, container: etree._Element, tag_name: str, *namespace_prefixes: str, default: str | None = None) -> etree._Element:
        return etree.SubElement(
            container,
            tag_name,
            attrib={ns('xsi', 'schemaLocation'): f'{self.namespace} {self.schema}'},
            nsmap=nsmap(*namespace_prefixes, 'xsi', default=default),
        )

    def append_term_values(self, parent: etree._Element, resource: Resource, term: str, element_name: str) -> None:
        for value in self.resolver.resolve_filtered(resource, term):
            append_element(parent, element_name, value)

    def append_field_map(self, parent: etree._Element, resource: Resource, local_names: Iterable[str], element_prefix: str) -> None:
        for local_name in local_names:
            self.append_term_values(parent, resource, dcterms(local_name), f'{element_prefix}:{local_name}')

    def append_identifiers(self, parent: etree._Element, item: Item, element_name: str) -> None:
        identifier = self.identifiers.single_identifier(item)
        if identifier:
            append_element(parent, element_name, identifier)
        if self.settings.expose_media:
            for media in item.media:
                if media.original_url:
                    append_element(parent, element_name, media.original_url)
