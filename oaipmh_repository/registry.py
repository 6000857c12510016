from __future__ import annotations
import logging

from oaipmh_repository.conf import RepositorySettings
from oaipmh_repository.exceptions import UnknownFormat
from oaipmh_repository.formats import (
    FormatDescriptor,
    MetadataFormat,
    MetsFormat,
    OaiDcBnfFormat,
    OaiDcFormat,
    OaiDctermsFormat,
    OaiDctermsNavigaeFormat,
)
from oaipmh_repository.identifiers import IdentifierStrategy
from oaipmh_repository.sets import OaiSet, get_oai_set
from oaipmh_repository.values import ValueResolver


logger = logging.getLogger(__name__)


FORMAT_SET: tuple[type[MetadataFormat], ...] = (
    OaiDcFormat,
    OaiDctermsFormat,
    MetsFormat,
    OaiDctermsNavigaeFormat,
)

# prefix -> ((settings flag, replacement class), ...); the first set flag wins
INSTITUTIONAL_VARIANTS: dict[str, tuple[tuple[str, type[MetadataFormat]], ...]] = {
    OaiDcFormat.prefix: (
        ('french_national_library_dc', OaiDcBnfFormat),
    ),
}


class FormatRegistry:
    """the metadata formats of one harvest session

    builds each enabled format at most once and hands out that same instance
    (formats hold no per-record state)
    """

    def __init__(
        self,
        settings: RepositorySettings,
        *,
        is_global_repository: bool = True,
        site_slug: str | None = None,
        resolver: ValueResolver | None = None,
    ):
        self.settings = settings
        self.resolver = resolver or ValueResolver(hide_private=settings.hide_private_values)
        self.identifiers = IdentifierStrategy(settings, is_global_repository, site_slug)
        self.oai_set: OaiSet = get_oai_set(settings.oai_set_format)
        self._format_classes = {
            format_class.prefix: format_class
            for format_class in FORMAT_SET
        }
        self._formats: dict[str, MetadataFormat] = {}

    @property
    def prefixes(self) -> tuple[str, ...]:
        # configured order, without duplicates or unknown prefixes
        return tuple(dict.fromkeys(
            prefix
            for prefix in self.settings.metadata_formats
            if prefix in self._format_classes
        ))

    def format_class(self, prefix: str) -> type[MetadataFormat]:
        if prefix not in self.prefixes:
            raise UnknownFormat(prefix)
        for flag, variant_class in INSTITUTIONAL_VARIANTS.get(prefix, ()):
            if getattr(self.settings, flag):
                return variant_class
        return self._format_classes[prefix]

    def get(self, prefix: str) -> MetadataFormat:
        try:
            return self._formats[prefix]
        except KeyError:
            format_class = self.format_class(prefix)
            logger.debug('Building %s for metadataPrefix %s', format_class.__name__, prefix)
            metadata_format = format_class(
                self.settings,
                resolver=self.resolver,
                identifiers=self.identifiers,
            )
            self._formats[prefix] = metadata_format
            return metadata_format

    def list_formats(self) -> list[FormatDescriptor]:
        return [self.format_class(prefix).descriptor() for prefix in self.prefixes]


def build(settings: RepositorySettings, prefix: str, **kwargs) -> MetadataFormat:
    return FormatRegistry(settings, **kwargs).get(prefix)
