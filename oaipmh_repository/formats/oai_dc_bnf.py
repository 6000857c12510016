import logging

from oaipmh_repository.exceptions import MalformedFieldError
from oaipmh_repository.util import append_element, ns

from .base import MetadataFormat
from .terms import DC_ELEMENTS, dcterms


logger = logging.getLogger(__name__)


BOOK_CLASS_NAME = 'Livre'
VIGNETTE_PAGE_TERM = '1886:pageVignette'
PUBLIC_DOMAIN_MARKER = 'Public Domain mark'

PUBLIC_DOMAIN_RIGHTS = (
    ('domaine public', 'fre'),
    ('public domain', 'eng'),
    ('http://creativecommons.org/publicdomain/mark/1.0/', None),
)
RESTRICTED_USE_RIGHTS = (
    ("conditions spécifiques d'utilisation", 'fre'),
    ('restricted use', 'eng'),
)


def vignette_index(page_values) -> int:
    """0-based media index from a 1-based page number (first page when absent)"""
    if not page_values:
        return 0
    try:
        page = int(str(page_values[0]).strip())
    except ValueError:
        raise MalformedFieldError(f'{VIGNETTE_PAGE_TERM} is not a page number: {page_values[0]}')
    if page < 1:
        raise MalformedFieldError(f'{VIGNETTE_PAGE_TERM} is not a page number: {page}')
    return page - 1


class OaiDcBnfFormat(MetadataFormat):
    """oai_dc as expected by the Bibliothèque nationale de France (Gallica partners)

    the 15 elements with institutional overrides for type, language, relation
    and rights; replaces the generic oai_dc when `french_national_library_dc` is set
    """
    prefix = 'oai_dc'
    namespace = 'http://www.openarchives.org/OAI/2.0/oai_dc/'
    schema = 'http://www.openarchives.org/OAI/2.0/oai_dc.xsd'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.overrides = {
            'type': self.append_type,
            'language': self.append_language,
            'relation': self.append_relation,
            'rights': self.append_rights,
        }

    def append_metadata(self, container, item):
        logger.debug('Rendering %r as %s (BnF)', item, self.prefix)
        dc_element = self.append_root(container, ns('oai_dc', 'dc'), 'oai_dc', 'dc')
        for local_name in DC_ELEMENTS:
            append_slot = self.overrides.get(local_name, self.append_default)
            append_slot(dc_element, item, local_name)
        self.append_identifiers(dc_element, item, 'dc:identifier')
        return dc_element

    def append_default(self, dc_element, item, local_name):
        self.append_term_values(dc_element, item, dcterms(local_name), f'dc:{local_name}')

    def is_book(self, item) -> bool:
        return item.resource_class.local_name == BOOK_CLASS_NAME

    def append_type(self, dc_element, item, local_name):
        if item.resource_class is None:
            self.append_default(dc_element, item, local_name)
        elif self.is_book(item):
            append_element(dc_element, 'dc:type', 'text')
        else:
            append_element(dc_element, 'dc:type', 'image')

    def append_language(self, dc_element, item, local_name):
        if item.resource_class is not None and self.is_book(item):
            append_element(dc_element, 'dc:language', 'fr')
        else:
            self.append_default(dc_element, item, local_name)

    def append_relation(self, dc_element, item, local_name):
        self.append_default(dc_element, item, local_name)
        try:
            index = vignette_index(self.resolver.resolve(item, VIGNETTE_PAGE_TERM))
        except MalformedFieldError as e:
            logger.warning('Skipping vignette of %r: %s', item, e)
            return
        if index >= len(item.media):
            logger.debug('No media at vignette index %s of %r', index, item)
            return
        thumbnail_url = item.media[index].thumbnail_url('medium')
        if thumbnail_url:
            append_element(dc_element, 'dc:relation', f'vignette : {thumbnail_url}')

    def append_rights(self, dc_element, item, local_name):
        # the raw statement only picks which fixed statements to emit
        raw_rights = self.resolver.resolve(item, dcterms(local_name))
        if raw_rights and PUBLIC_DOMAIN_MARKER in str(raw_rights[0]):
            statements = PUBLIC_DOMAIN_RIGHTS
        else:
            statements = RESTRICTED_USE_RIGHTS
        for text, language in statements:
            rights_element = append_element(dc_element, 'dc:rights', text)
            if language:
                rights_element.set(ns('xml', 'lang'), language)
