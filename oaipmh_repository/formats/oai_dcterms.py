import logging

from oaipmh_repository.util import ns

from .base import MetadataFormat
from .terms import DCTERMS_TERMS


logger = logging.getLogger(__name__)


class OaiDctermsFormat(MetadataFormat):
    """oai_dcterms: all 55 DCMI metadata terms

    not a standardized format, but an extended oai_dc used by some repositories;
    see http://dublincore.org/documents/dc-xml-guidelines/
    """
    prefix = 'oai_dcterms'
    namespace = 'http://www.openarchives.org/OAI/2.0/oai_dcterms/'
    schema = 'http://www.openarchives.org/OAI/2.0/oai_dcterms.xsd'

    def append_metadata(self, container, item):
        logger.debug('Rendering %r as %s', item, self.prefix)
        dcterms_element = self.append_root(container, ns('oai_dcterms', 'dcterms'), 'oai_dcterms', 'dcterms')
        self.append_field_map(dcterms_element, item, DCTERMS_TERMS, 'dcterms')
        self.append_identifiers(dcterms_element, item, 'dcterms:identifier')
        return dcterms_element
