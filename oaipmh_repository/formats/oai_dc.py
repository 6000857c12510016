import logging

from oaipmh_repository.util import ns

from .base import MetadataFormat
from .terms import DC_ELEMENTS


logger = logging.getLogger(__name__)


class OaiDcFormat(MetadataFormat):
    """the required oai_dc format: the 15 unqualified Dublin Core elements

    see https://www.openarchives.org/OAI/openarchivesprotocol.html#dublincore
    """
    prefix = 'oai_dc'
    namespace = 'http://www.openarchives.org/OAI/2.0/oai_dc/'
    schema = 'http://www.openarchives.org/OAI/2.0/oai_dc.xsd'

    def append_metadata(self, container, item):
        logger.debug('Rendering %r as %s', item, self.prefix)
        dc_element = self.append_root(container, ns('oai_dc', 'dc'), 'oai_dc', 'dc')
        self.append_field_map(dc_element, item, DC_ELEMENTS, 'dc')
        self.append_identifiers(dc_element, item, 'dc:identifier')
        return dc_element
