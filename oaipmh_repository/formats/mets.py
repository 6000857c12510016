import logging

from lxml import etree

from oaipmh_repository.models import Item, Media, Resource
from oaipmh_repository.util import append_element, ns, nsmap

from .base import MetadataFormat
from .terms import DC_ELEMENTS, DCTERMS_TERMS


logger = logging.getLogger(__name__)


def item_dmd_id(item: Item) -> str:
    return f'dmd-{item.id}'


def media_dmd_id(media: Media) -> str:
    return f'dmd-file-{media.id}'


def media_file_id(media: Media) -> str:
    return f'file-{media.id}'


class MetsFormat(MetadataFormat):
    """METS container: descriptive metadata for the item and, when media are
    exposed, a file section, descriptive metadata per media and a structure map

    see https://www.loc.gov/standards/mets/
    """
    prefix = 'mets'
    namespace = 'http://www.loc.gov/METS/'
    schema = 'http://www.loc.gov/standards/mets/mets.xsd'

    def append_metadata(self, container, item):
        logger.debug('Rendering %r as %s', item, self.prefix)
        mets_element = self.append_root(container, ns('mets', 'mets'), 'xlink', default='mets')

        self.append_dmd_section(mets_element, item, item_dmd_id(item), self.settings.mets_data_item)

        media_list = item.media if self.settings.expose_media else []
        # the schema wants every dmdSec ahead of the fileSec
        for media in media_list:
            self.append_dmd_section(mets_element, media, media_dmd_id(media), self.settings.mets_data_media)

        if media_list:
            file_group = append_element(append_element(mets_element, 'fileSec'), 'fileGrp', USE='ORIGINAL')
            for media in media_list:
                self.append_file(file_group, media)

        top_div = append_element(append_element(mets_element, 'structMap'), 'div', DMDID=item_dmd_id(item))
        for media in media_list:
            append_element(top_div, 'fptr', FILEID=media_file_id(media))
        return mets_element

    def append_dmd_section(self, mets_element: etree._Element, resource: Resource, dmd_id: str, data_format: str) -> None:
        data_wrap = append_element(append_element(mets_element, 'dmdSec', ID=dmd_id), 'mdWrap', MDTYPE='DC')
        if data_format == 'dcterms':
            data_wrap.set('MDTYPEVERSION', 'DCMI Metadata Terms')
            data_xml = etree.SubElement(data_wrap, ns('mets', 'xmlData'), nsmap=nsmap('dcterms'))
            self.append_field_map(data_xml, resource, DCTERMS_TERMS, 'dcterms')
        else:
            data_xml = etree.SubElement(data_wrap, ns('mets', 'xmlData'), nsmap=nsmap('dc'))
            self.append_field_map(data_xml, resource, DC_ELEMENTS, 'dc')

    def append_file(self, file_group: etree._Element, media: Media) -> None:
        file_element = append_element(file_group, 'file', ID=media_file_id(media))
        if media.sha256:
            file_element.set('CHECKSUM', media.sha256)
            file_element.set('CHECKSUMTYPE', 'SHA-256')
        file_element.set('DMDID', media_dmd_id(media))
        location = append_element(file_element, 'FLocat', LOCTYPE='URL')
        location.set(ns('xlink', 'type'), 'simple')
        if media.filename:
            location.set(ns('xlink', 'title'), media.filename)
        if media.original_url:
            location.set(ns('xlink', 'href'), media.original_url)
