import dataclasses

import pytest
from lxml import etree

from oaipmh_repository.formats import MetsFormat

from tests import factories
from tests._testutil import XSI_SCHEMA_LOCATION, assert_xml_equal, texts, xpath


XLINK_HREF = '{http://www.w3.org/1999/xlink}href'


@pytest.fixture
def mets(repository_settings):
    return MetsFormat(repository_settings)


@pytest.fixture
def mets_with_media(repository_settings):
    return MetsFormat(dataclasses.replace(repository_settings, expose_media=True))


def test_descriptor(mets):
    assert (mets.prefix, mets.namespace, mets.schema) == (
        'mets',
        'http://www.loc.gov/METS/',
        'http://www.loc.gov/standards/mets/mets.xsd',
    )


def test_root(mets, container, item):
    root = mets.append_metadata(container, item)
    assert list(container) == [root]
    assert root.tag == '{http://www.loc.gov/METS/}mets'
    assert root.get(XSI_SCHEMA_LOCATION) == 'http://www.loc.gov/METS/ http://www.loc.gov/standards/mets/mets.xsd'


def test_item_only(mets, item):
    assert_xml_equal(mets.format_record(item), '''
        <mets
            xmlns="http://www.loc.gov/METS/"
            xmlns:xlink="http://www.w3.org/1999/xlink"
            xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
            xsi:schemaLocation="http://www.loc.gov/METS/ http://www.loc.gov/standards/mets/mets.xsd"
        >
            <dmdSec ID="dmd-7">
                <mdWrap MDTYPE="DC">
                    <xmlData xmlns:dc="http://purl.org/dc/elements/1.1/">
                        <dc:title>Carte de Cassini</dc:title>
                        <dc:title>Cassini map</dc:title>
                        <dc:creator>Cassini de Thury, César-François</dc:creator>
                        <dc:date>[ca 1750?]</dc:date>
                        <dc:rights>Public Domain mark 1.0</dc:rights>
                    </xmlData>
                </mdWrap>
            </dmdSec>
            <structMap>
                <div DMDID="dmd-7"/>
            </structMap>
        </mets>
    ''')


def test_media_not_exposed(mets, container, item_with_media):
    root = mets.append_metadata(container, item_with_media)
    assert xpath(root, 'mets:fileSec') == []
    assert xpath(root, 'mets:dmdSec/@ID') == ['dmd-8']
    assert xpath(root, 'mets:structMap/mets:div/mets:fptr') == []


class TestExposedMedia:

    def test_counts_and_order(self, mets_with_media, container, item_with_media):
        root = mets_with_media.append_metadata(container, item_with_media)
        assert len(xpath(root, 'mets:fileSec/mets:fileGrp/mets:file')) == 3
        assert xpath(root, 'mets:dmdSec/@ID') == ['dmd-8', 'dmd-file-31', 'dmd-file-32', 'dmd-file-33']
        assert xpath(root, 'mets:structMap/mets:div/@DMDID') == ['dmd-8']
        assert xpath(root, 'mets:structMap/mets:div/mets:fptr/@FILEID') == ['file-31', 'file-32', 'file-33']
        assert xpath(root, 'mets:fileSec/mets:fileGrp/mets:file/@ID') == ['file-31', 'file-32', 'file-33']

    def test_section_order(self, mets_with_media, container, item_with_media):
        root = mets_with_media.append_metadata(container, item_with_media)
        assert [etree.QName(child).localname for child in root] == [
            'dmdSec', 'dmdSec', 'dmdSec', 'dmdSec', 'fileSec', 'structMap',
        ]

    def test_file(self, mets_with_media, container, item_with_media):
        root = mets_with_media.append_metadata(container, item_with_media)
        media = item_with_media.media[0]
        (file_element,) = xpath(root, 'mets:fileSec/mets:fileGrp[@USE="ORIGINAL"]/mets:file[@ID="file-31"]')
        assert file_element.get('CHECKSUM') == media.sha256
        assert file_element.get('CHECKSUMTYPE') == 'SHA-256'
        assert file_element.get('DMDID') == 'dmd-file-31'
        (location,) = xpath(file_element, 'mets:FLocat')
        assert location.get('LOCTYPE') == 'URL'
        assert location.get('{http://www.w3.org/1999/xlink}type') == 'simple'
        assert location.get('{http://www.w3.org/1999/xlink}title') == '31.jpg'
        assert location.get(XLINK_HREF) == 'http://localhost/files/original/31.jpg'

    def test_no_checksum(self, mets_with_media, container):
        item = factories.ItemFactory(media=[factories.MediaFactory(id=40, sha256=None)])
        root = mets_with_media.append_metadata(container, item)
        (file_element,) = xpath(root, 'mets:fileSec/mets:fileGrp/mets:file')
        assert file_element.get('CHECKSUM') is None
        assert file_element.get('CHECKSUMTYPE') is None

    def test_media_metadata(self, mets_with_media, container, item_with_media):
        root = mets_with_media.append_metadata(container, item_with_media)
        assert texts(root, 'mets:dmdSec[@ID="dmd-file-32"]/mets:mdWrap/mets:xmlData/dc:title') == ['Plate 2']

    def test_item_without_media(self, mets_with_media, container, item):
        root = mets_with_media.append_metadata(container, item)
        assert xpath(root, 'mets:fileSec') == []
        assert len(xpath(root, 'mets:structMap/mets:div')) == 1


def test_dcterms_blocks(repository_settings, container, item_with_media):
    settings = dataclasses.replace(
        repository_settings,
        expose_media=True,
        mets_data_item='dcterms',
        mets_data_media='dcterms',
    )
    root = MetsFormat(settings).append_metadata(container, item_with_media)
    wraps = xpath(root, 'mets:dmdSec/mets:mdWrap')
    assert [wrap.get('MDTYPEVERSION') for wrap in wraps] == ['DCMI Metadata Terms'] * 4
    assert texts(root, 'mets:dmdSec[@ID="dmd-8"]/mets:mdWrap/mets:xmlData/dcterms:title') == ['Atlas']
    assert xpath(root, '//dc:title') == []


def test_mixed_blocks(repository_settings, container, item_with_media):
    settings = dataclasses.replace(repository_settings, expose_media=True, mets_data_media='dcterms')
    root = MetsFormat(settings).append_metadata(container, item_with_media)
    assert texts(root, 'mets:dmdSec[@ID="dmd-8"]//dc:title') == ['Atlas']
    assert texts(root, 'mets:dmdSec[@ID="dmd-file-31"]//dcterms:title') == ['Plate 1']


def test_idempotent(mets_with_media, item_with_media):
    assert mets_with_media.format_record(item_with_media) == mets_with_media.format_record(item_with_media)
