import decimal
import logging
import re

from lxml import etree

from oaipmh_repository.exceptions import MalformedFieldError
from oaipmh_repository.util import append_element, ns

from .base import MetadataFormat
from .terms import dcterms


logger = logging.getLogger(__name__)


CARTOGRAPHIC_DATA_TERM = '1886:donneesCodeesRessourcesCartographiques'
PUBLIC_DOMAIN_MARK = 'https://creativecommons.org/publicdomain/mark/1.0/'
POINT_NAME = 'Point central de la carte'

DATE_PUNCTUATION = re.compile(r'[?\[\]]')
CIRCA_MARKER = 'ca'
YEAR = re.compile(r'\d{4}')
DMS_COORDINATE = re.compile(r'([NSEW])(\d{3})(\d{2})(\d{2})', re.IGNORECASE)

_SAFE_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


def reduce_to_year(raw_date: str) -> str | None:
    """'[ca 1987?]' -> '1987'; anything that is not a bare year after cleanup -> None"""
    residue = DATE_PUNCTUATION.sub('', raw_date)
    residue = residue.replace(CIRCA_MARKER, '').strip()
    if YEAR.fullmatch(residue):
        return residue
    return None


def dms_to_dd(coordinate: str) -> str:
    """convert a UNIMARC 123 coordinate like 'W0772030' (hemisphere, DDD, MM, SS)
    to decimal degrees with 2 decimals, e.g. '-77.34'
    """
    match = DMS_COORDINATE.fullmatch(coordinate.strip()) if coordinate else None
    if match is None:
        raise MalformedFieldError(f'not a coordinate: {coordinate!r}')
    orientation, degrees, minutes, seconds = match.groups()
    decimal_degrees = (
        decimal.Decimal(degrees)
        + (decimal.Decimal(minutes) * 60 + decimal.Decimal(seconds)) / 3600
    ).quantize(decimal.Decimal('0.01'), rounding=decimal.ROUND_HALF_UP)
    if orientation.upper() in ('W', 'S'):
        return f'-{decimal_degrees}'
    return str(decimal_degrees)


def parse_subfields(datafield: str) -> dict[str, str]:
    """{code: text} for each <subfield code="..."> child of a MARC datafield snippet"""
    try:
        root = etree.fromstring(datafield.encode(), parser=_SAFE_PARSER)
    except etree.XMLSyntaxError as e:
        raise MalformedFieldError(f'{CARTOGRAPHIC_DATA_TERM} is not well-formed: {e}')
    subfields = {}
    for subfield in root.iterchildren(tag=etree.Element):
        if etree.QName(subfield).localname == 'subfield' and subfield.get('code'):
            subfields[subfield.get('code')] = subfield.text or ''
    return subfields


class OaiDctermsNavigaeFormat(MetadataFormat):
    """oai_dcterms as harvested by Navigae (cartographic collections)

    a 12-term subset of dcterms with a year-only date, license forced to the
    public domain mark, and extent/spatial computed from the UNIMARC 123
    (coded cartographic mathematical data) field
    """
    prefix = 'oai_dcterms_navigae'
    namespace = 'http://www.openarchives.org/OAI/2.0/oai_dcterms/'
    schema = 'http://www.openarchives.org/OAI/2.0/oai_dcterms.xsd'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # (term, override); terms without an override are resolved, filtered and emitted
        self.term_table = (
            ('coverage', None),
            ('date', self.append_year),
            ('creator', None),
            ('description', None),
            ('extent', self.append_extent),
            ('identifier', None),
            ('language', None),
            ('license', self.append_license),
            ('spatial', self.append_spatial),
            ('subject', None),
            ('title', None),
            ('type', None),
        )

    def append_metadata(self, container, item):
        logger.debug('Rendering %r as %s', item, self.prefix)
        dcterms_element = self.append_root(container, ns('oai_dcterms', 'dcterms'), 'oai_dcterms', 'dcterms')
        subfields = self.cartographic_subfields(item)
        for local_name, override in self.term_table:
            if override is None:
                self.append_term_values(dcterms_element, item, dcterms(local_name), dcterms(local_name))
            else:
                override(dcterms_element, item, subfields)
        self.append_identifiers(dcterms_element, item, 'dcterms:identifier')
        return dcterms_element

    def cartographic_subfields(self, item) -> dict[str, str]:
        values = self.resolver.resolve(item, CARTOGRAPHIC_DATA_TERM)
        if len(values) != 1:
            return {}
        try:
            return parse_subfields(str(values[0]))
        except MalformedFieldError as e:
            logger.warning('Skipping extent and spatial of %r: %s', item, e)
            return {}

    def append_year(self, parent, item, subfields):
        raw_dates = self.resolver.resolve(item, dcterms('date'))
        if not raw_dates:
            return
        year = reduce_to_year(str(raw_dates[0]))
        if year is None:
            logger.debug('No year in date %r of %r', str(raw_dates[0]), item)
            return
        append_element(parent, 'dcterms:created', year)

    def append_extent(self, parent, item, subfields):
        if 'b' in subfields:
            append_element(parent, 'dcterms:extent', f'1:{subfields["b"]}')

    def append_license(self, parent, item, subfields):
        append_element(parent, 'dcterms:license', PUBLIC_DOMAIN_MARK)

    def append_spatial(self, parent, item, subfields):
        west, east, north, south = (subfields.get(code) for code in 'defg')
        try:
            if east is not None and south is not None and east != west and north != south:
                text = 'northlimit={}; southlimit={}; westlimit={}; eastlimit={}'.format(
                    dms_to_dd(north), dms_to_dd(south), dms_to_dd(west), dms_to_dd(east),
                )
                spatial_type = 'dcterms:Box'
            elif west is not None and north is not None:
                text = 'east={}; north={}; name={}'.format(dms_to_dd(west), dms_to_dd(north), POINT_NAME)
                spatial_type = 'dcterms:Point'
            else:
                return
        except MalformedFieldError as e:
            logger.warning('Skipping spatial of %r: %s', item, e)
            return
        append_element(parent, 'dcterms:spatial', text).set(ns('xsi', 'type'), spatial_type)
