import logging
import re
from typing import Any

from lxml import etree

from oaipmh_repository.models import Value


logger = logging.getLogger(__name__)


XML_NAMESPACES = {
    'dc': 'http://purl.org/dc/elements/1.1/',
    'dcterms': 'http://purl.org/dc/terms/',
    'mets': 'http://www.loc.gov/METS/',
    'oai': 'http://www.openarchives.org/OAI/2.0/',
    'oai_dc': 'http://www.openarchives.org/OAI/2.0/oai_dc/',
    'oai_dcterms': 'http://www.openarchives.org/OAI/2.0/oai_dcterms/',
    'xlink': 'http://www.w3.org/1999/xlink',
    'xsi': 'http://www.w3.org/2001/XMLSchema-instance',
    'xml': 'http://www.w3.org/XML/1998/namespace',
}


def ns(namespace_prefix: str, tag_name: str) -> str:
    """format XML tag/attribute name with full namespace URI

    see https://lxml.de/tutorial.html#namespaces
    """
    return f'{{{XML_NAMESPACES[namespace_prefix]}}}{tag_name}'


def nsmap(*namespace_prefixes: str, default: str | None = None) -> dict[str | None, str]:
    """build a namespace map suitable for lxml

    see https://lxml.de/tutorial.html#namespaces
    """
    return {
        (None if (prefix == default) else prefix): uri
        for prefix, uri in XML_NAMESPACES.items()
        if (
            prefix in namespace_prefixes
            or prefix == default
        )
    }


# characters outside the XML 1.0 `Char` production; lxml refuses them as text
XML_INCOMPATIBLE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]')


def xml_text(text: Any) -> str:
    text = str(text)
    cleaned = XML_INCOMPATIBLE.sub('', text)
    if cleaned != text:
        logger.debug('Dropped %d XML-incompatible characters from %r', len(text) - len(cleaned), text)
    return cleaned


# wrapper for lxml.etree.SubElement, adds `text` kwarg for convenience
def SubEl(parent: etree._Element, tag_name: str, text: Any = None, **kwargs: Any) -> etree._Element:
    element = etree.SubElement(parent, tag_name, **kwargs)
    if isinstance(text, Value):
        if text.language:
            element.set(ns('xml', 'lang'), text.language)
        element.text = xml_text(text)
    elif text:
        element.text = xml_text(text)
    return element


def append_element(parent: etree._Element, qualified_name: str, text: Any = None, **kwargs: Any) -> etree._Element:
    """append a child element named like `dc:title` (or a bare `title`, which
    takes the parent's namespace) and return it, so callers may set attributes
    """
    prefix, _, local_name = qualified_name.rpartition(':')
    if not local_name:
        raise ValueError(f'malformed element name: {qualified_name!r}')
    if prefix:
        try:
            tag_name = ns(prefix, local_name)
        except KeyError:
            raise ValueError(f'unknown namespace prefix in element name: {qualified_name!r}')
    else:
        tag_name = etree.QName(etree.QName(parent).namespace, local_name).text
    return SubEl(parent, tag_name, text, **kwargs)
