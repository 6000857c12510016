from .base import FormatDescriptor, MetadataFormat
from .mets import MetsFormat
from .oai_dc import OaiDcFormat
from .oai_dc_bnf import OaiDcBnfFormat
from .oai_dcterms import OaiDctermsFormat
from .oai_dcterms_navigae import OaiDctermsNavigaeFormat


__all__ = (
    'FormatDescriptor',
    'MetadataFormat',
    'MetsFormat',
    'OaiDcBnfFormat',
    'OaiDcFormat',
    'OaiDctermsFormat',
    'OaiDctermsNavigaeFormat',
)
