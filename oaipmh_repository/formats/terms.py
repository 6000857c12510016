# the 15 unqualified Dublin Core elements, in the order of the oai_dc schema
DC_ELEMENTS = (
    'title',
    'creator',
    'subject',
    'description',
    'publisher',
    'contributor',
    'date',
    'type',
    'format',
    'identifier',
    'source',
    'language',
    'relation',
    'coverage',
    'rights',
)

# the 55 DCMI metadata terms: the elements above, then their refinements
DCTERMS_TERMS = DC_ELEMENTS + (
    'audience',
    'alternative',
    'tableOfContents',
    'abstract',
    'created',
    'valid',
    'available',
    'issued',
    'modified',
    'extent',
    'medium',
    'isVersionOf',
    'hasVersion',
    'isReplacedBy',
    'replaces',
    'isRequiredBy',
    'requires',
    'isPartOf',
    'hasPart',
    'isReferencedBy',
    'references',
    'isFormatOf',
    'hasFormat',
    'conformsTo',
    'spatial',
    'temporal',
    'mediator',
    'dateAccepted',
    'dateCopyrighted',
    'dateSubmitted',
    'educationLevel',
    'accessRights',
    'bibliographicCitation',
    'license',
    'rightsHolder',
    'provenance',
    'instructionalMethod',
    'accrualMethod',
    'accrualPeriodicity',
    'accrualPolicy',
)


def dcterms(local_name: str) -> str:
    return f'dcterms:{local_name}'
