"""metadata formats for an OAI-PMH repository: oai_dc, oai_dcterms, mets and
institutional variants, rendered with lxml from a host platform's item records
"""
