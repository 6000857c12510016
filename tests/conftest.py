import logging

import pytest
from lxml import etree

from oaipmh_repository.conf import RepositorySettings
from oaipmh_repository.signals import values_pre

from tests import factories


logger = logging.getLogger(__name__)


def pytest_configure(config):
    from django.conf import settings
    if not settings.configured:
        settings.configure(
            USE_TZ=True,
            OAIPMH_REPOSITORY={
                'oaipmhrepository_base_url': 'http://example.org/omeka',
                'oaipmhrepository_main_site': 'main',
            },
        )


@pytest.fixture
def repository_settings():
    return RepositorySettings(base_url='http://example.org/omeka', main_site='main')


@pytest.fixture
def container():
    return etree.Element('metadata')


@pytest.fixture
def item():
    return factories.ItemFactory(
        id=7,
        values=factories.term_values(
            dcterms__title=['Carte de Cassini', 'Cassini map'],
            dcterms__creator=['Cassini de Thury, César-François'],
            dcterms__date=['[ca 1750?]'],
            dcterms__rights=['Public Domain mark 1.0'],
        ),
    )


@pytest.fixture
def item_with_media():
    return factories.ItemFactory(
        id=8,
        values=factories.term_values(dcterms__title=['Atlas']),
        media=[
            factories.MediaFactory(id=31, values=factories.term_values(dcterms__title=['Plate 1'])),
            factories.MediaFactory(id=32, values=factories.term_values(dcterms__title=['Plate 2'])),
            factories.MediaFactory(id=33, values=factories.term_values(dcterms__title=['Plate 3'])),
        ],
    )


@pytest.fixture
def connect_values_pre():
    """connect a `values_pre` receiver for the duration of one test"""
    _receivers = []

    def _connect(receiver):
        values_pre.connect(receiver, weak=False)
        _receivers.append(receiver)
        return receiver

    yield _connect
    for _receiver in _receivers:
        values_pre.disconnect(_receiver)
