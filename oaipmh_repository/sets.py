import abc

from django.utils.text import slugify

from oaipmh_repository.exceptions import ConfigurationError
from oaipmh_repository.models import Item


class OaiSet(abc.ABC):
    """how an item's item sets become OAI-PMH setSpec values"""

    name: str

    @abc.abstractmethod
    def set_spec(self, item_set) -> str:
        raise NotImplementedError

    def set_specs(self, item: Item) -> list[str]:
        return [self.set_spec(item_set) for item_set in item.item_sets]


class BaseOaiSet(OaiSet):
    name = 'base'

    def set_spec(self, item_set) -> str:
        return str(item_set.id)


class ItemSetTitleOaiSet(OaiSet):
    name = 'item_set_title'

    def set_spec(self, item_set) -> str:
        # setSpec only allows unreserved characters
        return slugify(item_set.title) or str(item_set.id)


OAI_SETS = {
    oai_set.name: oai_set
    for oai_set in (BaseOaiSet, ItemSetTitleOaiSet)
}


def get_oai_set(name: str) -> OaiSet:
    try:
        return OAI_SETS[name]()
    except KeyError:
        raise ConfigurationError(f'Unknown oai set format: {name}')
