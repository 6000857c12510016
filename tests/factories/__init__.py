import hashlib

import factory
import faker

from oaipmh_repository.models import Item, ItemSet, Media, ResourceClass, Value


fake = faker.Faker()


def term_values(**values_by_term):
    """`term_values(dcterms__title=['a', 'b'])` -> {'dcterms:title': [Value(...), Value(...)]}

    plain strings become public literals; `Value`s are kept as given
    """
    _values = {}
    for _key, _texts in values_by_term.items():
        _term = _key.replace('__', ':', 1)
        _values[_term] = [
            (_text if isinstance(_text, Value) else Value(term=_term, value=_text))
            for _text in _texts
        ]
    return _values


class MediaFactory(factory.Factory):
    id = factory.Sequence(lambda n: 1000 + n)
    values = factory.LazyFunction(dict)
    filename = factory.LazyAttribute(lambda m: f'{m.id}.jpg')
    sha256 = factory.LazyAttribute(lambda m: hashlib.sha256(m.filename.encode()).hexdigest())
    original_url = factory.LazyAttribute(lambda m: f'http://localhost/files/original/{m.filename}')
    thumbnail_urls = factory.LazyAttribute(lambda m: {
        _size: f'http://localhost/files/{_size}/{m.filename}'
        for _size in ('large', 'medium', 'square')
    })

    class Meta:
        model = Media


class ItemFactory(factory.Factory):
    id = factory.Sequence(lambda n: n + 1)
    values = factory.LazyFunction(lambda: term_values(dcterms__title=[fake.sentence()]))
    media = factory.LazyFunction(list)
    resource_class = None
    item_sets = factory.LazyFunction(list)

    class Meta:
        model = Item


class ResourceClassFactory(factory.Factory):
    vocabulary_prefix = 'bnf'
    local_name = 'Livre'
    label = factory.LazyAttribute(lambda rc: rc.local_name)

    class Meta:
        model = ResourceClass


class ItemSetFactory(factory.Factory):
    id = factory.Sequence(lambda n: 500 + n)
    title = factory.Faker('sentence')

    class Meta:
        model = ItemSet
