from __future__ import annotations
import dataclasses
import typing
from collections.abc import Mapping

from oaipmh_repository.exceptions import ConfigurationError


SETTINGS_PREFIX = 'oaipmhrepository_'

METS_DATA_FORMATS = ('dc', 'dcterms')
OAI_SET_FORMATS = ('base', 'item_set_title')
IDENTIFIER_MODES = ('api_url', 'relative_site_url', 'absolute_site_url', 'none')

_BOOLEAN_OPTIONS = ('expose_media', 'french_national_library_dc', 'hide_private_values')
_CHOICE_OPTIONS = {
    'mets_data_item': METS_DATA_FORMATS,
    'mets_data_media': METS_DATA_FORMATS,
    'oai_set_format': OAI_SET_FORMATS,
    'append_identifier_global': IDENTIFIER_MODES,
    'append_identifier_site': IDENTIFIER_MODES,
}


@dataclasses.dataclass(frozen=True)
class RepositorySettings:
    metadata_formats: tuple[str, ...] = ('oai_dc', 'oai_dcterms', 'mets')
    mets_data_item: str = 'dc'
    mets_data_media: str = 'dc'
    expose_media: bool = False
    oai_set_format: str = 'base'
    french_national_library_dc: bool = False
    append_identifier_global: str = 'api_url'
    append_identifier_site: str = 'absolute_site_url'
    base_url: str = 'http://localhost'
    main_site: str | None = None
    hide_private_values: bool = True

    def __post_init__(self):
        for _name, _choices in _CHOICE_OPTIONS.items():
            _value = getattr(self, _name)
            if _value not in _choices:
                raise ConfigurationError(
                    f'{SETTINGS_PREFIX}{_name} must be one of {", ".join(_choices)}, not {_value!r}'
                )
        for _name in _BOOLEAN_OPTIONS:
            if not isinstance(getattr(self, _name), bool):
                raise ConfigurationError(f'{SETTINGS_PREFIX}{_name} must be a boolean')
        if isinstance(self.metadata_formats, str):
            raise ConfigurationError(f'{SETTINGS_PREFIX}metadata_formats must be a list of prefixes')
        if not self.base_url:
            raise ConfigurationError(f'{SETTINGS_PREFIX}base_url is required')

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, typing.Any]) -> RepositorySettings:
        """build settings from a flat mapping; keys may carry the host
        platform's `oaipmhrepository_` prefix or not
        """
        _field_names = {_field.name for _field in dataclasses.fields(cls)}
        _kwargs = {}
        for _key, _value in mapping.items():
            _name = _key.removeprefix(SETTINGS_PREFIX)
            if _name not in _field_names:
                continue  # other modules' settings share the same store
            if _name == 'metadata_formats' and not isinstance(_value, str):
                _value = tuple(_value)
            _kwargs[_name] = _value
        return cls(**_kwargs)

    @classmethod
    def from_django(cls) -> RepositorySettings:
        from django.conf import settings
        return cls.from_mapping(getattr(settings, 'OAIPMH_REPOSITORY', {}))
