import logging

from furl import furl

from oaipmh_repository.conf import RepositorySettings
from oaipmh_repository.models import Media, Resource


logger = logging.getLogger(__name__)


class IdentifierStrategy:
    """derives the one canonical identifier (a url) appended to a record

    a global repository uses `append_identifier_global` and links to the main
    site; a site repository uses `append_identifier_site` and its own site
    """

    def __init__(self, settings: RepositorySettings, is_global_repository: bool = True, site_slug: str | None = None):
        self.settings = settings
        self.is_global_repository = is_global_repository
        self.site_slug = site_slug

    @property
    def mode(self) -> str:
        if self.is_global_repository:
            return self.settings.append_identifier_global
        return self.settings.append_identifier_site

    @property
    def slug(self) -> str | None:
        if self.is_global_repository:
            return self.settings.main_site
        return self.site_slug

    def single_identifier(self, resource: Resource) -> str | None:
        mode = self.mode
        if mode == 'none':
            return None
        if mode == 'api_url':
            return self.api_url(resource).url
        site_url = self.site_url(resource)
        if site_url is None:
            logger.debug('No site to build a %s identifier for %r', mode, resource)
            return None
        if mode == 'relative_site_url':
            return str(site_url.path)
        return site_url.url

    def api_url(self, resource: Resource) -> furl:
        return furl(self.settings.base_url).add(path=['api', self._resource_name(resource, plural=True), str(resource.id)])

    def site_url(self, resource: Resource) -> furl | None:
        if not self.slug:
            return None
        return furl(self.settings.base_url).add(path=['s', self.slug, self._resource_name(resource), str(resource.id)])

    @staticmethod
    def _resource_name(resource: Resource, plural: bool = False) -> str:
        if isinstance(resource, Media):
            return 'media'
        return 'items' if plural else 'item'
