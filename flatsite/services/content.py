"""
Content Store

Key-value access to page HTML (slug -> content). Callers talk to the
ContentStore interface; where the bytes live is up to the backend.

Concurrent saves to the same slug are not coordinated: the last write wins.
"""

import logging
import os
import tempfile
from abc import ABC, abstractmethod

from flatsite.services.slugs import sanitize

logger = logging.getLogger(__name__)

NOT_FOUND_HTML = '<h2>Page not found</h2><p>The requested page does not exist.</p>'

PAGE_SUFFIX = '.html'


def neutralize(html):
    """Escape processing-instruction openers so stored markup can't run as server code."""
    return (html or '').replace('<?', '&lt;?')


class ContentStore(ABC):
    """Base class for page storage backends.

    Subclasses implement load/save/exists/list_slugs on already sanitized
    slugs. read() and write() are the public entry points and sanitize
    every slug before it reaches the backend.
    """

    @abstractmethod
    def load(self, slug):
        """Return stored HTML, or None when the page is missing or unreadable."""

    @abstractmethod
    def save(self, slug, html):
        """Store HTML; return False instead of raising on failure."""

    @abstractmethod
    def exists(self, slug):
        pass

    @abstractmethod
    def list_slugs(self):
        pass

    def read(self, slug):
        """Return the page HTML, or the not-found placeholder."""
        content = self.load(sanitize(slug))
        if content is None:
            return NOT_FOUND_HTML
        return content

    def get(self, slug):
        """Return stored HTML for `slug` or None when there is no page."""
        return self.load(sanitize(slug))

    def write(self, slug, html):
        """Persist `html` under `slug`. Returns True on success."""
        return self.save(sanitize(slug), neutralize(html))


class FileContentStore(ContentStore):
    """One `<slug>.html` file per page in a flat directory."""

    def __init__(self, root):
        self.root = os.path.abspath(root)

    def __repr__(self):
        return f'<FileContentStore {self.root}>'

    def path_for(self, slug):
        return os.path.join(self.root, sanitize(slug) + PAGE_SUFFIX)

    def load(self, slug):
        path = self.path_for(slug)
        try:
            with open(path, encoding='utf-8') as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug('Page %s not readable: %s', slug, e)
            return None

    def save(self, slug, html):
        """Write through a temp file in the root so a failed save keeps the old page."""
        path = self.path_for(slug)
        tmp_path = None
        try:
            data = html.encode('utf-8')
            fd, tmp_path = tempfile.mkstemp(dir=self.root, prefix='.' + slug + '-', suffix='.tmp')
            with os.fdopen(fd, 'wb') as fh:
                fh.write(data)
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, path)
        except (OSError, UnicodeError):
            logger.exception('Could not save page %s to %s', slug, path)
            if tmp_path is not None:
                try:
                    os.remove(tmp_path)
                except OSError as e:
                    logger.debug('Could not remove temp file %s: %s', tmp_path, e)
            return False
        logger.info('Saved page %s (%d chars)', slug, len(html))
        return True

    def exists(self, slug):
        return os.path.isfile(self.path_for(slug))

    def list_slugs(self):
        try:
            names = os.listdir(self.root)
        except OSError as e:
            logger.debug('Content root %s not listable: %s', self.root, e)
            return []
        slugs = []
        for name in names:
            stem, ext = os.path.splitext(name)
            if ext == PAGE_SUFFIX and sanitize(stem) == stem:
                slugs.append(stem)
        return sorted(slugs)


class MemoryContentStore(ContentStore):
    """Dict-backed store, used for throwaway sites and tests."""

    def __init__(self, pages=None):
        self.pages = {}
        for slug, html in (pages or {}).items():
            self.pages[sanitize(slug)] = html

    def __repr__(self):
        return f'<MemoryContentStore {len(self.pages)} pages>'

    def load(self, slug):
        return self.pages.get(slug)

    def save(self, slug, html):
        self.pages[slug] = html
        logger.info('Saved page %s (%d chars)', slug, len(html))
        return True

    def exists(self, slug):
        return slug in self.pages

    def list_slugs(self):
        return sorted(self.pages)


def create_store(backend, root=None):
    """Build a store for the configured backend name ('file' or 'memory')."""
    if backend == 'file':
        if not root:
            raise ValueError('The file content backend needs CONTENT_DIR')
        return FileContentStore(root)
    if backend == 'memory':
        return MemoryContentStore()
    raise ValueError(f'Unknown content backend: {backend!r}')
