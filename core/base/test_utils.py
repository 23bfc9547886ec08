"""
Helpers shared by the app test suites.
"""
from django.core.files.storage import InMemoryStorage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings

IN_MEMORY_STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.InMemoryStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}


def use_in_memory_storage():
    """Class/method decorator routing default_storage to memory for the test."""
    return override_settings(STORAGES=IN_MEMORY_STORAGES)


def make_file(name='document.pdf', content=b'%PDF-1.4 test', content_type='application/pdf'):
    return SimpleUploadedFile(name, content, content_type=content_type)


class FailingStorage(InMemoryStorage):
    """
    In-memory storage whose save() fails after `fail_after` successful saves.

    Records what was deleted so tests can check orphan cleanup.
    """

    def __init__(self, fail_after=0, **kwargs):
        super().__init__(**kwargs)
        self.fail_after = fail_after
        self.saved = []
        self.deleted = []

    def _save(self, name, content):
        if len(self.saved) >= self.fail_after:
            raise OSError("storage unavailable")
        name = super()._save(name, content)
        self.saved.append(name)
        return name

    def delete(self, name):
        self.deleted.append(name)
        super().delete(name)
