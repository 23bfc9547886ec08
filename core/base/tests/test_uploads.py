"""
DocumentUploader tests against in-memory storage.
"""
from django.core.files.storage import InMemoryStorage
from django.test import SimpleTestCase

from core.base.exceptions import UploadError
from core.base.test_utils import FailingStorage, make_file
from core.base.uploads import DocumentUploader, object_name


class ObjectNameTests(SimpleTestCase):

    def test_path_and_extension_are_dropped(self):
        self.assertEqual(object_name('C:\\scans\\DNI Frente.PDF'), 'dni-frente')
        self.assertEqual(object_name('/tmp/cv final.docx'), 'cv-final')

    def test_name_is_capped(self):
        self.assertEqual(len(object_name('a' * 200 + '.pdf')), 60)

    def test_fallback_when_nothing_usable(self):
        self.assertEqual(object_name('***.pdf'), 'document')
        self.assertEqual(object_name(None), 'document')


class DocumentUploaderTests(SimpleTestCase):

    def setUp(self):
        self.storage = InMemoryStorage(base_url='/media/')
        self.uploader = DocumentUploader('candidates', storage=self.storage)

    def test_folder_layout(self):
        document = self.uploader.upload(make_file('Dni Frente.PDF'), '45678912', 'identity')

        self.assertEqual(document.category, 'identity')
        self.assertTrue(document.storage_name.startswith('candidates/45678912/identity/dni-frente'))
        self.assertTrue(document.storage_name.endswith('.pdf'))
        self.assertTrue(self.storage.exists(document.storage_name))
        self.assertTrue(document.url.startswith('/media/candidates/45678912/identity/'))

    def test_order_follows_categories_then_files(self):
        files = {
            'medical': [make_file('m1.pdf')],
            'identity': [make_file('i1.pdf'), make_file('i2.pdf')],
        }
        uploaded = self.uploader.upload_all('1', files, ['identity', 'certificates', 'medical'])

        self.assertEqual([d.category for d in uploaded], ['identity', 'identity', 'medical'])
        self.assertIn('/i1', uploaded[0].storage_name)
        self.assertIn('/i2', uploaded[1].storage_name)

    def test_failure_removes_earlier_uploads(self):
        storage = FailingStorage(fail_after=1)
        uploader = DocumentUploader('candidates', storage=storage)
        files = {'identity': [make_file('a.pdf'), make_file('b.pdf')]}

        with self.assertRaises(UploadError):
            uploader.upload_all('1', files, ['identity'])

        self.assertEqual(len(storage.saved), 1)
        self.assertEqual(storage.deleted, storage.saved)
        self.assertFalse(storage.exists(storage.saved[0]))
