"""
API Tests for Candidate endpoints.
"""
from datetime import datetime, timezone

from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.test import APIClient

from core.base.test_utils import make_file, use_in_memory_storage
from HR.person.models import Candidate, CandidateDocument


@use_in_memory_storage()
class CandidateAPITest(TestCase):
    """Test Candidate API endpoints."""

    def setUp(self):
        self.client = APIClient()
        self.list_url = '/api/candidates/'
        self.payload = {
            'nationalId': '45678912',
            'lastName1': 'Quispe',
            'lastName2': 'Mamani',
            'firstNames': 'Rosa Elena',
            'site': 'Lima',
            'shift': 'Mañana',
            'group': '7',
        }

    def create_candidate(self, **extra):
        data = dict(self.payload, **extra)
        response = self.client.post(self.list_url, data, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        return response.data['id']

    def test_create_returns_ok_and_id(self):
        response = self.client.post(self.list_url, self.payload, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['ok'])
        self.assertTrue(Candidate.objects.filter(pk=response.data['id']).exists())

    def test_create_with_documents(self):
        candidate_id = self.create_candidate(
            identity=[make_file('dni.pdf')],
            certificates=[make_file('cert-a.pdf'), make_file('cert-b.pdf')],
        )

        response = self.client.get(f'{self.list_url}{candidate_id}/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        categories = [d['category'] for d in response.data['documents']]
        self.assertEqual(categories, ['certificates', 'certificates', 'identity'])

    def test_create_missing_fields(self):
        data = dict(self.payload)
        del data['firstNames']

        response = self.client.post(self.list_url, data, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('error', response.data)
        self.assertIn('firstNames', response.data['fields'])
        self.assertEqual(Candidate.objects.count(), 0)

    def test_duplicate_national_id_is_conflict(self):
        self.create_candidate()

        response = self.client.post(self.list_url, self.payload, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data, {'error': 'National ID already registered'})

        self.create_candidate(nationalId='45678913')
        self.assertEqual(Candidate.objects.count(), 2)

    def test_too_many_files_in_category(self):
        files = [make_file(f'dni-{i}.pdf') for i in range(3)]

        response = self.client.post(
            self.list_url, dict(self.payload, identity=files), format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('identity', response.data['fields'])
        self.assertEqual(Candidate.objects.count(), 0)

    @override_settings(DOCUMENT_MAX_UPLOAD_SIZE=16)
    def test_file_too_large(self):
        big = make_file('scan.pdf', content=b'x' * 32)

        response = self.client.post(
            self.list_url, dict(self.payload, medical=[big]), format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('medical', response.data['fields'])

    def test_list_includes_document_count(self):
        self.create_candidate(resume=[make_file('cv.pdf')])

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['nationalId'], '45678912')
        self.assertEqual(response.data[0]['docCount'], 1)

    def test_list_and_detail_carry_latest_document_url_per_category(self):
        candidate_id = self.create_candidate(identity=[make_file('dni.pdf')])
        self.client.post(
            f'{self.list_url}{candidate_id}/documents/',
            {'identity': [make_file('dni-nuevo.pdf')]},
            format='multipart',
        )

        row = self.client.get(self.list_url).data[0]
        detail = self.client.get(f'{self.list_url}{candidate_id}/').data

        for data in (row, detail):
            self.assertIn('dni-nuevo', data['identity'])
            for category in ('certificates', 'background_check', 'medical', 'training', 'resume'):
                self.assertIsNone(data[category])
        self.assertEqual(row['docCount'], 2)

    def test_list_status_all_matches_nobody(self):
        self.create_candidate()

        response = self.client.get(self.list_url, {'status': 'ALL'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])

    def test_list_rejects_group_bound_beyond_range(self):
        response = self.client.get(self.list_url, {'groupStart': '0', 'groupEnd': '1' + '0' * 18})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('groupEnd', response.data['fields'])

    def test_list_filters(self):
        first = self.create_candidate(group='3')
        second = self.create_candidate(nationalId='45678913', group='B2')
        Candidate.objects.filter(pk=first).update(
            created_at=datetime(2019, 5, 10, 12, tzinfo=timezone.utc)
        )
        self.client.put(f'{self.list_url}{second}/status/', {'status': 'approved'}, format='json')

        response = self.client.get(self.list_url, {'year': '2019', 'month': 'ALL'})
        self.assertEqual([c['id'] for c in response.data], [first])

        response = self.client.get(self.list_url, {'status': 'Approved'})
        self.assertEqual([c['id'] for c in response.data], [second])

        response = self.client.get(self.list_url, {'groupStart': '1', 'groupEnd': '5'})
        self.assertEqual([c['id'] for c in response.data], [first])

        response = self.client.get(self.list_url, {'year': 'ALL', 'month': 'ALL'})
        self.assertEqual([c['id'] for c in response.data], [second, first])

    def test_list_rejects_non_numeric_year(self):
        response = self.client.get(self.list_url, {'year': 'twenty'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('year', response.data['fields'])

    def test_detail_not_found(self):
        response = self.client.get(f'{self.list_url}999999/')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertIn('error', response.data)

    def test_partial_update(self):
        candidate_id = self.create_candidate()

        response = self.client.put(
            f'{self.list_url}{candidate_id}/',
            {'lastName1': '', 'site': 'Cusco', 'training': [make_file('induccion.pdf')]},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'ok': True})
        candidate = Candidate.objects.get(pk=candidate_id)
        self.assertEqual(candidate.site, 'Cusco')
        self.assertEqual(candidate.last_name_1, 'Quispe')
        self.assertEqual(candidate.documents.filter(category='training').count(), 1)

    def test_update_not_found(self):
        response = self.client.put(f'{self.list_url}999999/', {'site': 'Cusco'}, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_status_change(self):
        candidate_id = self.create_candidate()

        response = self.client.put(
            f'{self.list_url}{candidate_id}/status/', {'status': 'cancelled'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'ok': True})
        self.assertEqual(Candidate.objects.get(pk=candidate_id).status, 'cancelled')

    def test_status_invalid_value(self):
        candidate_id = self.create_candidate()

        response = self.client.put(
            f'{self.list_url}{candidate_id}/status/', {'status': 'hired'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('status', response.data['fields'])

    def test_status_unknown_candidate(self):
        response = self.client.put(f'{self.list_url}999999/status/', {'status': 'approved'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_documents_history_and_append(self):
        candidate_id = self.create_candidate(identity=[make_file('dni.pdf')])
        url = f'{self.list_url}{candidate_id}/documents/'

        response = self.client.post(url, {'identity': [make_file('dni-nuevo.pdf')]}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(len(response.data), 2)
        self.assertEqual(CandidateDocument.objects.filter(candidate_id=candidate_id).count(), 2)

        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('dni-nuevo', response.data[0]['url'])

    def test_documents_append_without_files(self):
        candidate_id = self.create_candidate()

        response = self.client.post(f'{self.list_url}{candidate_id}/documents/', {}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'No files uploaded')
        self.assertIn('files', response.data['fields'])

    def test_documents_unknown_candidate(self):
        response = self.client.get(f'{self.list_url}999999/documents/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
