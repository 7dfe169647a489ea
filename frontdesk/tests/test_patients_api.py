import pytest
from django.core.cache import cache
from django.db import transaction
from django.urls import reverse
from django.utils import timezone

from frontdesk.models import Patient
from frontdesk.services import tables
from frontdesk.services.patients import discharge_patient

pytestmark = pytest.mark.django_db


def admit(api, **overrides):
    data = {'fullName': 'John Doe', 'age': 35, 'phone': '+1234567890', 'gender': 'Male',
            'allergies': 'Penicillin, Latex'}
    data.update(overrides)
    return api.post(reverse('patients'), data, format='json')


def test_admission_applies_defaults(api):
    r = admit(api)
    assert r.status_code == 201
    record = r.data['data']
    assert record['status'] == 'Admitted'
    assert record['admissionDate'] == timezone.localdate().isoformat()
    assert record['allergies'] == ['Penicillin', 'Latex']
    assert record['createdAt'] and record['updatedAt']


def test_missing_required_fields_are_rejected(api):
    r = api.post(reverse('patients'), {'fullName': '', 'age': 30}, format='json')
    assert r.status_code == 400
    err = r.data['error']
    assert err['code'] == 'validation_error'
    assert err['message'] == 'Please fill in all required fields'
    assert set(err['fields']) >= {'fullName', 'phone'}
    assert Patient.objects.count() == 0


def test_markup_is_stripped_from_names(api):
    r = admit(api, fullName='<b>Jane</b> Roe')
    assert r.data['data']['fullName'] == 'Jane Roe'


def test_list_is_cached_and_refreshed_after_mutation(api, django_assert_num_queries):
    admit(api)
    tables.patients.all()
    with django_assert_num_queries(0):
        tables.patients.all()
    admit(api, fullName='Sarah Wilson', phone='+1987')
    r = api.get(reverse('patients'))
    assert [p['fullName'] for p in r.data['data']] == ['Sarah Wilson', 'John Doe']


def test_list_filters(api):
    admit(api)
    admit(api, fullName='Sarah Wilson', phone='+1987', status='Critical')
    r = api.get(reverse('patients'), {'q': 'sarah'})
    assert [p['fullName'] for p in r.data['data']] == ['Sarah Wilson']
    r = api.get(reverse('patients'), {'status': 'All', 'q': '1234'})
    assert [p['fullName'] for p in r.data['data']] == ['John Doe']
    assert r.data['meta']['total'] == 2


def test_update_is_partial(api):
    pk = admit(api).data['data']['id']
    r = api.patch(reverse('patient_detail', args=[pk]), {'currentDiagnosis': 'Pneumonia'}, format='json')
    assert r.status_code == 200
    assert r.data['data']['currentDiagnosis'] == 'Pneumonia'
    assert r.data['data']['fullName'] == 'John Doe'


def test_update_cannot_clear_discharge_date(api):
    pk = admit(api).data['data']['id']
    r = api.patch(reverse('patient_detail', args=[pk]), {'dischargeDate': None}, format='json')
    assert r.status_code == 400


def test_discharge_sets_status_and_date(api):
    pk = admit(api).data['data']['id']
    r = api.post(reverse('patient_discharge', args=[pk]))
    assert r.status_code == 200
    assert r.data['data']['status'] == 'Discharged'
    assert r.data['data']['dischargeDate'] == timezone.localdate().isoformat()


def test_second_discharge_is_a_conflict(api):
    pk = admit(api).data['data']['id']
    Patient.objects.filter(pk=pk).update(discharge_date='2024-01-01', status='Discharged')
    tables.patients.invalidate()
    r = api.post(reverse('patient_discharge', args=[pk]))
    assert r.status_code == 409
    assert r.data['error']['code'] == 'conflict'
    assert Patient.objects.get(pk=pk).discharge_date.isoformat() == '2024-01-01'


def test_readmitted_patient_can_be_discharged_again(api):
    pk = admit(api).data['data']['id']
    api.post(reverse('patient_discharge', args=[pk]))
    Patient.objects.filter(pk=pk).update(discharge_date='2024-01-01')
    tables.patients.invalidate()
    r = api.patch(reverse('patient_detail', args=[pk]), {'status': 'Admitted'}, format='json')
    assert r.data['data']['status'] == 'Admitted'

    r = api.post(reverse('patient_discharge', args=[pk]))
    assert r.status_code == 200
    assert r.data['data']['status'] == 'Discharged'
    assert r.data['data']['dischargeDate'] == timezone.localdate().isoformat()


def test_patch_to_discharged_stamps_todays_date(api):
    pk = admit(api).data['data']['id']
    r = api.patch(reverse('patient_detail', args=[pk]), {'status': 'Discharged'}, format='json')
    assert r.data['data']['dischargeDate'] == timezone.localdate().isoformat()

    Patient.objects.filter(pk=pk).update(discharge_date='2024-01-01')
    tables.patients.invalidate()
    r = api.patch(reverse('patient_detail', args=[pk]), {'status': 'Discharged', 'currentDiagnosis': 'Recovered'}, format='json')
    assert r.data['data']['dischargeDate'] == '2024-01-01'

    other = admit(api, phone='+1555').data['data']['id']
    r = api.patch(reverse('patient_detail', args=[other]),
                  {'status': 'Discharged', 'dischargeDate': '2024-02-02'}, format='json')
    assert r.data['data']['dischargeDate'] == '2024-02-02'


@pytest.mark.django_db(transaction=True)
def test_patient_cache_dropped_again_when_discharge_commits(api):
    pk = admit(api).data['data']['id']
    key = tables.patients.cache_key
    with transaction.atomic():
        discharge_patient(pk)
        # a reader on another connection re-caches the rows it can still see
        cache.set(key, [{'id': pk, 'status': 'Admitted'}])
        assert cache.get(key) is not None
    assert cache.get(key) is None
    assert tables.patients.all()[0]['status'] == 'Discharged'


def test_unknown_patient_is_not_found(api):
    r = api.get(reverse('patient_detail', args=['00000000-0000-0000-0000-000000000000']))
    assert r.status_code == 404
    assert r.data['error']['code'] == 'not_found'


def test_names_sorted_by_name(api):
    admit(api, fullName='zed', phone='1')
    admit(api, fullName='Amy', phone='2')
    r = api.get(reverse('patient_names'))
    assert [p['fullName'] for p in r.data['data']] == ['Amy', 'zed']
    assert set(r.data['data'][0]) == {'id', 'fullName', 'email'}


def test_mutations_reach_activity_feed(api):
    admit(api)
    r = api.get(reverse('activity'))
    assert r.data['data'][0]['message'] == 'Admitted patient John Doe'
    assert r.data['data'][0]['user'] == 'staff@example.com'


def test_allergy_suggestions(api):
    r = api.get(reverse('allergy_suggestions'), {'q': 'pe', 'exclude': 'penicillin'})
    assert r.status_code == 200
    assert 'Penicillin' not in r.data['data']
    assert 'Peanuts' in r.data['data']
    assert 'Pet Dander' in r.data['data']
    assert r.data['data'] == sorted(r.data['data'])
